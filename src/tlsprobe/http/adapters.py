# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory ConnectionClient implementations."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Sequence

from .client import ConnectionClient
from .models import RawResponse, Target


class StubConnectionClient(ConnectionClient):
    """
    Deterministic, programmable ConnectionClient for tests.

    Responses are handed out round-robin. ``delays`` (seconds) are applied per
    call in the same round-robin fashion, which lets tests force completion
    orders that differ from submission order. Safe to share across threads.
    """

    def __init__(
        self,
        responses: Sequence[bytes | str] | None = None,
        *,
        delays: Sequence[float] | None = None,
        elapsed: float | Callable[[int], float] = 0.0,
    ):
        self._responses = [r.encode("utf-8") if isinstance(r, str) else bytes(r) for r in (responses or [])]
        self._delays = list(delays or [])
        self._elapsed = elapsed
        self._lock = threading.Lock()
        self.targets: list[Target] = []
        self.closed = False

    @property
    def calls(self) -> int:
        with self._lock:
            return len(self.targets)

    def probe(self, target: Target) -> RawResponse:
        with self._lock:
            index = len(self.targets)
            self.targets.append(target)
        if self._delays:
            time.sleep(self._delays[index % len(self._delays)])
        if not self._responses:
            return RawResponse(content=b"", elapsed=0.0)
        content = self._responses[index % len(self._responses)]
        elapsed = self._elapsed(index) if callable(self._elapsed) else self._elapsed
        return RawResponse(content=content, elapsed=elapsed)

    def close(self) -> None:
        self.closed = True
