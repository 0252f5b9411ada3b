# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level tlsprobe facade for single fetches and profiling runs."""

from __future__ import annotations

from contextlib import suppress

from .config import ProbeSettings, load_probe_settings
from .errors import InvalidRequestCountError
from .http.client import ConnectionClient, create_default_connection_client
from .http.models import ParsedResponse, Target
from .http.url import parse_target
from .models import ProfileOutcome, ProfileRequest, StatsSummary
from .profiling.dispatcher import Dispatcher
from .profiling.stats import summarize


class TlsProbe:
    """
    Convenience wrapper that wires one connection client into the dispatcher.

    Targets may be given as a Target or as a URL string.
    """

    def __init__(self, client: ConnectionClient | None = None, settings: ProbeSettings | None = None):
        self.settings = settings or load_probe_settings()
        self.client = client or create_default_connection_client(self.settings)
        self.dispatcher = Dispatcher(self.client, self.settings)

    @staticmethod
    def _target(target: Target | str) -> Target:
        return target if isinstance(target, Target) else parse_target(target)

    def fetch(self, target: Target | str) -> ParsedResponse:
        return self.dispatcher.fetch(self._target(target))

    def profile(self, target: Target | str, count: int, *, max_workers: int | None = None) -> StatsSummary:
        measurements = self.dispatcher.collect(self._target(target), count, max_workers=max_workers)
        return summarize(measurements)

    def run(self, target: Target | str, count: int = 1, *, max_workers: int | None = None) -> ProfileOutcome:
        """Fetch once when `count == 1`, otherwise profile `count` concurrent requests."""
        if count < 1:
            raise InvalidRequestCountError(count)
        if count == 1:
            return ProfileOutcome(body=self.fetch(target).body)
        return ProfileOutcome(summary=self.profile(target, count, max_workers=max_workers))

    def execute(self, request: ProfileRequest) -> ProfileOutcome:
        return self.run(request.target, request.count, max_workers=request.max_workers)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.client, "close"):
                self.client.close()

    def __enter__(self) -> TlsProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
