# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target, raw response and parsed response models used across tlsprobe."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..config import DEFAULT_HTTPS_PORT

Headers = Mapping[str, str]

# Matched case-sensitively against the raw field name.
KNOWN_HEADERS: frozenset[str] = frozenset(
    {
        "Date",
        "ContentType",
        "Content-Length",
        "Connection",
        "Set-Cookie",
        "cf-request-id",
        "Expect-CT",
        "Report-To",
        "NEL",
        "Server",
        "CF-Ray",
    }
)


@dataclass(frozen=True)
class Target:
    """Host and request path every probe of a run is sent to."""

    host: str
    path: str = "/"
    port: int = DEFAULT_HTTPS_PORT

    @property
    def address(self) -> tuple[str, int]:
        return (self.host, self.port)

    @property
    def host_header(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port != DEFAULT_HTTPS_PORT:
            return f"{host}:{self.port}"
        return host


@dataclass(frozen=True)
class RawResponse:
    """Bytes drained from one connection plus the wall-clock time it took."""

    content: bytes
    elapsed: float

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @property
    def elapsed_ms(self) -> int:
        """Elapsed time truncated to whole milliseconds."""
        return int(self.elapsed * 1000)

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ParsedResponse:
    """Status code, recognised header fields and body of one response."""

    status_code: int = 0
    headers: Headers = field(default_factory=dict)
    body: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def header(self, name: str) -> str | None:
        return self.headers.get(name)

    @property
    def content_length(self) -> int:
        """Content-Length as an int; 0 when the header is absent or not a number."""
        raw = (self.headers.get("Content-Length") or "").strip()
        if not raw.isascii() or not raw.isdigit():
            return 0
        return int(raw)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code <= 299
