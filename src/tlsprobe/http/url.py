# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers: turn user input into a probe Target."""

from __future__ import annotations

import httpx

from ..config import DEFAULT_HTTPS_PORT
from ..errors import InvalidTargetError
from .models import Target


def parse_target(raw_url: str) -> Target:
    """
    Parse an absolute https URL into a Target.

    The request path keeps the query string; the fragment is dropped. Hosts are
    stored in their ASCII (IDNA) form since they go straight onto the wire.
    """
    text = str(raw_url or "").strip()
    if not text:
        raise InvalidTargetError(text, "empty URL")
    try:
        url = httpx.URL(text)
    except httpx.InvalidURL as exc:
        raise InvalidTargetError(text, str(exc)) from exc

    if not url.is_absolute_url:
        raise InvalidTargetError(text, "expected an absolute URL such as https://host/path")
    if url.scheme != "https":
        raise InvalidTargetError(text, f"unsupported scheme {url.scheme!r}; only https is probed")

    host = url.raw_host.decode("ascii")
    if not host:
        raise InvalidTargetError(text, "missing host")

    path = url.raw_path.decode("ascii") or "/"
    return Target(host=host, path=path, port=url.port or DEFAULT_HTTPS_PORT)


__all__ = ["parse_target"]
