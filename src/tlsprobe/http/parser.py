# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Minimal parser for raw HTTP/1.0 responses read off a TLS socket.

Only what the profiler needs is extracted: the status code, a fixed set of
header fields (see ``KNOWN_HEADERS``) and the body. Everything else is
tolerated and dropped rather than rejected.
"""

from __future__ import annotations

from .models import KNOWN_HEADERS, ParsedResponse

LINE_BREAK = "\r\n"


def parse_status_line(line: str) -> int:
    """
    Return the status code from a line shaped like ``HTTP/1.0 200 OK``.

    Lines without ``HTTP`` or without a numeric second token yield 0.
    """
    if "HTTP" not in line:
        return 0
    tokens = line.split()
    if len(tokens) < 2:
        return 0
    code = tokens[1]
    if not code.isascii() or not code.isdigit():
        return 0
    return int(code)


def parse_response(raw: str | bytes) -> ParsedResponse:
    """Split a raw response into status code, recognised headers and body."""
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, (bytes, bytearray)) else str(raw)
    lines = text.split(LINE_BREAK)

    status_code = 0
    headers: dict[str, str] = {}
    body_parts: list[str] = []
    in_body = False

    for index, line in enumerate(lines):
        if in_body or not line:
            in_body = True
            body_parts.append(line)
            continue
        if index == 0 and "HTTP" in line:
            status_code = parse_status_line(line)
            continue
        name, sep, value = line.partition(":")
        if not sep:
            continue
        if name in KNOWN_HEADERS:
            headers[name] = value

    return ParsedResponse(status_code=status_code, headers=headers, body="".join(body_parts))


__all__ = ["LINE_BREAK", "parse_response", "parse_status_line"]
