# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Connection client, response parser and target exports."""

from .adapters import StubConnectionClient
from .client import ConnectionClient, TlsConnectionClient, build_request, create_default_connection_client
from .models import KNOWN_HEADERS, Headers, ParsedResponse, RawResponse, Target
from .parser import parse_response, parse_status_line
from .url import parse_target

__all__ = [
    "KNOWN_HEADERS",
    "ConnectionClient",
    "Headers",
    "ParsedResponse",
    "RawResponse",
    "StubConnectionClient",
    "Target",
    "TlsConnectionClient",
    "build_request",
    "create_default_connection_client",
    "parse_response",
    "parse_status_line",
    "parse_target",
]
