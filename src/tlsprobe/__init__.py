# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
tlsprobe package entrypoint.

This package fetches a URL over a raw TLS connection with a minimal HTTP/1.0
request, or profiles it with many concurrent requests and reduces the
measurements into latency, success-rate and size statistics. Connections are
abstracted behind an injectable client interface, and domain objects are
modeled with typed dataclasses.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import (
    ErrorCategory,
    InsufficientSamplesError,
    InvalidRequestCountError,
    InvalidTargetError,
    ProbeConnectError,
    ProbeReadError,
    ProbeWriteError,
    TlsProbeError,
)
from .http import (
    ConnectionClient,
    ParsedResponse,
    RawResponse,
    Target,
    TlsConnectionClient,
    create_default_connection_client,
    parse_response,
    parse_target,
)
from .log import setup_logging
from .models import Measurement, ProfileOutcome, ProfileRequest, StatsSummary
from .profiling import Dispatcher, format_summary, summarize
from .runtime import TlsProbe
from .version import __version__

__all__ = [
    "ConnectionClient",
    "Dispatcher",
    "ErrorCategory",
    "InsufficientSamplesError",
    "InvalidRequestCountError",
    "InvalidTargetError",
    "Measurement",
    "ParsedResponse",
    "ProbeConnectError",
    "ProbeReadError",
    "ProbeSettings",
    "ProbeWriteError",
    "ProfileOutcome",
    "ProfileRequest",
    "RawResponse",
    "StatsSummary",
    "Target",
    "TlsConnectionClient",
    "TlsProbe",
    "TlsProbeError",
    "create_default_connection_client",
    "format_summary",
    "load_probe_settings",
    "parse_response",
    "parse_target",
    "setup_logging",
    "summarize",
    "__version__",
]
