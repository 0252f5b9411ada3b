# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .http.models import Target

EXIT_FAILURE = 1
EXIT_USAGE = 2


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException | None) -> ErrorCategory:
    """
    Map socket/ssl exceptions raised while probing to ErrorCategory.
    """
    if exc is None:
        return ErrorCategory.NONE

    if isinstance(exc, TimeoutError):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, OSError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout during probe",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNKNOWN_ERROR: "Network error during probe",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Probe failed due to network error")


class TlsProbeError(Exception):
    """Base class for every error the probe core raises; str() is the diagnostic."""

    exit_code: int = EXIT_FAILURE


class InvalidTargetError(TlsProbeError, ValueError):
    exit_code = EXIT_USAGE

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class InvalidRequestCountError(TlsProbeError, ValueError):
    exit_code = EXIT_USAGE

    def __init__(self, count: int, label: str = "requests"):
        self.count = count
        super().__init__(f"Not a valid number of {label}: {count}")


class InsufficientSamplesError(TlsProbeError):
    """Statistics were requested for fewer than two measurements."""

    def __init__(self, sample_count: int):
        self.sample_count = sample_count
        super().__init__("Didn't profile enough things! Something went wrong")


class TransportError(TlsProbeError):
    """A probe failed on the wire; the whole batch is aborted."""

    prefix = "Transport error"

    def __init__(self, target: Target, cause: BaseException):
        self.target = target
        self.cause = cause
        self.category = categorize_exception(cause)
        super().__init__(f"{self.prefix}: {cause}")

    @property
    def reason(self) -> str:
        return error_category_to_reason(self.category)


class ProbeConnectError(TransportError):
    prefix = "Connection error"


class ProbeWriteError(TransportError):
    prefix = "Write error"


class ProbeReadError(TransportError):
    prefix = "Problem with read"


__all__ = [
    "EXIT_FAILURE",
    "EXIT_USAGE",
    "ErrorCategory",
    "InsufficientSamplesError",
    "InvalidRequestCountError",
    "InvalidTargetError",
    "ProbeConnectError",
    "ProbeReadError",
    "ProbeWriteError",
    "TlsProbeError",
    "TransportError",
    "categorize_exception",
    "error_category_to_reason",
]
