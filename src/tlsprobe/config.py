# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for tlsprobe."""

import os
from dataclasses import dataclass

DEFAULT_URL = "https://my-worker.derekli2.workers.dev/links"
DEFAULT_HTTPS_PORT = 443


def _positive_float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else default
    except ValueError:
        return default


def _positive_int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = int(value)
        return parsed if parsed > 0 else default
    except ValueError:
        return default


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


def _optional_int_env(name: str, default: int | None) -> int | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = int(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass
class ProbeSettings:
    """Connection and dispatch defaults."""

    connect_timeout: float = 5.0
    read_timeout: float | None = None
    read_chunk_bytes: int = 64 * 1024
    max_workers: int | None = None

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            connect_timeout=_positive_float_env("TLSPROBE_CONNECT_TIMEOUT", cls.connect_timeout),
            read_timeout=_optional_float_env("TLSPROBE_READ_TIMEOUT", cls.read_timeout),
            read_chunk_bytes=_positive_int_env("TLSPROBE_READ_CHUNK_BYTES", cls.read_chunk_bytes),
            max_workers=_optional_int_env("TLSPROBE_MAX_WORKERS", cls.max_workers),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
