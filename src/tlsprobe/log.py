# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for tlsprobe."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "TLSPROBE_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (argument, then TLSPROBE_LOG_LEVEL) to a logging constant."""
    effective_level = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    resolved = getattr(logging, effective_level, None)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use.

    Records go to stderr so they never interleave with the report on stdout.
    """
    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


__all__ = ["resolve_log_level", "setup_logging"]
