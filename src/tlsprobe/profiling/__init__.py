# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Concurrent profiling: dispatch, statistics and reporting."""

from .dispatcher import Dispatcher
from .report import format_summary
from .stats import summarize

__all__ = ["Dispatcher", "format_summary", "summarize"]
