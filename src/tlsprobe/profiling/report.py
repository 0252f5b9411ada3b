# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Human-readable rendering of a profile summary."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import StatsSummary

HEADER_DIVIDER = "------------Profile Results-------------"
FOOTER_DIVIDER = "-" * len(HEADER_DIVIDER)


def format_codes(codes: Iterable[int]) -> str:
    return "[" + " ".join(str(code) for code in codes) + "]"


def format_summary(summary: StatsSummary) -> str:
    lines = [
        HEADER_DIVIDER,
        f"Number of requests: {summary.request_count}",
        f"Fastest time: {summary.fastest_ms} ms",
        f"Slowest time: {summary.slowest_ms} ms",
        f"Mean time: {summary.mean_ms:.4g} ms",
        f"Median time: {summary.median_ms:.4g} ms",
        f"Percent Success: {summary.percent_success:.1f}%",
        f"Error codes: {format_codes(summary.error_codes)}",
        f"Smallest response: {summary.smallest_bytes} bytes",
        f"Largest response: {summary.largest_bytes} bytes",
        FOOTER_DIVIDER,
    ]
    return "\n".join(lines)


__all__ = ["FOOTER_DIVIDER", "HEADER_DIVIDER", "format_codes", "format_summary"]
