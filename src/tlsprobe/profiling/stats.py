# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Reduce a set of probe measurements into summary statistics."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from ..errors import InsufficientSamplesError
from ..models import Measurement, StatsSummary

MIN_SAMPLES = 2


def median(sorted_values: Sequence[int]) -> float:
    """Median of an ascending sequence; even lengths average the two middle values."""
    mid = len(sorted_values) // 2
    if len(sorted_values) % 2 == 1:
        return float(sorted_values[mid])
    return (sorted_values[mid - 1] + sorted_values[mid]) / 2


def summarize(measurements: Sequence[Measurement]) -> StatsSummary:
    """
    Compute latency, success and size statistics for a profiling run.

    Error codes keep every non-2xx status in arrival order, duplicates
    included. Raises InsufficientSamplesError for fewer than two samples.
    """
    count = len(measurements)
    if count < MIN_SAMPLES:
        raise InsufficientSamplesError(count)

    times = sorted(m.elapsed_ms for m in measurements)
    error_codes = tuple(m.status_code for m in measurements if not m.ok)

    smallest = sys.maxsize
    largest = -1
    for m in measurements:
        if m.size_bytes < smallest:
            smallest = m.size_bytes
        if m.size_bytes > largest:
            largest = m.size_bytes

    return StatsSummary(
        request_count=count,
        fastest_ms=times[0],
        slowest_ms=times[-1],
        mean_ms=sum(times) / count,
        median_ms=median(times),
        percent_success=(count - len(error_codes)) / count * 100.0,
        error_codes=error_codes,
        smallest_bytes=smallest,
        largest_bytes=largest,
    )


__all__ = ["MIN_SAMPLES", "median", "summarize"]
