# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for profile summaries and run outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StatsSummary:
    request_count: int
    fastest_ms: int
    slowest_ms: int
    mean_ms: float
    median_ms: float
    percent_success: float
    error_codes: tuple[int, ...]
    smallest_bytes: int
    largest_bytes: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_count": self.request_count,
            "fastest_ms": self.fastest_ms,
            "slowest_ms": self.slowest_ms,
            "mean_ms": self.mean_ms,
            "median_ms": self.median_ms,
            "percent_success": self.percent_success,
            "error_codes": list(self.error_codes),
            "smallest_bytes": self.smallest_bytes,
            "largest_bytes": self.largest_bytes,
        }


@dataclass(frozen=True)
class ProfileOutcome:
    """Result of one run: a body in single-request mode, a summary otherwise."""

    body: str | None = None
    summary: StatsSummary | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.summary is not None:
            return {"mode": "profile", "summary": self.summary.to_dict()}
        return {"mode": "single", "body": self.body or ""}
