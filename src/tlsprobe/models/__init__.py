# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for tlsprobe."""

from ..http.models import Headers, ParsedResponse, RawResponse, Target
from .probe import Measurement
from .profile import ProfileRequest
from .report import ProfileOutcome, StatsSummary

__all__ = [
    "Headers",
    "Measurement",
    "ParsedResponse",
    "ProfileOutcome",
    "ProfileRequest",
    "RawResponse",
    "StatsSummary",
    "Target",
]
