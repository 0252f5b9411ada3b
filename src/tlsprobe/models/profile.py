# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Profile run request model."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidRequestCountError
from ..http.models import Target


@dataclass(frozen=True)
class ProfileRequest:
    """
    Everything one run needs, fixed up front and passed explicitly.

    - `count == 1` fetches once and reports the body.
    - `count > 1` profiles concurrently and reports statistics.
    - `max_workers` caps concurrent connections; None means one per request.
    """

    target: Target
    count: int = 1
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if self.count < 1:
            raise InvalidRequestCountError(self.count)
        if self.max_workers is not None and self.max_workers < 1:
            raise InvalidRequestCountError(self.max_workers, label="workers")

    @property
    def is_profile(self) -> bool:
        return self.count > 1
