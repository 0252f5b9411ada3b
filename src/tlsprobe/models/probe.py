# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-probe measurement model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Measurement:
    status_code: int
    elapsed_ms: int
    size_bytes: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code <= 299
