# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict

# Worked hours are fixed-point so that sums over any grouping agree exactly.
HOURS_QUANTUM = Decimal("0.000001")


class SnapshotModel(BaseModel):
    """Immutable input snapshot handed to the engine by the caller."""

    model_config = ConfigDict(frozen=True)


def timedelta_to_hours(delta: timedelta) -> Decimal:
    """Convert a duration to decimal hours rounded to HOURS_QUANTUM."""
    micros = delta // timedelta(microseconds=1)
    hours = Decimal(micros) / Decimal(3_600_000_000)
    return hours.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)
