# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time balance adjustment schemas."""

import datetime
from decimal import Decimal

from worktime.models.enums import AdjustmentType
from worktime.schemas.common import SnapshotModel


class TimeBalanceAdjustment(SnapshotModel):
    """Manual correction or payout booked against the balance."""

    id: int
    employee_id: int
    date: datetime.date
    type: AdjustmentType = AdjustmentType.CORRECTION
    hours: Decimal
    note: str = ""

    @property
    def signed_hours(self) -> Decimal:
        """Hours as applied to the balance; payouts always reduce it."""
        if self.type == AdjustmentType.PAYOUT:
            return -abs(self.hours)
        return self.hours
