# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time entry schemas."""

from datetime import datetime, timedelta
from decimal import Decimal

from pydantic import Field, model_validator

from worktime.schemas.common import SnapshotModel, timedelta_to_hours


class TimeEntry(SnapshotModel):
    """A worked interval with its break."""

    id: int | None = None  # unset until the store assigns one
    employee_id: int
    start: datetime
    end: datetime
    break_duration_minutes: int = Field(default=0, ge=0)
    customer_id: str | None = None
    activity_id: str | None = None
    comment: str | None = None

    @model_validator(mode="after")
    def validate_interval(self) -> "TimeEntry":
        """Reject empty, inverted or mixed naive/aware intervals."""
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise ValueError("start and end must both be naive or both be aware")
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self

    @property
    def gross_hours(self) -> Decimal:
        """Hours between start and end."""
        return timedelta_to_hours(self.end - self.start)

    @property
    def worked_hours(self) -> Decimal:
        """Gross hours minus the break."""
        return timedelta_to_hours(
            self.end - self.start - timedelta(minutes=self.break_duration_minutes)
        )
