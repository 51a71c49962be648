# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence request schemas."""

from datetime import date

from pydantic import field_validator, model_validator

from worktime.models.enums import AbsenceStatus, AbsenceType, DayPortion
from worktime.schemas.common import SnapshotModel


class AbsenceRequest(SnapshotModel):
    """A vacation, sick leave or time-off request over an inclusive date range."""

    id: int | None = None  # unset until the store assigns one
    employee_id: int
    type: AbsenceType
    start_date: date
    end_date: date
    day_portion: DayPortion = DayPortion.FULL
    status: AbsenceStatus = AbsenceStatus.PENDING
    admin_comment: str | None = None

    @field_validator("day_portion", mode="before")
    @classmethod
    def default_day_portion(cls, v: object) -> object:
        """Treat a missing portion as a full day."""
        return DayPortion.FULL if v is None else v

    @model_validator(mode="after")
    def validate_range(self) -> "AbsenceRequest":
        """Reject ranges that end before they start."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def is_approved(self) -> bool:
        """Check if the request has been approved."""
        return self.status == AbsenceStatus.APPROVED

    @property
    def is_half_day(self) -> bool:
        """Half days only exist for vacation."""
        return self.type == AbsenceType.VACATION and self.day_portion != DayPortion.FULL

    def covers(self, day: date) -> bool:
        """Check if ``day`` falls inside the inclusive range."""
        return self.start_date <= day <= self.end_date
