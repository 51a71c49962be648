# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee and contract schemas."""

from datetime import date
from decimal import Decimal

from pydantic import Field

from worktime.models.enums import EmploymentType, TargetHoursModel
from worktime.schemas.common import SnapshotModel

WEEKDAY_KEYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


class WeeklySchedule(SnapshotModel):
    """Scheduled hours per weekday."""

    mon: Decimal = Field(default=Decimal("0"), ge=0)
    tue: Decimal = Field(default=Decimal("0"), ge=0)
    wed: Decimal = Field(default=Decimal("0"), ge=0)
    thu: Decimal = Field(default=Decimal("0"), ge=0)
    fri: Decimal = Field(default=Decimal("0"), ge=0)
    sat: Decimal = Field(default=Decimal("0"), ge=0)
    sun: Decimal = Field(default=Decimal("0"), ge=0)

    def hours_for(self, day: date) -> Decimal:
        """Return the scheduled hours for the weekday of ``day``."""
        return getattr(self, WEEKDAY_KEYS[day.weekday()])

    @property
    def weekly_total(self) -> Decimal:
        """Sum of all weekday hours."""
        return sum((getattr(self, key) for key in WEEKDAY_KEYS), Decimal("0"))


class ContractDetails(SnapshotModel):
    """One effective-dated contract record.

    A record is valid from ``valid_from`` until a later record supersedes it.
    ``monthly_target_hours`` is the payroll debit for every month the record
    is in effect. ``daily_target_hours`` drives weekday targets under the
    monthly model, ``weekly_schedule`` drives them under the weekly model.
    """

    valid_from: date
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    target_hours_model: TargetHoursModel = TargetHoursModel.MONTHLY
    monthly_target_hours: Decimal = Field(default=Decimal("0"), ge=0)
    daily_target_hours: Decimal = Field(default=Decimal("0"), ge=0)
    weekly_schedule: WeeklySchedule | None = None
    vacation_days: Decimal = Field(default=Decimal("0"), ge=0)

    @property
    def uses_weekly_schedule(self) -> bool:
        """True when targets come from the weekly schedule."""
        return (
            self.target_hours_model == TargetHoursModel.WEEKLY
            and self.weekly_schedule is not None
        )


class Employee(SnapshotModel):
    """Employee master data as read by the engine."""

    id: int
    first_name: str = ""
    last_name: str = ""
    first_work_day: date
    starting_time_balance_hours: Decimal = Decimal("0")
    contract_history: tuple[ContractDetails, ...] = ()
    automatic_break_deduction: bool = False
    vacation_carryover: dict[int, Decimal] = Field(default_factory=dict)
    timezone: str | None = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        """First and last name joined for display."""
        return f"{self.first_name} {self.last_name}".strip()
