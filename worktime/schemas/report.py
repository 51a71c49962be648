# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Computed report schemas returned to export and dashboard callers."""

from decimal import Decimal

from pydantic import BaseModel


class MonthlyStatement(BaseModel):
    """Balance statement for one calendar month."""

    year: int
    month: int
    previous_balance: Decimal
    worked_hours: Decimal
    adjustments: Decimal
    vacation_credit_hours: Decimal
    sick_leave_credit_hours: Decimal
    holiday_credit_hours: Decimal
    absence_holiday_credit: Decimal
    total_credited: Decimal
    target_hours: Decimal
    monthly_balance: Decimal
    end_of_month_balance: Decimal


class AbsenceDayCounts(BaseModel):
    """Absence workdays within a month."""

    vacation_days: Decimal = Decimal("0")
    sick_days: int = 0
    time_off_days: int = 0


class VacationAccount(BaseModel):
    """Vacation entitlement and consumption for a year."""

    year: int
    annual_entitlement: Decimal
    carryover: Decimal
    taken: Decimal

    @property
    def total_available(self) -> Decimal:
        """Entitlement plus carryover."""
        return self.annual_entitlement + self.carryover

    @property
    def remaining(self) -> Decimal:
        """Days still available."""
        return self.total_available - self.taken


class EmployeeOverview(BaseModel):
    """Per-employee summary row for the admin dashboard."""

    employee_id: int
    name: str
    time_balance: Decimal
    vacation_remaining: Decimal
    sick_days_taken: int
