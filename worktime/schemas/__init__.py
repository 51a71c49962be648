# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""
from worktime.schemas.absence import AbsenceRequest
from worktime.schemas.adjustment import TimeBalanceAdjustment
from worktime.schemas.common import HOURS_QUANTUM, SnapshotModel, timedelta_to_hours
from worktime.schemas.employee import ContractDetails, Employee, WeeklySchedule
from worktime.schemas.holiday import Holiday, HolidaysByYear
from worktime.schemas.report import (
    AbsenceDayCounts,
    EmployeeOverview,
    MonthlyStatement,
    VacationAccount,
)
from worktime.schemas.time_entry import TimeEntry

__all__ = [
    "HOURS_QUANTUM",
    "AbsenceDayCounts",
    "AbsenceRequest",
    "ContractDetails",
    "Employee",
    "EmployeeOverview",
    "Holiday",
    "HolidaysByYear",
    "MonthlyStatement",
    "SnapshotModel",
    "TimeBalanceAdjustment",
    "TimeEntry",
    "VacationAccount",
    "WeeklySchedule",
    "timedelta_to_hours",
]
