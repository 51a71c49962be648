# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dashboard overview rows combining balance and entitlements."""

from collections.abc import Iterable
from datetime import date, timedelta

from worktime.schemas import (
    AbsenceRequest,
    Employee,
    EmployeeOverview,
    HolidaysByYear,
    TimeBalanceAdjustment,
    TimeEntry,
)
from worktime.services.balance_service import calculate_balance
from worktime.services.entitlement_service import (
    annual_sick_days_taken,
    vacation_account,
)


def employee_overview(
    employee: Employee,
    as_of: date,
    time_entries: Iterable[TimeEntry] = (),
    absence_requests: Iterable[AbsenceRequest] = (),
    adjustments: Iterable[TimeBalanceAdjustment] = (),
    holidays_by_year: HolidaysByYear | None = None,
) -> EmployeeOverview:
    """Summarize an employee for the admin dashboard.

    The balance is taken at the end of the month before ``as_of`` since the
    running month is still open. Vacation and sick days refer to the year
    of ``as_of``.
    """
    holidays_by_year = holidays_by_year or {}
    absence_requests = tuple(absence_requests)
    last_closed_day = as_of.replace(day=1) - timedelta(days=1)

    time_balance = calculate_balance(
        employee,
        last_closed_day,
        time_entries,
        absence_requests,
        adjustments,
        holidays_by_year,
    )
    account = vacation_account(employee, absence_requests, as_of.year, holidays_by_year)
    sick_days = annual_sick_days_taken(
        employee.id, absence_requests, as_of.year, holidays_by_year.get(as_of.year)
    )

    return EmployeeOverview(
        employee_id=employee.id,
        name=employee.full_name,
        time_balance=time_balance,
        vacation_remaining=account.remaining,
        sick_days_taken=sick_days,
    )


def team_overview(
    employees: Iterable[Employee],
    as_of: date,
    time_entries: Iterable[TimeEntry] = (),
    absence_requests: Iterable[AbsenceRequest] = (),
    adjustments: Iterable[TimeBalanceAdjustment] = (),
    holidays_by_year: HolidaysByYear | None = None,
) -> list[EmployeeOverview]:
    """Overview rows for all active employees."""
    time_entries = tuple(time_entries)
    absence_requests = tuple(absence_requests)
    adjustments = tuple(adjustments)
    return [
        employee_overview(
            employee,
            as_of,
            time_entries,
            absence_requests,
            adjustments,
            holidays_by_year,
        )
        for employee in employees
        if employee.is_active
    ]
