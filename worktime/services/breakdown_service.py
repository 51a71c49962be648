# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Monthly balance statements for dashboards and payroll exports."""

import logging
from collections.abc import Iterable
from datetime import timedelta

from worktime.schemas import (
    AbsenceRequest,
    Employee,
    HolidaysByYear,
    MonthlyStatement,
    TimeBalanceAdjustment,
    TimeEntry,
)
from worktime.services.balance_service import calculate_balance
from worktime.services.credit_service import CreditSummary, summarize_credits
from worktime.services.dates import month_bounds
from worktime.services.payroll_service import payroll_debit_between

logger = logging.getLogger(__name__)


def monthly_breakdown(
    employee: Employee,
    year: int,
    month: int,
    time_entries: Iterable[TimeEntry] = (),
    absence_requests: Iterable[AbsenceRequest] = (),
    adjustments: Iterable[TimeBalanceAdjustment] = (),
    holidays_by_year: HolidaysByYear | None = None,
) -> MonthlyStatement:
    """Build the balance statement for one month.

    The statement's end balance always equals ``calculate_balance`` on the
    last day of the month. Months before the first work day carry the
    starting balance unchanged. The month containing the first work day
    also books the worked hours and adjustments dated before it.

    Args:
        employee: The employee.
        year: Calendar year.
        month: Calendar month, 1 = January.
        time_entries: Time entries of any employee.
        absence_requests: Absence requests of any employee.
        adjustments: Balance adjustments of any employee.
        holidays_by_year: Public holidays per year.

    Returns:
        The month's statement.

    Raises:
        ValueError: If month is out of range.
        DataIntegrityError: If the employee has no contract history.
    """
    first_day, last_day = month_bounds(year, month)

    time_entries = tuple(time_entries)
    absence_requests = tuple(absence_requests)
    adjustments = tuple(adjustments)

    previous_balance = calculate_balance(
        employee,
        first_day - timedelta(days=1),
        time_entries,
        absence_requests,
        adjustments,
        holidays_by_year,
    )

    if last_day < employee.first_work_day:
        credits = CreditSummary()
    else:
        opens_employment = first_day <= employee.first_work_day
        credits = summarize_credits(
            employee,
            None if opens_employment else first_day,
            last_day,
            time_entries,
            absence_requests,
            adjustments,
            holidays_by_year,
        )
    target_hours = payroll_debit_between(employee, first_day, last_day)

    total_credited = credits.total
    monthly_balance = total_credited - target_hours

    statement = MonthlyStatement(
        year=year,
        month=month,
        previous_balance=previous_balance,
        worked_hours=credits.worked_hours,
        adjustments=credits.adjustment_hours,
        vacation_credit_hours=credits.vacation_credit_hours,
        sick_leave_credit_hours=credits.sick_leave_credit_hours,
        holiday_credit_hours=credits.holiday_credit_hours,
        absence_holiday_credit=credits.absence_holiday_credit,
        total_credited=total_credited,
        target_hours=target_hours,
        monthly_balance=monthly_balance,
        end_of_month_balance=previous_balance + monthly_balance,
    )
    logger.debug(f"Employee {employee.id} statement {year}-{month:02d}: {statement}")
    return statement


def yearly_breakdown(
    employee: Employee,
    year: int,
    time_entries: Iterable[TimeEntry] = (),
    absence_requests: Iterable[AbsenceRequest] = (),
    adjustments: Iterable[TimeBalanceAdjustment] = (),
    holidays_by_year: HolidaysByYear | None = None,
) -> list[MonthlyStatement]:
    """Build the twelve monthly statements of a year, January first."""
    time_entries = tuple(time_entries)
    absence_requests = tuple(absence_requests)
    adjustments = tuple(adjustments)
    return [
        monthly_breakdown(
            employee,
            year,
            month,
            time_entries,
            absence_requests,
            adjustments,
            holidays_by_year,
        )
        for month in range(1, 13)
    ]
