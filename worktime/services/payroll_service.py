# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Monthly contractual target hours owed by an employee."""

from datetime import date
from decimal import Decimal

from worktime.schemas import Employee
from worktime.services.contract_service import contract_for
from worktime.services.dates import iter_month_starts, month_end


def payroll_debit_between(employee: Employee, start: date, end: date) -> Decimal:
    """Sum monthly targets for every month from start's month through end's.

    Months ending before the first work day owe nothing. Every other month
    owes the full ``monthly_target_hours`` of the contract in effect on its
    first day; partial first and last months are not prorated.

    Args:
        employee: The employee.
        start: Any day of the first month.
        end: Any day of the last month.

    Returns:
        Target hours owed.
    """
    total = Decimal("0")
    for first_day in iter_month_starts(start, end):
        if month_end(first_day) < employee.first_work_day:
            continue
        total += contract_for(employee, first_day).monthly_target_hours
    return total


def accumulate_payroll_debit(employee: Employee, upto_date: date) -> Decimal:
    """Target hours owed from the first work day's month through upto_date's."""
    if upto_date < employee.first_work_day:
        return Decimal("0")
    return payroll_debit_between(employee, employee.first_work_day, upto_date)
