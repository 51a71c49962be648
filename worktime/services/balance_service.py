# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Running time balance (overtime/undertime) of an employee."""

import logging
from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from worktime.schemas import (
    AbsenceRequest,
    Employee,
    HolidaysByYear,
    TimeBalanceAdjustment,
    TimeEntry,
)
from worktime.services.contract_service import ensure_contract_history
from worktime.services.credit_service import accumulate_credits
from worktime.services.dates import to_local_date
from worktime.services.payroll_service import accumulate_payroll_debit

logger = logging.getLogger(__name__)


def calculate_balance(
    employee: Employee,
    upto_date: date | datetime,
    time_entries: Iterable[TimeEntry] = (),
    absence_requests: Iterable[AbsenceRequest] = (),
    adjustments: Iterable[TimeBalanceAdjustment] = (),
    holidays_by_year: HolidaysByYear | None = None,
) -> Decimal:
    """Calculate the time balance at the end of a day.

    balance = starting balance + credits - monthly targets owed

    Before the first work day the balance is the starting balance carried
    in from before the system was adopted.

    Args:
        employee: The employee.
        upto_date: Last day included in the balance.
        time_entries: Time entries of any employee.
        absence_requests: Absence requests of any employee.
        adjustments: Balance adjustments of any employee.
        holidays_by_year: Public holidays per year.

    Returns:
        Balance in hours, positive for overtime.

    Raises:
        DataIntegrityError: If the employee has no contract history.
    """
    ensure_contract_history(employee)
    upto_date = to_local_date(upto_date, employee.timezone)

    if upto_date < employee.first_work_day:
        return employee.starting_time_balance_hours

    credits = accumulate_credits(
        employee,
        upto_date,
        time_entries,
        absence_requests,
        adjustments,
        holidays_by_year,
    )
    debits = accumulate_payroll_debit(employee, upto_date)
    balance = employee.starting_time_balance_hours + credits - debits

    logger.debug(
        f"Employee {employee.id} balance on {upto_date}: "
        f"credits={credits} debits={debits} balance={balance}"
    )
    return balance
