# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation and sick day consumption counted in workdays.

A workday is Monday to Friday and not a public holiday, regardless of the
employee's contract. Only approved requests count. Half-day vacation counts
as 0.5; sick leave and time off always count whole days.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from worktime.models.enums import AbsenceType
from worktime.schemas import (
    AbsenceDayCounts,
    AbsenceRequest,
    Employee,
    Holiday,
    HolidaysByYear,
    VacationAccount,
)
from worktime.services.contract_service import contract_for
from worktime.services.dates import (
    holiday_date_set,
    is_weekday,
    iter_days,
    month_bounds,
)

logger = logging.getLogger(__name__)

HALF_DAY = Decimal("0.5")
FULL_DAY = Decimal("1")

# Entitlement is read from the contract in effect mid-year
ENTITLEMENT_REFERENCE_MONTH = 7


def _approved(
    requests: Iterable[AbsenceRequest],
    employee_id: int,
    absence_type: AbsenceType | None = None,
) -> list[AbsenceRequest]:
    return [
        r
        for r in requests
        if r.employee_id == employee_id
        and r.is_approved
        and (absence_type is None or r.type == absence_type)
    ]


def _workdays(start: date, end: date, holidays: set[date]) -> list[date]:
    return [d for d in iter_days(start, end) if is_weekday(d) and d not in holidays]


def _vacation_day_value(request: AbsenceRequest) -> Decimal:
    return HALF_DAY if request.is_half_day else FULL_DAY


def count_workdays_in_range(
    start: date, end: date, holidays: Iterable[Holiday | date] | None = None
) -> int:
    """Count Monday-Friday non-holiday days in [start, end]."""
    return len(_workdays(start, end, holiday_date_set(holidays)))


def annual_vacation_taken(
    employee_id: int,
    requests: Iterable[AbsenceRequest],
    year: int,
    holidays: Iterable[Holiday | date] | None = None,
) -> Decimal:
    """Count vacation days taken in a calendar year.

    Args:
        employee_id: The employee.
        requests: Absence requests of any employee and status.
        year: The calendar year.
        holidays: Public holidays of that year.

    Returns:
        Vacation days, in steps of 0.5.
    """
    vacations = _approved(requests, employee_id, AbsenceType.VACATION)
    holiday_set = holiday_date_set(holidays)
    total = Decimal("0")
    for day in _workdays(date(year, 1, 1), date(year, 12, 31), holiday_set):
        request = next((r for r in vacations if r.covers(day)), None)
        if request is not None:
            total += _vacation_day_value(request)
    return total


def annual_sick_days_taken(
    employee_id: int,
    requests: Iterable[AbsenceRequest],
    year: int,
    holidays: Iterable[Holiday | date] | None = None,
) -> int:
    """Count sick workdays in a calendar year.

    Requests crossing the year boundary only contribute their in-year days.
    Overlapping requests count a day once.

    Args:
        employee_id: The employee.
        requests: Absence requests of any employee and status.
        year: The calendar year.
        holidays: Public holidays of that year.

    Returns:
        Number of sick workdays.
    """
    year_start, year_end = date(year, 1, 1), date(year, 12, 31)
    holiday_set = holiday_date_set(holidays)

    sick_days: set[date] = set()
    for request in _approved(requests, employee_id, AbsenceType.SICK_LEAVE):
        start = max(request.start_date, year_start)
        end = min(request.end_date, year_end)
        sick_days.update(_workdays(start, end, holiday_set))
    return len(sick_days)


def monthly_absence_breakdown(
    employee_id: int,
    requests: Iterable[AbsenceRequest],
    year: int,
    month: int,
    holidays: Iterable[Holiday | date] | None = None,
) -> AbsenceDayCounts:
    """Count vacation, sick and time-off workdays within a month.

    Each workday is attributed to the first approved request covering it.

    Args:
        employee_id: The employee.
        requests: Absence requests of any employee and status.
        year: The calendar year.
        month: The month, 1 = January.
        holidays: Public holidays of that year.

    Returns:
        Day counts per absence type.
    """
    first_day, last_day = month_bounds(year, month)
    approved = [
        r
        for r in _approved(requests, employee_id)
        if r.start_date <= last_day and r.end_date >= first_day
    ]

    counts = AbsenceDayCounts()
    for day in _workdays(first_day, last_day, holiday_date_set(holidays)):
        request = next((r for r in approved if r.covers(day)), None)
        if request is None:
            continue
        if request.type == AbsenceType.VACATION:
            counts.vacation_days += _vacation_day_value(request)
        elif request.type == AbsenceType.SICK_LEAVE:
            counts.sick_days += 1
        elif request.type == AbsenceType.TIME_OFF:
            counts.time_off_days += 1
    return counts


def calculate_vacation_carryover(
    employee: Employee,
    requests: Iterable[AbsenceRequest],
    year: int,
    holidays: Iterable[Holiday | date] | None = None,
) -> Decimal | None:
    """Calculate unused vacation to carry from ``year`` into the next year.

    Args:
        employee: The employee.
        requests: Absence requests of any employee and status.
        year: The year being closed.
        holidays: Public holidays of that year.

    Returns:
        Remaining days, or None if the employee started after that year or
        overdrew the entitlement.
    """
    if employee.first_work_day.year > year:
        return None

    entitlement = contract_for(employee, date(year, 12, 31)).vacation_days
    taken = annual_vacation_taken(employee.id, requests, year, holidays)
    remaining = entitlement - taken
    if remaining < 0:
        logger.info(
            f"Employee {employee.id} overdrew {year} vacation by {-remaining} days, "
            f"nothing carried over"
        )
        return None
    return remaining


def vacation_account(
    employee: Employee,
    requests: Sequence[AbsenceRequest],
    year: int,
    holidays_by_year: HolidaysByYear | None = None,
) -> VacationAccount:
    """Build the vacation account of a year.

    The carryover is the stored value for the previous year when present,
    otherwise it is calculated from the previous year's requests.

    Args:
        employee: The employee.
        requests: Absence requests of any employee and status.
        year: The calendar year.
        holidays_by_year: Public holidays per year.

    Returns:
        Entitlement, carryover and days taken.
    """
    holidays_by_year = holidays_by_year or {}
    previous_year = year - 1

    if previous_year in employee.vacation_carryover:
        carryover = employee.vacation_carryover[previous_year]
    else:
        carryover = calculate_vacation_carryover(
            employee, requests, previous_year, holidays_by_year.get(previous_year)
        ) or Decimal("0")

    contract = contract_for(employee, date(year, ENTITLEMENT_REFERENCE_MONTH, 1))
    return VacationAccount(
        year=year,
        annual_entitlement=contract.vacation_days,
        carryover=carryover,
        taken=annual_vacation_taken(
            employee.id, requests, year, holidays_by_year.get(year)
        ),
    )
