# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Credits booked towards an employee's time balance.

Three kinds of credit count towards the balance:

* worked hours from time entries (net of breaks),
* manual adjustments (corrections and payouts),
* non-worked credit for scheduled days covered by a public holiday or an
  approved vacation or sick leave.

A scheduled day earns at most one non-worked credit. Holidays take
precedence over absences. Time-off absences earn nothing because they
consume existing overtime.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from worktime.models.enums import AbsenceType, CreditSource
from worktime.schemas import (
    AbsenceRequest,
    Employee,
    HolidaysByYear,
    TimeBalanceAdjustment,
    TimeEntry,
)
from worktime.services.dates import holiday_dates, iter_days, to_local_date
from worktime.services.schedule_service import scheduled_hours_for_employee

ZERO = Decimal("0")

CREDITED_ABSENCE_TYPES = (AbsenceType.VACATION, AbsenceType.SICK_LEAVE)


@dataclass(frozen=True)
class DayCredit:
    """Non-worked credit for a single scheduled day."""

    date: date
    source: CreditSource
    hours: Decimal


@dataclass(frozen=True)
class CreditSummary:
    """Credits within a date range, split by source."""

    worked_hours: Decimal = ZERO
    adjustment_hours: Decimal = ZERO
    vacation_credit_hours: Decimal = ZERO
    sick_leave_credit_hours: Decimal = ZERO
    holiday_credit_hours: Decimal = ZERO

    @property
    def absence_holiday_credit(self) -> Decimal:
        """Vacation, sick leave and holiday credit combined."""
        return (
            self.vacation_credit_hours
            + self.sick_leave_credit_hours
            + self.holiday_credit_hours
        )

    @property
    def total(self) -> Decimal:
        """All credits combined."""
        return self.worked_hours + self.adjustment_hours + self.absence_holiday_credit


def _within(day: date, start: date | None, end: date) -> bool:
    return (start is None or start <= day) and day <= end


def worked_hours_between(
    employee: Employee,
    start: date | None,
    end: date,
    time_entries: Iterable[TimeEntry],
) -> Decimal:
    """Sum net hours of the employee's entries starting within [start, end].

    A ``start`` of None sums every entry up to ``end``.
    """
    return sum(
        (
            entry.worked_hours
            for entry in time_entries
            if entry.employee_id == employee.id
            and _within(to_local_date(entry.start, employee.timezone), start, end)
        ),
        ZERO,
    )


def adjustment_hours_between(
    employee: Employee,
    start: date | None,
    end: date,
    adjustments: Iterable[TimeBalanceAdjustment],
) -> Decimal:
    """Sum signed adjustment hours dated within [start, end].

    A ``start`` of None sums every adjustment up to ``end``.
    """
    return sum(
        (
            adj.signed_hours
            for adj in adjustments
            if adj.employee_id == employee.id and _within(adj.date, start, end)
        ),
        ZERO,
    )


def iter_day_credits(
    employee: Employee,
    start: date,
    end: date,
    absence_requests: Iterable[AbsenceRequest],
    holidays_by_year: HolidaysByYear | None = None,
) -> Iterator[DayCredit]:
    """Yield the non-worked credit of every scheduled day in [start, end].

    Days without scheduled hours never earn credit, even when a holiday or
    absence falls on them. A half-day vacation earns half the scheduled
    hours; sick leave always earns the full day.

    Args:
        employee: The employee.
        start: First day, inclusive.
        end: Last day, inclusive.
        absence_requests: Absence requests of any employee and status.
        holidays_by_year: Public holidays per year.

    Yields:
        One DayCredit per credited day.
    """
    holidays = holiday_dates(holidays_by_year)
    approved = [
        r
        for r in absence_requests
        if r.employee_id == employee.id
        and r.is_approved
        and r.type in CREDITED_ABSENCE_TYPES
    ]

    for day in iter_days(start, end):
        hours = scheduled_hours_for_employee(employee, day)
        if hours <= 0:
            continue

        if day in holidays:
            yield DayCredit(date=day, source=CreditSource.HOLIDAY, hours=hours)
            continue

        absence = next((r for r in approved if r.covers(day)), None)
        if absence is None:
            continue

        if absence.type == AbsenceType.SICK_LEAVE:
            yield DayCredit(date=day, source=CreditSource.SICK_LEAVE, hours=hours)
        elif absence.is_half_day:
            yield DayCredit(date=day, source=CreditSource.VACATION, hours=hours / 2)
        else:
            yield DayCredit(date=day, source=CreditSource.VACATION, hours=hours)


def summarize_credits(
    employee: Employee,
    start: date | None,
    end: date,
    time_entries: Iterable[TimeEntry] = (),
    absence_requests: Iterable[AbsenceRequest] = (),
    adjustments: Iterable[TimeBalanceAdjustment] = (),
    holidays_by_year: HolidaysByYear | None = None,
) -> CreditSummary:
    """Collect all credits within [start, end], split by source.

    Day credits never start before the first work day. A ``start`` of None
    counts worked hours and adjustments without a lower bound.
    """
    first_credit_day = max(start or employee.first_work_day, employee.first_work_day)
    by_source = dict.fromkeys(CreditSource, ZERO)
    for credit in iter_day_credits(
        employee, first_credit_day, end, absence_requests, holidays_by_year
    ):
        by_source[credit.source] += credit.hours

    return CreditSummary(
        worked_hours=worked_hours_between(employee, start, end, time_entries),
        adjustment_hours=adjustment_hours_between(employee, start, end, adjustments),
        vacation_credit_hours=by_source[CreditSource.VACATION],
        sick_leave_credit_hours=by_source[CreditSource.SICK_LEAVE],
        holiday_credit_hours=by_source[CreditSource.HOLIDAY],
    )


def accumulate_credits(
    employee: Employee,
    upto_date: date,
    time_entries: Iterable[TimeEntry] = (),
    absence_requests: Iterable[AbsenceRequest] = (),
    adjustments: Iterable[TimeBalanceAdjustment] = (),
    holidays_by_year: HolidaysByYear | None = None,
) -> Decimal:
    """Total credits up to and including ``upto_date``.

    Worked hours and adjustments count whatever their date; holiday and
    absence credits count from the first work day on.

    Args:
        employee: The employee.
        upto_date: Last day to include.
        time_entries: Time entries of any employee.
        absence_requests: Absence requests of any employee.
        adjustments: Balance adjustments of any employee.
        holidays_by_year: Public holidays per year.

    Returns:
        Worked, adjustment, holiday and absence hours combined.
    """
    return summarize_credits(
        employee,
        None,
        upto_date,
        time_entries,
        absence_requests,
        adjustments,
        holidays_by_year,
    ).total
