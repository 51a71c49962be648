# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar helpers shared by the balance services.

All comparisons in the engine happen on ``datetime.date`` values in the
employee's local calendar. Naive datetimes are taken as already local,
aware datetimes are converted to the employee's zone (or the configured
default zone) before their date is taken.
"""

from calendar import monthrange
from collections.abc import Iterable, Iterator
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from worktime.config import get_settings
from worktime.schemas import Holiday, HolidaysByYear


def to_local_date(value: datetime | date, timezone: str | None = None) -> date:
    """Normalize a timestamp or date to a local calendar date.

    Args:
        value: The timestamp or date.
        timezone: IANA zone name; defaults to the configured zone.

    Returns:
        The calendar date in the local zone.
    """
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        return value.date()
    zone = ZoneInfo(timezone or get_settings().timezone)
    return value.astimezone(zone).date()


def to_local_datetime(value: datetime, timezone: str | None = None) -> datetime:
    """Convert an aware timestamp to naive local time; naive values pass through.

    Args:
        value: The timestamp.
        timezone: IANA zone name; defaults to the configured zone.

    Returns:
        A naive datetime in the local zone.
    """
    if value.tzinfo is None:
        return value
    zone = ZoneInfo(timezone or get_settings().timezone)
    return value.astimezone(zone).replace(tzinfo=None)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month.

    Raises:
        ValueError: If month is not within 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    _, last_day = monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)


def month_end(day: date) -> date:
    """Return the last day of the month containing ``day``."""
    _, last_day = monthrange(day.year, day.month)
    return date(day.year, day.month, last_day)


def next_month_start(day: date) -> date:
    """Return the first day of the month after the one containing ``day``."""
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def iter_month_starts(start: date, end: date) -> Iterator[date]:
    """Yield the first day of every month from start's month through end's."""
    current = start.replace(day=1)
    while current <= end:
        yield current
        current = next_month_start(current)


def is_weekday(day: date) -> bool:
    """Monday to Friday."""
    return day.weekday() < 5


def holiday_dates(holidays_by_year: HolidaysByYear | None) -> set[date]:
    """Flatten a per-year holiday calendar to a set of dates."""
    if not holidays_by_year:
        return set()
    return {h.date for holidays in holidays_by_year.values() for h in holidays}


def holiday_date_set(holidays: Iterable[Holiday | date] | None) -> set[date]:
    """Collect dates from a flat holiday list, accepting plain dates too."""
    if not holidays:
        return set()
    return {h.date if isinstance(h, Holiday) else h for h in holidays}
