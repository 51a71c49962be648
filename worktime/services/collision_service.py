# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Conflict detection for new or edited entries and absences."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from worktime.models.enums import AbsenceStatus, ConflictType
from worktime.schemas import AbsenceRequest, TimeEntry
from worktime.services.dates import to_local_date, to_local_datetime


@dataclass(frozen=True)
class Conflict:
    """The first existing item a proposed interval collides with."""

    type: ConflictType
    item: TimeEntry | AbsenceRequest


def intervals_overlap(
    start1: datetime, end1: datetime, start2: datetime, end2: datetime
) -> bool:
    """Check if two half-open intervals overlap; touching ends do not."""
    return start1 < end2 and end1 > start2


def detect_collision(
    start: datetime,
    end: datetime,
    existing_entries: Iterable[TimeEntry],
    absence_requests: Iterable[AbsenceRequest],
    ignore_id: int | None = None,
    timezone: str | None = None,
) -> Conflict | None:
    """Check a proposed work interval against entries and absences.

    Entries are only compared when they start on the same local day as the
    proposed interval. Naive and aware timestamps may be mixed; both are
    compared as naive local time. Absences are compared on calendar dates
    and count unless rejected. Entries are checked before absences and the
    first hit is returned.

    Args:
        start: Proposed start.
        end: Proposed end.
        existing_entries: The employee's stored time entries.
        absence_requests: The employee's absence requests.
        ignore_id: ID of the entry being edited.
        timezone: Local zone for aware timestamps.

    Returns:
        The conflict, or None if the interval is free.
    """
    start = to_local_datetime(start, timezone)
    end = to_local_datetime(end, timezone)
    start_day, end_day = start.date(), end.date()

    for entry in existing_entries:
        if ignore_id is not None and entry.id == ignore_id:
            continue
        entry_start = to_local_datetime(entry.start, timezone)
        if entry_start.date() != start_day:
            continue
        entry_end = to_local_datetime(entry.end, timezone)
        if intervals_overlap(start, end, entry_start, entry_end):
            return Conflict(type=ConflictType.ENTRY, item=entry)

    for request in absence_requests:
        if request.status == AbsenceStatus.REJECTED:
            continue
        if request.start_date <= end_day and request.end_date >= start_day:
            return Conflict(type=ConflictType.ABSENCE, item=request)

    return None


def detect_entry_collision(
    entry: TimeEntry,
    existing_entries: Iterable[TimeEntry],
    absence_requests: Iterable[AbsenceRequest],
    timezone: str | None = None,
) -> Conflict | None:
    """Check an entry about to be saved, ignoring its stored version."""
    return detect_collision(
        entry.start,
        entry.end,
        existing_entries,
        absence_requests,
        ignore_id=entry.id,
        timezone=timezone,
    )


def detect_absence_collision(
    request: AbsenceRequest,
    existing_absences: Iterable[AbsenceRequest],
    time_entries: Iterable[TimeEntry],
    timezone: str | None = None,
) -> Conflict | None:
    """Check an absence request about to be saved.

    Other non-rejected requests of the same employee that share at least
    one date are checked first, then time entries starting within the
    requested range. Entries must be removed before an absence can cover
    their day.

    Args:
        request: The new or edited request.
        existing_absences: Stored absence requests.
        time_entries: Stored time entries.
        timezone: Local zone for aware timestamps.

    Returns:
        The conflict, or None if the range is free.
    """
    for other in existing_absences:
        if other.employee_id != request.employee_id:
            continue
        if request.id is not None and other.id == request.id:
            continue
        if other.status == AbsenceStatus.REJECTED:
            continue
        if (
            request.start_date <= other.end_date
            and request.end_date >= other.start_date
        ):
            return Conflict(type=ConflictType.ABSENCE, item=other)

    for entry in time_entries:
        if entry.employee_id != request.employee_id:
            continue
        if request.covers(to_local_date(entry.start, timezone)):
            return Conflict(type=ConflictType.ENTRY, item=entry)

    return None
