# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Statutory minimum breaks (Arbeitszeitgesetz §4)."""

from decimal import Decimal

from worktime.schemas import Employee, TimeEntry

BREAK_THRESHOLD_HOURS = Decimal("6")
LONG_BREAK_THRESHOLD_HOURS = Decimal("9")
BREAK_MINUTES_REQUIRED = 30
LONG_BREAK_MINUTES_REQUIRED = 45


def required_break_minutes(duration_hours: Decimal | float) -> int:
    """Calculate the required break for a shift length.

    Args:
        duration_hours: Gross length of the shift in hours.

    Returns:
        0 up to 6h, 30 up to 9h, 45 beyond.
    """
    hours = Decimal(str(duration_hours))
    if hours > LONG_BREAK_THRESHOLD_HOURS:
        return LONG_BREAK_MINUTES_REQUIRED
    if hours > BREAK_THRESHOLD_HOURS:
        return BREAK_MINUTES_REQUIRED
    return 0


def apply_automatic_break(entry: TimeEntry, employee: Employee) -> TimeEntry:
    """Raise the entry's break to the legal minimum if enabled for the employee.

    A longer break entered by hand is never shortened.

    Args:
        entry: The entry about to be stored.
        employee: The entry's employee.

    Returns:
        The entry, or a copy with the adjusted break.
    """
    if not employee.automatic_break_deduction:
        return entry

    required = required_break_minutes(entry.gross_hours)
    if entry.break_duration_minutes >= required:
        return entry

    return entry.model_copy(update={"break_duration_minutes": required})
