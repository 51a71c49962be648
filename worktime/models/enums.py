# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for the time balance domain."""

from enum import Enum


class EmploymentType(str, Enum):
    """Employment type enumeration."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    MINI_JOB = "mini_job"


class TargetHoursModel(str, Enum):
    """How a contract expresses its scheduled hours."""

    MONTHLY = "monthly"  # daily_target_hours on weekdays
    WEEKLY = "weekly"  # per-weekday hours from weekly_schedule


class AbsenceType(str, Enum):
    """Absence type enumeration."""

    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    TIME_OFF = "time_off"


class DayPortion(str, Enum):
    """Portion of a single day covered by an absence."""

    FULL = "full"
    AM = "am"
    PM = "pm"


class AbsenceStatus(str, Enum):
    """Absence request status enumeration.

    Status flow:
        PENDING → APPROVED
                ↘ REJECTED
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AdjustmentType(str, Enum):
    """Manual time balance adjustment types."""

    CORRECTION = "correction"
    PAYOUT = "payout"


class ConflictType(str, Enum):
    """What a proposed interval collided with."""

    ENTRY = "entry"
    ABSENCE = "absence"


class CreditSource(str, Enum):
    """Source of a non-worked daily credit."""

    HOLIDAY = "holiday"
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
