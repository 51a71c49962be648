# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain enumerations shared by schemas and services."""
from worktime.models.enums import (
    AbsenceStatus,
    AbsenceType,
    AdjustmentType,
    ConflictType,
    CreditSource,
    DayPortion,
    EmploymentType,
    TargetHoursModel,
)

__all__ = [
    "AbsenceStatus",
    "AbsenceType",
    "AdjustmentType",
    "ConflictType",
    "CreditSource",
    "DayPortion",
    "EmploymentType",
    "TargetHoursModel",
]
