# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exceptions raised by the time balance engine."""


class WorktimeError(Exception):
    """Base exception for time balance engine errors."""


class DataIntegrityError(WorktimeError):
    """Employee master data is inconsistent and cannot be computed on."""

    def __init__(self, employee_id: int | None, message: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id}: {message}")
