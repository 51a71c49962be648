# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Daily scheduled hours derived from a contract."""

from datetime import date
from decimal import Decimal

from worktime.schemas import ContractDetails, Employee
from worktime.services.contract_service import contract_for
from worktime.services.dates import is_weekday


def scheduled_hours(contract: ContractDetails, on_date: date) -> Decimal:
    """Calculate the target hours a contract schedules for a day.

    Weekly contracts use their per-weekday schedule. All other contracts
    schedule ``daily_target_hours`` on Monday to Friday and nothing on
    weekends.

    Args:
        contract: The contract in effect on the day.
        on_date: The day.

    Returns:
        Scheduled hours, 0 for days off.
    """
    if contract.uses_weekly_schedule:
        return contract.weekly_schedule.hours_for(on_date)
    if is_weekday(on_date):
        return contract.daily_target_hours
    return Decimal("0")


def scheduled_hours_for_employee(employee: Employee, on_date: date) -> Decimal:
    """Scheduled hours under the contract in effect on that day."""
    return scheduled_hours(contract_for(employee, on_date), on_date)
