# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time balance engine for employee working time and entitlements.

All functions are pure: they take immutable snapshots of employees,
entries, absences, adjustments and holidays and return computed values.
"""

from worktime.config import EngineSettings, configure_logging, get_settings
from worktime.exceptions import DataIntegrityError, WorktimeError
from worktime.services.balance_service import calculate_balance
from worktime.services.break_policy import (
    apply_automatic_break,
    required_break_minutes,
)
from worktime.services.breakdown_service import monthly_breakdown, yearly_breakdown
from worktime.services.collision_service import (
    Conflict,
    detect_absence_collision,
    detect_collision,
    detect_entry_collision,
)
from worktime.services.contract_service import (
    contract_for,
    resolve_contract,
    validate_contract_history,
)
from worktime.services.credit_service import (
    CreditSummary,
    DayCredit,
    accumulate_credits,
    iter_day_credits,
)
from worktime.services.entitlement_service import (
    annual_sick_days_taken,
    annual_vacation_taken,
    calculate_vacation_carryover,
    count_workdays_in_range,
    monthly_absence_breakdown,
    vacation_account,
)
from worktime.services.holiday_service import (
    HolidayCalendar,
    build_holidays_by_year,
    get_holiday_calendar,
)
from worktime.services.overview_service import employee_overview, team_overview
from worktime.services.payroll_service import accumulate_payroll_debit
from worktime.services.schedule_service import (
    scheduled_hours,
    scheduled_hours_for_employee,
)

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022
    # Configuration
    "EngineSettings",
    "configure_logging",
    "get_settings",
    # Errors
    "DataIntegrityError",
    "WorktimeError",
    # Contracts and schedules
    "contract_for",
    "resolve_contract",
    "validate_contract_history",
    "scheduled_hours",
    "scheduled_hours_for_employee",
    # Entry editing
    "apply_automatic_break",
    "required_break_minutes",
    "Conflict",
    "detect_collision",
    "detect_entry_collision",
    "detect_absence_collision",
    # Balance
    "CreditSummary",
    "DayCredit",
    "accumulate_credits",
    "iter_day_credits",
    "accumulate_payroll_debit",
    "calculate_balance",
    "monthly_breakdown",
    "yearly_breakdown",
    # Entitlements
    "annual_vacation_taken",
    "annual_sick_days_taken",
    "monthly_absence_breakdown",
    "count_workdays_in_range",
    "calculate_vacation_carryover",
    "vacation_account",
    # Holidays
    "HolidayCalendar",
    "build_holidays_by_year",
    "get_holiday_calendar",
    # Overview
    "employee_overview",
    "team_overview",
]
