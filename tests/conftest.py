# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from datetime import date
from decimal import Decimal

import pytest

# Set test environment before importing the package
os.environ["WORKTIME_TIMEZONE"] = "Europe/Berlin"
os.environ["WORKTIME_COUNTRY_CODE"] = "DE"

from worktime.config import get_settings
from worktime.models.enums import (
    AbsenceStatus,
    AbsenceType,
    AdjustmentType,
    DayPortion,
    TargetHoursModel,
)
from worktime.schemas import (
    AbsenceRequest,
    ContractDetails,
    Employee,
    Holiday,
    TimeBalanceAdjustment,
    TimeEntry,
    WeeklySchedule,
)


def build_contract(
    valid_from: str = "2024-01-01",
    monthly_target_hours: str = "160",
    daily_target_hours: str = "8",
    vacation_days: str = "30",
    **kwargs,
) -> ContractDetails:
    return ContractDetails(
        valid_from=valid_from,
        monthly_target_hours=Decimal(monthly_target_hours),
        daily_target_hours=Decimal(daily_target_hours),
        vacation_days=Decimal(vacation_days),
        **kwargs,
    )


def build_weekly_contract(
    valid_from: str = "2024-01-01",
    monthly_target_hours: str = "80",
    **hours: int,
) -> ContractDetails:
    return ContractDetails(
        valid_from=valid_from,
        target_hours_model=TargetHoursModel.WEEKLY,
        monthly_target_hours=Decimal(monthly_target_hours),
        weekly_schedule=WeeklySchedule(**hours),
        vacation_days=Decimal("20"),
    )


def build_employee(**overrides) -> Employee:
    data = {
        "id": 1,
        "first_name": "Jan",
        "last_name": "Demo",
        "first_work_day": date(2024, 1, 1),
        "starting_time_balance_hours": Decimal("0"),
        "contract_history": [build_contract()],
    }
    data.update(overrides)
    return Employee(**data)


def build_entry(
    start: str,
    end: str,
    break_minutes: int = 0,
    entry_id: int | None = 1,
    employee_id: int = 1,
) -> TimeEntry:
    return TimeEntry(
        id=entry_id,
        employee_id=employee_id,
        start=start,
        end=end,
        break_duration_minutes=break_minutes,
    )


def build_absence(
    start_date: str,
    end_date: str,
    absence_type: AbsenceType = AbsenceType.VACATION,
    status: AbsenceStatus = AbsenceStatus.APPROVED,
    day_portion: DayPortion = DayPortion.FULL,
    absence_id: int | None = 1,
    employee_id: int = 1,
) -> AbsenceRequest:
    return AbsenceRequest(
        id=absence_id,
        employee_id=employee_id,
        type=absence_type,
        start_date=start_date,
        end_date=end_date,
        day_portion=day_portion,
        status=status,
    )


def build_adjustment(
    on_date: str,
    hours: str,
    adjustment_type: AdjustmentType = AdjustmentType.CORRECTION,
    adjustment_id: int = 1,
    employee_id: int = 1,
) -> TimeBalanceAdjustment:
    return TimeBalanceAdjustment(
        id=adjustment_id,
        employee_id=employee_id,
        date=on_date,
        type=adjustment_type,
        hours=Decimal(hours),
        note="test",
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_contract():
    return build_contract


@pytest.fixture
def make_weekly_contract():
    return build_weekly_contract


@pytest.fixture
def make_employee():
    return build_employee


@pytest.fixture
def make_entry():
    return build_entry


@pytest.fixture
def make_absence():
    return build_absence


@pytest.fixture
def make_adjustment():
    return build_adjustment


@pytest.fixture
def employee() -> Employee:
    """Full-time employee: 160h/month, 8h/day, starting 2024-01-01."""
    return build_employee()


@pytest.fixture
def new_year_holidays() -> dict[int, list[Holiday]]:
    return {2024: [Holiday(date=date(2024, 1, 1), name="Neujahr")]}
