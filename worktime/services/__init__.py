# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from worktime.services import (
    balance_service,
    break_policy,
    breakdown_service,
    collision_service,
    contract_service,
    credit_service,
    entitlement_service,
    holiday_service,
    overview_service,
    payroll_service,
    schedule_service,
)

__all__ = [
    "balance_service",
    "break_policy",
    "breakdown_service",
    "collision_service",
    "contract_service",
    "credit_service",
    "entitlement_service",
    "holiday_service",
    "overview_service",
    "payroll_service",
    "schedule_service",
]
