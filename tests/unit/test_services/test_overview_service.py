# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for dashboard overview rows."""

from datetime import date
from decimal import Decimal

import pytest

from worktime.models.enums import AbsenceType
from worktime.services.overview_service import employee_overview, team_overview


@pytest.fixture
def absences(make_absence):
    return [
        make_absence("2024-01-08", "2024-01-09", absence_id=1),
        make_absence(
            "2024-02-05",
            "2024-02-06",
            absence_type=AbsenceType.SICK_LEAVE,
            absence_id=2,
        ),
    ]


class TestEmployeeOverview:
    """Tests for employee_overview."""

    def test_summary_row(self, employee, absences):
        """Balance of the closed month plus this year's entitlements."""
        row = employee_overview(employee, date(2024, 2, 15), absence_requests=absences)

        assert row.employee_id == 1
        assert row.name == "Jan Demo"
        assert row.time_balance == Decimal("-144")
        assert row.vacation_remaining == Decimal("28")
        assert row.sick_days_taken == 2


class TestTeamOverview:
    """Tests for team_overview."""

    def test_inactive_employees_skipped(self, make_employee, absences):
        """Only active employees are listed."""
        active = make_employee(id=1)
        inactive = make_employee(id=2, first_name="Eva", is_active=False)

        rows = team_overview(
            [active, inactive], date(2024, 2, 15), absence_requests=absences
        )

        assert [row.employee_id for row in rows] == [1]
