# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for balance credits."""

from datetime import date
from decimal import Decimal

from worktime.models.enums import (
    AbsenceStatus,
    AbsenceType,
    AdjustmentType,
    CreditSource,
    DayPortion,
)
from worktime.services.credit_service import (
    accumulate_credits,
    adjustment_hours_between,
    iter_day_credits,
    summarize_credits,
    worked_hours_between,
)

JAN_1 = date(2024, 1, 1)
JAN_31 = date(2024, 1, 31)


class TestWorkedHoursBetween:
    """Tests for worked_hours_between."""

    def test_net_of_break(self, employee, make_entry):
        """Breaks are deducted from the worked time."""
        entry = make_entry(
            "2024-01-02T08:00:00", "2024-01-02T16:30:00", break_minutes=30
        )

        assert worked_hours_between(employee, JAN_1, JAN_31, [entry]) == Decimal("8")

    def test_fractional_hours_quantized(self, employee, make_entry):
        """Twenty minutes are a third of an hour at micro-hour precision."""
        entry = make_entry("2024-01-02T08:00:00", "2024-01-02T08:20:00")

        result = worked_hours_between(employee, JAN_1, JAN_31, [entry])

        assert result == Decimal("0.333333")

    def test_filters_employee_and_range(self, employee, make_entry):
        """Other employees and entries outside the range are skipped."""
        entries = [
            make_entry("2024-01-02T08:00:00", "2024-01-02T12:00:00"),
            make_entry("2024-01-02T08:00:00", "2024-01-02T12:00:00", employee_id=2),
            make_entry("2024-02-01T08:00:00", "2024-02-01T12:00:00"),
        ]

        assert worked_hours_between(employee, JAN_1, JAN_31, entries) == 4


class TestAdjustmentHoursBetween:
    """Tests for adjustment_hours_between."""

    def test_corrections_add_payouts_subtract(self, employee, make_adjustment):
        """Payouts reduce the balance whatever sign they are stored with."""
        adjustments = [
            make_adjustment("2024-01-10", "5"),
            make_adjustment("2024-01-20", "3", adjustment_type=AdjustmentType.PAYOUT),
            make_adjustment("2024-01-25", "-1", adjustment_type=AdjustmentType.PAYOUT),
        ]

        result = adjustment_hours_between(employee, JAN_1, JAN_31, adjustments)

        assert result == Decimal("1")

    def test_negative_correction(self, employee, make_adjustment):
        """Corrections keep their sign."""
        adjustments = [make_adjustment("2024-01-10", "-2.5")]

        result = adjustment_hours_between(employee, JAN_1, JAN_31, adjustments)

        assert result == Decimal("-2.5")


class TestIterDayCredits:
    """Tests for iter_day_credits."""

    def test_holiday_beats_vacation(self, employee, make_absence, new_year_holidays):
        """A vacation over a holiday is credited once, as holiday."""
        vacation = make_absence("2024-01-01", "2024-01-01")

        credits = list(
            iter_day_credits(employee, JAN_1, JAN_1, [vacation], new_year_holidays)
        )

        assert len(credits) == 1
        assert credits[0].source == CreditSource.HOLIDAY
        assert credits[0].hours == Decimal("8")

    def test_half_day_vacation(self, employee, make_absence):
        """Half-day vacation earns half the scheduled hours."""
        vacation = make_absence("2024-01-02", "2024-01-02", day_portion=DayPortion.AM)

        credits = list(iter_day_credits(employee, JAN_1, JAN_31, [vacation]))

        assert [(c.date, c.hours) for c in credits] == [
            (date(2024, 1, 2), Decimal("4"))
        ]

    def test_sick_leave_always_full_day(self, employee, make_absence):
        """A day portion on sick leave is ignored."""
        sick = make_absence(
            "2024-01-02",
            "2024-01-02",
            absence_type=AbsenceType.SICK_LEAVE,
            day_portion=DayPortion.PM,
        )

        credits = list(iter_day_credits(employee, JAN_1, JAN_31, [sick]))

        assert credits[0].source == CreditSource.SICK_LEAVE
        assert credits[0].hours == Decimal("8")

    def test_time_off_earns_nothing(self, employee, make_absence):
        """Time off consumes overtime and is not credited."""
        time_off = make_absence(
            "2024-01-02", "2024-01-03", absence_type=AbsenceType.TIME_OFF
        )

        assert list(iter_day_credits(employee, JAN_1, JAN_31, [time_off])) == []

    def test_time_off_does_not_mask_vacation(self, employee, make_absence):
        """A credited absence on the same day is still found."""
        time_off = make_absence(
            "2024-01-02", "2024-01-02", absence_type=AbsenceType.TIME_OFF
        )
        vacation = make_absence("2024-01-02", "2024-01-02", absence_id=2)

        credits = list(iter_day_credits(employee, JAN_1, JAN_31, [time_off, vacation]))

        assert [c.source for c in credits] == [CreditSource.VACATION]

    def test_weekend_absence_not_credited(self, employee, make_absence):
        """Days without scheduled hours earn nothing."""
        vacation = make_absence("2024-01-06", "2024-01-07")

        assert list(iter_day_credits(employee, JAN_1, JAN_31, [vacation])) == []

    def test_pending_and_foreign_requests_ignored(self, employee, make_absence):
        """Only the employee's approved requests count."""
        requests = [
            make_absence("2024-01-02", "2024-01-02", status=AbsenceStatus.PENDING),
            make_absence("2024-01-03", "2024-01-03", status=AbsenceStatus.REJECTED),
            make_absence("2024-01-04", "2024-01-04", employee_id=2),
        ]

        assert list(iter_day_credits(employee, JAN_1, JAN_31, requests)) == []

    def test_weekly_schedule_hours(
        self, make_employee, make_weekly_contract, make_absence
    ):
        """Credit follows the weekly schedule of the day."""
        employee = make_employee(
            contract_history=[make_weekly_contract(mon=8, tue=8, wed=4)]
        )
        vacation = make_absence("2024-01-01", "2024-01-05")

        credits = list(iter_day_credits(employee, JAN_1, JAN_31, [vacation]))

        assert [c.hours for c in credits] == [Decimal("8"), Decimal("8"), Decimal("4")]


class TestSummarizeCredits:
    """Tests for summarize_credits and accumulate_credits."""

    def test_split_by_source(
        self, employee, make_entry, make_absence, make_adjustment, new_year_holidays
    ):
        """Each credit lands in its own bucket."""
        summary = summarize_credits(
            employee,
            JAN_1,
            date(2024, 1, 5),
            time_entries=[make_entry("2024-01-04T08:00:00", "2024-01-04T16:00:00")],
            absence_requests=[
                make_absence("2024-01-02", "2024-01-02"),
                make_absence(
                    "2024-01-03",
                    "2024-01-03",
                    absence_type=AbsenceType.SICK_LEAVE,
                    absence_id=2,
                ),
            ],
            adjustments=[make_adjustment("2024-01-05", "1.5")],
            holidays_by_year=new_year_holidays,
        )

        assert summary.worked_hours == Decimal("8")
        assert summary.adjustment_hours == Decimal("1.5")
        assert summary.vacation_credit_hours == Decimal("8")
        assert summary.sick_leave_credit_hours == Decimal("8")
        assert summary.holiday_credit_hours == Decimal("8")
        assert summary.absence_holiday_credit == Decimal("24")
        assert summary.total == Decimal("33.5")

    def test_accumulate_from_first_work_day(
        self, employee, make_entry, make_absence, new_year_holidays
    ):
        """Holiday, vacation and work in the first week add up."""
        total = accumulate_credits(
            employee,
            date(2024, 1, 5),
            time_entries=[make_entry("2024-01-04T08:00:00", "2024-01-04T16:00:00")],
            absence_requests=[make_absence("2024-01-02", "2024-01-03")],
            holidays_by_year=new_year_holidays,
        )

        assert total == Decimal("32")

    def test_work_before_first_work_day_counts(
        self, make_employee, make_entry, make_absence, make_adjustment
    ):
        """Early entries and adjustments count, early absences earn nothing."""
        employee = make_employee(first_work_day=date(2024, 1, 10))
        entries = [
            make_entry("2024-01-05T08:00:00", "2024-01-05T16:00:00"),
            make_entry("2024-01-10T08:00:00", "2024-01-10T12:00:00", entry_id=2),
        ]
        absences = [
            make_absence("2024-01-08", "2024-01-09", absence_id=1),
            make_absence("2024-01-11", "2024-01-11", absence_id=2),
        ]
        adjustments = [make_adjustment("2024-01-02", "1.5")]

        total = accumulate_credits(employee, JAN_31, entries, absences, adjustments)

        assert total == Decimal("21.5")

    def test_open_start_sums_everything_up_to_end(self, employee, make_entry):
        """Without a lower bound every earlier entry is included."""
        entries = [
            make_entry("2023-11-20T08:00:00", "2023-11-20T12:00:00"),
            make_entry("2024-01-02T08:00:00", "2024-01-02T12:00:00", entry_id=2),
            make_entry("2024-02-01T08:00:00", "2024-02-01T12:00:00", entry_id=3),
        ]

        assert worked_hours_between(employee, None, JAN_31, entries) == 8
