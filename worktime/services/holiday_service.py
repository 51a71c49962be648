# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday calendars per country and region."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

import holidays

from worktime.config import get_settings
from worktime.schemas import Holiday


class HolidayCalendar(ABC):
    """Base class for country-specific public holiday rules."""

    country_code: str

    @abstractmethod
    def get_public_holidays(
        self,
        year: int,
        region: str | None = None,
    ) -> list[Holiday]:
        """Return public holidays of a year, sorted by date."""
        ...

    def is_public_holiday(
        self,
        check_date: date,
        region: str | None = None,
    ) -> bool:
        """Check if a date is a public holiday.

        Args:
            check_date: The date to check.
            region: Optional state/region code.

        Returns:
            True if the date is a public holiday.
        """
        return self.get_holiday_name(check_date, region) is not None

    def get_holiday_name(
        self,
        check_date: date,
        region: str | None = None,
    ) -> str | None:
        """Get the name of a holiday on a date.

        Args:
            check_date: The date to check.
            region: Optional state/region code.

        Returns:
            The holiday name, or None if not a holiday.
        """
        for holiday in self.get_public_holidays(check_date.year, region):
            if holiday.date == check_date:
                return holiday.name
        return None

    def holidays_by_year(
        self,
        years: Iterable[int],
        region: str | None = None,
    ) -> dict[int, list[Holiday]]:
        """Build the per-year calendar consumed by the balance services."""
        return {year: self.get_public_holidays(year, region) for year in years}


class LibraryHolidayCalendar(HolidayCalendar):
    """Calendar backed by a country class of the ``holidays`` package."""

    country_class: type[holidays.HolidayBase]

    def get_public_holidays(
        self,
        year: int,
        region: str | None = None,
    ) -> list[Holiday]:
        """Get public holidays for a year.

        Args:
            year: The year to get holidays for.
            region: Optional state/region code (e.g., "BY" for Bavaria).

        Returns:
            Holidays sorted by date.

        Raises:
            ValueError: If the region is unknown for the country.
        """
        if region is not None and region not in self.country_class.subdivisions:
            raise ValueError(
                f"Unknown region {region!r} for country {self.country_code}"
            )
        country_holidays = self.country_class(years=year, subdiv=region)
        return [
            Holiday(date=day, name=name)
            for day, name in sorted(country_holidays.items())
        ]


class GermanHolidayCalendar(LibraryHolidayCalendar):
    """German public holidays.

    Nationwide holidays plus the state-specific ones of the region, e.g.
    Epiphany in BW/BY/ST, Corpus Christi in BW/BY/HE/NW/RP/SL, Reformation
    Day in the northern and eastern states.
    """

    country_code = "DE"
    country_class = holidays.Germany


class AustrianHolidayCalendar(LibraryHolidayCalendar):
    """Austrian public holidays; regions are the federal state numbers."""

    country_code = "AT"
    country_class = holidays.Austria


def get_holiday_calendar(country_code: str | None = None) -> HolidayCalendar:
    """Get the holiday calendar for a country.

    Args:
        country_code: ISO 2-letter country code; defaults to the setting.

    Returns:
        The country's holiday calendar.

    Raises:
        ValueError: If no calendar exists for the country.
    """
    calendars: dict[str, type[HolidayCalendar]] = {
        "DE": GermanHolidayCalendar,
        "AT": AustrianHolidayCalendar,
    }

    code = (country_code or get_settings().country_code).upper()
    calendar_class = calendars.get(code)
    if calendar_class is None:
        raise ValueError(f"No holiday calendar for country: {code}")

    return calendar_class()


def build_holidays_by_year(
    years: Iterable[int],
    country_code: str | None = None,
    region: str | None = None,
) -> dict[int, list[Holiday]]:
    """Build a per-year holiday calendar from the configured country/region.

    Args:
        years: Years to include.
        country_code: ISO 2-letter code; defaults to the setting.
        region: State/region code; defaults to the setting.

    Returns:
        Mapping of year to that year's holidays.
    """
    if region is None and country_code is None:
        region = get_settings().region
    calendar = get_holiday_calendar(country_code)
    return calendar.holidays_by_year(years, region)
