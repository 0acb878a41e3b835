"""Tests for ISO week resolution."""

import pytest
from datetime import date, timedelta

from roster_week.errors import InvalidWeekError, RosterError
from roster_week.week import resolve_week, weeks_in_year


class TestResolveWeek:
    """Tests for resolve_week."""

    @pytest.mark.parametrize(
        "year,week,monday",
        [
            (2024, 1, date(2024, 1, 1)),  # Jan 1st is a Monday
            (2024, 10, date(2024, 3, 4)),
            (2019, 1, date(2018, 12, 31)),  # Week 1 starts in previous year
            (2021, 1, date(2021, 1, 4)),  # Jan 1st belongs to 2020-W53
            (2020, 53, date(2020, 12, 28)),
            (2025, 52, date(2025, 12, 22)),
        ],
    )
    def test_known_weeks(self, year: int, week: int, monday: date):
        """Known ISO weeks resolve to the expected Monday."""
        start, end = resolve_week(year, week)
        assert start == monday
        assert end == monday + timedelta(days=6)

    def test_week_spanning_new_year(self):
        """Sunday may fall in the following calendar year."""
        monday, sunday = resolve_week(2020, 53)
        assert sunday == date(2021, 1, 3)

    @pytest.mark.parametrize("year", range(2018, 2026))
    def test_every_week_matches_iso_calendar(self, year: int):
        """Monday's ISO year and week equal the requested ones."""
        for week in range(1, weeks_in_year(year) + 1):
            monday, sunday = resolve_week(year, week)
            assert monday.weekday() == 0
            assert monday.isocalendar()[:2] == (year, week)
            assert sunday - monday == timedelta(days=6)

    @pytest.mark.parametrize("year", [2018, 2019, 2021, 2022, 2023, 2024, 2025])
    def test_week_53_in_52_week_year_raises(self, year: int):
        """Week 53 does not exist in a 52-week year."""
        with pytest.raises(InvalidWeekError, match="no ISO week 53"):
            resolve_week(year, 53)

    @pytest.mark.parametrize("week", [0, 54, 55])
    def test_out_of_calendar_weeks_raise(self, week: int):
        """Weeks no year has are rejected rather than scanned forever."""
        with pytest.raises(InvalidWeekError):
            resolve_week(2020, week)

    def test_invalid_week_is_roster_error(self):
        """InvalidWeekError is part of the roster error family."""
        with pytest.raises(RosterError):
            resolve_week(2019, 53)


class TestWeeksInYear:
    @pytest.mark.parametrize(
        "year,expected", [(2019, 52), (2020, 53), (2024, 52), (2026, 53)]
    )
    def test_weeks_in_year(self, year: int, expected: int):
        assert weeks_in_year(year) == expected
