"""
Unit tests for the calendar validator.
"""

import pytest

from rfc822time.processors.calendar_validator import (
    days_in_february,
    is_leap_year,
    is_valid_date,
    is_valid_date_time,
    is_valid_time,
)
from rfc822time.processors.timestamp_models import CivilDateTime


class TestCalendarValidator:
    """Test suite for date and time range checks"""

    @pytest.mark.unit
    @pytest.mark.parametrize("year,leap", [
        (2020, True), (2019, False), (2000, True), (1900, False),
        (2100, False), (2400, True), (0, True), (-4, True), (-100, False),
    ])
    def test_is_leap_year(self, year, leap):
        assert is_leap_year(year) is leap
        assert days_in_february(year) == (29 if leap else 28)

    @pytest.mark.unit
    @pytest.mark.parametrize("day,month,year", [
        (1, 1, 2020), (28, 2, 2019), (29, 2, 2020), (29, 2, 2000),
        (30, 4, 2021), (31, 1, 2021), (31, 3, 2021), (31, 5, 2021),
        (31, 7, 2021), (31, 8, 2021), (31, 10, 2021), (31, 12, 2021),
        (30, 1, 2019), (29, 3, 2019),
    ])
    def test_valid_dates(self, day, month, year):
        assert is_valid_date(day, month, year)

    @pytest.mark.unit
    @pytest.mark.parametrize("day,month,year", [
        (29, 2, 2019), (29, 2, 1900), (30, 2, 2020), (31, 2, 2020),
        (31, 4, 2021), (31, 6, 2021), (31, 9, 2021), (31, 11, 2021),
        (0, 1, 2020), (32, 1, 2020), (-1, 1, 2020),
        (1, 0, 2020), (1, 13, 2020),
    ])
    def test_invalid_dates(self, day, month, year):
        assert not is_valid_date(day, month, year)

    @pytest.mark.unit
    def test_month_zero_never_passes(self):
        """Test the sentinel month is rejected for every day"""
        assert not any(is_valid_date(day, 0, 2020) for day in range(1, 32))

    @pytest.mark.unit
    @pytest.mark.parametrize("hour,minute,second,valid", [
        (0, 0, 0, True), (23, 59, 59, True), (12, 30, 0, True),
        (24, 0, 0, False), (0, 60, 0, False), (0, 0, 60, False),
        (-1, 0, 0, False), (0, -1, 0, False), (0, 0, -1, False),
    ])
    def test_is_valid_time(self, hour, minute, second, valid):
        assert is_valid_time(hour, minute, second) is valid

    @pytest.mark.unit
    def test_is_valid_date_time_needs_both(self):
        assert is_valid_date_time(CivilDateTime(29, 2, 2020, 23, 59, 59))
        assert not is_valid_date_time(CivilDateTime(29, 2, 2019, 12, 0, 0))
        assert not is_valid_date_time(CivilDateTime(28, 2, 2019, 25, 0, 0))
