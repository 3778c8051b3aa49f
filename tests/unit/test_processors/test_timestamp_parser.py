"""
Unit tests for TimestampParser and the ParsedTimestamp value type.
"""

import logging
from datetime import datetime, timedelta

import pytest

from rfc822time import ParsedTimestamp, parse
from rfc822time.processors.instant_converter import days_from_civil
from rfc822time.processors.timestamp_parser import TimestampParser
from tests.fixtures.sample_data import (
    INVALID_VALUE_STAMPS,
    MALFORMED_STAMPS,
    SAME_INSTANT_STAMPS,
    VALID_STAMPS,
)


class TestTimestampParser:
    """Test suite for TimestampParser"""

    @pytest.fixture
    def parser(self):
        return TimestampParser()

    @pytest.mark.unit
    @pytest.mark.parametrize("sample", VALID_STAMPS, ids=lambda s: s["stamp"])
    def test_valid_stamps(self, parser, sample):
        result = parser.parse(sample["stamp"])

        assert isinstance(result, ParsedTimestamp)
        assert result.stamp == sample["stamp"]
        assert result.instant == sample["instant"]
        dt = result.date_time
        assert (dt.day, dt.month, dt.year, dt.hour, dt.minute, dt.second) == sample["civil"]
        assert result.time_zone_differential == sample["differential"]

    @pytest.mark.unit
    @pytest.mark.parametrize("stamp", MALFORMED_STAMPS)
    def test_malformed_stamps(self, parser, stamp):
        assert parser.parse(stamp) is None

    @pytest.mark.unit
    @pytest.mark.parametrize("stamp", INVALID_VALUE_STAMPS)
    def test_invalid_values(self, parser, stamp):
        assert parser.parse(stamp) is None

    @pytest.mark.unit
    def test_tokens_are_kept(self, parser):
        result = parser.parse("Mon, 23 Nov 20 09:34:03 -0500")

        assert result.tokens.day_of_week == "Mon"
        assert result.tokens.day == "23"
        assert result.tokens.month == "Nov"
        assert result.tokens.year == "20"
        assert result.tokens.hour == "09"
        assert result.tokens.minute == "34"
        assert result.tokens.second == "03"
        assert result.tokens.time_zone == "-0500"
        assert result.date_time.year == 2020

    @pytest.mark.unit
    def test_missing_seconds(self, parser):
        result = parser.parse("07 Oct 2014 10:10 PST")

        assert result.tokens.second == ""
        assert result.tokens.day_of_week == ""
        assert result.date_time.second == 0

    @pytest.mark.unit
    def test_civil_fields_are_local(self, parser):
        """Test the differential affects only the instant"""
        result = parser.parse("07 Oct 2014 10:10:05 PST")
        reference = parser.parse("07 Oct 2014 10:10:05 UT")

        assert result.date_time.hour == 10
        assert result.instant - reference.instant == 8 * 3600

    @pytest.mark.unit
    def test_leap_day(self, parser):
        assert parser.parse("29 Feb 2020 00:00:00 GMT") is not None
        assert parser.parse("29 Feb 2019 00:00:00 GMT") is None

    @pytest.mark.unit
    def test_rejections_are_logged_with_reason(self, parser, caplog):
        with caplog.at_level(logging.DEBUG, logger="rfc822time"):
            parser.parse("not a stamp")
            parser.parse("32 Jan 2020 10:00:00 GMT")

        messages = [record.getMessage() for record in caplog.records]
        assert any("no_match" in m for m in messages)
        assert any("invalid_calendar_value" in m for m in messages)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 1606142043, b"23 Nov 2020 09:34:03 EST"])
    def test_non_string_input(self, parser, value):
        with pytest.raises(TypeError):
            parser.parse(value)

    @pytest.mark.unit
    def test_module_level_parse(self):
        assert parse("23 Nov 2020 09:34:03 EST").instant == 1606142043
        assert parse("23 Nov 2020 09:34:03") is None


class TestParsedTimestamp:
    """Test suite for ParsedTimestamp comparison and conversions"""

    @pytest.mark.unit
    def test_ordering_uses_instant(self):
        later = parse("Mon, 23 Nov 2020 09:34:03 -0500")
        earlier = parse("Tue, 07 Oct 2014 10:10:05 PST")

        assert later.stamp < earlier.stamp
        assert later > earlier
        assert later >= earlier
        assert earlier < later
        assert earlier <= later
        assert later != earlier
        assert sorted([later, earlier]) == [earlier, later]

    @pytest.mark.unit
    def test_equal_instants_compare_equal(self):
        parsed = [parse(stamp) for stamp in SAME_INSTANT_STAMPS]

        assert all(p == parsed[0] for p in parsed)
        assert len({p.stamp for p in parsed}) == len(parsed)
        assert len(set(parsed)) == 1

    @pytest.mark.unit
    def test_not_equal_to_other_types(self):
        assert parse("23 Nov 2020 14:34:03 GMT") != 1606142043

    @pytest.mark.unit
    def test_idempotent(self):
        first = parse("Mon, 23 Nov 2020 09:34:03 -0500")
        second = parse("Mon, 23 Nov 2020 09:34:03 -0500")

        assert first == second
        assert first.instant == second.instant
        assert first.tokens == second.tokens
        assert first.date_time == second.date_time

    @pytest.mark.unit
    def test_immutable(self):
        result = parse("23 Nov 2020 09:34:03 EST")

        with pytest.raises(AttributeError):
            result.instant = 0
        with pytest.raises(AttributeError):
            result.date_time.day = 1

    @pytest.mark.unit
    def test_utc_datetime(self):
        result = parse("07 Oct 2014 10:10:05 PST")

        assert result.utc_datetime.replace(tzinfo=None) == datetime(2014, 10, 7, 18, 10, 5)
        assert result.utc_datetime.utcoffset() == timedelta(0)
        assert result.utc_datetime.timestamp() == result.instant

    @pytest.mark.unit
    def test_local_datetime(self):
        result = parse("31 Dec 1999 23:59 +1230")

        local = result.local_datetime
        assert local.replace(tzinfo=None) == datetime(1999, 12, 31, 23, 59)
        assert local.utcoffset() == timedelta(hours=12, minutes=30)
        assert local == result.utc_datetime

    @pytest.mark.unit
    def test_instant_outside_datetime_range(self):
        """Test the instant may pass year 9999; only the datetime view overflows"""
        result = parse("31 Dec 9999 23:59:59 M")

        assert result.instant == days_from_civil(10000, 1, 1) * 86400 + 11 * 3600 + 59 * 60 + 59
        with pytest.raises(OverflowError):
            result.utc_datetime

    @pytest.mark.unit
    def test_day_of_week_consistency(self):
        assert parse("Mon, 23 Nov 2020 09:34:03 -0500").day_of_week_consistent
        assert parse("23 Nov 2020 09:34:03 -0500").day_of_week_consistent

        mismatched = parse("Tue, 23 Nov 2020 09:34:03 -0500")
        assert mismatched is not None
        assert not mismatched.day_of_week_consistent
        assert mismatched.date_time.implied_day_of_week == "Mon"
