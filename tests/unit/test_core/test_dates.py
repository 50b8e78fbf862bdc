#!/usr/bin/env python3
"""Tests for FinancialDate and the date helpers."""

from datetime import date, datetime, timezone

import pytest

from bankcli.core.dates import (
    FinancialDate,
    months_ago,
    parse_date_expression,
    parse_timestamp,
    utc_now_iso,
    validate_date_range,
)
from bankcli.core.errors import ValidationError

TODAY = date(2024, 3, 31)


class TestFinancialDate:
    """Test FinancialDate coercion and comparison."""

    @pytest.mark.unit
    def test_from_value_ignores_time_of_day(self):
        """Test ISO timestamps collapse to their calendar date."""
        parsed = FinancialDate.from_value("2024-01-15T23:59:59.999Z")
        assert parsed == FinancialDate(date(2024, 1, 15))

    @pytest.mark.unit
    def test_from_value_accepts_date_objects(self):
        """Test date and datetime inputs."""
        assert FinancialDate.from_value(date(2024, 1, 15)).to_iso_string() == "2024-01-15"
        assert FinancialDate.from_value(datetime(2024, 1, 15, 10, 30)).to_iso_string() == "2024-01-15"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "2024-13-01", "not a date", 20240115])
    def test_from_value_returns_none_for_garbage(self, value):
        """Test unparsable values give None."""
        assert FinancialDate.from_value(value) is None

    @pytest.mark.unit
    def test_ordering(self):
        """Test comparisons between dates."""
        earlier = FinancialDate.from_value("2024-01-01")
        later = FinancialDate.from_value("2024-02-01T08:00:00Z")
        assert earlier < later
        assert later >= earlier


class TestTimestamps:
    """Test ISO timestamp helpers."""

    @pytest.mark.unit
    def test_utc_now_iso_round_trips(self):
        """Test the generated timestamp parses back as an aware UTC datetime."""
        stamp = utc_now_iso()
        assert stamp.endswith("Z")
        parsed = parse_timestamp(stamp)
        assert parsed is not None
        assert parsed.tzinfo is not None

    @pytest.mark.unit
    def test_parse_timestamp_assumes_utc_for_naive(self):
        """Test naive timestamps are treated as UTC."""
        parsed = parse_timestamp("2024-01-15T10:00:00")
        assert parsed == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_parse_timestamp_invalid(self):
        """Test missing or malformed timestamps give None."""
        assert parse_timestamp(None) is None
        assert parse_timestamp("yesterday-ish") is None


class TestDateExpressions:
    """Test command-line date expression parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("today", date(2024, 3, 31)),
            ("yesterday", date(2024, 3, 30)),
            ("7d", date(2024, 3, 24)),
            ("2w", date(2024, 3, 17)),
            ("1m", date(2024, 2, 29)),
            ("thismonth", date(2024, 3, 1)),
            ("lastmonth", date(2024, 2, 1)),
            ("endoflastmonth", date(2024, 2, 29)),
            ("2024-01-05", date(2024, 1, 5)),
        ],
    )
    def test_shortcuts(self, text, expected):
        """Test each supported expression."""
        assert parse_date_expression(text, "since", today=TODAY) == expected

    @pytest.mark.unit
    def test_invalid_format_names_the_option(self):
        """Test the error mentions the option and the accepted forms."""
        with pytest.raises(ValidationError, match="--since"):
            parse_date_expression("last tuesday", "since", today=TODAY)

    @pytest.mark.unit
    def test_impossible_calendar_date(self):
        """Test a well-formed but impossible date is rejected."""
        with pytest.raises(ValidationError, match="valid date"):
            parse_date_expression("2024-02-30", "until", today=TODAY)

    @pytest.mark.unit
    def test_months_ago_crosses_year(self):
        """Test month arithmetic across a year boundary."""
        assert months_ago(3, date(2024, 1, 31)) == date(2023, 10, 31)

    @pytest.mark.unit
    def test_validate_date_range(self):
        """Test reversed ranges are rejected and equal bounds allowed."""
        validate_date_range(date(2024, 1, 1), date(2024, 1, 1))
        with pytest.raises(ValidationError, match="after"):
            validate_date_range(date(2024, 2, 1), date(2024, 1, 1))
