"""
Tests for the jdatetime-backed Jalali conversion helpers.
"""

from datetime import date, datetime, time, timezone

from django.test import SimpleTestCase

import jdatetime
import pytest

from apps.calendars import jalali


class TestJalaliConversion(SimpleTestCase):
    """Test conversion between Gregorian and Jalali dates."""

    def test_from_universal_new_year(self):
        """Test conversion of Persian New Year (Nowruz)."""
        result = jalali.from_universal(date(2024, 3, 20))
        assert (result.year, result.month, result.day) == (1403, 1, 1)

    def test_from_universal_ignores_time(self):
        """Test that a late-evening datetime keeps its Gregorian date."""
        result = jalali.from_universal(datetime(2024, 1, 1, 23, 59))
        assert (result.year, result.month, result.day) == (1402, 10, 11)

    def test_to_universal(self):
        """Test conversion back to a Gregorian datetime."""
        assert jalali.to_universal(jdatetime.date(1402, 10, 11)) == datetime(2024, 1, 1)

    def test_to_universal_with_time_and_timezone(self):
        """Test that time of day and tzinfo are attached."""
        result = jalali.to_universal(jdatetime.date(1403, 1, 1), at=time(9, 15), tz=timezone.utc)
        assert result == datetime(2024, 3, 20, 9, 15, tzinfo=timezone.utc)

    def test_round_trip(self):
        """Test that conversion is reversible."""
        original = datetime(2025, 9, 23)
        assert jalali.to_universal(jalali.from_universal(original)) == original


class TestJalaliArithmetic(SimpleTestCase):
    """Test Jalali month lengths and arithmetic."""

    def test_month_length(self):
        """Test the month length table and the Esfand leap rule."""
        assert jalali.month_length(1402, 1) == 31
        assert jalali.month_length(1402, 6) == 31
        assert jalali.month_length(1402, 7) == 30
        assert jalali.month_length(1402, 11) == 30
        assert jalali.month_length(1402, 12) == 29
        assert jalali.month_length(1403, 12) == 30

    def test_add_months_rollover(self):
        """Test month 13 becoming month 1 of the next year and back."""
        assert jalali.add_months(jdatetime.date(1402, 11, 5), 2) == jdatetime.date(1403, 1, 5)
        assert jalali.add_months(jdatetime.date(1403, 1, 5), -2) == jdatetime.date(1402, 11, 5)

    def test_add_months_clamps_day(self):
        """Test that the day is clamped to the target month length."""
        assert jalali.add_months(jdatetime.date(1402, 6, 31), 6) == jdatetime.date(1402, 12, 29)

    def test_add_days(self):
        """Test day addition across a month boundary."""
        assert jalali.add_days(jdatetime.date(1402, 12, 29), 1) == jdatetime.date(1403, 1, 1)

    def test_with_month(self):
        """Test month replacement within the same year."""
        assert jalali.with_month(jdatetime.date(1402, 3, 31), 7) == jdatetime.date(1402, 7, 30)

    def test_invalid_month_propagates(self):
        """Test that invalid fields raise from jdatetime unchanged."""
        with pytest.raises(ValueError):
            jalali.with_month(jdatetime.date(1402, 3, 1), 13)


class TestJalaliFormatter(SimpleTestCase):
    """Test the per-date string renderings."""

    def test_formatter_fields(self):
        """Test padded and plain renderings and the month name."""
        f = jalali.formatter(jdatetime.date(1403, 1, 5))
        assert (f.y, f.m, f.d) == ("1403", "1", "5")
        assert (f.yyyy, f.mm, f.dd) == ("1403", "01", "05")
        assert f.month_name == "فروردین"

    def test_formatter_is_immutable(self):
        """Test that the formatter value cannot be modified."""
        f = jalali.formatter(jdatetime.date(1403, 1, 5))
        with pytest.raises(AttributeError):
            f.d = "6"
