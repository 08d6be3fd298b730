"""
Tests for numeral transliteration.
"""

from django.test import SimpleTestCase

import pytest

from apps.calendars.numerals import format_number, localize_digits, to_latin_digits


class TestFormatNumber(SimpleTestCase):
    """Test the numeral chokepoint."""

    def test_format_number_persian(self):
        """Test Persian digits."""
        assert format_number("1403", "fa") == "۱۴۰۳"
        assert format_number("0", "fa") == "۰"

    def test_format_number_arabic(self):
        """Test Arabic-Indic digits."""
        assert format_number("2024", "ar") == "٢٠٢٤"

    def test_format_number_english(self):
        """Test that other languages keep ASCII digits."""
        assert format_number("2024", "en") == "2024"
        assert format_number("2024", "de") == "2024"

    def test_format_number_pattern_padding(self):
        """Test zero-padding from the pattern."""
        assert format_number("5", "fa", "00") == "۰۵"
        assert format_number("5", "en", "00") == "05"
        assert format_number("12", "en", "0000") == "0012"
        assert format_number("1403", "en", "00") == "1403"

    def test_format_number_drops_leading_zeros_without_pattern(self):
        """Test that the input is parsed as an integer."""
        assert format_number("05", "en") == "5"
        assert format_number("0099", "fa") == "۹۹"

    def test_format_number_negative(self):
        """Test negative numbers keep their sign."""
        assert format_number("-7", "en", "00") == "-07"

    def test_format_number_localized_input(self):
        """Test that localized digits are accepted as input."""
        assert format_number("۱۴۰۳", "en") == "1403"

    def test_format_number_invalid(self):
        """Test that a non-integer raises."""
        with pytest.raises(ValueError):
            format_number("twelve", "en")


class TestDigitTransliteration(SimpleTestCase):
    """Test digit-glyph replacement in free text."""

    def test_localize_digits(self):
        """Test that only digits are replaced."""
        assert localize_digits("Jan 5, 2024", "fa") == "Jan ۵, ۲۰۲۴"
        assert localize_digits("1403/01/05", "en") == "1403/01/05"

    def test_to_latin_digits(self):
        """Test Persian and Arabic-Indic digits back to ASCII."""
        assert to_latin_digits("۱۴۰۳/۰۱/۰۵") == "1403/01/05"
        assert to_latin_digits("٢٠٢٤") == "2024"

    def test_roundtrip_conversion(self):
        """Test that conversion is reversible."""
        original = "0123456789"
        assert to_latin_digits(localize_digits(original, "fa")) == original
