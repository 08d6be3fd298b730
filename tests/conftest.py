"""
Pytest configuration and fixtures for the dual-calendar formatting app.
"""

from django.utils import translation

import pytest


class StubLocaleProvider:
    """
    Locale provider with fixed tables, independent of Django's catalogs.
    """

    MONTH_NAMES = {
        "en": (
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
    }

    WEEKDAY_NAMES = {
        "en": ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        "fa": ("یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنج‌شنبه", "جمعه", "شنبه"),
    }

    def __init__(self, language_code="en"):
        self.language_code = language_code

    def current_locale(self):
        return self.language_code

    def month_names(self, language_code):
        return self.MONTH_NAMES[language_code]

    def standalone_weekday_names(self, language_code):
        return self.WEEKDAY_NAMES[language_code]

    def first_day_of_week_index(self, language_code):
        return 6 if language_code == "fa" else 0


@pytest.fixture
def stub_locale_provider():
    """
    Fixture for a locale provider with deterministic English and Persian tables.
    """
    return StubLocaleProvider()


@pytest.fixture
def persian_language():
    """
    Activate Persian for the duration of a test.
    """
    with translation.override("fa"):
        yield "fa"
