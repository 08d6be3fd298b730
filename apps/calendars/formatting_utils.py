"""
Locale-aware formatting of dates, months and years in either calendar.

Each function takes the language code explicitly (callers resolve it once,
e.g. with ``default_provider.current_locale()``) together with the calendar
mode. Gregorian output is delegated to Django's localized date formatting.
Jalali output is composed here:
- Persian (fa): Persian month names and Persian digits
- English (en): transliterated month names and ASCII digits
- any other language: an empty string

All numerals go through ``apps.calendars.numerals.format_number``.
"""

import logging
from datetime import date, datetime
from typing import Union

from django.utils import formats, translation

from apps.calendars import jalali
from apps.calendars.enums import CalendarMode
from apps.calendars.locale_provider import default_provider
from apps.calendars.numerals import format_number, localize_digits

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

# Language the Jalali calendar is native to
JALALI_NATIVE_LANGUAGE = "fa"

# Gregorian "weekday, month day" patterns (Django date format syntax)
MEDIUM_DATE_FORMATS = {
    "fa": "l، j F",
}
DEFAULT_MEDIUM_DATE_FORMAT = "D, M j"


def _unsupported(function_name: str, language_code: str, mode: CalendarMode) -> str:
    logger.debug("%s has no %s rendering for language %r", function_name, mode, language_code)
    return ""


def _host_date_format(value: DateLike, format_string: str, language_code: str) -> str:
    with translation.override(language_code):
        formatted = formats.date_format(value, format_string)
    return localize_digits(formatted, language_code)


def format_year(language_code: str, value: DateLike, mode: CalendarMode) -> str:
    """
    Year of ``value`` in the selected calendar, in the language's numerals.

    Examples:
        >>> format_year("fa", date(2024, 3, 20), CalendarMode.JALALI)
        '۱۴۰۳'
    """
    if mode == CalendarMode.GREGORIAN:
        year = value.year
    else:
        year = jalali.from_universal(value).year
    return format_number(str(year), language_code)


def format_month_year(language_code: str, value: DateLike, mode: CalendarMode) -> str:
    """
    Month name and year of ``value``, e.g. "January 2024" or "۱۴۰۳ فروردین".
    """
    if mode == CalendarMode.GREGORIAN:
        return _host_date_format(value, "YEAR_MONTH_FORMAT", language_code)

    converted = jalali.from_universal(value)
    if language_code == JALALI_NATIVE_LANGUAGE:
        f = jalali.formatter(converted)
        return f"{format_number(f.yyyy, language_code)} {f.month_name}"
    if language_code == "en":
        return f"{jalali.JALALI_MONTH_NAMES_EN[converted.month - 1]} {converted.year}"
    return _unsupported("format_month_year", language_code, mode)


def format_medium_date(
    language_code: str, value: DateLike, mode: CalendarMode, provider=default_provider
) -> str:
    """
    Weekday, month and day of ``value``, e.g. "Mon, Jan 15".

    For the Jalali calendar the weekday comes from the provider's Sunday-first
    standalone weekday table, indexed with ``isoweekday() % 7``.
    """
    if mode == CalendarMode.GREGORIAN:
        format_string = MEDIUM_DATE_FORMATS.get(language_code, DEFAULT_MEDIUM_DATE_FORMAT)
        return _host_date_format(value, format_string, language_code)

    converted = jalali.from_universal(value)
    if language_code == JALALI_NATIVE_LANGUAGE:
        weekday = provider.standalone_weekday_names(language_code)[value.isoweekday() % 7]
        f = jalali.formatter(converted)
        return f"{weekday}، {format_number(f.d, language_code)} {f.month_name}"
    if language_code == "en":
        weekday = provider.standalone_weekday_names(language_code)[value.isoweekday() % 7]
        month_name = jalali.JALALI_MONTH_NAMES_EN[converted.month - 1]
        return f"{weekday}, {month_name} {converted.day}"
    return _unsupported("format_medium_date", language_code, mode)


def format_date(language_code: str, value: DateLike, mode: CalendarMode) -> str:
    """
    Numeric date in year/month/day order.

    Gregorian dates follow the ``y/M/dd`` pattern (2024/1/05). Jalali dates
    are zero-padded (1403/01/05), with Persian digits in Persian.
    """
    if mode == CalendarMode.GREGORIAN:
        year = format_number(str(value.year), language_code)
        month = format_number(str(value.month), language_code)
        day = format_number(str(value.day), language_code, "00")
        return f"{year}/{month}/{day}"

    f = jalali.formatter(jalali.from_universal(value))
    if language_code == JALALI_NATIVE_LANGUAGE:
        year = format_number(f.yyyy, language_code, "0000")
        month = format_number(f.mm, language_code, "00")
        day = format_number(f.dd, language_code, "00")
        return f"{year}/{month}/{day}"
    if language_code == "en":
        return f"{f.yyyy}/{f.mm}/{f.dd}"
    return _unsupported("format_date", language_code, mode)


def get_month_name(
    language_code: str, month_number: int, mode: CalendarMode, provider=default_provider
) -> str:
    """
    Localized name of month ``month_number`` (1-12) of the selected calendar.
    """
    if mode == CalendarMode.GREGORIAN:
        return provider.month_names(language_code)[month_number - 1]
    if language_code == JALALI_NATIVE_LANGUAGE:
        return jalali.JALALI_MONTH_NAMES_FA[month_number - 1]
    if language_code == "en":
        return jalali.JALALI_MONTH_NAMES_EN[month_number - 1]
    return _unsupported("get_month_name", language_code, mode)
