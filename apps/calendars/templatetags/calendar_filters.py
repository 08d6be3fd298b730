"""
Django template filters for calendar-aware date formatting.

Usage in templates:
    {% load calendar_filters %}

    {{ date|calendar_date:"jalali" }}
    {{ date|calendar_month_year:"gregorian" }}
    {{ date|calendar_medium_date:"jalali" }}
    {{ date|calendar_year:"jalali" }}
    {{ 7|calendar_month_name:"jalali" }}
    {{ "1403"|localized_number }}
    {% first_day_offset date "jalali" %}

The calendar mode defaults to Gregorian. The language is the active
translation, resolved once per filter call.
"""

from datetime import date, datetime
from typing import Union

from django import template

from apps.calendars import calendar_math, formatting_utils
from apps.calendars.enums import CalendarMode
from apps.calendars.locale_provider import default_provider
from apps.calendars.numerals import format_number

register = template.Library()


def _render(function, value, mode: str) -> str:
    if value is None:
        return ""

    try:
        return function(default_provider.current_locale(), value, CalendarMode(mode))
    except (ValueError, TypeError, AttributeError):
        return str(value)


@register.filter(name="calendar_year")
def calendar_year_filter(value: Union[date, datetime], mode: str = CalendarMode.GREGORIAN) -> str:
    """
    Usage:
        {{ date_obj|calendar_year:"jalali" }}  -> 1402 (en) or ۱۴۰۲ (fa)
    """
    return _render(formatting_utils.format_year, value, mode)


@register.filter(name="calendar_month_year")
def calendar_month_year_filter(
    value: Union[date, datetime], mode: str = CalendarMode.GREGORIAN
) -> str:
    """
    Usage:
        {{ date_obj|calendar_month_year:"jalali" }}  -> Dey 1402 (en) or ۱۴۰۲ دی (fa)
    """
    return _render(formatting_utils.format_month_year, value, mode)


@register.filter(name="calendar_medium_date")
def calendar_medium_date_filter(
    value: Union[date, datetime], mode: str = CalendarMode.GREGORIAN
) -> str:
    """
    Usage:
        {{ date_obj|calendar_medium_date }}  -> Mon, Jan 1 (en)
    """
    return _render(formatting_utils.format_medium_date, value, mode)


@register.filter(name="calendar_date")
def calendar_date_filter(value: Union[date, datetime], mode: str = CalendarMode.GREGORIAN) -> str:
    """
    Usage:
        {{ date_obj|calendar_date:"jalali" }}  -> 1402/10/11 (en) or ۱۴۰۲/۱۰/۱۱ (fa)
        {{ date_obj|calendar_date }}           -> 2024/1/01 (en)
    """
    return _render(formatting_utils.format_date, value, mode)


@register.filter(name="calendar_month_name")
def calendar_month_name_filter(value: int, mode: str = CalendarMode.GREGORIAN) -> str:
    """
    Usage:
        {{ 7|calendar_month_name:"jalali" }}  -> Mehr (en) or مهر (fa)
    """
    if value is None:
        return ""

    try:
        return formatting_utils.get_month_name(
            default_provider.current_locale(), int(value), CalendarMode(mode)
        )
    except (ValueError, TypeError, IndexError):
        return str(value)


@register.filter(name="localized_number")
def localized_number_filter(value: Union[str, int], pattern: str = "") -> str:
    """
    Usage:
        {{ 1403|localized_number }}     -> ۱۴۰۳ (fa)
        {{ 5|localized_number:"00" }}   -> 05 (en) or ۰۵ (fa)
    """
    if value is None:
        return ""

    try:
        return format_number(str(value), default_provider.current_locale(), pattern)
    except (ValueError, TypeError):
        return str(value)


@register.simple_tag
def first_day_offset(value: Union[date, datetime], mode: str = CalendarMode.GREGORIAN) -> int:
    """
    Number of leading blank cells in the month grid of ``value``.

    Usage:
        {% first_day_offset month_date "jalali" as blanks %}
    """
    return calendar_math.first_day_offset(value, CalendarMode(mode))
