"""
Calendar-correct date arithmetic for the Gregorian and Jalali calendars.

Dates are exchanged as Gregorian ``datetime`` values. Every operation takes an
explicit ``CalendarMode``; when the mode is Jalali the value is converted to
its Jalali fields, the arithmetic is done there and the result is converted
back. Results that are dates are returned at midnight, keeping the input's
``tzinfo``.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from apps.calendars import jalali
from apps.calendars.enums import CalendarMode, DateRange

DateLike = Union[date, datetime]

# Days per Gregorian month; February is decided by the leap rule
GREGORIAN_DAYS_IN_MONTH = (31, -1, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

FEBRUARY = 2

# 0-based, 0 = Sunday
FIRST_DAY_OF_WEEK = {
    CalendarMode.GREGORIAN: 0,  # Sunday
    CalendarMode.JALALI: 6,  # Saturday
}


def _tz(value: DateLike):
    return getattr(value, "tzinfo", None)


def _from_month_index(month_index: int):
    """Split a month count since year 0 into (year, 1-based month)."""
    year, month = divmod(month_index, 12)
    return year, month + 1


def date_only(value: DateLike) -> datetime:
    """
    Return ``value`` with the time of day set to midnight.

    Examples:
        >>> date_only(datetime(2024, 1, 15, 14, 30))
        datetime.datetime(2024, 1, 15, 0, 0)
    """
    return datetime(value.year, value.month, value.day, tzinfo=_tz(value))


def dates_only(date_range: DateRange) -> DateRange:
    """Return ``date_range`` with both endpoints set to midnight."""
    return DateRange(start=date_only(date_range.start), end=date_only(date_range.end))


def is_same_day(date_a: Optional[DateLike], date_b: Optional[DateLike]) -> bool:
    """
    True if both dates have the same year, month and day, or are both None.
    """
    if date_a is None or date_b is None:
        return date_a is None and date_b is None
    return (date_a.year, date_a.month, date_a.day) == (date_b.year, date_b.month, date_b.day)


def is_same_month(
    date_a: Optional[DateLike], date_b: Optional[DateLike], mode: CalendarMode
) -> bool:
    """
    True if both dates fall in the same month of the selected calendar, or are
    both None.
    """
    if date_a is None or date_b is None:
        return date_a is None and date_b is None
    if mode == CalendarMode.GREGORIAN:
        return (date_a.year, date_a.month) == (date_b.year, date_b.month)
    a = jalali.from_universal(date_a)
    b = jalali.from_universal(date_b)
    return (a.year, a.month) == (b.year, b.month)


def month_delta(start_date: DateLike, end_date: DateLike, mode: CalendarMode) -> int:
    """
    Number of months between two dates in the selected calendar.

    The day of month is ignored.

    Examples:
        >>> month_delta(date(2019, 6, 15), date(2020, 1, 15), CalendarMode.GREGORIAN)
        7
    """
    if mode == CalendarMode.GREGORIAN:
        start, end = start_date, end_date
    else:
        start, end = jalali.from_universal(start_date), jalali.from_universal(end_date)
    return (end.year - start.year) * 12 + end.month - start.month


def add_months_to_month_date(
    month_date: DateLike, months_to_add: int, mode: CalendarMode
) -> datetime:
    """
    First day of the month ``months_to_add`` months away from ``month_date``.

    Examples:
        >>> add_months_to_month_date(date(2019, 1, 15), 3, CalendarMode.GREGORIAN)
        datetime.datetime(2019, 4, 1, 0, 0)
    """
    if mode == CalendarMode.GREGORIAN:
        year, month = _from_month_index(month_date.year * 12 + month_date.month - 1 + months_to_add)
        return datetime(year, month, 1, tzinfo=_tz(month_date))
    start = jalali.month_start(jalali.from_universal(month_date))
    return jalali.to_universal(jalali.add_months(start, months_to_add), tz=_tz(month_date))


def add_days_to_date(value: DateLike, days: int, mode: CalendarMode) -> datetime:
    """Return ``value`` moved by ``days`` days, at midnight."""
    if mode == CalendarMode.GREGORIAN:
        return date_only(value) + timedelta(days=days)
    moved = jalali.add_days(jalali.from_universal(value), days)
    return jalali.to_universal(moved, tz=_tz(value))


def is_leap_year(year: int, mode: CalendarMode) -> bool:
    """Leap-year rule of the selected calendar for a year in that calendar."""
    if mode == CalendarMode.GREGORIAN:
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    return jalali.is_leap(year)


def get_days_in_month(value: DateLike, mode: CalendarMode) -> int:
    """
    Number of days in the month containing ``value`` in the selected calendar.

    Gregorian results follow the proleptic Gregorian calendar, so they are not
    historically accurate before the 1582 reform.
    """
    if mode == CalendarMode.GREGORIAN:
        if value.month == FEBRUARY:
            return 29 if is_leap_year(value.year, mode) else 28
        return GREGORIAN_DAYS_IN_MONTH[value.month - 1]
    converted = jalali.from_universal(value)
    return jalali.month_length(converted.year, converted.month)


def first_day_of_week(mode: CalendarMode) -> int:
    """
    First day of the week for the calendar system, 0-based with 0 = Sunday.

    This is a property of the calendar, not of the locale.
    """
    return FIRST_DAY_OF_WEEK[CalendarMode(mode)]


def month_start_date(value: DateLike, mode: CalendarMode) -> datetime:
    """Day 1 of the month containing ``value`` in the selected calendar."""
    if mode == CalendarMode.GREGORIAN:
        return datetime(value.year, value.month, 1, tzinfo=_tz(value))
    start = jalali.month_start(jalali.from_universal(value))
    return jalali.to_universal(start, tz=_tz(value))


def first_day_offset(value: DateLike, mode: CalendarMode) -> int:
    """
    Number of blank cells before day 1 when laying out the month of ``value``
    as a weekly grid.

    For example, September 1, 2017 is a Friday. With the Gregorian week
    starting on Sunday the grid reads::

        S M T W T F S
        _ _ _ _ _ 1 2

    so the offset is 5. The Jalali week starts on Saturday, so the month
    containing that date (Shahrivar 1396, which starts on Wednesday,
    August 23) has an offset of 4.
    """
    # 0 = Monday
    weekday_from_monday = month_start_date(value, mode).weekday()
    # first day of week re-based from Sunday = 0 to Monday = 0
    first_day_index = (first_day_of_week(mode) - 1) % 7
    return (weekday_from_monday - first_day_index) % 7


def get_month_number(value: DateLike, mode: CalendarMode) -> int:
    """1-based month of ``value`` in the selected calendar."""
    if mode == CalendarMode.GREGORIAN:
        return value.month
    return jalali.from_universal(value).month


def get_month_date(value: DateLike, month_number: int, mode: CalendarMode) -> datetime:
    """
    Day 1 of month ``month_number`` in the selected-calendar year of ``value``.
    """
    if mode == CalendarMode.GREGORIAN:
        return datetime(value.year, month_number, 1, tzinfo=_tz(value))
    moved = jalali.with_month(jalali.from_universal(value), month_number)
    return jalali.to_universal(jalali.month_start(moved), tz=_tz(value))


def add_month(value: DateLike, count: int, mode: CalendarMode) -> datetime:
    """
    Move ``value`` by ``count`` months keeping the day and time of day.

    The day is clamped to the length of the target month, so January 31 plus
    one month is the last day of February.
    """
    if not isinstance(value, datetime):
        value = date_only(value)
    if mode == CalendarMode.GREGORIAN:
        year, month = _from_month_index(value.year * 12 + value.month - 1 + count)
        day = min(value.day, get_days_in_month(date(year, month, 1), mode))
        return value.replace(year=year, month=month, day=day)
    moved = jalali.add_months(jalali.from_universal(value), count)
    return jalali.to_universal(moved, at=value.time(), tz=value.tzinfo)
