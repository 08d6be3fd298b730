"""
Jalali (Persian/Shamsi) calendar conversion built on jdatetime.

Converts between Gregorian ``datetime`` values (the interchange form used by
the rest of the app) and ``jdatetime.date`` values, and implements the Jalali
month arithmetic the calendar math needs:
- month lengths and the leap rule
- month and day addition
- per-date string renderings (JalaliFormatter)
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional, Union

import jdatetime

# Month names in the calendar's native language
JALALI_MONTH_NAMES_FA = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

# Transliterated names used for every non-Persian language
JALALI_MONTH_NAMES_EN = (
    "Farvardin",
    "Ordibehesht",
    "Khordad",
    "Tir",
    "Mordad",
    "Shahrivar",
    "Mehr",
    "Aban",
    "Azar",
    "Dey",
    "Bahman",
    "Esfand",
)


def from_universal(value: Union[date, datetime]) -> jdatetime.date:
    """
    Convert a Gregorian date or datetime to a Jalali date.

    Only the date fields are used; time of day and timezone are ignored.

    Examples:
        >>> from_universal(date(2024, 3, 20))
        jdatetime.date(1403, 1, 1)
    """
    if isinstance(value, datetime):
        value = value.date()
    return jdatetime.date.fromgregorian(date=value)


def to_universal(
    jalali_date: jdatetime.date,
    at: Optional[time] = None,
    tz: Optional[tzinfo] = None,
) -> datetime:
    """
    Convert a Jalali date back to a Gregorian datetime.

    Args:
        jalali_date: Jalali date to convert
        at: Time of day for the result, midnight if omitted
        tz: Timezone to attach to the result

    Returns:
        Gregorian datetime
    """
    result = datetime.combine(jalali_date.togregorian(), at or time.min)
    if tz is not None:
        result = result.replace(tzinfo=tz)
    return result


def is_leap(year: int) -> bool:
    """Return True if the Jalali year has 366 days."""
    return jdatetime.date(year, 1, 1).isleap()


def month_length(year: int, month: int) -> int:
    """
    Number of days in a Jalali month.

    The first six months have 31 days, the next five 30, and Esfand has 30
    days in a leap year and 29 otherwise.
    """
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap(year) else 29


def add_months(jalali_date: jdatetime.date, months: int) -> jdatetime.date:
    """
    Move a Jalali date by a number of months.

    Month 13 rolls into month 1 of the next year (and month 0 into month 12 of
    the previous one). The day is clamped to the length of the target month.
    """
    year, month_index = divmod(jalali_date.year * 12 + jalali_date.month - 1 + months, 12)
    month = month_index + 1
    day = min(jalali_date.day, month_length(year, month))
    return jdatetime.date(year, month, day)


def add_days(jalali_date: jdatetime.date, days: int) -> jdatetime.date:
    """Move a Jalali date by a number of days."""
    return jalali_date + timedelta(days=days)


def with_month(jalali_date: jdatetime.date, month: int) -> jdatetime.date:
    """Same year and day with the month replaced; the day is clamped."""
    day = min(jalali_date.day, month_length(jalali_date.year, month))
    return jdatetime.date(jalali_date.year, month, day)


def month_start(jalali_date: jdatetime.date) -> jdatetime.date:
    """First day of the Jalali month containing ``jalali_date``."""
    return jdatetime.date(jalali_date.year, jalali_date.month, 1)


@dataclass(frozen=True)
class JalaliFormatter:
    """
    String renderings of one Jalali date.

    ``yyyy``, ``mm`` and ``dd`` are zero-padded to 4, 2 and 2 digits; ``y``,
    ``m`` and ``d`` are plain. All digits are ASCII; ``month_name`` is the
    Persian month name.
    """

    y: str
    m: str
    d: str
    yyyy: str
    mm: str
    dd: str
    month_name: str

    @classmethod
    def from_date(cls, jalali_date: jdatetime.date) -> "JalaliFormatter":
        return cls(
            y=str(jalali_date.year),
            m=str(jalali_date.month),
            d=str(jalali_date.day),
            yyyy=f"{jalali_date.year:04d}",
            mm=f"{jalali_date.month:02d}",
            dd=f"{jalali_date.day:02d}",
            month_name=JALALI_MONTH_NAMES_FA[jalali_date.month - 1],
        )


def formatter(jalali_date: jdatetime.date) -> JalaliFormatter:
    """Build the string renderings for ``jalali_date``."""
    return JalaliFormatter.from_date(jalali_date)
