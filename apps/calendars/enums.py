"""
Calendar system selector and range value shared by every calendar operation.
"""

from datetime import datetime
from typing import NamedTuple

from django.db import models
from django.utils.translation import gettext_lazy as _


class CalendarMode(models.TextChoices):
    """Calendar system whose rules govern an operation."""

    GREGORIAN = "gregorian", _("Gregorian")
    JALALI = "jalali", _("Jalali")


class DateRange(NamedTuple):
    """A (start, end) pair of dates. start <= end is up to the caller."""

    start: datetime
    end: datetime
