"""
Locale symbol tables backed by Django's translation catalogs and format modules.

The calendar formatting utilities never read the active language themselves;
callers resolve it once (``current_locale``) and pass it explicitly. Any object
providing the four methods of ``DjangoLocaleProvider`` can be passed as the
``provider`` argument of the formatting utilities instead.
"""

import logging
from functools import lru_cache
from typing import Tuple

from django.conf import settings
from django.utils import formats, translation
from django.utils.dates import MONTHS, WEEKDAYS

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _month_names(language_code: str) -> Tuple[str, ...]:
    logger.debug("Loading month names for %s", language_code)
    with translation.override(language_code):
        return tuple(str(MONTHS[month]) for month in range(1, 13))


@lru_cache(maxsize=None)
def _standalone_weekday_names(language_code: str) -> Tuple[str, ...]:
    logger.debug("Loading weekday names for %s", language_code)
    # WEEKDAYS is keyed 0=Monday; the table is returned Sunday first
    with translation.override(language_code):
        return tuple(str(WEEKDAYS[(index + 6) % 7]) for index in range(7))


class DjangoLocaleProvider:
    """
    Read-only access to month/weekday names and week-start conventions.

    Tables are cached per language for the life of the process.
    """

    def current_locale(self) -> str:
        """
        Return the bare language code of the active translation.

        Falls back to ``settings.LANGUAGE_CODE`` when no translation is active.
        """
        language = translation.get_language() or settings.LANGUAGE_CODE
        return language.split("-")[0].lower()

    def month_names(self, language_code: str) -> Tuple[str, ...]:
        """The 12 Gregorian month names, January first."""
        return _month_names(language_code)

    def standalone_weekday_names(self, language_code: str) -> Tuple[str, ...]:
        """The 7 weekday names, Sunday first."""
        return _standalone_weekday_names(language_code)

    def first_day_of_week_index(self, language_code: str) -> int:
        """First day of the week for the locale, 0 = Sunday."""
        return int(formats.get_format("FIRST_DAY_OF_WEEK", lang=language_code))


default_provider = DjangoLocaleProvider()
