"""
Persian (fa) format localization.

Note: These patterns format Gregorian dates. Jalali dates are rendered by
apps.calendars.formatting_utils, which also converts digits to Persian.
"""

# Date formats
DATE_FORMAT = "j F Y"  # e.g., "1 ژانویه 2024"
YEAR_MONTH_FORMAT = "F Y"  # e.g., "ژانویه 2024"
MONTH_DAY_FORMAT = "j F"  # e.g., "1 ژانویه"
SHORT_DATE_FORMAT = "Y/m/d"  # e.g., "2024/01/01"

# Number formatting
# Persian uses Eastern Arabic numerals (۰۱۲۳۴۵۶۷۸۹)
DECIMAL_SEPARATOR = "٫"  # Persian decimal separator (U+066B)
THOUSAND_SEPARATOR = "٬"  # Persian thousands separator (U+066C)
NUMBER_GROUPING = 3

# First day of week (6 = Saturday, which is the first day in Iran)
FIRST_DAY_OF_WEEK = 6  # Saturday
