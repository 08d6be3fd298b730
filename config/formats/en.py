"""
English (en) format localization.
"""

# Date formats
DATE_FORMAT = "N j, Y"  # e.g., "Jan. 1, 2024"
YEAR_MONTH_FORMAT = "F Y"  # e.g., "January 2024"
MONTH_DAY_FORMAT = "F j"  # e.g., "January 1"
SHORT_DATE_FORMAT = "m/d/Y"  # e.g., "01/01/2024"

# Number formatting
DECIMAL_SEPARATOR = "."
THOUSAND_SEPARATOR = ","
NUMBER_GROUPING = 3

# First day of week (0 = Sunday, 1 = Monday, etc.)
FIRST_DAY_OF_WEEK = 0  # Sunday
