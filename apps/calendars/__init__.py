"""
Dual-calendar (Gregorian / Jalali) date arithmetic and formatting.

The public surface lives in:
- apps.calendars.calendar_math: calendar-correct date arithmetic
- apps.calendars.formatting_utils: locale-aware date formatting
- apps.calendars.numerals: numeral transliteration
"""
