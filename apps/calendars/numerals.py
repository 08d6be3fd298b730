"""
Numeral transliteration.

Every number rendered by the formatting utilities passes through
``format_number`` so that a language always gets the same digit glyphs:
- Persian (fa): ۰۱۲۳۴۵۶۷۸۹
- Arabic (ar): ٠١٢٣٤٥٦٧٨٩
- everything else: ASCII 0-9
"""

LATIN_DIGITS = "0123456789"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

# Digit glyphs per language code
NUMERAL_SYSTEMS = {
    "fa": PERSIAN_DIGITS,
    "ar": ARABIC_INDIC_DIGITS,
}

_TO_LATIN = str.maketrans(PERSIAN_DIGITS + ARABIC_INDIC_DIGITS, LATIN_DIGITS * 2)


def localize_digits(text: str, language_code: str) -> str:
    """
    Replace ASCII digits in ``text`` with the language's digit glyphs.

    Non-digit characters are preserved.

    Examples:
        >>> localize_digits("1403/01/05", "fa")
        '۱۴۰۳/۰۱/۰۵'
        >>> localize_digits("2024", "en")
        '2024'
    """
    digits = NUMERAL_SYSTEMS.get(language_code)
    if digits is None:
        return text
    return text.translate(str.maketrans(LATIN_DIGITS, digits))


def to_latin_digits(text: str) -> str:
    """
    Replace Persian and Arabic-Indic digits in ``text`` with ASCII digits.

    Examples:
        >>> to_latin_digits("۱۴۰۳")
        '1403'
    """
    return text.translate(_TO_LATIN)


def format_number(number: str, language_code: str, pattern: str = "") -> str:
    """
    Render an integer string in the language's numeral system.

    Args:
        number: Integer as a string (ASCII or localized digits)
        language_code: Target language code, e.g. 'fa' or 'en'
        pattern: Zero-padding pattern; the number is padded to as many digits
            as the pattern has '0' characters

    Returns:
        The localized number

    Raises:
        ValueError: If ``number`` is not an integer

    Examples:
        >>> format_number("1403", "fa")
        '۱۴۰۳'
        >>> format_number("5", "fa", "00")
        '۰۵'
        >>> format_number("05", "en")
        '5'
    """
    value = int(to_latin_digits(number))
    digits = str(abs(value)).zfill(pattern.count("0"))
    if value < 0:
        digits = f"-{digits}"
    return localize_digits(digits, language_code)
