"""Formatting utilities for patient form fields.

Formatters are pure string transforms applied after validation has passed.
"""

import re

NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


def extract_digits(value: str) -> str:
    """Return only the ASCII digits of ``value``, in order."""
    return NON_DIGIT_PATTERN.sub("", value)


def format_phone_number(phone: str) -> str:
    """Format a phone number for display.

    10 digits become ``(555) 123-4567``; 11 digits become ``+1 (555) 123-4567``
    with the first digit as the country code. Any other digit count returns the
    input unchanged.

    Args:
        phone: Raw phone number in any punctuation

    Returns:
        Display-formatted phone number, or ``phone`` itself

    Example:
        >>> format_phone_number("555.123.4567")
        '(555) 123-4567'
    """
    digits = extract_digits(phone)

    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11:
        return f"+{digits[0]} ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"

    return phone
