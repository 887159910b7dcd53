"""
utils/validation_utils.py

Purpose: Input validation

- Monetary amounts as exact decimal text
- GST number normalization
- Free-text sanitization
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


# Plain positional decimal: ASCII digits with an optional fractional part
_DECIMAL_TEXT = re.compile(r"[0-9]+(\.[0-9]+)?")

# Width of the products.price / original_price columns
MAX_DECIMAL_TEXT_LENGTH = 32


def parse_decimal_text(value: Any, field: str = "price") -> str:
    """
    Validates a monetary amount and returns it as decimal text.

    Strings are kept exactly as given (after trimming) so "199.99" is stored
    as "199.99". Integers and floats are converted through str() so 499
    becomes "499" and 19.9 becomes "19.9". Exponent and leading "+" forms are
    rewritten positionally; anything else must already be plain ASCII digits
    with an optional fraction, at most 32 characters long.

    Args:
        value: Raw value from the request body
        field: Field name used in error messages

    Returns:
        Decimal text

    Raises:
        ValueError: If the value is not a finite, non-negative number in
            plain decimal form, or does not fit the price column
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"{field} must be a number")

    if isinstance(value, (int, float, Decimal)):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise ValueError(f"{field} must be a number")

    if len(text) > MAX_DECIMAL_TEXT_LENGTH:
        raise ValueError(f"{field} is too long")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"{field} must be a number")

    if not amount.is_finite():
        raise ValueError(f"{field} must be a finite number")
    if amount < 0:
        raise ValueError(f"{field} must not be negative")

    if "e" in text.lower() or text.startswith("+"):
        # Bound the positional width before expanding "1e100000"
        exponent = amount.as_tuple().exponent
        if amount.adjusted() >= MAX_DECIMAL_TEXT_LENGTH or -exponent > MAX_DECIMAL_TEXT_LENGTH:
            raise ValueError(f"{field} is too long")
        text = format(amount, "f")

    if len(text) > MAX_DECIMAL_TEXT_LENGTH:
        raise ValueError(f"{field} is too long")
    if not _DECIMAL_TEXT.fullmatch(text):
        raise ValueError(f"{field} must be a plain decimal number")

    return text


def normalize_gstin(gstin: Optional[str]) -> Optional[str]:
    """
    Uppercases and strips a GST number. Empty input becomes None.
    """
    if gstin is None:
        return None
    gstin = re.sub(r"\s+", "", gstin).upper()
    return gstin or None


def sanitize_input(text: Optional[str], max_length: int = 1000) -> Optional[str]:
    """
    Trims free text, strips markup brackets and collapses whitespace.

    Args:
        text: Input text
        max_length: Maximum allowed length

    Returns:
        Sanitized text, or None when nothing is left
    """
    if not text:
        return None

    text = text[:max_length]
    text = re.sub(r"[<>{}\[\]]", "", text)
    text = " ".join(text.split())

    return text.strip() or None
