"""
Input validation helper functions.
Provides validation for common input types.
"""

import math
import re

# Same grammar browsers apply to <input type="email">: the host part may be a
# single label, so "eli@gmail" is accepted.
EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254


def validate_email(email: str) -> bool:
    """
    Validate email format.

    Args:
        email: Email address to validate

    Returns:
        True if valid email format
    """
    if not email or len(email) > EMAIL_MAX_LENGTH:
        return False

    return bool(re.match(EMAIL_PATTERN, email))


def validate_price(price) -> bool:
    """
    Validate a unit price (non-negative number).

    Args:
        price: Price value (number or numeric string)

    Returns:
        True if valid price
    """
    try:
        value = float(price)
    except (TypeError, ValueError):
        return False

    return math.isfinite(value) and value >= 0


def validate_quantity(quantity) -> bool:
    """Validate an item quantity (integer, at least 1)."""
    try:
        return int(quantity) >= 1 and float(quantity) == int(quantity)
    except (TypeError, ValueError, OverflowError):
        return False


def sanitize_input(text: str) -> str:
    """
    Sanitize text input by trimming surrounding whitespace.

    Args:
        text: Text to sanitize

    Returns:
        Sanitized text
    """
    if not text:
        return ''

    return text.strip()
