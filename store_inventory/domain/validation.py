"""
Centralized validation rules for raw user input.

validate_* functions return (is_valid, error_message).
parse_* functions convert text to domain values and raise
InvalidInputError on malformed input.
"""
from datetime import date
from typing import Optional, Tuple

from ..inventory import InvalidInputError
from .dates import default_expiry_date, default_markdown_date, parse_date


def validate_product_id(text: str) -> Tuple[bool, str]:
    """
    Validate product ID text.

    Args:
        text: Raw input

    Returns:
        (is_valid, error_message)
    """
    try:
        int(text.strip())
    except ValueError:
        return False, "Product ID must be an integer"
    return True, ""


def validate_product_name(name: str) -> Tuple[bool, str]:
    """Product name must not be empty."""
    if not name or not name.strip():
        return False, "Product Name cannot be empty"
    return True, ""


def validate_date_text(text: str) -> Tuple[bool, str]:
    """Date text must be MM/dd/yyyy (blank is handled by the caller)."""
    try:
        parse_date(text)
    except ValueError:
        return False, "Invalid date format. Please enter the date in MM/dd/yyyy format"
    return True, ""


def validate_markdown_days(text: str, expiry_date: Optional[date] = None) -> Tuple[bool, str]:
    """
    Markdown duration must be a non-negative integer number of days.

    With expiry_date, the resulting markdown date must also be a
    representable calendar date.
    """
    try:
        days = int(text.strip())
    except ValueError:
        return False, "Invalid input for markdown duration. It must be an integer"
    if days < 0:
        return False, "Markdown duration cannot be negative"
    if expiry_date is not None:
        try:
            default_markdown_date(expiry_date, days)
        except (OverflowError, ValueError):
            return False, "Markdown duration is too large for the expiry date"
    return True, ""


def parse_product_id(text: str) -> int:
    """
    Raises:
        InvalidInputError: If text is not an integer
    """
    is_valid, error = validate_product_id(text)
    if not is_valid:
        raise InvalidInputError(error)
    return int(text.strip())


def parse_optional_product_id(text: str) -> Optional[int]:
    """Blank input means "all products" (None)."""
    if not text.strip():
        return None
    return parse_product_id(text)


def parse_product_name(text: str) -> str:
    is_valid, error = validate_product_name(text)
    if not is_valid:
        raise InvalidInputError(error)
    return text.strip()


def parse_expiry_date(text: str, today: date, default_months: Optional[int] = None) -> date:
    """
    Expiry date from input; blank means today + default months.

    Raises:
        InvalidInputError: If text is not a MM/dd/yyyy date, or the default
                           falls outside the calendar range
    """
    if not text.strip():
        try:
            if default_months is None:
                return default_expiry_date(today)
            return default_expiry_date(today, default_months)
        except (OverflowError, ValueError) as e:
            raise InvalidInputError(f"Default expiry date is out of range: {e}") from e

    is_valid, error = validate_date_text(text)
    if not is_valid:
        raise InvalidInputError(error)
    return parse_date(text)


def parse_markdown_date(text: str, expiry_date: date, default_days: Optional[int] = None) -> date:
    """
    Markdown date from a number of days before expiry; blank means the default.

    Raises:
        InvalidInputError: If text is not a non-negative integer, or the
                           markdown date falls outside the calendar range
    """
    if not text.strip():
        try:
            if default_days is None:
                return default_markdown_date(expiry_date)
            return default_markdown_date(expiry_date, default_days)
        except (OverflowError, ValueError) as e:
            raise InvalidInputError(f"Default markdown date is out of range: {e}") from e

    is_valid, error = validate_markdown_days(text, expiry_date)
    if not is_valid:
        raise InvalidInputError(error)
    return default_markdown_date(expiry_date, int(text.strip()))
