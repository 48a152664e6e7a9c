"""
Calendar helpers: MM/dd/yyyy codec and input date defaults.

Day granularity only; nothing here looks at the time of day.
"""
import calendar
from datetime import date, datetime, timedelta
from typing import Optional

from ..config import (
    DATE_FORMAT,
    DEFAULT_EXPIRY_MONTHS,
    DEFAULT_MARKDOWN_DAYS,
    MISSING_DATE_TEXT,
)


def format_date(value: Optional[date]) -> str:
    """Format as MM/dd/yyyy, or N/A when absent."""
    if value is None:
        return MISSING_DATE_TEXT
    return value.strftime(DATE_FORMAT)


def parse_date(text: str) -> date:
    """
    Parse MM/dd/yyyy text.

    Raises:
        ValueError: If text does not match the format or is not a real date
    """
    return datetime.strptime(text.strip(), DATE_FORMAT).date()


def add_months(start: date, months: int) -> date:
    """
    Add calendar months, clamping the day to the end of the target month.

    Examples:
        >>> add_months(date(2025, 1, 31), 1)
        datetime.date(2025, 2, 28)
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def default_expiry_date(today: date, months: int = DEFAULT_EXPIRY_MONTHS) -> date:
    """Expiry used when none is entered: today + N months."""
    return add_months(today, months)


def default_markdown_date(expiry_date: date, days_before: int = DEFAULT_MARKDOWN_DAYS) -> date:
    """Markdown used when none is entered: N days before expiry."""
    return expiry_date - timedelta(days=days_before)
