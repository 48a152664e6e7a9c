"""
Shelf refill policy.

Policy Formula:
    Q = max(0, max - current)

Where:
    - max: Shelf capacity
    - current: Stock currently on the shelf
    - Q: Quantity needed to bring the shelf back to capacity

Q is never negative, even when current exceeds max.
"""
from decimal import Decimal

from .domain.models import Shelf

ZERO = Decimal(0)


def quantity_to_refill(shelf: Shelf) -> Decimal:
    """
    Quantity needed to fill the shelf to capacity.

    Args:
        shelf: Shelf to evaluate

    Returns:
        Decimal: max(shelf.max - shelf.current, 0)

    Examples:
        >>> quantity_to_refill(Shelf(min=Decimal(0), max=Decimal(10), current=Decimal(5)))
        Decimal('5')
        >>> quantity_to_refill(Shelf(min=Decimal(0), max=Decimal(3), current=Decimal(5)))
        Decimal('0')
    """
    return max(shelf.max - shelf.current, ZERO)


def needs_refill(shelf: Shelf) -> bool:
    """True when the shelf is below capacity."""
    return quantity_to_refill(shelf) > ZERO
