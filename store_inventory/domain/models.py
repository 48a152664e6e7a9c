"""
Domain models for store-inventory.

Pure data classes + value objects. No I/O, no side effects.
Deterministic and fully testable.
"""
from dataclasses import dataclass, field
from enum import Enum
from datetime import date as Date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from ..config import DEFAULT_SHELF_CURRENT, DEFAULT_SHELF_MAX, DEFAULT_SHELF_MIN


class ReportKind(Enum):
    """Report selected from the menu."""
    LIST_ALL = "LIST_ALL"          # Every product with its dates
    SHOW_PRODUCT = "SHOW_PRODUCT"  # One product by ID
    REFILL = "REFILL"              # Products whose shelf needs refilling
    COUNT = "COUNT"                # Current shelf stock
    EXPIRY = "EXPIRY"              # Expiry date listing
    EXPIRED = "EXPIRED"            # expiry_date < today
    IN_MARKDOWN = "IN_MARKDOWN"    # markdown_date <= today
    FOR_MARKDOWN = "FOR_MARKDOWN"  # today < markdown_date < today + lookahead


class ReportStatus(Enum):
    """Outcome of a report query."""
    OK = "OK"                              # At least one line
    EMPTY = "EMPTY"                        # Nothing matched (not an error)
    NOT_FOUND = "NOT_FOUND"                # Requested product ID does not exist
    NO_REFILL_NEEDED = "NO_REFILL_NEEDED"  # Scoped refill: product is full


@dataclass(frozen=True)
class Shelf:
    """Shelf stock for one product - immutable."""
    min: Decimal = DEFAULT_SHELF_MIN
    max: Decimal = DEFAULT_SHELF_MAX
    current: Decimal = DEFAULT_SHELF_CURRENT

    def __post_init__(self):
        # Accept ints/strings from callers, store Decimals
        for name in ("min", "max", "current"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                try:
                    value = Decimal(str(value))
                except InvalidOperation:
                    raise ValueError(f"Shelf {name} must be a number, got {value!r}") from None
                object.__setattr__(self, name, value)
            if not value.is_finite():
                raise ValueError(f"Shelf {name} must be a finite number, got {value}")
        if self.min < 0:
            raise ValueError("Shelf min cannot be negative")
        if self.max < 0:
            raise ValueError("Shelf max cannot be negative")
        if self.current < 0:
            raise ValueError("Shelf current stock cannot be negative")
        if self.max < self.min:
            raise ValueError(f"Shelf max ({self.max}) must be >= min ({self.min})")


@dataclass(frozen=True)
class Product:
    """Product with its own shelf - immutable."""
    product_id: int
    name: str
    expiry_date: Date
    markdown_date: Optional[Date] = None  # None = no markdown scheduled
    shelf: Shelf = field(default_factory=Shelf)

    def __post_init__(self):
        if isinstance(self.product_id, bool) or not isinstance(self.product_id, int):
            raise ValueError("Product ID must be an integer")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Product name cannot be empty")
        # Day granularity: drop any time-of-day component
        for name in ("expiry_date", "markdown_date"):
            value = getattr(self, name)
            if isinstance(value, datetime):
                object.__setattr__(self, name, value.date())
        if not isinstance(self.expiry_date, Date):
            raise ValueError("Expiry date must be a date")
        if self.markdown_date is not None and not isinstance(self.markdown_date, Date):
            raise ValueError("Markdown date must be a date or None")

    def is_expired(self, check_date: Date) -> bool:
        """Expired once check_date is past the expiry date."""
        return self.expiry_date < check_date

    def is_in_markdown(self, check_date: Date) -> bool:
        """In markdown on or after the markdown date (never without one)."""
        if self.markdown_date is None:
            return False
        return self.markdown_date <= check_date

    def is_markdown_scheduled(self, check_date: Date, lookahead_end: Date) -> bool:
        """Markdown date strictly between check_date and lookahead_end."""
        if self.markdown_date is None:
            return False
        return check_date < self.markdown_date < lookahead_end


@dataclass(frozen=True)
class ReportLine:
    """
    One product row of a report.

    quantity holds the refill quantity for REFILL reports and the shelf
    count for COUNT reports; it is None otherwise.
    """
    product_id: int
    name: str
    expiry_date: Date
    markdown_date: Optional[Date] = None
    quantity: Optional[Decimal] = None

    @classmethod
    def from_product(cls, product: Product, quantity: Optional[Decimal] = None) -> "ReportLine":
        return cls(
            product_id=product.product_id,
            name=product.name,
            expiry_date=product.expiry_date,
            markdown_date=product.markdown_date,
            quantity=quantity,
        )


@dataclass(frozen=True)
class Report:
    """Structured result of a report query; rendering is left to the caller."""
    kind: ReportKind
    status: ReportStatus
    lines: Tuple[ReportLine, ...] = ()
    product_id: Optional[int] = None  # Set when the query was scoped to one product

    def __post_init__(self):
        if self.status == ReportStatus.OK and not self.lines:
            raise ValueError("OK report must carry at least one line")

    @property
    def found(self) -> bool:
        return self.status == ReportStatus.OK
