"""
In-memory product inventory.

- Inventory: ordered, append-only product collection
- Product IDs unique, enforced at insertion time
- Error handling: domain validation failures mapped to InvalidInputError

The list stands in for a future persistence layer; nothing is written
to disk.
"""
import logging
import threading
from datetime import date
from typing import Iterator, List, Optional, Tuple

from .domain.models import Product, Shelf

logger = logging.getLogger(__name__)


# ============================================================
# Custom Exceptions
# ============================================================

class InventoryError(Exception):
    """Base exception for inventory operations"""

    def __init__(self, message: str, product_id: Optional[int] = None):
        super().__init__(message)
        self.product_id = product_id


class DuplicateIdError(InventoryError):
    """Raised when a product ID is already taken"""
    pass


class NotFoundError(InventoryError):
    """Raised when a product ID does not exist"""
    pass


class InvalidInputError(InventoryError):
    """Raised when raw input cannot form a valid product"""
    pass


# ============================================================
# Inventory
# ============================================================

class Inventory:
    """
    Ordered collection of products.

    Responsibilities:
    - Append-only insertion with ID uniqueness
    - Lookup by ID
    - Read-only snapshots for reporting

    Insert and snapshot share one lock, so a report never iterates over a
    half-applied insert.
    """

    def __init__(self):
        self._products: List[Product] = []
        self._lock = threading.Lock()

    def insert(self, product: Product) -> Product:
        """
        Append a product.

        Args:
            product: Product to add

        Returns:
            The inserted product

        Raises:
            DuplicateIdError: If a product with the same ID exists (no state change)
        """
        with self._lock:
            if self._find_unlocked(product.product_id) is not None:
                logger.warning(f"Rejected duplicate product ID {product.product_id} ({product.name})")
                raise DuplicateIdError(
                    f"Product ID must be unique: {product.product_id} already exists",
                    product_id=product.product_id,
                )
            self._products.append(product)

        logger.info(f"Product {product.product_id} ({product.name}) added")
        return product

    def create(
        self,
        product_id: int,
        name: str,
        expiry_date: date,
        markdown_date: Optional[date] = None,
        shelf: Optional[Shelf] = None,
    ) -> Product:
        """
        Build a product from validated primitives and insert it.

        Args:
            product_id: Unique product ID
            name: Product name (non-blank)
            expiry_date: Expiry date
            markdown_date: Markdown start date (None = no markdown)
            shelf: Shelf thresholds (None = default shelf)

        Returns:
            The created product

        Raises:
            InvalidInputError: If the primitives do not form a valid product
            DuplicateIdError: If the product ID is already taken
        """
        try:
            if shelf is None:
                product = Product(product_id, name, expiry_date, markdown_date)
            else:
                product = Product(product_id, name, expiry_date, markdown_date, shelf)
        except ValueError as e:
            raise InvalidInputError(str(e), product_id=product_id) from e
        return self.insert(product)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Product with the given ID, or None."""
        with self._lock:
            return self._find_unlocked(product_id)

    def get(self, product_id: int) -> Product:
        """
        Product with the given ID.

        Raises:
            NotFoundError: If no product has that ID
        """
        product = self.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found", product_id=product_id)
        return product

    def all(self) -> Tuple[Product, ...]:
        """Snapshot of all products in insertion order."""
        with self._lock:
            return tuple(self._products)

    def _find_unlocked(self, product_id: int) -> Optional[Product]:
        for product in self._products:
            if product.product_id == product_id:
                return product
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.all())

    def __contains__(self, product_id: object) -> bool:
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            return False
        return self.find_by_id(product_id) is not None
