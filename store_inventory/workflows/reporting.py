"""
Reporting workflow: read-only queries over the inventory.

Handles:
- Product listings (all / one)
- Refill and shelf-count reports, optionally scoped to one product
- Expiry listing and expired products
- Markdown reports (in markdown now / scheduled within the lookahead window)

Every query returns a Report; rendering belongs to the caller.
"today" is read from the clock once per query.
"""
from datetime import date, timedelta
from typing import Callable, Iterable, List, Optional
import logging

from ..config import MARKDOWN_LOOKAHEAD_DAYS
from ..domain.models import Product, Report, ReportKind, ReportLine, ReportStatus
from ..inventory import Inventory, NotFoundError
from ..shelf_policy import needs_refill, quantity_to_refill

logger = logging.getLogger(__name__)


class ReportingService:
    """Read-only report queries over an Inventory."""

    def __init__(
        self,
        inventory: Inventory,
        clock: Callable[[], date] = date.today,
        markdown_lookahead_days: int = MARKDOWN_LOOKAHEAD_DAYS,
    ):
        """
        Initialize the service.

        Args:
            inventory: Inventory to query
            clock: Returns today's date (injectable for tests)
            markdown_lookahead_days: Width of the "scheduled for markdown" window
        """
        self.inventory = inventory
        self.clock = clock
        self.markdown_lookahead_days = markdown_lookahead_days

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def run(self, kind: ReportKind, product_id: Optional[int] = None) -> Report:
        """
        Run the report for a menu selection.

        Args:
            kind: Report to run
            product_id: Scope to one product (ignored by reports that are
                        always inventory-wide)

        Raises:
            ValueError: SHOW_PRODUCT without a product_id
        """
        if kind == ReportKind.LIST_ALL:
            return self.list_all()
        if kind == ReportKind.SHOW_PRODUCT:
            if product_id is None:
                raise ValueError("SHOW_PRODUCT requires a product_id")
            return self.find_and_show(product_id)
        if kind == ReportKind.REFILL:
            return self.refill_report(product_id)
        if kind == ReportKind.COUNT:
            return self.count_report(product_id)
        if kind == ReportKind.EXPIRY:
            return self.expiry_report(product_id)
        if kind == ReportKind.EXPIRED:
            return self.expired_report()
        if kind == ReportKind.IN_MARKDOWN:
            return self.in_markdown_report()
        if kind == ReportKind.FOR_MARKDOWN:
            return self.for_markdown_report()
        raise ValueError(f"Unknown report kind: {kind}")

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def list_all(self) -> Report:
        """Every product, in insertion order."""
        lines = [ReportLine.from_product(p) for p in self.inventory.all()]
        return self._build(ReportKind.LIST_ALL, lines)

    def find_and_show(self, product_id: int) -> Report:
        """One product by ID, or NOT_FOUND."""
        try:
            product = self.inventory.get(product_id)
        except NotFoundError:
            return self._not_found(ReportKind.SHOW_PRODUCT, product_id)
        return Report(
            kind=ReportKind.SHOW_PRODUCT,
            status=ReportStatus.OK,
            lines=(ReportLine.from_product(product),),
            product_id=product_id,
        )

    def expiry_report(self, product_id: Optional[int] = None) -> Report:
        """
        Expiry date listing.

        With product_id the listing is scoped to that product (NOT_FOUND if
        it does not exist); without it every product is listed.
        """
        candidates = self._candidates(product_id)
        if candidates is None:
            return self._not_found(ReportKind.EXPIRY, product_id)
        lines = [ReportLine.from_product(p) for p in candidates]
        return self._build(ReportKind.EXPIRY, lines, product_id)

    # ------------------------------------------------------------------
    # Shelf reports
    # ------------------------------------------------------------------

    def refill_report(self, product_id: Optional[int] = None) -> Report:
        """
        Products whose shelf is below capacity.

        Status:
            OK: at least one product needs refilling (quantity on each line)
            EMPTY: inventory-wide, nothing needs replenishing
            NO_REFILL_NEEDED: scoped product is full
            NOT_FOUND: scoped product does not exist
        """
        candidates = self._candidates(product_id)
        if candidates is None:
            return self._not_found(ReportKind.REFILL, product_id)

        lines = [
            ReportLine.from_product(product, quantity=quantity_to_refill(product.shelf))
            for product in candidates
            if needs_refill(product.shelf)
        ]

        if not lines and product_id is not None:
            return Report(
                kind=ReportKind.REFILL,
                status=ReportStatus.NO_REFILL_NEEDED,
                product_id=product_id,
            )
        return self._build(ReportKind.REFILL, lines, product_id)

    def count_report(self, product_id: Optional[int] = None) -> Report:
        """Current shelf stock per product."""
        candidates = self._candidates(product_id)
        if candidates is None:
            return self._not_found(ReportKind.COUNT, product_id)
        lines = [ReportLine.from_product(p, quantity=p.shelf.current) for p in candidates]
        return self._build(ReportKind.COUNT, lines, product_id)

    # ------------------------------------------------------------------
    # Date reports
    # ------------------------------------------------------------------

    def expired_report(self) -> Report:
        """Products with expiry_date strictly before today."""
        today = self.clock()
        lines = [
            ReportLine.from_product(p)
            for p in self.inventory.all()
            if p.is_expired(today)
        ]
        return self._build(ReportKind.EXPIRED, lines)

    def in_markdown_report(self) -> Report:
        """
        Products whose markdown date is today or earlier.

        Products without a markdown date are never in markdown.
        """
        today = self.clock()
        lines = [
            ReportLine.from_product(p)
            for p in self.inventory.all()
            if p.is_in_markdown(today)
        ]
        return self._build(ReportKind.IN_MARKDOWN, lines)

    def for_markdown_report(self) -> Report:
        """Products with today < markdown_date < today + lookahead (both ends exclusive)."""
        today = self.clock()
        window_end = today + timedelta(days=self.markdown_lookahead_days)
        lines = [
            ReportLine.from_product(p)
            for p in self.inventory.all()
            if p.is_markdown_scheduled(today, window_end)
        ]
        return self._build(ReportKind.FOR_MARKDOWN, lines)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _candidates(self, product_id: Optional[int]) -> Optional[List[Product]]:
        """All products, or the scoped one; None if the scoped ID is unknown."""
        if product_id is None:
            return list(self.inventory.all())
        product = self.inventory.find_by_id(product_id)
        if product is None:
            return None
        return [product]

    def _build(
        self,
        kind: ReportKind,
        lines: Iterable[ReportLine],
        product_id: Optional[int] = None,
    ) -> Report:
        lines = tuple(lines)
        status = ReportStatus.OK if lines else ReportStatus.EMPTY
        logger.debug(f"{kind.value} report: {status.value}, {len(lines)} line(s)")
        return Report(kind=kind, status=status, lines=lines, product_id=product_id)

    def _not_found(self, kind: ReportKind, product_id: Optional[int]) -> Report:
        logger.debug(f"{kind.value} report: product {product_id} not found")
        return Report(kind=kind, status=ReportStatus.NOT_FOUND, product_id=product_id)
