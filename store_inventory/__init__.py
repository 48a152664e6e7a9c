"""Store inventory tracker: products, shelf stock, expiry and markdown reports."""
from .domain.models import Product, Report, ReportKind, ReportLine, ReportStatus, Shelf
from .inventory import DuplicateIdError, Inventory, InventoryError, InvalidInputError, NotFoundError
from .shelf_policy import quantity_to_refill
from .workflows.reporting import ReportingService

__version__ = "1.0.0"

__all__ = [
    'Product', 'Shelf', 'Report', 'ReportKind', 'ReportLine', 'ReportStatus',
    'Inventory', 'InventoryError', 'DuplicateIdError', 'NotFoundError', 'InvalidInputError',
    'quantity_to_refill', 'ReportingService',
]
