"""
Console menu for store-inventory.

Thin collaborator around the core: reads raw input, calls Inventory /
ReportingService, renders Report records as text. No domain rules here.

Usage:
    store-inventory                          # Start the menu
    store-inventory --settings my.json       # Custom settings file
    store-inventory --log-dir /tmp/logs -v   # Debug logging to a custom dir
"""
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional
import argparse
import logging

from .config import InventorySettings, load_settings
from .domain.dates import format_date
from .domain.models import Report, ReportKind, ReportLine, ReportStatus
from .domain.validation import (
    parse_expiry_date,
    parse_markdown_date,
    parse_optional_product_id,
    parse_product_id,
    parse_product_name,
)
from .inventory import DuplicateIdError, Inventory, InventoryError
from .utils.logging_config import setup_logging
from .workflows.reporting import ReportingService

logger = logging.getLogger(__name__)


class MenuOption(Enum):
    """Main menu entries (value = number typed by the user)."""
    QUIT = 0
    PRODUCTS = 1
    CREATE_PRODUCT = 2
    REFILL = 3
    COUNT = 4
    EXPIRY = 5
    EXPIRED = 6
    IN_MARKDOWN = 7
    FOR_MARKDOWN = 8


MENU_TEXT = [
    "Which display would you like to go to:",
    "1: Products.",
    "2: Create Product.",
    "3: Products To Refill.",
    "4: Product Count.",
    "5: Product's Expiry Date.",
    "6: Display Expired Products.",
    "7: Products In Mark Down.",
    "8: Products For Mark Down.",
    "To close the program at any time, press: 0.",
    "",
]

# Menu options that run a report and may be scoped to one product ID
SCOPED_REPORTS = {
    MenuOption.REFILL: (ReportKind.REFILL, "Enter Product ID (or press Enter to display all products to refill):"),
    MenuOption.COUNT: (ReportKind.COUNT, "Enter Product ID (or press Enter to display count for all products):"),
    MenuOption.EXPIRY: (ReportKind.EXPIRY, "Enter Product ID (or press Enter to display expiry dates for all products):"),
}

# Menu options that always run inventory-wide
UNSCOPED_REPORTS = {
    MenuOption.EXPIRED: (ReportKind.EXPIRED, "Display Expired Products:"),
    MenuOption.IN_MARKDOWN: (ReportKind.IN_MARKDOWN, "Displaying all products that are past the markdown date:"),
    MenuOption.FOR_MARKDOWN: (ReportKind.FOR_MARKDOWN, "Displaying all products that need to be marked down within a week:"),
}

EMPTY_MESSAGES = {
    ReportKind.LIST_ALL: "No products available.",
    ReportKind.REFILL: "No products need to be replenished.",
    ReportKind.COUNT: "No products on shelf.",
    ReportKind.EXPIRY: "No products available.",
    ReportKind.EXPIRED: "No expired products.",
    ReportKind.IN_MARKDOWN: "No products are currently in markdown.",
    ReportKind.FOR_MARKDOWN: "No products are scheduled for markdown in the upcoming week.",
}


# ============================================================
# Rendering
# ============================================================

def _render_line(kind: ReportKind, line: ReportLine) -> str:
    if kind in (ReportKind.LIST_ALL, ReportKind.SHOW_PRODUCT):
        return (
            f"Product ID: {line.product_id}. Product Name: {line.name}. "
            f"Expiry date: {format_date(line.expiry_date)}. "
            f"Markdown date: {format_date(line.markdown_date)}"
        )
    if kind == ReportKind.REFILL:
        return f"Product ID: {line.product_id} needs to be refilled by {line.quantity}"
    if kind == ReportKind.COUNT:
        return f"Product ID: {line.product_id}, Count on Shelf: {line.quantity}"
    if kind == ReportKind.EXPIRY:
        return f"Product ID: {line.product_id} ({line.name}) expires on {format_date(line.expiry_date)}"
    if kind == ReportKind.EXPIRED:
        return f"Product ID: {line.product_id} ({line.name}) has expired on {format_date(line.expiry_date)}"
    if kind == ReportKind.IN_MARKDOWN:
        return f"Product ID: {line.product_id} ({line.name}) is currently in the markdown period."
    if kind == ReportKind.FOR_MARKDOWN:
        return (
            f"Product ID: {line.product_id} ({line.name}) is scheduled for markdown on "
            f"{format_date(line.markdown_date)}"
        )
    raise ValueError(f"Unknown report kind: {kind}")


def render_report(report: Report) -> List[str]:
    """
    Turn a Report into console lines.

    Args:
        report: Result of a ReportingService query

    Returns:
        List of lines to print (never empty)
    """
    if report.status == ReportStatus.NOT_FOUND:
        return [f"Product with ID {report.product_id} not found."]
    if report.status == ReportStatus.NO_REFILL_NEEDED:
        return [f"Product ID: {report.product_id} does not need to be refilled."]
    if report.status == ReportStatus.EMPTY:
        return [EMPTY_MESSAGES[report.kind]]
    return [_render_line(report.kind, line) for line in report.lines]


# ============================================================
# Menu loop
# ============================================================

class InventoryConsole:
    """Text menu bound to one inventory for the lifetime of the process."""

    def __init__(
        self,
        inventory: Inventory,
        reporting: ReportingService,
        settings: Optional[InventorySettings] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clock: Callable[[], date] = date.today,
    ):
        self.inventory = inventory
        self.reporting = reporting
        self.settings = settings or InventorySettings()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.clock = clock

    def run(self) -> None:
        """Loop until the user picks 0 (or input ends)."""
        self.output_fn("Welcome to System Market Online")
        self.output_fn("")
        while True:
            for text in MENU_TEXT:
                self.output_fn(text)
            try:
                raw = self.input_fn("")
            except EOFError:
                break
            option = self.read_option(raw)
            if option is None:
                continue
            if option == MenuOption.QUIT:
                break
            try:
                self.process_option(option)
            except EOFError:
                break
        self.output_fn("Program terminated.")

    def read_option(self, raw: str) -> Optional[MenuOption]:
        """Menu option from raw text; None (after a message) when invalid."""
        try:
            number = int(raw.strip())
        except ValueError:
            self.output_fn("Invalid Input. Select a valid option (Integer).")
            return None
        try:
            return MenuOption(number)
        except ValueError:
            self.output_fn("Invalid Input. Select a valid option.")
            return None

    def process_option(self, option: MenuOption) -> None:
        """Run one menu option; input errors are reported, never raised."""
        try:
            if option == MenuOption.PRODUCTS:
                self._products()
            elif option == MenuOption.CREATE_PRODUCT:
                self._create_product()
            elif option in SCOPED_REPORTS:
                kind, prompt = SCOPED_REPORTS[option]
                self.output_fn(prompt)
                product_id = parse_optional_product_id(self.input_fn(""))
                self._show(self.reporting.run(kind, product_id))
            elif option in UNSCOPED_REPORTS:
                kind, title = UNSCOPED_REPORTS[option]
                self.output_fn(title)
                self._show(self.reporting.run(kind))
        except InventoryError as e:
            logger.info(f"Menu option {option.name} rejected: {e}")
            self.output_fn(str(e))
        self.output_fn("")

    def _products(self) -> None:
        self.output_fn("Products display:")
        self.output_fn("Enter a Product ID to display details for that product.")
        self.output_fn("Press Enter without typing anything to display all products.")
        self.output_fn("To return to the main menu, type 'back' and press Enter.")
        raw = self.input_fn("").strip()
        if raw.lower() == "back":
            return
        product_id = parse_optional_product_id(raw)
        if product_id is None:
            self._show(self.reporting.list_all())
        else:
            self._show(self.reporting.find_and_show(product_id))

    def _create_product(self) -> None:
        today = self.clock()

        self.output_fn("Enter Product ID:")
        product_id = parse_product_id(self.input_fn(""))
        # Reject a taken ID before asking for the rest of the product
        if product_id in self.inventory:
            raise DuplicateIdError(
                f"Product ID must be unique: {product_id} already exists",
                product_id=product_id,
            )

        self.output_fn("Enter Product Name:")
        name = parse_product_name(self.input_fn(""))

        self.output_fn(
            f"Enter Expiry Date (MM/dd/yyyy) or press Enter for default "
            f"({self.settings.default_expiry_months} months from today):"
        )
        expiry_date = parse_expiry_date(
            self.input_fn(""), today, self.settings.default_expiry_months
        )

        self.output_fn(
            f"Enter Markdown Duration in days (or press Enter for default of "
            f"{self.settings.default_markdown_days} days before expiry):"
        )
        markdown_date = parse_markdown_date(
            self.input_fn(""), expiry_date, self.settings.default_markdown_days
        )

        self.inventory.create(
            product_id,
            name,
            expiry_date,
            markdown_date,
            shelf=self.settings.default_shelf(),
        )
        self.output_fn(f"{name} with Product ID {product_id} created successfully.")

    def _show(self, report: Report) -> None:
        for text in render_report(report):
            self.output_fn(text)


# ============================================================
# Entry point
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="store-inventory",
        description="Console inventory tracker: products, shelf refills, expiry and markdown reports",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Path to settings.json (default: <project_root>/settings.json)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for log files (default: <project_root>/logs)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Write debug records to the log file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    app_logger = setup_logging(log_dir=args.log_dir, verbose=args.verbose)
    settings = load_settings(args.settings)

    inventory = Inventory()
    reporting = ReportingService(
        inventory,
        markdown_lookahead_days=settings.markdown_lookahead_days,
    )
    app_logger.info(f"Store inventory console started with {settings}")
    InventoryConsole(inventory, reporting, settings).run()
    return 0
