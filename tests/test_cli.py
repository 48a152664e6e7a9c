"""
Test suite for the console menu.

Drives InventoryConsole with scripted input and captures its output.
"""
import pytest
from datetime import date
from decimal import Decimal

from store_inventory.cli import InventoryConsole, MenuOption, build_parser, render_report
from store_inventory.config import InventorySettings
from store_inventory.domain.models import Report, ReportKind, ReportLine, ReportStatus
from store_inventory.inventory import Inventory
from store_inventory.workflows.reporting import ReportingService

TODAY = date(2025, 1, 1)


class ScriptedConsole:
    """Feeds canned answers to the console and records printed lines."""

    def __init__(self, answers, settings=None):
        self.answers = list(answers)
        self.output = []
        self.inventory = Inventory()
        self.console = InventoryConsole(
            self.inventory,
            ReportingService(self.inventory, clock=lambda: TODAY),
            settings=settings,
            input_fn=self._input,
            output_fn=self.output.append,
            clock=lambda: TODAY,
        )

    def _input(self, prompt):
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def run(self):
        self.console.run()
        return self.output


class TestRenderReport:
    """Report → console text."""

    def test_not_found(self):
        report = Report(ReportKind.SHOW_PRODUCT, ReportStatus.NOT_FOUND, product_id=5)
        assert render_report(report) == ["Product with ID 5 not found."]

    def test_no_refill_needed(self):
        report = Report(ReportKind.REFILL, ReportStatus.NO_REFILL_NEEDED, product_id=3)
        assert render_report(report) == ["Product ID: 3 does not need to be refilled."]

    @pytest.mark.parametrize("kind,message", [
        (ReportKind.LIST_ALL, "No products available."),
        (ReportKind.REFILL, "No products need to be replenished."),
        (ReportKind.EXPIRED, "No expired products."),
        (ReportKind.IN_MARKDOWN, "No products are currently in markdown."),
        (ReportKind.FOR_MARKDOWN, "No products are scheduled for markdown in the upcoming week."),
    ])
    def test_empty_messages(self, kind, message):
        assert render_report(Report(kind, ReportStatus.EMPTY)) == [message]

    def test_product_line_with_missing_markdown(self):
        line = ReportLine(1, "Salt", date(2030, 1, 2))
        report = Report(ReportKind.LIST_ALL, ReportStatus.OK, (line,))
        assert render_report(report) == [
            "Product ID: 1. Product Name: Salt. Expiry date: 01/02/2030. Markdown date: N/A"
        ]

    def test_refill_line(self):
        line = ReportLine(2, "Milk", date(2025, 6, 1), quantity=Decimal(6))
        report = Report(ReportKind.REFILL, ReportStatus.OK, (line,))
        assert render_report(report) == ["Product ID: 2 needs to be refilled by 6"]

    def test_for_markdown_line(self):
        line = ReportLine(2, "Milk", date(2025, 1, 10), date(2025, 1, 4))
        report = Report(ReportKind.FOR_MARKDOWN, ReportStatus.OK, (line,))
        assert render_report(report) == [
            "Product ID: 2 (Milk) is scheduled for markdown on 01/04/2025"
        ]


class TestMenuLoop:
    """End-to-end menu scenarios."""

    def test_quit_immediately(self):
        output = ScriptedConsole(["0"]).run()
        assert output[0] == "Welcome to System Market Online"
        assert output[-1] == "Program terminated."

    def test_end_of_input_terminates(self):
        output = ScriptedConsole([]).run()
        assert output[-1] == "Program terminated."

    def test_invalid_options(self):
        output = ScriptedConsole(["abc", "42", "0"]).run()
        assert "Invalid Input. Select a valid option (Integer)." in output
        assert "Invalid Input. Select a valid option." in output

    def test_create_with_defaults_then_list(self):
        scripted = ScriptedConsole(["2", "42", "Milk", "", "", "1", "", "0"])
        output = scripted.run()

        assert "Milk with Product ID 42 created successfully." in output
        product = scripted.inventory.find_by_id(42)
        assert product.expiry_date == date(2025, 4, 1)
        assert product.markdown_date == date(2025, 3, 26)
        assert (
            "Product ID: 42. Product Name: Milk. Expiry date: 04/01/2025. "
            "Markdown date: 03/26/2025"
        ) in output

    def test_create_with_explicit_dates(self):
        scripted = ScriptedConsole(["2", "7", "Bread", "06/01/2025", "10", "0"])
        scripted.run()
        product = scripted.inventory.find_by_id(7)
        assert product.expiry_date == date(2025, 6, 1)
        assert product.markdown_date == date(2025, 5, 22)

    def test_create_duplicate_reported(self):
        """A taken ID is rejected before the name is asked for."""
        scripted = ScriptedConsole([
            "2", "1", "Milk", "", "",
            "2", "1",
            "0",
        ])
        output = scripted.run()
        assert "Product ID must be unique: 1 already exists" in output
        assert output.count("Enter Product Name:") == 1
        assert len(scripted.inventory) == 1
        assert output[-1] == "Program terminated."

    def test_markdown_days_too_large_reported(self):
        """Huge markdown duration is an input error, not a crash."""
        scripted = ScriptedConsole(["2", "1", "Milk", "06/01/2025", "99999999999", "0"])
        output = scripted.run()
        assert "Markdown duration is too large for the expiry date" in output
        assert len(scripted.inventory) == 0
        assert output[-1] == "Program terminated."

    def test_default_markdown_before_year_one_reported(self):
        """Expiry 01/02/0001 leaves no room for the 6-day default markdown."""
        scripted = ScriptedConsole(["2", "1", "Milk", "01/02/0001", "", "0"])
        output = scripted.run()
        assert any("Default markdown date is out of range" in line for line in output)
        assert len(scripted.inventory) == 0
        assert output[-1] == "Program terminated."

    def test_default_expiry_past_year_9999_reported(self):
        settings = InventorySettings(default_expiry_months=12 * 9000)
        scripted = ScriptedConsole(["2", "1", "Milk", "", "0"], settings=settings)
        output = scripted.run()
        assert any("Default expiry date is out of range" in line for line in output)
        assert output[-1] == "Program terminated."

    def test_create_invalid_id_reported(self):
        scripted = ScriptedConsole(["2", "x1", "0"])
        output = scripted.run()
        assert "Product ID must be an integer" in output
        assert len(scripted.inventory) == 0

    def test_create_invalid_date_reported(self):
        scripted = ScriptedConsole(["2", "1", "Milk", "2025-06-01", "0"])
        output = scripted.run()
        assert any("MM/dd/yyyy" in line for line in output)

    def test_products_back(self):
        output = ScriptedConsole(["1", "back", "0"]).run()
        assert "No products available." not in output

    def test_refill_all_on_default_shelves(self):
        scripted = ScriptedConsole(["2", "1", "Milk", "", "", "3", "", "0"])
        output = scripted.run()
        assert "No products need to be replenished." in output

    def test_count_for_unknown_id(self):
        output = ScriptedConsole(["4", "9", "0"]).run()
        assert "Product with ID 9 not found." in output

    def test_expired_report(self):
        scripted = ScriptedConsole(["2", "1", "Old milk", "12/01/2024", "", "6", "0"])
        output = scripted.run()
        assert "Product ID: 1 (Old milk) has expired on 12/01/2024" in output

    def test_for_markdown_option_eight(self):
        # Expiry 01/10/2025, markdown 6 days earlier → 01/04/2025
        scripted = ScriptedConsole(["2", "1", "Yogurt", "01/10/2025", "", "8", "0"])
        output = scripted.run()
        assert "Product ID: 1 (Yogurt) is scheduled for markdown on 01/04/2025" in output

    def test_settings_drive_defaults(self):
        settings = InventorySettings(default_expiry_months=1, default_markdown_days=2, shelf_max=Decimal(9))
        scripted = ScriptedConsole(["2", "1", "Milk", "", "", "3", "1", "0"], settings=settings)
        output = scripted.run()
        product = scripted.inventory.find_by_id(1)
        assert product.expiry_date == date(2025, 2, 1)
        assert product.markdown_date == date(2025, 1, 30)
        assert "Product ID: 1 needs to be refilled by 4" in output


class TestMenuOption:
    def test_valid_range(self):
        assert [o.value for o in MenuOption] == list(range(9))


class TestArgumentParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.settings is None
        assert args.log_dir is None
        assert args.verbose is False

    def test_flags(self, tmp_path):
        args = build_parser().parse_args(["--log-dir", str(tmp_path), "-v"])
        assert args.log_dir == tmp_path
        assert args.verbose is True
