"""
Test suite for settings loading and logging setup.
"""
import json
import logging
import pytest
import shutil
import tempfile
from decimal import Decimal
from pathlib import Path

from store_inventory.config import (
    DEFAULT_EXPIRY_MONTHS,
    DEFAULT_MARKDOWN_DAYS,
    MARKDOWN_LOOKAHEAD_DAYS,
    InventorySettings,
    load_settings,
)
from store_inventory.utils.logging_config import setup_logging
from store_inventory.utils.paths import get_settings_path


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir)


class TestLoadSettings:
    """settings.json overrides with fallback to defaults."""

    def test_missing_file_gives_defaults(self, temp_dir):
        settings = load_settings(temp_dir / "settings.json")
        assert settings == InventorySettings()
        assert settings.default_expiry_months == DEFAULT_EXPIRY_MONTHS
        assert settings.default_markdown_days == DEFAULT_MARKDOWN_DAYS
        assert settings.markdown_lookahead_days == MARKDOWN_LOOKAHEAD_DAYS

    def test_overrides_applied(self, temp_dir):
        path = temp_dir / "settings.json"
        path.write_text(json.dumps({
            "default_expiry_months": 2,
            "markdown_lookahead_days": 14,
            "shelf_max": "12.5",
            "unknown_key": True,
        }), encoding="utf-8")

        settings = load_settings(path)

        assert settings.default_expiry_months == 2
        assert settings.markdown_lookahead_days == 14
        assert settings.shelf_max == Decimal("12.5")
        assert settings.default_markdown_days == DEFAULT_MARKDOWN_DAYS

    def test_corrupt_json_gives_defaults(self, temp_dir):
        path = temp_dir / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == InventorySettings()

    def test_invalid_value_gives_defaults(self, temp_dir):
        path = temp_dir / "settings.json"
        path.write_text(json.dumps({"markdown_lookahead_days": 0}), encoding="utf-8")
        assert load_settings(path) == InventorySettings()

    def test_non_object_gives_defaults(self, temp_dir):
        path = temp_dir / "settings.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_settings(path) == InventorySettings()


class TestShelfSettings:
    """Shelf thresholds from settings are checked when loaded."""

    @pytest.mark.parametrize("overrides", [
        {"shelf_min": "10", "shelf_max": "5"},
        {"shelf_current": "-1"},
        {"shelf_max": "NaN"},
        {"shelf_min": "abc"},
        {"default_markdown_days": 1e400},
    ])
    def test_invalid_values_fall_back_to_defaults(self, temp_dir, overrides):
        path = temp_dir / "settings.json"
        path.write_text(json.dumps(overrides), encoding="utf-8")
        assert load_settings(path) == InventorySettings()

    def test_inconsistent_shelf_rejected_on_construction(self):
        with pytest.raises(ValueError, match="max"):
            InventorySettings(shelf_min=Decimal(10), shelf_max=Decimal(5))

    def test_default_shelf_from_settings(self):
        settings = InventorySettings(shelf_min=1, shelf_max="12.5", shelf_current=3)
        shelf = settings.default_shelf()
        assert shelf.min == Decimal(1)
        assert shelf.max == Decimal("12.5")
        assert shelf.current == Decimal(3)
        assert settings.shelf_max == Decimal("12.5")


class TestPaths:
    def test_settings_path_in_project_root(self):
        path = get_settings_path()
        assert path.name == "settings.json"
        assert (path.parent / "store_inventory").is_dir()


class TestSetupLogging:
    """Rotating file logging, idempotent."""

    def test_creates_log_file_and_is_idempotent(self, temp_dir):
        name = "store_inventory_test_logging"
        logger = setup_logging(log_dir=temp_dir / "logs", app_name=name)
        try:
            again = setup_logging(log_dir=temp_dir / "logs", app_name=name)
            assert again is logger
            assert len(logger.handlers) == 2

            logger.warning("shelf check failed")
            for handler in logger.handlers:
                handler.flush()

            log_files = list((temp_dir / "logs").glob(f"{name}_*.log"))
            assert len(log_files) == 1
            assert "shelf check failed" in log_files[0].read_text(encoding="utf-8")
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_verbose_writes_debug(self, temp_dir):
        name = "store_inventory_test_verbose"
        logger = setup_logging(log_dir=temp_dir, app_name=name, verbose=True)
        try:
            file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            assert file_handlers[0].level == logging.DEBUG
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
