"""
Project configuration and constants.

Defaults live here as module constants; an optional settings.json can
override the tunable ones (see load_settings).
"""
from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional
import json
import logging

logger = logging.getLogger(__name__)

# Date text format for display and input (MM/dd/yyyy)
DATE_FORMAT = "%m/%d/%Y"
MISSING_DATE_TEXT = "N/A"

# Shelf defaults: every product gets this shelf unless one is supplied
DEFAULT_SHELF_MIN = Decimal(5)
DEFAULT_SHELF_MAX = Decimal(5)
DEFAULT_SHELF_CURRENT = Decimal(5)

# Input defaults used by the CLI when a prompt is left blank
DEFAULT_EXPIRY_MONTHS = 3
DEFAULT_MARKDOWN_DAYS = 6

# Products whose markdown date falls strictly inside (today, today + N days)
MARKDOWN_LOOKAHEAD_DAYS = 7


@dataclass
class InventorySettings:
    """Tunable settings, overridable through settings.json."""
    default_expiry_months: int = DEFAULT_EXPIRY_MONTHS
    default_markdown_days: int = DEFAULT_MARKDOWN_DAYS
    markdown_lookahead_days: int = MARKDOWN_LOOKAHEAD_DAYS
    shelf_min: Decimal = DEFAULT_SHELF_MIN
    shelf_max: Decimal = DEFAULT_SHELF_MAX
    shelf_current: Decimal = DEFAULT_SHELF_CURRENT

    def __post_init__(self):
        if self.default_expiry_months < 0:
            raise ValueError("default_expiry_months cannot be negative")
        if self.default_markdown_days < 0:
            raise ValueError("default_markdown_days cannot be negative")
        if self.markdown_lookahead_days < 1:
            raise ValueError("markdown_lookahead_days must be >= 1")
        # Fail here, not on the first "Create Product"
        shelf = self.default_shelf()
        self.shelf_min, self.shelf_max, self.shelf_current = shelf.min, shelf.max, shelf.current

    def default_shelf(self):
        """Shelf given to products created from the console."""
        from .domain.models import Shelf  # noqa: PLC0415
        return Shelf(min=self.shelf_min, max=self.shelf_max, current=self.shelf_current)


_INT_KEYS = ("default_expiry_months", "default_markdown_days", "markdown_lookahead_days")
_DECIMAL_KEYS = ("shelf_min", "shelf_max", "shelf_current")


def load_settings(path: Optional[Path] = None) -> InventorySettings:
    """
    Load settings from settings.json.

    Missing file, unreadable JSON or invalid values fall back to defaults.
    Unknown keys are ignored.

    Args:
        path: settings.json location (defaults to the project settings path)

    Returns:
        InventorySettings
    """
    if path is None:
        from .utils.paths import get_settings_path  # noqa: PLC0415
        path = get_settings_path()
    path = Path(path)

    if not path.exists():
        return InventorySettings()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not read settings from {path}: {e}; using defaults")
        return InventorySettings()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {path} is not a JSON object; using defaults")
        return InventorySettings()

    known = {f.name for f in fields(InventorySettings)}
    values = {}
    try:
        for key, value in raw.items():
            if key not in known:
                continue
            if key in _INT_KEYS:
                values[key] = int(value)
            elif key in _DECIMAL_KEYS:
                values[key] = Decimal(str(value))
        return InventorySettings(**values)
    except (TypeError, ValueError, OverflowError, InvalidOperation) as e:
        logger.warning(f"Invalid value in settings file {path}: {e}; using defaults")
        return InventorySettings()
