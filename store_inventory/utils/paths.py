"""
Path resolver for store-inventory.

Rules
-----
* base_dir      → project root (two levels up from store_inventory/utils)
* logs_dir      → base_dir/logs (portable first); fallback ~/StoreInventory/logs
* settings_path → base_dir/settings.json

Runtime code should call one of the functions below instead of building
relative Path("...") strings.
"""

from pathlib import Path

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _get_base_dir() -> Path:
    # store_inventory/utils/paths.py → parent.parent.parent = project root
    return Path(__file__).resolve().parent.parent.parent


def _try_writable(path: Path) -> bool:
    """
    Return True if *path* can be created and used as a writable directory.

    Creates the directory if it does not exist.  Writes and removes a canary file
    so permission issues are detected up front.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
        canary = path / ".write_check"
        canary.touch()
        canary.unlink()
        return True
    except OSError:
        return False


def _home_dir(sub: str) -> Path:
    return Path.home() / "StoreInventory" / sub


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logs_dir() -> Path:
    """
    Portable logs directory.

    Priority:
      1. <base_dir>/logs
      2. ~/StoreInventory/logs
    """
    primary = _get_base_dir() / "logs"
    if _try_writable(primary):
        return primary
    fallback = _home_dir("logs")
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback


def get_settings_path() -> Path:
    """Full path to the optional settings.json file."""
    return _get_base_dir() / "settings.json"
