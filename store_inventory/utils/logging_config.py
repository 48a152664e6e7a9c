"""
Logging setup for the store-inventory console.

All package modules log through logging.getLogger(__name__), so their
records propagate to the "store_inventory" logger configured here:
- Rotating file log (warnings and errors; everything with --verbose)
- Console output for critical errors only, so the menu stays readable
"""
import logging
import logging.handlers
from pathlib import Path
from datetime import datetime

APP_NAME = "store_inventory"

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
MAX_LOG_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUPS = 3


def _file_handler(log_path: Path, app_name: str, verbose: bool) -> logging.Handler:
    """One log file per day, rotated when it grows past MAX_LOG_BYTES."""
    log_file = log_path / f"{app_name}_{datetime.now().strftime('%Y%m%d')}.log"
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding='utf-8',
    )
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(logging.CRITICAL)
    handler.setFormatter(logging.Formatter('CRITICAL: %(message)s'))
    return handler


def setup_logging(
    log_dir: "str | Path | None" = None,
    app_name: str = APP_NAME,
    verbose: bool = False,
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        log_dir: Directory for log files (created if missing).  When *None*
                 <project_root>/logs is used, or ~/StoreInventory/logs when
                 that is read-only.
        app_name: Logger name; also the log file prefix
        verbose: Write DEBUG records to the log file instead of WARNING+

    Returns:
        The configured logger (calling again returns it unchanged)
    """
    if log_dir is None:
        from .paths import get_logs_dir  # noqa: PLC0415
        log_path = get_logs_dir()
    else:
        log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(app_name)
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.addHandler(_file_handler(log_path, app_name, verbose))
    logger.addHandler(_console_handler())
    logger.debug(f"Logging to {log_path} (verbose={verbose})")
    return logger
