# src/config/logging_config.py

"""Per-run timestamped logging configuration for the storefront.

Each application launch creates a dedicated log file inside ``logs/``,
named with the launch timestamp (e.g. ``logs/run_20261019_153045.log``).
All ``storefront.*`` loggers route through this file handler so that
cart mutations, searches and contact submissions from every module land
in the same per-run log. Console verbosity follows
``STOREFRONT_LOG_LEVEL`` (default ``WARNING``).
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

# Reusable format strings --------------------------------------------------

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> Path:
    """Initialise the root ``storefront`` logger for the current run.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger("storefront")
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls (e.g. tests) keep the first run's handlers
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(
        logging.getLevelName(Settings.CONSOLE_LOG_LEVEL.upper())
    )
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info("Logging initialised, log file: %s", log_file)

    return log_file
