"""Logging setup: rotating log file in the data directory plus console output."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..db.schema import get_data_dir

LOG_FILE_NAME = "tool_inventory.log"


def get_log_dir() -> Path:
    return get_data_dir() / "logs"


def setup_logging(console_level: int = logging.INFO, log_dir: Path | None = None) -> Path:
    """
    Configure the `tool_inventory` logger.

    - tool_inventory.log: DEBUG and above (1 MB per file, 3 rotations)
    - console (stderr): console_level and above

    Returns the log directory.
    """
    log_dir = log_dir or get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    detailed_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

    app_logger = logging.getLogger("tool_inventory")
    app_logger.setLevel(logging.DEBUG)
    # Called again (e.g. tests): replace handlers instead of stacking them
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    app_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    app_logger.addHandler(console_handler)

    app_logger.propagate = False
    app_logger.info(f"Logging to {log_dir / LOG_FILE_NAME}")
    return log_dir
