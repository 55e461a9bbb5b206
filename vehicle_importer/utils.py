"""
Utility functions for logging and timestamps.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from .config import config


def init_logger(
    name: str = "vehicle_importer",
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    log_file: Optional[str] = config.LOG_FILE_PATH
) -> logging.Logger:
    """Initialize logger with console and optional file handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    console_level_num = getattr(logging, console_level.upper(), logging.INFO)
    ch = logging.StreamHandler()
    ch.setLevel(console_level_num)

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:  # Create file handler only if log_file is provided
        file_level_num = getattr(logging, file_level.upper(), logging.DEBUG)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level_num)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def now_iso() -> str:
    """Return current UTC timestamp in ISO format."""
    return datetime.now(timezone.utc).isoformat()


def date_tag(now: Optional[datetime] = None) -> str:
    """Return the UTC date as ``YYYY-MM-DD`` for export file names."""
    now = now or datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%d")
