"""
Logging configuration for the funds transfer core.

Console logging always; a rotating file log when LOG_FILE is set.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "funds_transfer"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name; defaults to LOG_LEVEL env var, then INFO
        log_file: Rotating log file path; defaults to LOG_FILE env var

    Returns:
        The configured package logger
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    log_file = log_file or os.getenv("LOG_FILE")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    # Avoid duplicate handlers if setup_logging is called multiple times
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
