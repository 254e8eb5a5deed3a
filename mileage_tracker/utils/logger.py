# mileage_tracker/utils/logger.py
"""
Logging for the tracker: one format on the console and, unless disabled,
a size-rotated mileage.log under LOG_DIR (defaults to <project>/logs).
Shift, roster and notification modules tag their lines ([SHIFT], [ROSTER],
[NOTIFY]) so the file can be grepped per concern.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from mileage_tracker.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_FILE = "mileage.log"

_configured = False


def log_dir() -> str:
    if settings.LOG_DIR:
        return settings.LOG_DIR
    return os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")


def _file_handler(level: str, fmt: logging.Formatter) -> RotatingFileHandler:
    directory = log_dir()
    os.makedirs(directory, exist_ok=True)
    handler = RotatingFileHandler(
        filename=os.path.join(directory, LOG_FILE),
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(console)
    if settings.LOG_TO_FILE:
        root.addHandler(_file_handler(level, fmt))

    # Per-request httpx lines would drown the [NOTIFY] ones
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
