"""Diagnostic logging for filelog itself.

Library code only gets a named logger. ``configure_logging`` attaches a
RotatingFileHandler writing to ~/.filelog/debug.log; the CLI calls it.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path.home() / ".filelog"
LOG_FILE = LOG_DIR / "debug.log"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3


def get_logger(name: str = "filelog") -> logging.Logger:
    """Get the filelog diagnostic logger without touching the filesystem."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def configure_logging(log_file: Path = LOG_FILE, level: int = logging.DEBUG) -> logging.Logger:
    """Attach the rotating debug file handler to the filelog logger, once."""
    logger = get_logger()
    target = os.path.abspath(log_file)
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == target:
            return logger

    logger.setLevel(level)

    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


log = get_logger()
