"""
logger.py
---------
Logging for the conversion engine.

Every module logs through a child of the ``schemaconv`` logger obtained
from :func:`get_logger`. The level and the optional log file come from
``CONFIG.conversion``; :func:`configure_logging` applies them once, on first
import, and can be called again with other values (tests, embedding apps).
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from config import CONFIG, get_log_level

ROOT_LOGGER_NAME = "schemaconv"
_CONSOLE_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(level: int, log_file: str | Path | None = None) -> logging.Logger:
    """
    (Re)build the handlers of the ``schemaconv`` logger.

    Args:
        level:    Threshold for the logger and its stderr handler.
        log_file: When set, also write DEBUG and above to this file.

    Returns:
        The configured ``schemaconv`` logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.DEBUG if log_file else level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as exc:
            root.warning("Could not open conversion log '%s': %s", log_path, exc)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(fmt=_FILE_FORMAT, datefmt=_DATE_FORMAT))
            root.addHandler(file_handler)
    return root


configure_logging(get_log_level(), CONFIG.conversion.log_file)


def get_logger(name: str) -> logging.Logger:
    """Return the ``schemaconv`` child logger for module *name*."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
