"""Logging setup shared by the cart and product services."""

import logging
import sys
from typing import Optional

ROOT_LOGGER = "shop"


class ColorFormatter(logging.Formatter):
    """Colorized level names for interactive terminals."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        if record.levelname in self.COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``shop`` logger once and return it.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"INFO"``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER)

    if logger.handlers:
        return logger

    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if sys.stdout.isatty():
        handler.setFormatter(ColorFormatter(fmt))
    else:
        handler.setFormatter(logging.Formatter(fmt))

    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a child of the ``shop`` logger, e.g. ``get_logger("cart.store")``."""
    if name:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logging.getLogger(ROOT_LOGGER)
