"""Logging setup."""

import sys
from pathlib import Path

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Route loguru to stderr, and optionally to a rotating file."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT)
    if log_file:
        logger.add(str(log_file), level="DEBUG", rotation="1 MB", retention=3, format=_FORMAT, colorize=False)
