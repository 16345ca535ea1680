"""Utility functions"""

import sys

from loguru import logger


def configure_logger(verbose: bool = False):
    """Configure the logger for the application."""
    level = "DEBUG" if verbose else "WARNING"
    if getattr(configure_logger, "level", None) == level:
        return logger

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
    )

    configure_logger.level = level
    return logger
