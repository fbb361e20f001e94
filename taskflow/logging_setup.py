# -*- coding: utf-8 -*-

"""
TaskFlow - Logging setup.

Replaces loguru's default sink with a single stderr sink at the requested level.
"""

import sys

from loguru import logger

from taskflow.config import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure loguru for console output."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=True)
    logger.debug(f"Logging configured at level {level.upper()}")
