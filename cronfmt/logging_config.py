"""Loguru logging configuration."""

import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    """Route loguru to stderr at the given level."""
    logger.remove()  # drop the default handler
    logger.add(
        sys.stderr,
        format="<level>{time:YYYY-MM-DD HH:mm:ss} | {name}:{function}:{line} | {message}</level>",
        level=level.upper(),
        colorize=True,
        backtrace=True,
        diagnose=True,
    )
