"""Logger configuration."""

import sys

from loguru import logger


CONSOLE_FORMAT = "<level>{level: <8}</level> | {name}:{line} - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"


def setup_logger(level="WARNING", log_file=None):
    """Send loguru output to stderr, and to log_file as well when configured."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        # loguru creates missing parent directories for file sinks.
        logger.add(log_file, format=FILE_FORMAT, level=level, rotation="1 MB", encoding="utf-8")

    logger.debug(f"Logging at {level}")
