"""
Logging setup for lr_schedulers.

The library only creates module loggers; handlers are attached by the
application (or by setup_logging in scripts and notebooks).
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "lr_schedulers"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)
        logger_name: Logger to configure (defaults to the package root)

    Returns:
        The configured logger
    """
    if format_string is None:
        format_string = (
            "%(asctime)s - %(name)s - %(levelname)s - "
            "%(message)s"
        )

    level_value = getattr(logging, level.upper(), None)
    if not isinstance(level_value, int):
        raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger(logger_name)
    logger.setLevel(level_value)

    # Re-running setup replaces our handler instead of stacking duplicates
    for handler in list(logger.handlers):
        if getattr(handler, "_lr_schedulers_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))
    handler._lr_schedulers_handler = True
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
