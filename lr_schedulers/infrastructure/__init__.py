"""
Infrastructure utilities.

Cross-cutting concerns: logging.
"""

from .logging import setup_logging, get_logger, PACKAGE_LOGGER

__all__ = ["setup_logging", "get_logger", "PACKAGE_LOGGER"]
