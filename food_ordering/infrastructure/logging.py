"""
Logging infrastructure.

Provides logging utilities for the application and infrastructure layers.
All module loggers propagate to the package logger, which owns the handler.
"""
import logging

PACKAGE_LOGGER = "food_ordering"


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Set the level of the package logger (e.g. "DEBUG")."""
    get_logger(PACKAGE_LOGGER).setLevel(level.upper())
