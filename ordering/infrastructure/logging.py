"""
Logging infrastructure.

Provides logging utilities for the ordering package.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
ROOT_LOGGER_NAME = "ordering"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)
        level: Level name; defaults to INFO when the logger is first set up

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level:
        logger.setLevel(level.upper())
    return logger


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger from settings.

    Args:
        level: Overrides the configured log level

    Returns:
        The "ordering" package logger
    """
    if level is None:
        from ordering.settings import get_app_settings
        level = get_app_settings().log_level
    return get_logger(ROOT_LOGGER_NAME, level=level)
