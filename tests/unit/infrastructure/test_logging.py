"""Tests for logging helpers."""
import logging

import pytest

from ordering.infrastructure.logging import (
    LOG_FORMAT,
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_loggers():
    """Put back level and handlers of every logger these tests touch."""
    names = [
        ROOT_LOGGER_NAME,
        "ordering.tests.single_handler",
        "ordering.tests.explicit_level",
    ]
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers))
        for name in names
    }
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers[:] = handlers


def test_get_logger_attaches_single_handler():
    logger = get_logger("ordering.tests.single_handler")
    get_logger("ordering.tests.single_handler")

    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    assert logger.level == logging.INFO


def test_get_logger_applies_explicit_level():
    logger = get_logger("ordering.tests.explicit_level", level="debug")
    assert logger.level == logging.DEBUG


def test_configure_logging_reads_settings(monkeypatch):
    monkeypatch.setenv("ORDERING_LOG_LEVEL", "warning")

    logger = configure_logging()

    assert logger.name == "ordering"
    assert logger.level == logging.WARNING


def test_configure_logging_override():
    assert configure_logging("ERROR").level == logging.ERROR


def test_package_logger_is_left_as_found():
    """Earlier configure_logging() calls in this module leave no trace."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    assert logger.level == logging.NOTSET
    assert logger.handlers == []
