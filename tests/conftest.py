"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from eztest.reporting.console import ConsoleReporter


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up eztest loggers after each test so handlers do not leak between tests."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("eztest")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def stream():
    """In-memory text sink for report output."""
    return io.StringIO()


@pytest.fixture
def reporter(stream):
    return ConsoleReporter(stream)


@pytest.fixture
def logger():
    """DEBUG-level logger that propagates to pytest's caplog."""
    logger = logging.getLogger("eztest_test")
    logger.setLevel(logging.DEBUG)
    return logger
