"""Debug logging for test runs."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from eztest.case import DEFAULT_LOGGER_NAME

LOG_FORMAT = "[%(asctime)s] %(levelname)-5s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    debug_file: Path, verbose: bool = False, logger_name: str = DEFAULT_LOGGER_NAME
) -> logging.Logger:
    """Point the runner's logger at ``debug_file``, and at stderr when verbose.

    The report itself goes to stdout or ``--output``; this logger only carries
    lifecycle events (suite start, case verdicts, failing expectations), so
    calling it twice in one process re-targets the same logger instead of
    stacking handlers. The file is appended to, and each call marks where a
    new run starts.
    """
    logger = logging.getLogger(logger_name)

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [logging.FileHandler(debug_file, mode="a")]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"--- {logger_name} run, debug log {debug_file} ---")
    return logger
