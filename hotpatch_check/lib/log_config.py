#!/usr/bin/env python3
"""
Logging setup for hotpatch-check.

Status lines are printed to stdout by the checks themselves; logging is
for diagnostics only and goes to stderr so it never mixes into the report.
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "hotpatch_check"


def setup_logging(verbose: bool = False, stream=None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: Log at DEBUG instead of WARNING
        stream: Stream for the handler (defaults to sys.stderr)

    Returns:
        logging.Logger: the configured package logger
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Clear existing handlers so repeated calls don't duplicate output
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)

    return logger
