#!/usr/bin/env python
"""Validate the version argument given on the command line."""
import logging
import re
from typing import Sequence

from hotpatch_check.exceptions import UsageError

logger = logging.getLogger(__name__)

DEFAULT_MIN_VERSION = 3.0

# Leading numeric prefix only, so "2.17.15" reads as 2.17.
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_version_number(token: str) -> float:
    """Parse the leading number of a version string; 0.0 when there is none."""
    m = _NUMERIC_PREFIX.match(token)
    if not m:
        return 0.0
    return float(m.group(1))


def check_arg_count(args: Sequence[str]) -> None:
    """Raise UsageError unless exactly one positional argument was given."""
    if len(args) != 1:
        logger.debug("Expected exactly one argument, got %d", len(args))
        raise UsageError()


def validate_args(args: Sequence[str], min_version: float = DEFAULT_MIN_VERSION) -> str:
    """
    Check the positional arguments and return the version label.

    Exactly one argument is accepted. Only its leading numeric prefix is
    compared against ``min_version``; the returned label is the argument
    exactly as given.

    Raises:
        UsageError: wrong argument count or version below ``min_version``
    """
    check_arg_count(args)

    version = args[0]
    number = parse_version_number(version)
    if number < min_version:
        logger.debug("Version %r parses as %s, below minimum %s", version, number, min_version)
        raise UsageError()

    return version
