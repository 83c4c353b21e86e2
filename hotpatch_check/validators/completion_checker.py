#!/usr/bin/env python
"""Verify that the hotpatch log ends in the patched state."""
import logging
import pathlib

from hotpatch_check.exceptions import EmptyLogError, IncompleteUpgradeError, LogReadError
from hotpatch_check.lib.utils import read_lines
from hotpatch_check.state import ValidationState

logger = logging.getLogger(__name__)

DEFAULT_COMPLETION_MARKER = "is now patched"


def check_completion(
    path: str | pathlib.Path,
    state: ValidationState,
    marker: str = DEFAULT_COMPLETION_MARKER,
) -> ValidationState:
    """
    Inspect the last line of the log for ``marker``.

    Raises:
        LogReadError: log missing or unreadable
        EmptyLogError: log has no lines
        IncompleteUpgradeError: last line lacks ``marker``
    """
    p = pathlib.Path(path)
    try:
        lines = read_lines(p)
    except OSError as e:
        raise LogReadError(str(p), cause=e) from e

    if not lines:
        raise EmptyLogError(str(p))

    last = lines[-1]
    if marker not in last:
        logger.debug("Last line of %s lacks %r: %s", p, marker, last)
        print("ERROR: Upgrade did not fully complete!")
        raise IncompleteUpgradeError(last_line=last)

    print(f"Logs showing that upgrade completed. Last line: {last}")
    state.last_line = last
    return state
