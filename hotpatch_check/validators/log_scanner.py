#!/usr/bin/env python
import logging
import pathlib

from hotpatch_check.exceptions import LogReadError
from hotpatch_check.lib.utils import iter_lines
from hotpatch_check.state import ValidationState

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MARKER = "ERROR"


def scan_for_errors(
    path: str | pathlib.Path,
    state: ValidationState,
    marker: str = DEFAULT_ERROR_MARKER,
) -> ValidationState:
    """
    Count log lines containing ``marker`` and print a one-line summary.

    Any match sets ``state.failure_status``; the upgrade can still pass,
    but the final report will ask for the log to be reviewed.

    Raises:
        LogReadError: log missing or unreadable
    """
    p = pathlib.Path(path)
    errors: list[str] = []
    try:
        for lineno, line in enumerate(iter_lines(p), start=1):
            if marker in line:
                logger.debug("%s:%d: %s", p, lineno, line)
                errors.append(line)
    except OSError as e:
        raise LogReadError(str(p), cause=e) from e

    state.error_count = len(errors)
    state.error_lines = errors
    if not errors:
        print("No errors detected in the hotpatch log.")
    else:
        print(f"WARNING: {len(errors)} errors detected during hotpatching.")
        state.failure_status = True
    return state
