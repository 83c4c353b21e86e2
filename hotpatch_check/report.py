#!/usr/bin/env python3
"""
Hotpatch report generator.

Runs the checks in order against one log and prints the final verdict:

    from hotpatch_check.config import HotpatchConfig
    from hotpatch_check.report import run_checks

    state = run_checks(["3.0.4"], HotpatchConfig(log_path="/var/log/hotpatch.log"))

Each step either returns the updated ValidationState or raises a
HotpatchCheckError, which stops the remaining steps.
"""

import logging
import pathlib
from typing import Sequence

from hotpatch_check.config import HotpatchConfig
from hotpatch_check.exceptions import LogReadError
from hotpatch_check.state import ValidationState
from hotpatch_check.validators.completion_checker import check_completion
from hotpatch_check.validators.log_scanner import scan_for_errors
from hotpatch_check.validators.version_validator import validate_args

logger = logging.getLogger(__name__)


def final_report(state: ValidationState) -> str:
    """Return the closing status line for a completed upgrade."""
    if not state.failure_status:
        return f"Upgrade to {state.patch_version} appears to have completed successfully!"
    return (
        f"WARNING: Upgrade to {state.patch_version} appears to have completed successfully, "
        "however the log output should be reviewed."
    )


def print_final_report(state: ValidationState) -> None:
    print(final_report(state))


def ensure_log_exists(path: str | pathlib.Path) -> pathlib.Path:
    """
    Fail early if the log is not a regular file.

    Raises:
        LogReadError: path missing or not a file
    """
    p = pathlib.Path(path)
    if not p.is_file():
        raise LogReadError(str(p), message=f"hotpatch log not found: {p}")
    return p


def run_checks(args: Sequence[str], config: HotpatchConfig | None = None) -> ValidationState:
    """
    Validate arguments, scan the log, check completion and print the report.

    Args:
        args: Positional command-line arguments (the version)
        config: Paths, markers and thresholds; defaults when None

    Returns:
        ValidationState: final state after the report was printed
    """
    if config is None:
        config = HotpatchConfig()

    version = validate_args(args, min_version=config.min_version)
    log_path = ensure_log_exists(config.log_path)
    logger.info("Checking hotpatch log %s for version %s", log_path, version)

    state = ValidationState(patch_version=version)
    state = scan_for_errors(log_path, state, marker=config.error_marker)
    state = check_completion(log_path, state, marker=config.completion_marker)
    print_final_report(state)
    return state
