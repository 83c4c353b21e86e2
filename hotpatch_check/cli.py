#!/usr/bin/env python3
"""CLI entry point for hotpatch-check.

Usage:
    python -m hotpatch_check.cli [options] VERSION
    hotpatch-check [options] VERSION

Exit codes:
    0   upgrade completed (error lines in the log only produce a warning)
    1   upgrade did not fully complete
    2   missing, extra or too-low version argument
    3   hotpatch log missing or unreadable
    4   hotpatch log empty
    5   invalid configuration file
"""
from __future__ import annotations

import argparse
import logging
import sys

from hotpatch_check.config import apply_overrides, load_config
from hotpatch_check.exceptions import (
    HotpatchCheckError,
    IncompleteUpgradeError,
    UsageError,
)
from hotpatch_check.lib.log_config import setup_logging
from hotpatch_check.report import run_checks
from hotpatch_check.validators.version_validator import check_arg_count

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hotpatch-check",
        description="Verify that a hotpatch upgrade log shows a completed upgrade.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    hotpatch-check 3.1.2                              # check test/hotpatch.log
    hotpatch-check --log /var/log/hotpatch.log 3.1.2  # check a specific log
    hotpatch-check --config hotpatch.yaml 3.1.2       # paths and markers from YAML
        """.strip(),
    )
    parser.add_argument("version", nargs="*", help="Target version, e.g. 3.1.2")
    parser.add_argument("--log", dest="log_path", help="Hotpatch log to inspect (overrides config)")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--min-version", type=float, help="Lowest accepted version number (overrides config)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    overrides = {}
    if args.log_path is not None:
        overrides["log_path"] = args.log_path
    if args.min_version is not None:
        overrides["min_version"] = args.min_version

    try:
        # Usage problems are reported before any config file is read.
        check_arg_count(args.version)
        config = load_config(args.config)
        if overrides:
            config = apply_overrides(config, **overrides)
        run_checks(args.version, config)
    except UsageError as e:
        logger.debug("Stopping with %s", e.error_code)
        print(e.message)
        return e.exit_code
    except IncompleteUpgradeError as e:
        logger.debug("Stopping with %s; last line was: %s", e.error_code, e.last_line)
        return e.exit_code
    except HotpatchCheckError as e:
        logger.debug("Stopping with %s", e.error_code)
        print(f"FAIL: {e.message}", file=sys.stderr)
        return e.exit_code

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
