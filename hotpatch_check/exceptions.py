#!/usr/bin/env python3
"""
Error types for hotpatch-check.

Every fatal condition is a subclass of HotpatchCheckError and carries the
process exit code the CLI should use. Soft warnings (error lines in an
otherwise complete log) are not exceptions; they only flip
ValidationState.failure_status.
"""

USAGE_MESSAGE = "Please provide a version, e.g. ghe-check-hotpatch.sh 2.17.15"


class HotpatchCheckError(Exception):
    """Base error for hotpatch-check"""

    exit_code = 1

    def __init__(self, message: str, error_code: str | None = None, cause: Exception | None = None):
        self.message = message
        self.error_code = error_code
        self.cause = cause
        super().__init__(self.message)


class UsageError(HotpatchCheckError):
    """Wrong argument count, or version below the threshold"""

    exit_code = 2

    def __init__(self, message: str = USAGE_MESSAGE, error_code: str = "USAGE"):
        super().__init__(message=message, error_code=error_code)


class LogReadError(HotpatchCheckError):
    """Hotpatch log missing or unreadable"""

    exit_code = 3

    def __init__(
        self,
        path: str,
        cause: Exception | None = None,
        message: str | None = None,
        error_code: str = "LOG_READ",
    ):
        self.path = path
        if message is None:
            message = f"cannot read hotpatch log: {path}"
            if cause is not None:
                message += f" ({cause.__class__.__name__}: {cause})"
        super().__init__(message=message, error_code=error_code, cause=cause)


class EmptyLogError(LogReadError):
    """Hotpatch log has no lines, so there is no last line to inspect"""

    exit_code = 4

    def __init__(self, path: str):
        super().__init__(
            path=path,
            message=f"log is empty or unreadable: {path}",
            error_code="LOG_EMPTY",
        )


class IncompleteUpgradeError(HotpatchCheckError):
    """Last log line lacks the completion marker"""

    exit_code = 1

    def __init__(self, last_line: str | None = None, error_code: str = "INCOMPLETE"):
        self.last_line = last_line
        super().__init__(message="Upgrade did not fully complete!", error_code=error_code)


class ConfigError(HotpatchCheckError):
    """Configuration file missing or invalid"""

    exit_code = 5

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message=message, error_code="CONFIG", cause=cause)
