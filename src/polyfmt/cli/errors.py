# topmark:header:start
#
#   project      : polyfmt
#   file         : errors.py
#   file_relpath : src/polyfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions and exit codes for the polyfmt demo CLI.

Library errors (`polyfmt.errors.PolyfmtError`) are mapped onto these Click
exceptions at the command boundary, so they are reported as one-line messages
with a `sysexits`-style exit code instead of a traceback.
"""

from __future__ import annotations

from enum import IntEnum

import click


class ExitCode(IntEnum):
    """Exit codes of the demo CLI, aligned with BSD ``sysexits`` where practical.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid invocation or configuration value. Mirrors
            BSD ``EX_USAGE (64)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE


class PolyfmtCliError(click.ClickException):
    """Base class for all polyfmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class PolyfmtUsageError(PolyfmtCliError):
    """Error for invalid flags, environment values or configuration."""

    exit_code = ExitCode.USAGE_ERROR
