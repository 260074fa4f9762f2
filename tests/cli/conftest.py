# topmark:header:start
#
#   project      : polyfmt
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ``polyfmt-demo`` in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click command, so configuration discovery only sees the
files the test created there.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from polyfmt.cli.errors import ExitCode
from polyfmt.cli.main import cli
from polyfmt.config.logging import TRACE_LEVEL, setup_logging
from tests.conftest import fixture

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence
    from pathlib import Path

TEST_COLUMNS: int = 100


@fixture(autouse=True)
def restore_diagnostics_logging() -> Iterator[None]:
    """Reinstall TRACE diagnostics after the command reconfigured logging."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: Sequence[str],
    *,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["--format", "json"]``.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli_in(tmp_path, ["--format", "tree", "--delay", "0"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, env=env)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: Sequence[str],
    *,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for runs that do not depend on configuration discovery
    (``--help``, ``--no-config``, explicit ``--config`` paths).

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["--help"]``.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    # fixed terminal width for Options.max_line_length detection
    merged: dict[str, str | None] = {"COLUMNS": str(TEST_COLUMNS), **(env or {})}
    return runner.invoke(cli, list(argv), env=merged)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
