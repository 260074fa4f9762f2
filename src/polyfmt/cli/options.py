# topmark:header:start
#
#   project      : polyfmt
#   file         : options.py
#   file_relpath : src/polyfmt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options for the polyfmt demo CLI.

Option groups are plain decorators so commands can stack them:

```python
@click.command()
@common_verbose_options
@common_color_options
@common_formatter_options
def demo(...): ...
```
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from polyfmt.cli.cli_types import EnumChoiceParam
from polyfmt.cli.errors import PolyfmtUsageError
from polyfmt.color import ColorMode
from polyfmt.config.logging import TRACE_LEVEL
from polyfmt.formats import Format

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the diagnostics log level from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        PolyfmtUsageError: If both verbose and quiet flags are used.

    Behavior:
        ``-vvv`` selects TRACE, ``-vv`` DEBUG, ``-v`` INFO, ``-q`` ERROR;
        the default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PolyfmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def resolve_cli_color(color_mode: ColorMode | None, no_color: bool) -> ColorMode | None:
    """Combine ``--color`` and ``--no-color``; None means "not given"."""
    if no_color:
        return ColorMode.NEVER
    return color_mode


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (diagnostics log level)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase diagnostics verbosity (on stderr). Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report diagnostics errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_formatter_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the format selection and `Options` override flags."""
    f = click.option(
        "--format",
        "-f",
        "output_format",
        type=EnumChoiceParam(Format),
        default=None,
        help=f"Output format: {', '.join(Format.choices())} "
        "(default: $POLYFMT_FORMAT, then the configuration file, then plain).",
    )(f)
    f = click.option(
        "--all",
        "all_formats",
        is_flag=True,
        help="Run the demo once for every format.",
    )(f)
    f = click.option(
        "--debug",
        "debug",
        is_flag=True,
        help="Print debug messages (overrides the configuration file).",
    )(f)
    f = click.option(
        "--padding",
        type=click.IntRange(min=0, max=65535),
        default=None,
        help="Columns of left padding.",
    )(f)
    f = click.option(
        "--max-line-length",
        type=click.IntRange(min=1),
        default=None,
        help="Wrap lines at this width (default: terminal width).",
    )(f)
    f = click.option(
        "--no-wrap",
        is_flag=True,
        help="Disable line wrapping.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore polyfmt.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        default=None,
        help="Configuration file to load ([polyfmt] or [tool.polyfmt] table).",
    )(f)
    return f
