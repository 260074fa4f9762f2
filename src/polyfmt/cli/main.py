# topmark:header:start
#
#   project      : polyfmt
#   file         : main.py
#   file_relpath : src/polyfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``polyfmt-demo`` command.

Runs the same sequence of formatter calls (messages, indentation, filtering,
a table and a progress indication) against one format, or against every
format with ``--all``, so the renderings can be compared side by side.

Format selection follows `polyfmt.config.io.resolve_format`: ``--format``, then
``POLYFMT_FORMAT``, then the configuration file, then plain.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING

import click

from polyfmt.cli.errors import PolyfmtUsageError
from polyfmt.cli.options import (
    common_color_options,
    common_config_options,
    common_formatter_options,
    common_verbose_options,
    resolve_cli_color,
    resolve_verbosity,
)
from polyfmt.config.io import load_options, resolve_format
from polyfmt.config.logging import get_logger, resolve_env_log_level, setup_logging
from polyfmt.errors import PolyfmtError
from polyfmt.factory import new
from polyfmt.formats import Format, is_machine_format
from polyfmt.options import Options

if TYPE_CHECKING:
    from polyfmt.color import ColorMode
    from polyfmt.formatters.base import Formatter

logger = get_logger(__name__)

PROGRESS_STEPS: int = 4


def build_options(
    *,
    config_path: str | None,
    no_config: bool,
    debug: bool,
    padding: int | None,
    max_line_length: int | None,
    no_wrap: bool,
    color_mode: ColorMode | None,
) -> tuple[Format | None, Options]:
    """Layer CLI overrides on top of the configuration file.

    Returns:
        tuple[Format | None, Options]: The configured format (if any) and the
        options to build formatters with.

    Raises:
        PolyfmtError: On an invalid configured format or option value.
    """
    configured: Format | None
    options: Options
    if no_config:
        configured, options = None, Options()
    else:
        configured, options = load_options(Path(config_path) if config_path else None)

    if debug:
        options = options.with_debug(True)
    if padding is not None:
        options = options.with_padding(padding)
    if no_wrap:
        options = options.with_max_line_length(None)
    elif max_line_length is not None:
        options = options.with_max_line_length(max_line_length)
    if color_mode is not None:
        options = options.with_color(color_mode)
    return configured, options


def run_demo(fmt: Formatter, *, delay: float = 0.0) -> None:
    """Exercise every formatter operation once, then finish ``fmt``."""
    fmt.print("Starting the demo...")
    fmt.println()
    fmt.println("Hello from polyfmt!")
    with fmt.indent():
        fmt.println("This line is indented one level.")
        fmt.debug("Debug lines only show up with --debug.")
        with fmt.indent():
            fmt.warning("Nested warnings are indented further.")
        fmt.success("Back to one level.")

    fmt.only(Format.PLAIN, Format.TREE, Format.SPINNER).println(
        "Only human-readable formats print this line."
    )
    fmt.only(Format.JSON).println({"event": "demo", "machine_readable": True})
    fmt.spacer()

    fmt.table(
        ["format", "machine readable"],
        [[choice.value, is_machine_format(choice)] for choice in Format],
    )

    with fmt.progress("Working") as handle:
        for step in range(1, PROGRESS_STEPS + 1):
            if delay:
                time.sleep(delay)
            handle.update(step / PROGRESS_STEPS)
        handle.finish("Work complete")

    fmt.error("This is what an error looks like.")
    fmt.finish()


@click.command(
    name="polyfmt-demo",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Demonstrate polyfmt output formats.",
)
@common_verbose_options
@common_color_options
@common_config_options
@common_formatter_options
@click.option(
    "--delay",
    type=click.FloatRange(min=0.0),
    default=0.3,
    show_default=True,
    help="Seconds to wait between progress steps.",
)
def cli(
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: str | None,
    no_config: bool,
    output_format: Format | None,
    all_formats: bool,
    debug: bool,
    padding: int | None,
    max_line_length: int | None,
    no_wrap: bool,
    delay: float,
) -> None:
    """Entry point for the polyfmt demo."""
    level: int | None = (
        resolve_verbosity(verbose, quiet) if verbose or quiet else resolve_env_log_level()
    )
    setup_logging(level=level)

    try:
        configured, options = build_options(
            config_path=config_path,
            no_config=no_config,
            debug=debug,
            padding=padding,
            max_line_length=max_line_length,
            no_wrap=no_wrap,
            color_mode=resolve_cli_color(color_mode, no_color),
        )
        formats: list[Format] = (
            list(Format) if all_formats else [resolve_format(output_format, configured)]
        )
    except PolyfmtError as exc:
        raise PolyfmtUsageError(str(exc)) from exc

    for choice in formats:
        if all_formats:
            click.echo(f"--- {choice} formatter ---")
        logger.info("Running the demo with the %s formatter", choice)
        run_demo(new(choice, options), delay=delay)


if __name__ == "__main__":
    cli()
