# topmark:header:start
#
#   project      : polyfmt
#   file         : factory.py
#   file_relpath : src/polyfmt/factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter factory.

`new` is the construction entry point: it selects the backend registered for a
`Format` and builds it from `Options`. Construction never fails for a valid
format; a backend whose prerequisites are missing degrades instead. Currently
the only degradation is Spinner -> Plain, decided once here:

- the output target is a custom stream (``Options.with_custom_output_target``), or
- standard output is not an interactive terminal.

The substituted formatter *is* a Plain formatter (including its `format` tag,
so ``only(Format.PLAIN)`` matches it), and renders byte-for-byte like one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from polyfmt.config.logging import get_logger
from polyfmt.formats import Format
from polyfmt.formatters.json import JsonFormatter
from polyfmt.formatters.plain import PlainFormatter
from polyfmt.formatters.silent import SilentFormatter
from polyfmt.formatters.spinner import SpinnerFormatter
from polyfmt.formatters.tree import TreeFormatter
from polyfmt.options import Options

if TYPE_CHECKING:
    from polyfmt.formatters.base import Formatter

logger = get_logger(__name__)

BACKENDS: Final[dict[Format, type[Formatter]]] = {
    Format.PLAIN: PlainFormatter,
    Format.TREE: TreeFormatter,
    Format.SPINNER: SpinnerFormatter,
    Format.JSON: JsonFormatter,
    Format.SILENT: SilentFormatter,
}


def new(output_format: Format | str, options: Options | None = None) -> Formatter:
    """Create a formatter for ``output_format``.

    Args:
        output_format (Format | str): The format, or its (case-insensitive) name.
        options (Options | None): Construction options; defaults to ``Options()``.

    Returns:
        Formatter: The new formatter.

    Raises:
        FormatParseError: If ``output_format`` is a string naming no format.
    """
    fmt: Format = (
        output_format if isinstance(output_format, Format) else Format.parse(output_format)
    )
    opts: Options = options if options is not None else Options()

    if fmt is Format.SPINNER:
        target = opts.output_target
        if target.is_custom or not target.isatty():
            logger.debug(
                "Spinner needs an interactive standard output (%r); using plain output", target
            )
            fmt = Format.PLAIN

    formatter: Formatter = BACKENDS[fmt](opts)
    logger.trace("Constructed %r", formatter)
    return formatter
