# topmark:header:start
#
#   project      : polyfmt
#   file         : __init__.py
#   file_relpath : src/polyfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""polyfmt package.

One output API for command-line tools, several interchangeable renderings:
plain text, a tree view, an interactive spinner, newline-delimited JSON, or
nothing at all. Calling code stays the same; the format is picked at runtime.

Example:
    ```python
    from polyfmt import Format, Options, new

    fmt = new(Format.parse("tree"), Options().with_debug(True))
    fmt.println("Deploying")
    with fmt.indent():
        fmt.success("image built")
    fmt.finish()
    ```

The module-level functions (`polyfmt.println`, `polyfmt.success`, ...) use the
process-wide formatter managed by `set_global_formatter`.
"""

from __future__ import annotations

from polyfmt.color import ColorMode
from polyfmt.errors import ConstructionError, FormatParseError, PolyfmtError, SinkWriteError
from polyfmt.facade import (
    debug,
    error,
    finish,
    indent,
    outdent,
    print,  # noqa: A004
    println,
    progress,
    question,
    spacer,
    success,
    table,
    warning,
)
from polyfmt.factory import new
from polyfmt.formats import Format
from polyfmt.formatters import Formatter, ProgressHandle
from polyfmt.indentation import IndentGuard
from polyfmt.message import Displayable, Structured
from polyfmt.options import Options
from polyfmt.registry import get_global_formatter, set_global_formatter
from polyfmt.sink import OutputTarget

__all__ = [
    "ColorMode",
    "ConstructionError",
    "Displayable",
    "Format",
    "FormatParseError",
    "Formatter",
    "IndentGuard",
    "Options",
    "OutputTarget",
    "PolyfmtError",
    "ProgressHandle",
    "SinkWriteError",
    "Structured",
    "debug",
    "error",
    "finish",
    "get_global_formatter",
    "indent",
    "new",
    "outdent",
    "print",
    "println",
    "progress",
    "question",
    "set_global_formatter",
    "spacer",
    "success",
    "table",
    "warning",
]
