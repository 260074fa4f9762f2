# topmark:header:start
#
#   project      : polyfmt
#   file         : facade.py
#   file_relpath : src/polyfmt/facade.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide convenience functions over the global formatter.

Each function looks up the current formatter in `polyfmt.registry` and
delegates to it. Message functions accept a trailing format whitelist, applied
with `Formatter.only` inside the formatter's exclusive section, so the filter
and the call it guards can never be split by another thread:

```python
import polyfmt
from polyfmt import Format

polyfmt.println("human readable summary", Format.PLAIN, Format.TREE)
polyfmt.println({"summary": "machine readable"}, Format.JSON)
with polyfmt.indent():
    polyfmt.success("done")
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polyfmt.registry import get_global_formatter

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from polyfmt.formats import Format
    from polyfmt.formatters.base import ProgressHandle
    from polyfmt.indentation import IndentGuard


def print(msg: object = "", *only: Format) -> None:  # noqa: A001
    """Print ``msg`` without a trailing newline."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        fmt.only(*only).print(msg)


def println(msg: object = "", *only: Format) -> None:
    """Print ``msg`` followed by a newline."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        fmt.only(*only).println(msg)


def error(msg: object, *only: Format) -> None:
    """Print ``msg`` as an error."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        fmt.only(*only).error(msg)


def success(msg: object, *only: Format) -> None:
    """Print ``msg`` as a success."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        fmt.only(*only).success(msg)


def warning(msg: object, *only: Format) -> None:
    """Print ``msg`` as a warning."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        fmt.only(*only).warning(msg)


def debug(msg: object, *only: Format) -> None:
    """Print ``msg`` if the global formatter has debug printing enabled."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        fmt.only(*only).debug(msg)


def question(msg: object, *only: Format) -> str:
    """Prompt with ``msg`` and return the answer (``""`` when filtered out)."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        return fmt.only(*only).question(msg)


def spacer(*only: Format) -> None:
    """Print a visual separator."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        fmt.only(*only).spacer()


def table(headers: Sequence[object], rows: Iterable[Sequence[object]], *only: Format) -> None:
    """Print a table."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        fmt.only(*only).table(headers, rows)


def progress(label: str, *only: Format) -> ProgressHandle:
    """Begin a progress indication on the global formatter."""
    fmt = get_global_formatter()
    with fmt.exclusive():
        return fmt.only(*only).progress(label)


def indent() -> IndentGuard:
    """Enter one more process-wide indentation level."""
    return get_global_formatter().indent()


def outdent() -> bool:
    """Release the innermost indentation level."""
    return get_global_formatter().outdent()


def finish() -> None:
    """Finish the global formatter (stop spinners, flush output)."""
    get_global_formatter().finish()
