# topmark:header:start
#
#   project      : polyfmt
#   file         : base.py
#   file_relpath : src/polyfmt/formatters/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The formatter contract shared by every backend.

`Formatter` implements everything that must behave the same regardless of the
backend, and leaves rendering to a small set of abstract hooks:

- **Filtering**: `Formatter.only` restricts the *next* output call to the given
  formats. The next call consumes the restriction whether or not it prints.
- **Debug gating**: `Formatter.debug` prints only when ``Options.debug`` is on.
  The ``only`` restriction and debug gating compose: either one suppresses.
- **Indentation**: `Formatter.indent` returns a process-wide `IndentGuard`.
- **Progress**: `Formatter.progress` returns a `ProgressHandle`.
- **Lifecycle**: `Formatter.finish` releases backend resources and flushes the
  output target; the formatter keeps working afterwards.

Thread safety:
    Every public call runs under the formatter's `RLock`, so calls from several
    threads never interleave inside one rendered block. The pending ``only``
    restriction is stored per thread, so ``fmt.only(...).println(...)`` on one
    thread is never consumed by another thread's call. Use `Formatter.exclusive`
    to keep a sequence of calls together.

Calls from several threads are not ordered relative to each other.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import contextmanager
from threading import RLock
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

from polyfmt.color import resolve_color_mode
from polyfmt.config.logging import get_logger
from polyfmt.formats import Format
from polyfmt.indentation import INDENT_WIDTH, IndentGuard, current_depth
from polyfmt.indentation import indent as _indent
from polyfmt.indentation import outdent as _outdent
from polyfmt.kinds import MessageKind

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from types import TracebackType

    from polyfmt.options import Options
    from polyfmt.sink import OutputTarget

logger = get_logger(__name__)

FormatSpec: TypeAlias = "Format | str | Iterable[Format | str]"


def normalize_formats(specs: Iterable[FormatSpec]) -> frozenset[Format]:
    """Flatten ``only`` arguments into a set of formats.

    Accepts members, format names, and (nested) iterables of either, so
    ``only(Format.PLAIN, Format.TREE)``, ``only([Format.PLAIN])`` and
    ``only("plain")`` are all valid.

    Raises:
        FormatParseError: If a string names no known format.
    """
    result: set[Format] = set()
    for spec in specs:
        if isinstance(spec, Format):
            result.add(spec)
        elif isinstance(spec, str):
            result.add(Format.parse(spec))
        else:
            result.update(normalize_formats(spec))
    return frozenset(result)


class ProgressHandle:
    """A running progress indication, driven by the caller.

    Use it as a context manager, or call `finish` explicitly. `update` accepts
    either a fraction in ``[0, 1]`` or a new label.

    Attributes:
        label (str): Current label.
        fraction (float | None): Completion ratio, if one was reported.
    """

    def __init__(self, formatter: Formatter | None, label: str) -> None:
        self._formatter = formatter
        self.label = label
        self.fraction: float | None = None
        self._finished = formatter is None

    def __enter__(self) -> ProgressHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.finish()

    @property
    def finished(self) -> bool:
        """True once `finish` was called (or the handle was filtered out)."""
        return self._finished

    def render(self) -> str:
        """Return the label, with the completion percentage when known."""
        if self.fraction is None:
            return self.label
        return f"{self.label} ({round(self.fraction * 100)}%)"

    def update(self, value: float | str) -> None:
        """Report progress as a fraction or replace the label."""
        if self._finished or self._formatter is None:
            return
        if isinstance(value, str):
            self.label = value
        else:
            self.fraction = min(max(float(value), 0.0), 1.0)
        with self._formatter.lock:
            self._formatter._progress_update(self)

    def finish(self, message: str | None = None) -> None:
        """Complete the progress indication; calling it again is a no-op.

        Args:
            message (str | None): Completion text; defaults to the label.
        """
        if self._finished or self._formatter is None:
            return
        self._finished = True
        with self._formatter.lock:
            self._formatter._progress_finish(self, message if message is not None else self.label)


class Formatter(ABC):
    """Abstract base class for output formatters.

    Subclasses set `format` and implement the rendering hooks. Public methods
    take care of locking, ``only`` filtering and debug gating.

    Args:
        options (Options): Construction options, captured as-is (they are frozen).

    Attributes:
        format (Format): The backend's identity, compared by `only`.
        options (Options): The captured options.
        target (OutputTarget): The shared output target.
        color (bool): Whether ANSI styles are emitted, resolved at construction.
    """

    format: ClassVar[Format]

    def __init__(self, options: Options) -> None:
        self.options: Options = options
        self.target: OutputTarget = options.output_target
        self.color: bool = resolve_color_mode(
            color_mode=options.color,
            output_format=self.format,
            isatty=self.target.isatty(),
        )
        self._lock = RLock()
        self._pending = threading.local()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.format.value!r}, target={self.target!r})"

    @property
    def lock(self) -> RLock:
        """The formatter's reentrant lock."""
        return self._lock

    @contextmanager
    def exclusive(self) -> Iterator[Formatter]:
        """Hold the formatter lock across several calls.

        Example:
            ```python
            with fmt.exclusive():
                fmt.only(Format.PLAIN).println("header")
                fmt.table(headers, rows)
            ```
        """
        with self._lock:
            yield self

    # --- filtering ---

    def only(self, *formats: FormatSpec) -> Formatter:
        """Restrict the next output call to the given formats.

        Args:
            *formats (FormatSpec): Formats (or format names, or iterables of
                them) for which the next call should have an effect. An empty
                set leaves the next call unrestricted.

        Returns:
            Formatter: ``self``, for fluent ``fmt.only(...).println(...)`` calls.
        """
        self._pending.allowed = normalize_formats(formats)
        return self

    def _take_allowed(self) -> bool:
        """Consume the pending restriction and report whether output may proceed."""
        allowed: frozenset[Format] | None = getattr(self._pending, "allowed", None)
        self._pending.allowed = None
        if not allowed:
            return True
        return self.format in allowed

    # --- print family ---

    def print(self, msg: object = "") -> None:
        """Print ``msg`` without a trailing newline."""
        with self._lock:
            if self._take_allowed():
                self._print(msg)

    def println(self, msg: object = "") -> None:
        """Print ``msg`` followed by a newline, wrapped to the line length."""
        with self._lock:
            if self._take_allowed():
                self._message(MessageKind.INFO, msg)

    def error(self, msg: object) -> None:
        """Print ``msg`` as an error."""
        self._tagged(MessageKind.ERROR, msg)

    def success(self, msg: object) -> None:
        """Print ``msg`` as a success."""
        self._tagged(MessageKind.SUCCESS, msg)

    def warning(self, msg: object) -> None:
        """Print ``msg`` as a warning."""
        self._tagged(MessageKind.WARNING, msg)

    def debug(self, msg: object) -> None:
        """Print ``msg`` only if debug printing is enabled in the options."""
        with self._lock:
            allowed: bool = self._take_allowed()
            if allowed and self.options.debug:
                self._message(MessageKind.DEBUG, msg)

    def _tagged(self, kind: MessageKind, msg: object) -> None:
        with self._lock:
            if self._take_allowed():
                self._message(kind, msg)

    def question(self, msg: object) -> str:
        """Print ``msg`` as a prompt and return the line the user typed.

        Even machine formats wait for input, so filter this call with `only`
        when the program may run non-interactively.

        Returns:
            str: The stripped answer, or ``""`` if the call was filtered out or
            input is exhausted.
        """
        with self._lock:
            if not self._take_allowed():
                return ""
            return self._question(msg)

    def spacer(self) -> None:
        """Print a visual separator."""
        with self._lock:
            if self._take_allowed():
                self._spacer()

    def table(self, headers: Sequence[object], rows: Iterable[Sequence[object]]) -> None:
        """Print rows of values under the given column headers.

        Args:
            headers (Sequence[object]): Column headers.
            rows (Iterable[Sequence[object]]): Rows; missing cells render empty
                and extra cells are ignored.
        """
        with self._lock:
            if self._take_allowed():
                self._table([str(h) for h in headers], [list(row) for row in rows])

    def progress(self, label: str) -> ProgressHandle:
        """Begin a progress indication.

        Backends without live redraw print one line when the progress starts
        and one when it finishes; intermediate updates are not printed.

        Returns:
            ProgressHandle: The handle to update and finish. A filtered-out call
            returns an inert handle.
        """
        with self._lock:
            if not self._take_allowed():
                return ProgressHandle(None, label)
            handle = ProgressHandle(self, label)
            self._progress_start(handle)
            return handle

    # --- indentation ---

    def indent(self) -> IndentGuard:
        """Enter one more process-wide indentation level; see `polyfmt.indentation`."""
        return _indent()

    def outdent(self) -> bool:
        """Release the innermost indentation level, if any."""
        return _outdent()

    def indentation(self) -> int:
        """Columns of padding plus indentation applied to the next line."""
        return self.options.padding + current_depth() * INDENT_WIDTH

    # --- lifecycle ---

    def pause(self) -> None:
        """Pause live redrawing (no-op unless the backend redraws)."""

    def resume(self) -> None:
        """Resume live redrawing (no-op unless the backend redraws)."""

    def finish(self) -> None:
        """Release backend resources and flush the output target.

        Safe to call repeatedly. The formatter remains usable afterwards.
        """
        with self._lock:
            self._finish()
            self.target.flush()

    def _finish(self) -> None:
        """Backend-specific cleanup; nothing by default."""

    # --- rendering hooks ---

    @abstractmethod
    def _print(self, msg: object) -> None:
        """Render ``msg`` without a line terminator."""

    @abstractmethod
    def _message(self, kind: MessageKind, msg: object) -> None:
        """Render one complete message of the given kind."""

    @abstractmethod
    def _question(self, msg: object) -> str:
        """Render a prompt and read the answer."""

    @abstractmethod
    def _spacer(self) -> None:
        """Render a separator."""

    @abstractmethod
    def _table(self, headers: list[str], rows: list[list[Any]]) -> None:
        """Render a table."""

    @abstractmethod
    def _progress_start(self, handle: ProgressHandle) -> None:
        """Render the start of a progress indication."""

    @abstractmethod
    def _progress_update(self, handle: ProgressHandle) -> None:
        """Render a progress update."""

    @abstractmethod
    def _progress_finish(self, handle: ProgressHandle, message: str) -> None:
        """Render the completion of a progress indication."""
