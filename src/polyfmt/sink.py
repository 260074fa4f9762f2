# topmark:header:start
#
#   project      : polyfmt
#   file         : sink.py
#   file_relpath : src/polyfmt/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output targets.

An `OutputTarget` is the place formatter bytes end up. It is shared, not owned:
every formatter built from the same `Options`, and the spinner's background
redraw thread, write through the same target. The target's `RLock` makes each
`write` call atomic, and callers that need several writes to stay together
(clear line, write block, repaint spinner) hold `OutputTarget.lock` around them.

Write failures are recorded, logged and swallowed; see `OutputTarget.last_error`.
"""

from __future__ import annotations

import sys
from threading import RLock
from typing import TYPE_CHECKING

import click

from polyfmt.config.logging import get_logger
from polyfmt.errors import SinkWriteError

if TYPE_CHECKING:
    from typing import TextIO

logger = get_logger(__name__)


class OutputTarget:
    """A lock-guarded, shareable text destination.

    Args:
        stream (TextIO | None): The stream to write to. When None, the target
            follows ``sys.stdout`` as it is at write time, so redirections made
            after construction (test runners, ``contextlib.redirect_stdout``)
            are honored.

    Attributes:
        last_error (SinkWriteError | None): The most recent swallowed write or
            flush failure, if any.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream
        self._lock = RLock()
        self.last_error: SinkWriteError | None = None

    def __repr__(self) -> str:
        name = "stdout" if self._stream is None else type(self._stream).__name__
        return f"{type(self).__name__}({name})"

    @classmethod
    def stdout(cls) -> OutputTarget:
        """Return the process-wide standard output target."""
        return _STDOUT_TARGET

    @classmethod
    def coerce(cls, target: OutputTarget | TextIO) -> OutputTarget:
        """Wrap a plain text stream into an `OutputTarget` (targets pass through)."""
        if isinstance(target, OutputTarget):
            return target
        return cls(target)

    @property
    def stream(self) -> TextIO:
        """The stream currently written to."""
        return self._stream if self._stream is not None else sys.stdout

    @property
    def is_custom(self) -> bool:
        """True when the target was given an explicit stream instead of stdout."""
        return self._stream is not None

    @property
    def lock(self) -> RLock:
        """Reentrant lock serializing writes to this target."""
        return self._lock

    def isatty(self) -> bool:
        """Return whether the underlying stream is an interactive terminal."""
        try:
            return bool(self.stream.isatty())
        except (AttributeError, OSError, ValueError):
            return False

    def write(self, text: str, *, flush: bool = False) -> bool:
        """Write ``text`` as one atomic unit.

        Args:
            text (str): The already rendered text, including line terminators.
            flush (bool): Flush the stream after writing.

        Returns:
            bool: True on success, False if the write failed (see `last_error`).
        """
        with self._lock:
            try:
                # color=True: styling is decided by the formatter, never stripped here
                click.echo(text, file=self.stream, nl=False, color=True)
                if flush:
                    self.stream.flush()
            except (OSError, ValueError) as exc:
                self._record(exc, "write")
                return False
        return True

    def flush(self) -> bool:
        """Flush the underlying stream; failures are recorded, not raised."""
        with self._lock:
            try:
                self.stream.flush()
            except (OSError, ValueError) as exc:
                self._record(exc, "flush")
                return False
        return True

    def clear_error(self) -> None:
        """Forget the last recorded failure."""
        with self._lock:
            self.last_error = None

    def _record(self, exc: BaseException, action: str) -> None:
        self.last_error = SinkWriteError(f"Cannot {action} output to {self!r}: {exc}", exc)
        logger.debug("Swallowed output %s failure on %r: %s", action, self, exc)


_STDOUT_TARGET = OutputTarget()
