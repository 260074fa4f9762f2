# topmark:header:start
#
#   project      : polyfmt
#   file         : indentation.py
#   file_relpath : src/polyfmt/indentation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide indentation scopes.

Indentation depth is a single counter shared by the whole process. Creating an
`IndentGuard` increments it; releasing the guard (explicitly, or by leaving its
``with`` block, including on exceptions) decrements it exactly once.

Notes:
    * Formatters read the depth when they render, not when a guard is created.
      A nested scope entered on one thread therefore also indents output printed
      by other threads while it is active. This is shared global state on
      purpose: indentation reflects the program's nesting, not a call stack.
    * The depth never drops below zero: it is the number of live guards.
    * State is guarded by an `RLock`.

Example:
    ```python
    fmt.println("deploying")
    with fmt.indent():
        fmt.println("building image")  # one level deeper
    fmt.println("done")  # back to the original level
    ```
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING, Final

from polyfmt.config.logging import get_logger

if TYPE_CHECKING:
    from types import TracebackType

logger = get_logger(__name__)

#: Columns added per indentation level by textual formatters.
INDENT_WIDTH: Final[int] = 2


class IndentationState:
    """Stack of live indentation guards; its size is the current depth."""

    _lock = RLock()
    _guards: list[IndentGuard] = []

    @classmethod
    def depth(cls) -> int:
        """Return the current nesting depth."""
        with cls._lock:
            return len(cls._guards)

    @classmethod
    def push(cls, guard: IndentGuard) -> int:
        """Register a new live guard and return the resulting depth."""
        with cls._lock:
            cls._guards.append(guard)
            return len(cls._guards)

    @classmethod
    def pop(cls, guard: IndentGuard) -> bool:
        """Unregister ``guard``; return False if it was not live."""
        with cls._lock:
            try:
                cls._guards.remove(guard)
            except ValueError:
                return False
            return True

    @classmethod
    def innermost(cls) -> IndentGuard | None:
        """Return the most recently created live guard, if any."""
        with cls._lock:
            return cls._guards[-1] if cls._guards else None

    @classmethod
    def reset(cls) -> int:
        """Release every live guard and return how many there were.

        Notes:
            Intended for test scaffolding and process teardown.
        """
        with cls._lock:
            count = len(cls._guards)
            for guard in cls._guards[:]:
                guard.release()
            return count


class IndentGuard:
    """Scope guard holding one level of indentation until released."""

    def __init__(self) -> None:
        self._released = False
        depth: int = IndentationState.push(self)
        logger.trace("Indentation increased to %d", depth)

    def __enter__(self) -> IndentGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    @property
    def active(self) -> bool:
        """True until the guard is released."""
        return not self._released

    def release(self) -> None:
        """Give the indentation level back; calling it again is a no-op."""
        if self._released:
            return
        self._released = True
        if IndentationState.pop(self):
            logger.trace("Indentation decreased to %d", IndentationState.depth())


def indent() -> IndentGuard:
    """Enter one more level of indentation."""
    return IndentGuard()


def outdent() -> bool:
    """Release the innermost live guard.

    Returns:
        bool: False when there was nothing to release (depth already 0).
    """
    guard: IndentGuard | None = IndentationState.innermost()
    if guard is None:
        return False
    guard.release()
    return True


def current_depth() -> int:
    """Return the current process-wide indentation depth."""
    return IndentationState.depth()
