# topmark:header:start
#
#   project      : polyfmt
#   file         : registry.py
#   file_relpath : src/polyfmt/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide formatter slot.

The registry holds the formatter used by the `polyfmt.facade` functions. It is
shared: `get_global_formatter` returns the installed instance itself, not a copy.

Notes:
    * The slot is lazily filled with a Plain formatter built from default
      `Options` on first access when nothing was installed.
    * Replacing the slot does not finish the previous formatter. It is released
      like any other object once the caller drops its last reference (a Spinner
      formatter stops its redraw thread when collected).
    * State is process-local and guarded by an `RLock`.

Example:
    ```python
    from polyfmt import Format, new, set_global_formatter
    import polyfmt

    set_global_formatter(new(Format.TREE))
    polyfmt.println("hello")
    ```
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from polyfmt.config.logging import get_logger

if TYPE_CHECKING:
    from polyfmt.formatters.base import Formatter

logger = get_logger(__name__)


class FormatterRegistry:
    """Single guarded slot holding the current global formatter."""

    _lock = RLock()
    _current: Formatter | None = None

    @classmethod
    def lock(cls) -> RLock:
        """Return the lock guarding the slot."""
        return cls._lock

    @classmethod
    def get(cls) -> Formatter:
        """Return the current formatter, installing the default one if needed."""
        with cls._lock:
            if cls._current is None:
                from polyfmt.factory import new
                from polyfmt.formats import Format

                cls._current = new(Format.PLAIN)
                logger.trace("Installed default global formatter %r", cls._current)
            return cls._current

    @classmethod
    def set(cls, formatter: Formatter) -> Formatter | None:
        """Install ``formatter`` and return the previous occupant (if any)."""
        with cls._lock:
            previous: Formatter | None = cls._current
            cls._current = formatter
            logger.trace("Global formatter %r replaced by %r", previous, formatter)
            return previous

    @classmethod
    def clear(cls) -> Formatter | None:
        """Empty the slot and return the previous occupant.

        Notes:
            Intended for test scaffolding; the next `get` installs the default.
        """
        with cls._lock:
            previous: Formatter | None = cls._current
            cls._current = None
            return previous


def get_global_formatter() -> Formatter:
    """Return the shared global formatter."""
    return FormatterRegistry.get()


def set_global_formatter(formatter: Formatter) -> Formatter | None:
    """Replace the global formatter.

    Args:
        formatter (Formatter): The formatter the facade functions should use.

    Returns:
        Formatter | None: The previously installed formatter, so callers can
        `finish` it or restore it later.
    """
    return FormatterRegistry.set(formatter)
