# topmark:header:start
#
#   project      : polyfmt
#   file         : errors.py
#   file_relpath : src/polyfmt/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by polyfmt.

Only configuration mistakes surface to callers:

- `FormatParseError` is raised when a format name cannot be parsed. Parse formats
  at startup (CLI flags, environment, config files) so the failure is immediate.
- `ConstructionError` is raised for invalid `Options` values.

`SinkWriteError` is never raised from a print call. Output targets record it as
their `last_error` so callers may inspect it, but a failing write must not abort
the program that is trying to report something.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class PolyfmtError(Exception):
    """Base class for all polyfmt errors."""


class FormatParseError(PolyfmtError, ValueError):
    """A string could not be parsed into a `Format`.

    Attributes:
        token (str): The offending input, as given by the caller.
        choices (tuple[str, ...]): The accepted format names.
    """

    def __init__(self, token: str, choices: Iterable[str]) -> None:
        self.token = token
        self.choices = tuple(choices)
        super().__init__(f"Invalid format '{token}'. Must be one of: {', '.join(self.choices)}")


class ConstructionError(PolyfmtError):
    """Options or backend prerequisites are invalid."""


class SinkWriteError(PolyfmtError):
    """Writing to an output target failed.

    Attributes:
        original (BaseException | None): The underlying exception, if any.
    """

    def __init__(self, message: str, original: BaseException | None = None) -> None:
        super().__init__(message)
        self.original = original
