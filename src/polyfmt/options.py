# topmark:header:start
#
#   project      : polyfmt
#   file         : options.py
#   file_relpath : src/polyfmt/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter construction options.

`Options` is frozen. The ``with_*`` mutators return updated copies (via
`dataclasses.replace`), so chaining order does not matter and an `Options`
value already handed to a formatter can never change underneath it.

Example:
    ```python
    from polyfmt import Format, Options, new

    options = Options().with_debug(True).with_padding(1).with_max_line_length(60)
    fmt = new(Format.TREE, options)
    ```
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

from polyfmt.color import ColorMode
from polyfmt.errors import ConstructionError
from polyfmt.sink import OutputTarget

if TYPE_CHECKING:
    from typing import TextIO

DEFAULT_MAX_LINE_LENGTH: Final[int] = 80
MAX_PADDING: Final[int] = 65535


def detect_max_line_length() -> int:
    """Return the terminal width, or `DEFAULT_MAX_LINE_LENGTH` if undetectable."""
    columns: int = shutil.get_terminal_size(fallback=(DEFAULT_MAX_LINE_LENGTH, 24)).columns
    return columns if columns > 0 else DEFAULT_MAX_LINE_LENGTH


@dataclass(frozen=True)
class Options:
    """Configuration captured by every formatter at construction time.

    Attributes:
        debug (bool): Print `debug` messages. Off by default.
        max_line_length (int | None): Maximum characters per line, indentation
            included. Defaults to the terminal width at construction time;
            ``None`` disables wrapping.
        padding (int): Columns of left padding before any indentation (0..65535).
        output_target (OutputTarget): Destination shared by formatters built
            from these options. Defaults to standard output.
        color (ColorMode): Color intent, resolved once per formatter. With
            ``AUTO``, ``NO_COLOR`` in the environment disables color even when
            ``FORCE_COLOR`` is set; only ``ALWAYS`` overrides it.
    """

    debug: bool = False
    max_line_length: int | None = field(default_factory=detect_max_line_length)
    padding: int = 0
    output_target: OutputTarget = field(default_factory=OutputTarget.stdout)
    color: ColorMode = ColorMode.AUTO

    def __post_init__(self) -> None:
        if self.max_line_length is not None and self.max_line_length <= 0:
            raise ConstructionError(
                f"max_line_length must be positive, got {self.max_line_length}"
            )
        if not 0 <= self.padding <= MAX_PADDING:
            raise ConstructionError(f"padding must be within 0..{MAX_PADDING}, got {self.padding}")
        if not isinstance(self.output_target, OutputTarget):
            # Frozen dataclass: bypass __setattr__ to normalize raw streams
            object.__setattr__(self, "output_target", OutputTarget.coerce(self.output_target))

    def with_debug(self, debug: bool = True) -> Options:
        """Return a copy with debug printing turned on or off."""
        return replace(self, debug=debug)

    def with_max_line_length(self, max_line_length: int | None) -> Options:
        """Return a copy with a new maximum line length (``None`` disables wrapping)."""
        return replace(self, max_line_length=max_line_length)

    def with_padding(self, padding: int) -> Options:
        """Return a copy with a new left padding."""
        return replace(self, padding=padding)

    def with_custom_output_target(self, target: OutputTarget | TextIO) -> Options:
        """Return a copy writing to ``target`` instead of standard output.

        Args:
            target (OutputTarget | TextIO): Any writable text stream, or an
                existing `OutputTarget` to share with other formatters.

        Returns:
            Options: The updated options.
        """
        return replace(self, output_target=OutputTarget.coerce(target))

    def with_color(self, color: ColorMode) -> Options:
        """Return a copy with a new color intent."""
        return replace(self, color=color)
