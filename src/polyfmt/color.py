# topmark:header:start
#
#   project      : polyfmt
#   file         : color.py
#   file_relpath : src/polyfmt/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for formatter output.

Formatters decide once, at construction time, whether they emit ANSI styles.
The decision combines the caller's intent (`ColorMode`), the output format,
the ``FORCE_COLOR``/``NO_COLOR`` environment variables and the TTY status of
the output target. Later changes to the environment do not affect an already
constructed formatter.
"""

from __future__ import annotations

import os
from enum import Enum

from polyfmt.config.logging import get_logger
from polyfmt.formats import Format

logger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (the output target is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode: ColorMode,
    output_format: Format,
    isatty: bool,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Colorless formats**: ``JSON`` and ``SILENT`` never use color.
        2. **Explicit mode**: ``ALWAYS`` → True; ``NEVER`` → False.
        3. **Environment**:
            - ``NO_COLOR`` (set to any value, even empty) → False
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
        4. **Auto**: follow ``isatty``.

    ``NO_COLOR`` therefore disables color in every backend unless the caller asks
    for ``ColorMode.ALWAYS`` explicitly (a CLI ``--color always`` flag).

    Args:
        color_mode (ColorMode): Caller intent.
        output_format (Format): Format of the formatter being constructed.
        isatty (bool): Whether the output target is an interactive terminal.

    Returns:
        bool: True if ANSI styles should be emitted.

    Examples:
        >>> resolve_color_mode(color_mode=ColorMode.NEVER, output_format=Format.PLAIN, isatty=True)
        False
        >>> resolve_color_mode(color_mode=ColorMode.ALWAYS, output_format=Format.JSON, isatty=True)
        False
    """
    if output_format in (Format.JSON, Format.SILENT):
        return False

    if color_mode == ColorMode.ALWAYS:
        return True
    if color_mode == ColorMode.NEVER:
        return False

    if os.getenv("NO_COLOR") is not None:
        logger.trace("NO_COLOR is set; disabling color for %s output", output_format)
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True

    return isatty
