# topmark:header:start
#
#   project      : polyfmt
#   file         : kinds.py
#   file_relpath : src/polyfmt/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semantic message kinds and their visual treatment.

`MessageKind` is a ``str`` enum whose *value* is the stable machine label used
by the Json formatter (``"info"``, ``"error"``, ...). The glyph and the
`click.style` keyword arguments used by textual formatters live on separate
attributes, so Enum semantics (hashing, equality, ``repr``) stay intact.

Example:
    ```python
    MessageKind.ERROR.value               # 'error'
    MessageKind.ERROR.glyph               # 'x'
    MessageKind.ERROR.styled_glyph(True)  # red 'x'
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import click


class MessageKind(str, Enum):
    """Kinds of messages a formatter can print."""

    glyph: str
    style: dict[str, Any]

    def __new__(cls, label: str, glyph: str, style: dict[str, Any]) -> MessageKind:
        """Construct a kind member.

        Args:
            label (str): Stable machine label, stored as the enum value.
            glyph (str): Prefix printed by textual formatters (may be empty).
            style (dict[str, Any]): Keyword arguments for `click.style`.

        Returns:
            MessageKind: The newly constructed member.
        """
        obj: MessageKind = str.__new__(cls, label)
        obj._value_ = label
        obj.glyph = glyph
        obj.style = style
        return obj

    INFO = ("info", "", {})
    ERROR = ("error", "x", {"fg": "red"})
    SUCCESS = ("success", "✓", {"fg": "green"})
    WARNING = ("warning", "!!", {"fg": "yellow"})
    DEBUG = ("debug", "[debug]", {"dim": True})
    QUESTION = ("question", "?", {"fg": "magenta"})

    def styled_glyph(self, color: bool) -> str:
        """Return the glyph, styled when ``color`` is enabled."""
        if not color or not self.glyph:
            return self.glyph
        return click.style(self.glyph, **self.style)


def styled(text: str, color: bool, **style_kwargs: Any) -> str:
    """Return ``text`` styled with `click.style`, or unchanged if color is off."""
    if not color:
        return text
    return click.style(text, **style_kwargs)
