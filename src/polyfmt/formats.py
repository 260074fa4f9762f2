# topmark:header:start
#
#   project      : polyfmt
#   file         : formats.py
#   file_relpath : src/polyfmt/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output format vocabulary shared by every formatter.

`Format` is the identity tag of a backend. The factory selects a backend by
format, and the `only` filter compares the active backend's format against a
caller-supplied set.

Machine formats (``JSON``) are stable and colorless.
"""

from __future__ import annotations

from enum import Enum

from polyfmt.errors import FormatParseError


class Format(str, Enum):
    """Available output formats.

    Attributes:
        PLAIN: Humanized text without any other additions.
        TREE: Humanized text with tree box graphics on the left hand side.
        SPINNER: Humanized text with a live spinner on interactive terminals.
        JSON: Newline-delimited JSON, mainly suitable to be read by computers.
        SILENT: Prints nothing at all.
    """

    PLAIN = "plain"
    TREE = "tree"
    SPINNER = "spinner"
    JSON = "json"
    SILENT = "silent"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        """Return the accepted format names, in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, raw: str) -> Format:
        """Parse a format name, ignoring case and surrounding whitespace.

        Args:
            raw (str): The format name, e.g. ``"Plain"`` or ``"json"``.

        Returns:
            Format: The matching member.

        Raises:
            FormatParseError: If ``raw`` names no known format.
        """
        token: str = raw.strip().lower()
        for member in cls:
            if token in (member.value, member.name.lower()):
                return member
        raise FormatParseError(raw, cls.choices())


def is_machine_format(fmt: Format | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt is Format.JSON
