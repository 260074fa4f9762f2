# topmark:header:start
#
#   project      : polyfmt
#   file         : keys.py
#   file_relpath : src/polyfmt/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for polyfmt configuration.

Keys defined here are external configuration API (``polyfmt.toml`` and
``[tool.polyfmt]`` in ``pyproject.toml``); renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by polyfmt configuration."""

    # pyproject.toml: [tool.polyfmt]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_POLYFMT: Final[str] = "polyfmt"

    KEY_FORMAT: Final[str] = "format"
    KEY_DEBUG: Final[str] = "debug"
    KEY_MAX_LINE_LENGTH: Final[str] = "max-line-length"
    KEY_PADDING: Final[str] = "padding"
    KEY_COLOR: Final[str] = "color"

    @classmethod
    def known_keys(cls) -> frozenset[str]:
        """Return the keys accepted inside the polyfmt table."""
        return frozenset(
            {
                cls.KEY_FORMAT,
                cls.KEY_DEBUG,
                cls.KEY_MAX_LINE_LENGTH,
                cls.KEY_PADDING,
                cls.KEY_COLOR,
            }
        )


#: Environment variable selecting the format when none is requested explicitly.
FORMAT_ENV: Final[str] = "POLYFMT_FORMAT"

#: File names probed by `polyfmt.config.io.discover_config`, in order.
CONFIG_FILE_NAMES: Final[tuple[str, ...]] = ("polyfmt.toml", "pyproject.toml")
