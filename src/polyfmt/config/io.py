# topmark:header:start
#
#   project      : polyfmt
#   file         : io.py
#   file_relpath : src/polyfmt/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load formatter configuration from TOML files and the environment.

Configuration lives in a ``[polyfmt]`` table of ``polyfmt.toml`` or in
``[tool.polyfmt]`` of ``pyproject.toml``:

```toml
[tool.polyfmt]
format = "tree"
debug = true
max-line-length = 100   # false disables wrapping
padding = 2
color = "never"
```

Parsing is done with `tomlkit`. Unreadable or malformed files are logged and
treated as empty; unknown keys and ill-typed values are logged and ignored. An
unknown ``format`` is a configuration mistake and raises `FormatParseError`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from polyfmt.color import ColorMode
from polyfmt.config.keys import CONFIG_FILE_NAMES, FORMAT_ENV, Toml
from polyfmt.config.logging import get_logger
from polyfmt.formats import Format
from polyfmt.options import Options

if TYPE_CHECKING:
    from polyfmt.config.logging import PolyfmtLogger

TomlTable = dict[str, Any]

logger: PolyfmtLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content; empty on failure.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_polyfmt_table(data: TomlTable, path: Path) -> TomlTable:
    """Return the polyfmt table of a parsed document.

    ``pyproject.toml`` keeps it under ``[tool.polyfmt]``; any other file under
    a top-level ``[polyfmt]`` table.
    """
    table: Any
    if path.name == "pyproject.toml":
        tool: Any = data.get(Toml.SECTION_TOOL, {})
        if not isinstance(tool, dict):
            logger.warning("Ignoring non-table [%s] in %s", Toml.SECTION_TOOL, path)
            return {}
        table = tool.get(Toml.SECTION_POLYFMT, {})
    else:
        table = data.get(Toml.SECTION_POLYFMT, {})
    if not isinstance(table, dict):
        logger.warning("Ignoring non-table [%s] in %s", Toml.SECTION_POLYFMT, path)
        return {}
    return cast("TomlTable", table)


def load_options_dict(path: Path) -> TomlTable:
    """Load the polyfmt table from ``path`` (empty when absent or unreadable)."""
    return extract_polyfmt_table(load_toml_dict(path), path)


def discover_config(start: Path | None = None) -> Path | None:
    """Return the first configuration file found in ``start`` (default: cwd).

    ``polyfmt.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` without
    a ``[tool.polyfmt]`` table is skipped.
    """
    directory: Path = start if start is not None else Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate: Path = directory / name
        if not candidate.is_file():
            continue
        if name == "pyproject.toml" and not load_options_dict(candidate):
            continue
        logger.debug("Using configuration file %s", candidate)
        return candidate
    return None


def options_from_dict(
    table: TomlTable,
    base: Options | None = None,
) -> tuple[Format | None, Options]:
    """Build a format and `Options` from a polyfmt configuration table.

    Args:
        table (TomlTable): The ``[polyfmt]`` table.
        base (Options | None): Options to start from; defaults to ``Options()``.

    Returns:
        tuple[Format | None, Options]: The configured format (None when the table
        has no ``format`` key) and the updated options.

    Raises:
        FormatParseError: If ``format`` names no known format.
        ConstructionError: If a numeric value is out of range.
    """
    options: Options = base if base is not None else Options()
    output_format: Format | None = None

    for key in sorted(set(table) - Toml.known_keys()):
        logger.warning("Ignoring unknown configuration key '%s'", key)

    raw_format: Any = table.get(Toml.KEY_FORMAT)
    if raw_format is not None:
        output_format = Format.parse(str(raw_format))

    debug: Any = table.get(Toml.KEY_DEBUG)
    if isinstance(debug, bool):
        options = options.with_debug(debug)
    elif debug is not None:
        logger.warning("Ignoring non-boolean '%s': %r", Toml.KEY_DEBUG, debug)

    max_line_length: Any = table.get(Toml.KEY_MAX_LINE_LENGTH)
    if max_line_length is False:
        options = options.with_max_line_length(None)
    elif isinstance(max_line_length, int) and not isinstance(max_line_length, bool):
        options = options.with_max_line_length(max_line_length)
    elif max_line_length is not None:
        logger.warning(
            "Ignoring invalid '%s': %r", Toml.KEY_MAX_LINE_LENGTH, max_line_length
        )

    padding: Any = table.get(Toml.KEY_PADDING)
    if isinstance(padding, int) and not isinstance(padding, bool):
        options = options.with_padding(padding)
    elif padding is not None:
        logger.warning("Ignoring non-integer '%s': %r", Toml.KEY_PADDING, padding)

    color: Any = table.get(Toml.KEY_COLOR)
    if color is not None:
        try:
            options = options.with_color(ColorMode(str(color).lower()))
        except ValueError:
            logger.warning("Ignoring invalid '%s': %r", Toml.KEY_COLOR, color)

    return output_format, options


def load_options(
    path: Path | None = None,
    base: Options | None = None,
) -> tuple[Format | None, Options]:
    """Load a format and `Options` from ``path`` or a discovered configuration file."""
    config_path: Path | None = path if path is not None else discover_config()
    if config_path is None:
        return None, base if base is not None else Options()
    return options_from_dict(load_options_dict(config_path), base)


def resolve_format(
    requested: Format | str | None = None,
    configured: Format | None = None,
) -> Format:
    """Decide which format to use.

    Precedence: ``requested`` (e.g. a CLI flag), then the ``POLYFMT_FORMAT``
    environment variable, then ``configured``, then ``Format.PLAIN``.

    Raises:
        FormatParseError: If ``requested`` or ``POLYFMT_FORMAT`` names no format.
    """
    if isinstance(requested, Format):
        return requested
    if requested:
        return Format.parse(requested)
    env_value: str | None = os.getenv(FORMAT_ENV)
    if env_value:
        logger.debug("Format %r selected by %s", env_value, FORMAT_ENV)
        return Format.parse(env_value)
    if configured is not None:
        return configured
    return Format.PLAIN
