# topmark:header:start
#
#   project      : polyfmt
#   file         : wrap.py
#   file_relpath : src/polyfmt/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line wrapping for textual formatters."""

from __future__ import annotations

import textwrap


def wrap_text(text: str, *, indent: int, max_line_length: int | None) -> list[str]:
    """Split ``text`` into lines that fit after ``indent`` columns.

    Explicit newlines are kept as line breaks; each paragraph is then wrapped on
    whitespace. Words longer than the available width are never split.

    Args:
        text (str): The message text.
        indent (int): Columns already taken by padding, indentation and prefixes.
        max_line_length (int | None): Maximum line length including ``indent``;
            ``None`` disables wrapping.

    Returns:
        list[str]: The wrapped lines, without indentation. Empty paragraphs
        yield empty lines. If ``indent`` leaves no room at all, the result
        is empty and nothing should be printed.
    """
    paragraphs: list[str] = text.splitlines() or [""]
    if max_line_length is None:
        return paragraphs

    width: int = max_line_length - indent
    if width <= 0:
        return []

    lines: list[str] = []
    for paragraph in paragraphs:
        if not paragraph.strip():
            lines.append("")
            continue
        lines.extend(
            textwrap.wrap(
                paragraph,
                width=width,
                break_long_words=False,
                break_on_hyphens=False,
            )
        )
    return lines
