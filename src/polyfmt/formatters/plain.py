# topmark:header:start
#
#   project      : polyfmt
#   file         : plain.py
#   file_relpath : src/polyfmt/formatters/plain.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain text formatter.

Humanized text without any other additions: every call is rendered immediately,
wrapped to ``Options.max_line_length`` and written as one block to the output
target. Tagged messages get a (colored) glyph prefix, and their continuation
lines are aligned under the message text:

```text
x could not reach the registry at registry.example.com, retrying with
  the mirror configured in ~/.config/app.toml
```

`PlainFormatter` is also the rendering base of the Tree and Spinner backends,
which override the line layout (`_render_block`) and the write path (`_emit`).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from polyfmt.config.logging import get_logger
from polyfmt.formats import Format
from polyfmt.formatters.base import Formatter
from polyfmt.kinds import MessageKind, styled
from polyfmt.message import render_text
from polyfmt.wrap import wrap_text

if TYPE_CHECKING:
    from polyfmt.formatters.base import ProgressHandle
    from polyfmt.options import Options

logger = get_logger(__name__)

#: Separator between table columns.
COLUMN_GAP: str = "  "


def layout_table(headers: list[str], rows: list[list[Any]]) -> list[str]:
    """Lay out a table as aligned text lines.

    The result is the header line, a dash separator, then one line per row.
    Columns are left-aligned and separated by `COLUMN_GAP`; trailing
    whitespace is stripped. Missing cells render empty; extra cells are ignored.

    Args:
        headers (list[str]): Column headers.
        rows (list[list[Any]]): Row values, rendered with `render_text`.

    Returns:
        list[str]: The table lines, without terminators.
    """
    cells: list[list[str]] = [
        [render_text(row[i]) if i < len(row) else "" for i in range(len(headers))]
        for row in rows
    ]
    widths: list[int] = [
        max([len(header)] + [len(row[i]) for row in cells]) for i, header in enumerate(headers)
    ]

    def _line(values: list[str]) -> str:
        return COLUMN_GAP.join(value.ljust(width) for value, width in zip(values, widths)).rstrip()

    lines: list[str] = [_line(headers), _line(["-" * width for width in widths])]
    lines.extend(_line(row) for row in cells)
    return lines


class PlainFormatter(Formatter):
    """Formatter for humanized plain text."""

    format = Format.PLAIN

    def __init__(self, options: Options) -> None:
        super().__init__(options)
        # False after `print` left a line open
        self._at_line_start: bool = True

    # --- write path ---

    def _emit(self, text: str, *, flush: bool = False) -> None:
        """Write one rendered block to the output target."""
        if not text:
            return
        self.target.write(text, flush=flush)
        self._at_line_start = text.endswith("\n")

    # --- layout ---

    def _render_block(self, kind: MessageKind, text: str, *, terminator: str = "\n") -> str:
        """Render a message as wrapped, indented lines.

        Args:
            kind (MessageKind): The message kind (selects the glyph prefix).
            text (str): The message text.
            terminator (str): Appended after the last line.

        Returns:
            str: The rendered block, or ``""`` when there is no room to print.
        """
        indentation: int = self.indentation()
        prefix_width: int = len(kind.glyph) + 1 if kind.glyph else 0
        lines: list[str] = wrap_text(
            text,
            indent=indentation + prefix_width,
            max_line_length=self.options.max_line_length,
        )
        if not lines:
            return ""

        pad: str = " " * indentation
        head: str = f"{kind.styled_glyph(self.color)} " if kind.glyph else ""
        # continue an open line left by `print` instead of indenting again
        lead: str = pad if self._at_line_start else ""

        first: str = f"{lead}{head}{lines[0]}"
        rendered: list[str] = [first if first.strip() else ""]
        continuation: str = pad + " " * prefix_width
        rendered.extend(f"{continuation}{line}" if line else "" for line in lines[1:])
        return "\n".join(rendered) + terminator

    # --- rendering hooks ---

    def _print(self, msg: object) -> None:
        text: str = render_text(msg)
        if not text:
            return
        pad: str = " " * self.indentation()
        chunks: list[str] = []
        at_line_start: bool = self._at_line_start
        for segment in text.splitlines(keepends=True):
            if at_line_start and segment.strip("\r\n"):
                chunks.append(pad)
            chunks.append(segment)
            at_line_start = segment.endswith("\n")
        self._emit("".join(chunks))

    def _message(self, kind: MessageKind, msg: object) -> None:
        self._emit(self._render_block(kind, render_text(msg)))

    def _question(self, msg: object) -> str:
        self._emit(self._render_block(MessageKind.QUESTION, render_text(msg), terminator=" "))
        return self._read_answer()

    def _read_answer(self) -> str:
        """Flush the prompt and read one line from standard input."""
        self.target.flush()
        answer: str = sys.stdin.readline()
        # the user's Enter key ended the prompt line
        self._at_line_start = True
        return answer.strip()

    def _spacer(self) -> None:
        self._emit("\n" if self._at_line_start else "\n\n")

    def _table(self, headers: list[str], rows: list[list[Any]]) -> None:
        if not headers:
            logger.debug("Ignoring table without headers")
            return
        lines: list[str] = layout_table(headers, rows)
        lines[0] = styled(lines[0], self.color, bold=True)
        pad: str = " " * self.indentation()
        lead: str = "" if self._at_line_start else "\n"
        self._emit(lead + "".join(f"{pad}{line}\n" for line in lines))

    def _progress_start(self, handle: ProgressHandle) -> None:
        self._emit(self._render_block(MessageKind.INFO, handle.render()))

    def _progress_update(self, handle: ProgressHandle) -> None:
        # no live redraw: intermediate updates are not printed
        logger.trace("Progress update for %r: %s", handle.label, handle.render())

    def _progress_finish(self, handle: ProgressHandle, message: str) -> None:
        self._emit(self._render_block(MessageKind.SUCCESS, message))
