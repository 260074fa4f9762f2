# topmark:header:start
#
#   project      : polyfmt
#   file         : tree.py
#   file_relpath : src/polyfmt/formatters/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree formatter.

Humanized text with box-drawing graphics on the left hand side. Each message is
a node; nesting (driven by `Formatter.indent`) lengthens the node connector:

```text
┌─ Deploying
├── building image
│   using cache from 2 days ago
├─ ✓ deployed
┊
```

The first node of a formatter opens the tree with ``┌─``; later nodes use
``├─``. Continuation lines of a wrapped message start with ``│ `` and are
aligned under the message text. An empty ``println`` draws a bare ``│ ``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from polyfmt.formats import Format
from polyfmt.formatters.plain import PlainFormatter, layout_table
from polyfmt.indentation import current_depth
from polyfmt.kinds import MessageKind, styled
from polyfmt.message import render_text
from polyfmt.wrap import wrap_text

if TYPE_CHECKING:
    from polyfmt.options import Options

FIRST_NODE: str = "┌─"
NODE: str = "├─"
DEPTH: str = "─"
BRANCH: str = "│ "
SPACER: str = "┊"


class TreeFormatter(PlainFormatter):
    """Formatter drawing messages as nodes of a tree."""

    format = Format.TREE

    def __init__(self, options: Options) -> None:
        super().__init__(options)
        self._header_printed: bool = False

    def _graphic(self, text: str) -> str:
        return styled(text, self.color, fg="magenta")

    def _render_block(self, kind: MessageKind, text: str, *, terminator: str = "\n") -> str:
        depth: int = current_depth()
        pad: str = " " * self.options.padding
        prefix_width: int = len(kind.glyph) + 1 if kind.glyph else 0
        # connector + depth dashes + one space, then the glyph
        text_column: int = len(NODE) + depth + 1 + prefix_width
        lines: list[str] = wrap_text(
            text,
            indent=self.options.padding + text_column,
            max_line_length=self.options.max_line_length,
        )
        lead: str = "" if self._at_line_start else "\n"

        if not lines or (len(lines) == 1 and not lines[0] and kind is MessageKind.INFO):
            return f"{lead}{pad}{self._graphic(BRANCH)}{terminator}"

        connector: str = NODE if self._header_printed else FIRST_NODE
        self._header_printed = True
        head: str = f"{kind.styled_glyph(self.color)} " if kind.glyph else ""
        rendered: list[str] = [
            f"{pad}{self._graphic(connector + DEPTH * depth)} {head}{lines[0]}"
        ]
        continuation: str = f"{pad}{self._graphic(BRANCH)}{' ' * (text_column - len(BRANCH))}"
        rendered.extend(f"{continuation}{line}" for line in lines[1:])
        return lead + "\n".join(rendered) + terminator

    def _print(self, msg: object) -> None:
        text: str = render_text(msg)
        if not text:
            return
        branch: str = " " * self.options.padding + self._graphic(BRANCH)
        chunks: list[str] = []
        at_line_start: bool = self._at_line_start
        for segment in text.splitlines(keepends=True):
            if at_line_start and segment.strip("\r\n"):
                chunks.append(branch)
            chunks.append(segment)
            at_line_start = segment.endswith("\n")
        self._emit("".join(chunks))

    def _spacer(self) -> None:
        lead: str = "" if self._at_line_start else "\n"
        self._emit(f"{lead}{' ' * self.options.padding}{self._graphic(SPACER)}\n")

    def _table(self, headers: list[str], rows: list[list[Any]]) -> None:
        if not headers:
            return
        header, *body = layout_table(headers, rows)
        self._emit(self._render_block(MessageKind.INFO, header))
        gap: str = " " * (len(NODE) + current_depth() + 1 - len(BRANCH))
        continuation: str = f"{' ' * self.options.padding}{self._graphic(BRANCH)}{gap}"
        self._emit("".join(f"{continuation}{line}\n" for line in body))
