# topmark:header:start
#
#   project      : polyfmt
#   file         : silent.py
#   file_relpath : src/polyfmt/formatters/silent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Silent formatter: accepts every call and writes nothing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from polyfmt.formats import Format
from polyfmt.formatters.base import Formatter

if TYPE_CHECKING:
    from polyfmt.formatters.base import ProgressHandle
    from polyfmt.kinds import MessageKind


class SilentFormatter(Formatter):
    """Formatter that prints nothing; `question` answers ``""``."""

    format = Format.SILENT

    def _print(self, msg: object) -> None:
        pass

    def _message(self, kind: MessageKind, msg: object) -> None:
        pass

    def _question(self, msg: object) -> str:
        return ""

    def _spacer(self) -> None:
        pass

    def _table(self, headers: list[str], rows: list[list[Any]]) -> None:
        pass

    def _progress_start(self, handle: ProgressHandle) -> None:
        pass

    def _progress_update(self, handle: ProgressHandle) -> None:
        pass

    def _progress_finish(self, handle: ProgressHandle, message: str) -> None:
        pass
