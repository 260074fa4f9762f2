# topmark:header:start
#
#   project      : polyfmt
#   file         : json.py
#   file_relpath : src/polyfmt/formatters/json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Newline-delimited JSON formatter.

Every call writes exactly one JSON value on its own line, UTF-8 encoded:

```text
{"label": "info", "data": "Deploying"}
{"label": "success", "data": {"service": "api", "replicas": 3}}
[{"a": 1, "b": 2}, {"a": 3, "b": 4}]
{"label": "progress", "data": {"label": "Uploading", "state": "started"}}
```

- Messages use the ``{"label": <kind>, "data": <structured message>}`` envelope,
  where ``data`` comes from `render_structured` (the text rendering is ignored).
- ``table`` writes a bare array of objects keyed by header.
- Indentation and padding do not affect the output; ``spacer`` writes nothing.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any, Callable

from polyfmt.config.logging import get_logger
from polyfmt.formats import Format
from polyfmt.formatters.base import Formatter
from polyfmt.kinds import MessageKind
from polyfmt.message import render_structured

if TYPE_CHECKING:
    from polyfmt.formatters.base import ProgressHandle

logger = get_logger(__name__)


def dumps_record(value: Any) -> str:
    """Serialize one wire value as a single JSON line (with terminator).

    Raises:
        ValueError: For NaN or infinite floats, which have no JSON spelling.
    """
    return json.dumps(value, ensure_ascii=False, allow_nan=False, default=str) + "\n"


class JsonFormatter(Formatter):
    """Formatter writing one JSON value per call."""

    format = Format.JSON

    def _write(self, build: Callable[[], Any]) -> None:
        # a value that cannot be converted still produces exactly one line
        try:
            line: str = dumps_record(build())
        except (TypeError, ValueError, RecursionError) as exc:
            logger.debug("Cannot serialize record: %s", exc)
            line = dumps_record(
                {"label": MessageKind.ERROR.value, "data": f"Error serializing to JSON: {exc}"}
            )
        self.target.write(line)

    def _record(self, label: str, msg: object) -> None:
        self._write(lambda: {"label": label, "data": render_structured(msg)})

    def _print(self, msg: object) -> None:
        self._record(MessageKind.INFO.value, msg)

    def _message(self, kind: MessageKind, msg: object) -> None:
        self._record(kind.value, msg)

    def _question(self, msg: object) -> str:
        self._record(MessageKind.QUESTION.value, msg)
        self.target.flush()
        return sys.stdin.readline().strip()

    def _spacer(self) -> None:
        pass

    def _table(self, headers: list[str], rows: list[list[Any]]) -> None:
        self._write(
            lambda: [
                {
                    header: render_structured(row[i]) if i < len(row) else None
                    for i, header in enumerate(headers)
                }
                for row in rows
            ]
        )

    def _progress_data(self, handle: ProgressHandle, state: str) -> dict[str, Any]:
        data: dict[str, Any] = {"label": handle.label, "state": state}
        if handle.fraction is not None:
            data["fraction"] = handle.fraction
        return data

    def _progress_start(self, handle: ProgressHandle) -> None:
        self._record("progress", self._progress_data(handle, "started"))

    def _progress_update(self, handle: ProgressHandle) -> None:
        logger.trace("Progress update for %r: %s", handle.label, handle.render())

    def _progress_finish(self, handle: ProgressHandle, message: str) -> None:
        data: dict[str, Any] = self._progress_data(handle, "finished")
        if message != handle.label:
            data["message"] = message
        self._record("progress", data)
