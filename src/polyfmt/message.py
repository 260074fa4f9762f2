# topmark:header:start
#
#   project      : polyfmt
#   file         : message.py
#   file_relpath : src/polyfmt/message.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message model: one value, two renderings.

Anything passed to a print call must render both as text (for Plain, Tree and
Spinner) and as a JSON-compatible structure (for Json), because the caller does
not know which backend is active.

- Text rendering is ``str(value)``.
- Structured rendering uses `render_structured`, which understands JSON scalars,
  mappings, sequences, sets, dataclasses, enums, paths and any object that
  implements the `Structured` protocol (``to_structured()``).
- NaN and infinite floats have no JSON spelling and render as text (``"nan"``,
  ``"inf"``, ``"-inf"``).

Example:
    ```python
    @dataclass
    class Deployed:
        service: str
        replicas: int

        def __str__(self) -> str:
            return f"{self.service} is running {self.replicas} replicas"

    fmt.success(Deployed("api", 3))
    # Plain: ✓ api is running 3 replicas
    # Json:  {"label": "success", "data": {"service": "api", "replicas": 3}}
    ```
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any, Protocol, runtime_checkable

from polyfmt.config.logging import get_logger

logger = get_logger(__name__)


class Displayable(Protocol):
    """Anything with a text rendering; see `Structured` for the JSON side."""

    def __str__(self) -> str:
        """Return the human-readable rendering."""
        ...


@runtime_checkable
class Structured(Protocol):
    """Values that provide their own JSON-compatible representation."""

    def to_structured(self) -> Any:
        """Return a value made of dicts, lists and JSON scalars."""
        ...


def render_text(message: object) -> str:
    """Return the text rendering of ``message``."""
    if message is None:
        return ""
    return str(message)


def render_structured(message: object) -> Any:
    """Return a JSON-compatible rendering of ``message``.

    Values with no structured form fall back to their text rendering.

    Args:
        message (object): The value to convert.

    Returns:
        Any: Dicts (with string keys), lists and JSON scalars only.
    """
    if isinstance(message, Structured):
        return render_structured(message.to_structured())
    if isinstance(message, Enum):
        return render_structured(message.value)
    if isinstance(message, float) and not math.isfinite(message):
        return render_text(message)
    if message is None or isinstance(message, (str, int, float, bool)):
        return message
    if dataclasses.is_dataclass(message) and not isinstance(message, type):
        return {
            f.name: render_structured(getattr(message, f.name))
            for f in dataclasses.fields(message)
        }
    if isinstance(message, Mapping):
        return {str(key): render_structured(value) for key, value in message.items()}
    if isinstance(message, (list, tuple)):
        return [render_structured(item) for item in message]
    if isinstance(message, (set, frozenset)):
        return sorted((render_structured(item) for item in message), key=repr)
    if isinstance(message, PurePath):
        return str(message)

    logger.debug("No structured form for %s; using its text rendering", type(message).__name__)
    return render_text(message)
