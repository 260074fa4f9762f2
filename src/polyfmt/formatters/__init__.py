# topmark:header:start
#
#   project      : polyfmt
#   file         : __init__.py
#   file_relpath : src/polyfmt/formatters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter backends, one per `polyfmt.formats.Format`."""

from __future__ import annotations

from polyfmt.formatters.base import Formatter, ProgressHandle
from polyfmt.formatters.json import JsonFormatter
from polyfmt.formatters.plain import PlainFormatter
from polyfmt.formatters.silent import SilentFormatter
from polyfmt.formatters.spinner import SpinnerFormatter, SpinnerState
from polyfmt.formatters.tree import TreeFormatter

__all__ = [
    "Formatter",
    "JsonFormatter",
    "PlainFormatter",
    "ProgressHandle",
    "SilentFormatter",
    "SpinnerFormatter",
    "SpinnerState",
    "TreeFormatter",
]
