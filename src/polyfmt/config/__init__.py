# topmark:header:start
#
#   project      : polyfmt
#   file         : __init__.py
#   file_relpath : src/polyfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration sources and diagnostics logging for polyfmt.

Public modules:
    - polyfmt.config.io
    - polyfmt.config.logging
"""

from __future__ import annotations
