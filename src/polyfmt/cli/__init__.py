# topmark:header:start
#
#   project      : polyfmt
#   file         : __init__.py
#   file_relpath : src/polyfmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line demo for polyfmt (``polyfmt-demo``).

Public modules:
    - polyfmt.cli.main
    - polyfmt.cli.options
    - polyfmt.cli.cli_types
    - polyfmt.cli.errors
"""

from __future__ import annotations
