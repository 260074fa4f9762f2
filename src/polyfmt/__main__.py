# topmark:header:start
#
#   project      : polyfmt
#   file         : __main__.py
#   file_relpath : src/polyfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point: ``python -m polyfmt`` runs the ``polyfmt-demo`` command."""

from __future__ import annotations

from polyfmt.cli.main import cli

if __name__ == "__main__":
    cli()
