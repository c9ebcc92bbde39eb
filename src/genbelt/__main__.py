# topmark:header:start
#
#   project      : GenBelt
#   file         : __main__.py
#   file_relpath : src/genbelt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running GenBelt via ``python -m genbelt``.

Delegates to :func:`genbelt.cli.main.cli`, the same entry point as the
``genbelt`` console script.
"""

from __future__ import annotations

from genbelt.cli.main import cli

if __name__ == "__main__":
    cli()
