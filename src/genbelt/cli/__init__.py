# topmark:header:start
#
#   project      : GenBelt
#   file         : __init__.py
#   file_relpath : src/genbelt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt CLI package.

This package groups the Click command definitions of the ``genbelt``
command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        genbelt = "genbelt.cli.main:cli"

All subcommands live in [`genbelt.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
