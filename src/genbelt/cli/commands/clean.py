# topmark:header:start
#
#   project      : GenBelt
#   file         : clean.py
#   file_relpath : src/genbelt/cli/commands/clean.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt `clean` command.

Empties output directories before a new generation run.
"""

from __future__ import annotations

import click

from genbelt.cli.cmd_common import get_console, get_effective_verbosity
from genbelt.cli.errors import error_from_os
from genbelt.cli_shared.console import out
from genbelt.rendering.colors import TermColor
from genbelt.utils.fs import empty_dir


@click.command(
    name="clean",
    help="Delete the contents of directories. Missing directories are ignored.",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.option(
    "--remove-self",
    is_flag=True,
    default=False,
    help="Also remove the directories themselves.",
)
@click.pass_context
def clean_command(ctx: click.Context, paths: tuple[str, ...], remove_self: bool) -> None:
    """Empty (or remove) each directory in ``paths``."""
    console = get_console(ctx)
    for path in paths:
        try:
            empty_dir(path, remove_self=remove_self)
        except OSError as exc:
            raise error_from_os(exc) from exc
        if get_effective_verbosity(ctx) >= 0:
            verb = "removed" if remove_self else "emptied"
            out(f"{path} {verb}", TermColor.GREEN, console=console)
