# topmark:header:start
#
#   project      : GenBelt
#   file         : mkdir.py
#   file_relpath : src/genbelt/cli/commands/mkdir.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt `mkdir` command.

Creates output directories, including every missing parent.
"""

from __future__ import annotations

import click

from genbelt.cli.cmd_common import get_console, get_effective_verbosity
from genbelt.cli.errors import error_from_os
from genbelt.cli_shared.console import out
from genbelt.config.logging import get_logger
from genbelt.rendering.colors import TermColor
from genbelt.utils.fs import create_dir

logger = get_logger(__name__)


@click.command(
    name="mkdir",
    help="Create directories (and their missing parents). Existing directories are left as-is.",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.pass_context
def mkdir_command(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Create each directory in ``paths``."""
    console = get_console(ctx)
    for path in paths:
        try:
            create_dir(path)
        except OSError as exc:
            logger.debug("create_dir(%s) failed: %s", path, exc)
            raise error_from_os(exc) from exc
        if get_effective_verbosity(ctx) >= 0:
            out(f"{path} ready", TermColor.GREEN, console=console)
