# topmark:header:start
#
#   project      : GenBelt
#   file         : version.py
#   file_relpath : src/genbelt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt `version` command.

Prints the GenBelt version installed in the active Python environment.
"""

from __future__ import annotations

import click

from genbelt.cli.cmd_common import get_console, get_effective_verbosity
from genbelt.constants import GENBELT_VERSION


@click.command(
    name="version",
    help="Show the current version of GenBelt.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of GenBelt."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("GenBelt version:", bold=True, underline=True))
        console.print(f"    {console.styled(GENBELT_VERSION, bold=True)}")
    else:
        console.print(console.styled(GENBELT_VERSION, bold=True))
