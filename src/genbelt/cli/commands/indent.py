# topmark:header:start
#
#   project      : GenBelt
#   file         : indent.py
#   file_relpath : src/genbelt/cli/commands/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt `indent` command.

Indents text from a file (or STDIN) using the configured indentation unit.
"""

from __future__ import annotations

from typing import IO

import click

from genbelt.cli.cmd_common import get_config, get_console, read_text_input
from genbelt.rendering.text import TextFormatter


@click.command(
    name="indent",
    help="Indent text read from INPUT (default: STDIN) by LEVEL indentation units.",
)
@click.argument("input_file", metavar="INPUT", type=click.File("r"), default="-")
@click.option(
    "--level",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Number of indentation levels.",
)
@click.pass_context
def indent_command(ctx: click.Context, input_file: IO[str], level: int) -> None:
    """Indent the input text."""
    formatter = TextFormatter.from_config(get_config(ctx))
    get_console(ctx).print(formatter.indent(read_text_input(input_file), level))
