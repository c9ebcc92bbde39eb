# topmark:header:start
#
#   project      : GenBelt
#   file         : comment.py
#   file_relpath : src/genbelt/cli/commands/comment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt `comment` command.

Wraps text from a file (or STDIN) in a ``/** ... */`` doc comment.
"""

from __future__ import annotations

from typing import IO

import click

from genbelt.cli.cmd_common import get_console, read_text_input
from genbelt.rendering.text import make_comment


@click.command(
    name="comment",
    help="Wrap text read from INPUT (default: STDIN) in a doc comment.",
)
@click.argument("input_file", metavar="INPUT", type=click.File("r"), default="-")
@click.pass_context
def comment_command(ctx: click.Context, input_file: IO[str]) -> None:
    """Print the input text as a comment block."""
    # The comment already ends with a newline (or is empty).
    get_console(ctx).print(make_comment(read_text_input(input_file)), nl=False)
