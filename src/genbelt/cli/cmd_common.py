# topmark:header:start
#
#   project      : GenBelt
#   file         : cmd_common.py
#   file_relpath : src/genbelt/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

if TYPE_CHECKING:
    from genbelt.cli_shared.console_api import ConsoleLike
    from genbelt.config.model import GeneratorConfig


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console installed by the group callback."""
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> GeneratorConfig:
    """Return the configuration resolved by the group callback."""
    return ctx.obj["config"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (negative when quiet)."""
    return int(ctx.obj.get("verbosity_level", 0))


def read_text_input(stream: IO[str]) -> str:
    """Read a text block, dropping the single trailing newline of the last line."""
    text = stream.read()
    return text[:-1] if text.endswith("\n") else text
