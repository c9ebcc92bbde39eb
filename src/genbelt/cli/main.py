# topmark:header:start
#
#   project      : GenBelt
#   file         : main.py
#   file_relpath : src/genbelt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt command-line interface.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``
  (console, verbosity, configuration).
- The group's console also becomes the process console, so library calls
  made by commands report through it.
"""

from __future__ import annotations

from pathlib import Path

import click

from genbelt.cli.commands.clean import clean_command
from genbelt.cli.commands.comment import comment_command
from genbelt.cli.commands.indent import indent_command
from genbelt.cli.commands.mkdir import mkdir_command
from genbelt.cli.commands.version import version_command
from genbelt.cli.errors import GenbeltConfigError
from genbelt.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from genbelt.cli_shared.color import ColorMode, default_color_enabled, resolve_color_mode
from genbelt.cli_shared.console import ClickConsole, set_default_console
from genbelt.config import ConfigError, load_config
from genbelt.config.logging import configure_logging, get_logger

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, console, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit configuration file from ``--config``.

    Raises:
        GenbeltConfigError: If the configuration cannot be loaded.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    ctx.obj["log_level"] = configure_logging(ctx.obj["verbosity_level"])

    if no_color:
        enable_color = False
    elif color_mode is None:
        enable_color = default_color_enabled()
    else:
        enable_color = resolve_color_mode(color_mode_override=ColorMode(color_mode))
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console
    set_default_console(console)
    ctx.call_on_close(lambda: set_default_console(None))

    try:
        ctx.obj["config"] = load_config(config_path)
    except ConfigError as exc:
        raise GenbeltConfigError(str(exc)) from exc
    logger.debug("Effective configuration: %s", ctx.obj["config"].to_dict())


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="GenBelt: filesystem and text helpers for code generators.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (genbelt.toml or pyproject.toml). Discovered when omitted.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the GenBelt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(version_command)
cli.add_command(mkdir_command)
cli.add_command(clean_command)
cli.add_command(indent_command)
cli.add_command(comment_command)

if __name__ == "__main__":
    cli()
