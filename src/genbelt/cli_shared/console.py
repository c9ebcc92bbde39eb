# topmark:header:start
#
#   project      : GenBelt
#   file         : console.py
#   file_relpath : src/genbelt/cli_shared/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides `ClickConsole`, the process-wide default console, and
`out`, the status-line reporter used by the emitters. Use these for messages
intended for end users, while reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

import click

from genbelt.cli_shared.color import default_color_enabled
from genbelt.cli_shared.console_api import ConsoleLike
from genbelt.rendering.text import join_lines

if TYPE_CHECKING:
    from genbelt.rendering.colors import TermColor
    from genbelt.rendering.text import TextBlock


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, ANSI codes are written as-is.
            Otherwise Click strips them and all output is plain text.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by click.style
                (``fg``, ``bold``, ``underline``, ...).

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


_default_console: ConsoleLike | None = None


def get_default_console() -> ConsoleLike:
    """Return the process console, creating it on first use.

    Color is on unless `NO_COLOR` disables it, whether or not stdout is a TTY.
    """
    global _default_console
    if _default_console is None:
        _default_console = ClickConsole(
            enable_color=default_color_enabled(),
        )
    return _default_console


def set_default_console(console: ConsoleLike | None) -> None:
    """Replace the process console (``None`` restores lazy creation)."""
    global _default_console
    _default_console = console


def out(
    text: TextBlock,
    color: TermColor | None = None,
    *,
    console: ConsoleLike | None = None,
) -> None:
    """Write a status line (or several joined lines) to stdout.

    Args:
        text (TextBlock): A string or a sequence of lines (joined with newlines).
        color (TermColor | None): Optional color wrapped around the whole text.
        console (ConsoleLike | None): Target console; defaults to the process console.
    """
    message = join_lines(text)
    if color is not None:
        message = color.wrap(message)
    (console or get_default_console()).print(message)
