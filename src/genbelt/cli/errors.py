# topmark:header:start
#
#   project      : GenBelt
#   file         : errors.py
#   file_relpath : src/genbelt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the GenBelt CLI.

The library layer raises plain `OSError` subclasses and
[`ConfigError`][genbelt.config.model.ConfigError]; commands convert them into
the exceptions below so that Click prints a single styled message and exits
with a sysexits-aligned code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from genbelt.cli_shared.exit_codes import ExitCode


class GenbeltError(click.ClickException):
    """Base class for all GenBelt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class GenbeltUsageError(GenbeltError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class GenbeltConfigError(GenbeltError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class GenbeltFileNotFoundError(GenbeltError):
    """Error when a path (or one of its parents) does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class GenbeltPermissionError(GenbeltError):
    """Error when permissions prevent reading or writing a path."""

    exit_code = ExitCode.PERMISSION_DENIED


class GenbeltIOError(GenbeltError):
    """Error for any other filesystem failure."""

    exit_code = ExitCode.IO_ERROR


def error_from_os(exc: OSError) -> GenbeltError:
    """Map a filesystem error raised by the library onto a CLI error.

    Args:
        exc (OSError): The error raised by a filesystem helper.

    Returns:
        GenbeltError: The CLI error carrying the matching exit code.
    """
    message = f"{exc.strerror or exc}: {exc.filename}" if exc.filename else str(exc)
    if isinstance(exc, PermissionError):
        return GenbeltPermissionError(message)
    if isinstance(exc, FileNotFoundError):
        return GenbeltFileNotFoundError(message)
    return GenbeltIOError(message)
