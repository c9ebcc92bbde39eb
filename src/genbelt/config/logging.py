# topmark:header:start
#
#   project      : GenBelt
#   file         : logging.py
#   file_relpath : src/genbelt/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic logging for GenBelt.

Adds a TRACE level below DEBUG (used for per-entry filesystem events), a
logger class exposing `.trace()`, and a chalk-colored formatter. The level
comes from GENBELT_LOG_LEVEL or, for CLI runs, from the -v / -q flags.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from genbelt.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class GenbeltLogger(logging.Logger):
    """Custom logger class for GenBelt with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(GenbeltLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Level used when neither GENBELT_LOG_LEVEL nor -v/-q say otherwise: config
# warnings (unknown keys) are shown, filesystem chatter is not.
DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}

# -v count -> level; anything above the last entry is TRACE.
_VERBOSITY_LEVELS: Final[tuple[int, ...]] = (DEFAULT_LOG_LEVEL, logging.INFO, logging.DEBUG)


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.ERROR:
            return chalk.red_bright(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        return chalk.blue(message)


def parse_log_level(value: str) -> int | None:
    """Parse a level name (``"trace"``, ``"DEBUG"``, ...) or a number.

    Args:
        value (str): Raw value, case-insensitive, surrounding blanks ignored.

    Returns:
        int | None: The numeric level, or None when ``value`` is not a level.
    """
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level requested by GENBELT_LOG_LEVEL, or None if unset or invalid."""
    val = os.environ.get(ENV_LOG_LEVEL)
    if not val:
        return None
    return parse_log_level(val)


def level_for_verbosity(verbosity: int) -> int:
    """Map the CLI verbosity to a logging level.

    ``0`` gives WARNING, ``1`` INFO, ``2`` DEBUG and ``3`` or more TRACE.
    Quiet runs (negative verbosity) only log errors.

    Args:
        verbosity (int): ``-v`` count, or minus the ``-q`` count.

    Returns:
        int: The logging level.
    """
    if verbosity < 0:
        return logging.ERROR
    if verbosity < len(_VERBOSITY_LEVELS):
        return _VERBOSITY_LEVELS[verbosity]
    return TRACE_LEVEL


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    Records go to stderr so they never mix with generated text printed on
    stdout. If ``level`` is None, GENBELT_LOG_LEVEL is consulted, then
    ``DEFAULT_LOG_LEVEL``.

    Args:
        level (int | None): Logging level.
        stream (TextIO | None): Destination stream; defaults to ``sys.stderr``.
    """
    if level is None:
        level = resolve_env_log_level() or DEFAULT_LOG_LEVEL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def configure_logging(verbosity: int = 0, *, stream: TextIO | None = None) -> int:
    """Set up logging for a CLI run.

    GENBELT_LOG_LEVEL takes precedence over the verbosity flags. An
    unrecognized value is reported once and otherwise ignored.

    Args:
        verbosity (int): Resolved ``-v`` / ``-q`` verbosity.
        stream (TextIO | None): Destination stream; defaults to ``sys.stderr``.

    Returns:
        int: The effective logging level.
    """
    raw = os.environ.get(ENV_LOG_LEVEL, "")
    env_level = parse_log_level(raw) if raw else None
    level = env_level if env_level is not None else level_for_verbosity(verbosity)
    setup_logging(level, stream=stream)
    if raw and env_level is None:
        get_logger(__name__).warning("Ignoring invalid %s value: %r", ENV_LOG_LEVEL, raw)
    return level


def get_logger(name: str) -> GenbeltLogger:
    """Retrieve a GenbeltLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        GenbeltLogger: A GenbeltLogger instance.
    """
    return cast("GenbeltLogger", logging.getLogger(name))
