# topmark:header:start
#
#   project      : GenBelt
#   file         : colors.py
#   file_relpath : src/genbelt/rendering/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal colors used for console status lines."""

from __future__ import annotations

from enum import Enum


class TermColor(str, Enum):
    """Fixed ANSI escape sequences for status output.

    Attributes:
        GREEN: Success messages (e.g. a generated file).
        RED: Failures.
        YELLOW: Warnings.
        DEFAULT: Reset to the terminal's default style.
    """

    GREEN = "\x1b[32m"
    RED = "\x1b[31m"
    YELLOW = "\x1b[33m"
    DEFAULT = "\x1b[0m"

    def __str__(self) -> str:
        return self.value

    def wrap(self, text: str) -> str:
        """Return ``text`` in this color followed by a reset sequence."""
        return f"{self.value}{text}{TermColor.DEFAULT.value}"
