# topmark:header:start
#
#   project      : GenBelt
#   file         : __init__.py
#   file_relpath : src/genbelt/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing rendering helpers: generated-text formatting and terminal colors."""

from __future__ import annotations

from genbelt.rendering.colors import TermColor
from genbelt.rendering.text import TextFormatter, indent, make_comment, process_header

__all__ = [
    "TermColor",
    "TextFormatter",
    "indent",
    "make_comment",
    "process_header",
]
