# topmark:header:start
#
#   project      : GenBelt
#   file         : __init__.py
#   file_relpath : src/genbelt/emit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emission of generated files."""

from __future__ import annotations

from genbelt.emit.writer import FileType, render_file, write_file

__all__ = [
    "FileType",
    "render_file",
    "write_file",
]
