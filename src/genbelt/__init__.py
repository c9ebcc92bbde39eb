# topmark:header:start
#
#   project      : GenBelt
#   file         : __init__.py
#   file_relpath : src/genbelt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenBelt package.

GenBelt is the filesystem and text-formatting toolbelt used by code generators.
It prepares output directories, indents and comments generated text, renders
header banners from API descriptors, and writes generated files while
reporting progress on the console.
"""

from __future__ import annotations
