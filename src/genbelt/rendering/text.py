# topmark:header:start
#
#   project      : GenBelt
#   file         : text.py
#   file_relpath : src/genbelt/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text helpers for generated source: indentation, doc comments and header banners.

Every helper accepts either a single string with embedded newlines or a
sequence of lines, and returns a new string. Inputs are never mutated.

The indentation unit is not global state: it is carried by a
[`TextFormatter`][genbelt.rendering.text.TextFormatter], usually built from a
[`GeneratorConfig`][genbelt.config.model.GeneratorConfig].
"""

from __future__ import annotations

import copy
import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from genbelt.constants import DEFAULT_INDENTATION

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from genbelt.config.model import GeneratorConfig

TextBlock = Union[str, "Sequence[str]"]

_WORD_RE = re.compile(r"\w")


def join_lines(text: TextBlock) -> str:
    """Return ``text`` as a single newline-joined string."""
    if isinstance(text, str):
        return text
    return "\n".join(text)


def make_comment(text: TextBlock) -> str:
    """Wrap ``text`` in a ``/** ... */`` doc comment.

    A single line gives ``/** line */``; several lines give a block where empty
    lines become a bare `` *``. Empty input gives an empty string. The result
    ends with a newline unless it is empty.

    Args:
        text (TextBlock): A string (newline separated) or a sequence of lines.

    Returns:
        str: The comment, or ``""``.
    """
    lines = join_lines(text).split("\n")

    if len(lines) > 1:
        body = "\n".join(f" * {line}" if line else " *" for line in lines)
        return f"/**\n{body}\n */\n"
    if lines and lines[0]:
        return f"/** {lines[0]} */\n"
    return ""


def _scalar_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # Numbers, booleans and null read as they would in the serialized descriptor.
    return json.dumps(value)


def _header_lines(value: Any) -> Iterator[str]:
    """Yield the displayable lines of a descriptor value, depth first."""
    if isinstance(value, Mapping):
        for item in value.values():
            yield from _header_lines(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _header_lines(item)
    else:
        yield from _scalar_text(value).split("\n")


def process_header(descriptor: Mapping[str, Any], omit_version: bool = False) -> str:
    """Render the API descriptor as the header comment of generated files.

    Only ``info`` and the API path (``host`` followed by ``basePath``) are kept.
    Keys and structural punctuation are dropped: every scalar value becomes a
    comment line, and lines without a word character are discarded.

    Args:
        descriptor (Mapping[str, Any]): Parsed API descriptor with ``info``,
            ``host`` and an optional ``basePath``. Left untouched.
        omit_version (bool): If True, leave ``info.version`` out.

    Returns:
        str: The header comment (see [`make_comment`][genbelt.rendering.text.make_comment]).

    Example:
        >>> process_header({"info": {"title": "Pets"}, "host": "api.io", "basePath": "/v1"})
        '/**\\n * Pets\\n * api.io/v1\\n */\\n'
    """
    info = copy.deepcopy(dict(descriptor.get("info") or {}))
    if omit_version:
        info.pop("version", None)

    relevant = {
        "info": info,
        "path": (descriptor.get("host") or "") + (descriptor.get("basePath") or ""),
    }

    lines = [line for line in _header_lines(relevant) if _WORD_RE.search(line)]
    return make_comment(lines)


@dataclass(frozen=True)
class TextFormatter:
    """Indentation-aware text formatter.

    Attributes:
        indentation (int): Number of spaces per indentation level.
    """

    indentation: int = DEFAULT_INDENTATION

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> TextFormatter:
        """Build a formatter using the indentation unit of ``config``."""
        return cls(indentation=config.indentation)

    def indent(self, text: TextBlock, level: int = 1) -> str:
        """Indent every line of ``text`` by ``level`` units.

        Lines that only hold whitespace after indenting are emptied, so blank
        lines never carry trailing spaces.

        Args:
            text (TextBlock): A string (newline separated) or a sequence of lines.
            level (int): Number of indentation levels; negative levels count as zero.

        Returns:
            str: The indented text.
        """
        prefix = " " * (max(level, 0) * self.indentation)
        lines = join_lines(text).split("\n")
        return "\n".join(prefix + line if line.strip() else "" for line in lines)

    make_comment = staticmethod(make_comment)
    process_header = staticmethod(process_header)


def indent(text: TextBlock, level: int = 1, *, indentation: int = DEFAULT_INDENTATION) -> str:
    """Indent ``text`` with an explicit indentation unit.

    Shortcut for ``TextFormatter(indentation).indent(text, level)``.
    """
    return TextFormatter(indentation=indentation).indent(text, level)
