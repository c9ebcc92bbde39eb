# topmark:header:start
#
#   project      : GenBelt
#   file         : writer.py
#   file_relpath : src/genbelt/emit/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer for generated files.

Typed-source output (TypeScript) is prefixed with a ``tslint:disable``
directive and the header comment; other outputs are written verbatim. Every
successful write is announced on the console as ``"<file> generated"``.

Write failures are not caught: they propagate to the generator.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from genbelt.cli_shared.console import out
from genbelt.config.logging import get_logger
from genbelt.constants import MAX_LINE_LENGTH_FLAG, TSLINT_DISABLE_PREFIX
from genbelt.rendering.colors import TermColor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from genbelt.cli_shared.console_api import ConsoleLike
    from genbelt.config.logging import GenbeltLogger
    from genbelt.utils.fs import StrPath

logger: GenbeltLogger = get_logger(__name__)


class FileType(str, Enum):
    """Kind of generated output.

    Attributes:
        TS: Typed source (TypeScript); gets the lint banner and header.
        GENERIC: Any other file; written as-is.
    """

    TS = "ts"
    GENERIC = "generic"


def disable_directive(disable_flags: Iterable[str] = ()) -> str:
    """Return the lint-disable comment line.

    ``max-line-length`` always comes first, followed by ``disable_flags``.

    Example:
        >>> disable_directive(["no-unused-variable"])
        '/* tslint:disable:max-line-length no-unused-variable */'
    """
    flags = " ".join([MAX_LINE_LENGTH_FLAG, *disable_flags])
    return f"/* {TSLINT_DISABLE_PREFIX}{flags} */"


def render_file(
    content: str,
    header: str,
    file_type: FileType | str = FileType.GENERIC,
    disable_flags: Iterable[str] = (),
) -> str:
    """Return the full text of a generated file without writing it."""
    if FileType(file_type) is FileType.TS:
        return "\n".join([disable_directive(disable_flags), header, content])
    return content


def write_file(
    file: StrPath,
    content: str,
    header: str,
    file_type: FileType | str = FileType.GENERIC,
    disable_flags: Iterable[str] = (),
    *,
    console: ConsoleLike | None = None,
) -> None:
    """Write a generated file, replacing any existing content.

    Args:
        file (StrPath): Destination path.
        content (str): Generated body.
        header (str): Header comment placed after the lint directive (typed source only).
        file_type (FileType | str): Kind of output; ``"ts"`` adds the banner.
        disable_flags (Iterable[str]): Extra lint rules to disable; not modified.
        console (ConsoleLike | None): Console for the success message; defaults to
            the process console.

    Raises:
        ValueError: If ``file_type`` is not a known `FileType`.
        OSError: If the file cannot be written.
    """
    text = render_file(content, header, file_type, disable_flags)
    with open(file, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.debug("Wrote %d bytes to %s", len(text.encode("utf-8")), file)
    out(f"{os.fspath(file)} generated", TermColor.GREEN, console=console)
