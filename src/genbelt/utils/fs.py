# topmark:header:start
#
#   project      : GenBelt
#   file         : fs.py
#   file_relpath : src/genbelt/utils/fs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directory helpers for preparing generator output trees.

- `is_directory`: stat-based probe that reports a missing path as ``False``
  and re-raises every other failure.
- `create_dir`: segment-by-segment directory creation that tolerates segments
  which already exist, and permission or is-a-directory errors on
  intermediate segments.
- `empty_dir`: empties a directory tree, optionally removing the root too.

All operations are synchronous and idempotent.
"""

from __future__ import annotations

import errno
import os
import shutil
import stat
from pathlib import Path
from typing import TYPE_CHECKING, Union

from genbelt.config.logging import get_logger

if TYPE_CHECKING:
    from genbelt.config.logging import GenbeltLogger

StrPath = Union[str, "os.PathLike[str]"]

logger: GenbeltLogger = get_logger(__name__)

# Errors tolerated on intermediate segments only (seen on macOS and Windows for
# deeply nested paths whose parents already exist).
TOLERATED_MKDIR_ERRNOS: frozenset[int] = frozenset({errno.EACCES, errno.EPERM, errno.EISDIR})


def is_directory(path: StrPath) -> bool:
    """Return whether ``path`` is an existing directory.

    Symlinks are followed.

    Args:
        path (StrPath): Path to probe.

    Returns:
        bool: ``True`` for a directory, ``False`` for anything else or a missing path.

    Raises:
        OSError: If the path cannot be inspected for any reason other than not existing.
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return False
    return stat.S_ISDIR(st.st_mode)


def _segments(target: Path) -> list[tuple[Path, Path]]:
    """Return ``(segment, parent)`` pairs from the top-most segment down to ``target``."""
    ancestors = [p for p in reversed(target.parents) if p != Path(target.anchor)]
    chain = [*ancestors, target]
    return [(segment, segment.parent) for segment in chain]


def create_dir(path: StrPath) -> None:
    """Create ``path`` and every missing parent, left to right.

    Relative paths are resolved against the current working directory.

    Args:
        path (StrPath): Directory to create.

    Raises:
        PermissionError: If a segment's parent is missing while creating it, or if
            the final segment cannot be created for lack of permission.
        NotADirectoryError: If ``path`` exists but is not a directory.
        OSError: For any other creation failure.
    """
    if is_directory(path):
        logger.trace("Directory already exists: %s", path)
        return

    target = Path(os.path.abspath(path))
    for segment, parent in _segments(target):
        try:
            os.mkdir(segment)
        except FileExistsError:
            continue
        except FileNotFoundError as exc:
            raise PermissionError(errno.EACCES, "permission denied, mkdir", str(parent)) from exc
        except OSError as exc:
            if exc.errno not in TOLERATED_MKDIR_ERRNOS or segment == target:
                raise
            logger.debug(
                "Ignoring %s on intermediate segment %s",
                errno.errorcode.get(exc.errno or 0, exc.errno),
                segment,
            )
            continue
        logger.debug("Created directory %s", segment)

    if not is_directory(target):
        raise NotADirectoryError(errno.ENOTDIR, "not a directory", str(target))


def empty_dir(path: StrPath, remove_self: bool = False) -> None:
    """Delete the contents of ``path``, and optionally ``path`` itself.

    Files are unlinked; subdirectories are visited with the same ``remove_self``
    flag, so with ``remove_self=False`` they are emptied but kept. Entries are
    inspected with ``lstat``: symlinks are unlinked, never followed.

    A missing ``path`` is not an error. When ``path`` itself is a symlink, the
    link is removed with ``remove_self=True`` (its target is left alone);
    otherwise the target directory is emptied.

    Args:
        path (StrPath): Directory to empty.
        remove_self (bool): If True, remove ``path`` and every subdirectory once emptied.
    """
    root = os.fspath(path)
    if remove_self and os.path.islink(root):
        os.unlink(root)
        logger.debug("Removed symlink %s", root)
        return

    if not os.path.exists(root):
        if not remove_self:
            shutil.rmtree(root, ignore_errors=True)
        return

    pending: list[str] = [root]
    visited: list[str] = []
    while pending:
        current = pending.pop()
        visited.append(current)
        for name in os.listdir(current):
            child = os.path.join(current, name)
            if stat.S_ISDIR(os.lstat(child).st_mode):
                pending.append(child)
            else:
                os.unlink(child)
                logger.trace("Removed file %s", child)

    if remove_self:
        # Parents are visited before their children: remove deepest first.
        for directory in reversed(visited):
            shutil.rmtree(directory)
            logger.trace("Removed directory %s", directory)
        logger.debug("Removed directory tree %s", root)
    else:
        logger.debug("Emptied directory %s", root)
