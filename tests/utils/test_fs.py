# topmark:header:start
#
#   project      : GenBelt
#   file         : test_fs.py
#   file_relpath : tests/utils/test_fs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directory helpers: probing, creating and emptying directory trees.

Covers:
- `is_directory` for directories, files, missing paths and stat failures,
- `create_dir` for nested, existing, relative and conflicting paths, including
  the handling of errors raised on intermediate vs. final segments,
- `empty_dir` with and without ``remove_self``, missing paths and symlinks.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest

from genbelt.utils import fs
from genbelt.utils.fs import create_dir, empty_dir, is_directory
from tests.conftest import mark_fs


def _populate(root: Path) -> None:
    root.mkdir()
    (root / "top.txt").write_text("top")
    nested = root / "nested"
    nested.mkdir()
    (nested / "inner.txt").write_text("inner")


# --- is_directory ---


@mark_fs
def test_is_directory_true_for_directory(tmp_path: Path) -> None:
    """An existing directory is reported as such."""
    assert is_directory(tmp_path) is True
    assert is_directory(str(tmp_path)) is True


@mark_fs
def test_is_directory_false_for_file(tmp_path: Path) -> None:
    """A regular file is not a directory."""
    f = tmp_path / "file.txt"
    f.write_text("x")
    assert is_directory(f) is False


@mark_fs
def test_is_directory_false_for_missing_path(tmp_path: Path) -> None:
    """A missing path is a negative result, not an error."""
    assert is_directory(tmp_path / "missing" / "deeper") is False


@mark_fs
def test_is_directory_reraises_other_stat_errors(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Stat failures other than 'not found' propagate to the caller."""
    target = tmp_path / "locked"
    target.mkdir()
    real_stat = os.stat

    def fake_stat(path: object, *args: object, **kwargs: object) -> os.stat_result:
        if os.fspath(path) == str(target):  # type: ignore[arg-type]
            raise PermissionError(errno.EACCES, "permission denied", str(target))
        return real_stat(path, *args, **kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(fs.os, "stat", fake_stat)

    with pytest.raises(PermissionError):
        is_directory(target)


@mark_fs
def test_is_directory_follows_symlinks(tmp_path: Path) -> None:
    """A symlink to a directory counts as a directory."""
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    try:
        link.symlink_to(real, target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")
    assert is_directory(link) is True


# --- create_dir ---


@mark_fs
def test_create_dir_creates_nested_levels(tmp_path: Path) -> None:
    """All missing segments are created."""
    target = tmp_path / "a" / "b" / "c"
    create_dir(target)
    assert (tmp_path / "a").is_dir()
    assert (tmp_path / "a" / "b").is_dir()
    assert target.is_dir()


@mark_fs
def test_create_dir_is_idempotent(tmp_path: Path) -> None:
    """Creating an existing directory is a no-op."""
    target = tmp_path / "a" / "b" / "c"
    create_dir(target)
    (target / "keep.txt").write_text("kept")

    create_dir(target)

    assert (target / "keep.txt").read_text() == "kept"


@mark_fs
def test_create_dir_relative_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Relative paths are resolved against the working directory."""
    monkeypatch.chdir(tmp_path)
    create_dir(os.path.join("x", "y"))
    assert (tmp_path / "x" / "y").is_dir()


@mark_fs
def test_create_dir_partially_existing_path(tmp_path: Path) -> None:
    """Existing leading segments are reused."""
    (tmp_path / "a").mkdir()
    create_dir(tmp_path / "a" / "b")
    assert (tmp_path / "a" / "b").is_dir()


@mark_fs
def test_create_dir_fails_when_target_is_a_file(tmp_path: Path) -> None:
    """An existing file at the target path is not silently accepted."""
    target = tmp_path / "file"
    target.write_text("x")
    with pytest.raises(NotADirectoryError):
        create_dir(target)


@mark_fs
def test_create_dir_fails_below_a_file(tmp_path: Path) -> None:
    """A file in the middle of the path stops creation."""
    (tmp_path / "file").write_text("x")
    with pytest.raises(NotADirectoryError):
        create_dir(tmp_path / "file" / "sub")


def _failing_mkdir(
    monkeypatch: pytest.MonkeyPatch, failing: Path, err: int
) -> list[str]:
    """Make ``os.mkdir`` fail with ``err`` for ``failing`` and record every call."""
    real_mkdir = os.mkdir
    calls: list[str] = []

    def fake_mkdir(path: object, *args: object, **kwargs: object) -> None:
        p = os.fspath(path)  # type: ignore[arg-type]
        calls.append(p)
        if p == str(failing):
            # Simulate the segment being there despite the error.
            real_mkdir(p)
            raise OSError(err, os.strerror(err), p)
        real_mkdir(p, *args, **kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(fs.os, "mkdir", fake_mkdir)
    return calls


@mark_fs
@pytest.mark.parametrize("err", [errno.EACCES, errno.EPERM, errno.EISDIR])
def test_create_dir_tolerates_errors_on_intermediate_segments(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, err: int
) -> None:
    """Permission and is-a-directory errors on a parent segment are ignored."""
    intermediate = tmp_path / "a"
    target = intermediate / "b"
    calls = _failing_mkdir(monkeypatch, intermediate, err)

    create_dir(target)

    assert target.is_dir()
    assert str(target) in calls


@mark_fs
@pytest.mark.parametrize("err", [errno.EACCES, errno.EPERM, errno.EISDIR])
def test_create_dir_propagates_errors_on_final_segment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, err: int
) -> None:
    """The same errors on the target segment itself propagate."""
    target = tmp_path / "a" / "b"
    _failing_mkdir(monkeypatch, target, err)

    with pytest.raises(OSError) as excinfo:
        create_dir(target)
    assert excinfo.value.errno == err


@mark_fs
def test_create_dir_propagates_other_errors(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Errors outside the tolerated set propagate even on intermediate segments."""
    intermediate = tmp_path / "a"
    _failing_mkdir(monkeypatch, intermediate, errno.ENOSPC)

    with pytest.raises(OSError) as excinfo:
        create_dir(intermediate / "b")
    assert excinfo.value.errno == errno.ENOSPC


@mark_fs
def test_create_dir_missing_parent_reports_permission_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A parent that vanishes mid-creation is reported against that parent."""
    target = tmp_path / "a" / "b"
    real_mkdir = os.mkdir

    def fake_mkdir(path: object, *args: object, **kwargs: object) -> None:
        p = os.fspath(path)  # type: ignore[arg-type]
        if p == str(target):
            raise FileNotFoundError(errno.ENOENT, "no such file or directory", p)
        real_mkdir(p, *args, **kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(fs.os, "mkdir", fake_mkdir)

    with pytest.raises(PermissionError) as excinfo:
        create_dir(target)
    assert excinfo.value.filename == str(tmp_path / "a")


# --- empty_dir ---


@mark_fs
def test_empty_dir_keeps_root(tmp_path: Path) -> None:
    """Without remove_self the root stays and every file is gone."""
    root = tmp_path / "out"
    _populate(root)

    empty_dir(root)

    assert root.is_dir()
    assert not (root / "top.txt").exists()
    assert not (root / "nested" / "inner.txt").exists()
    assert [p for p in root.rglob("*") if p.is_file()] == []


@mark_fs
def test_empty_dir_keeps_emptied_subdirectories(tmp_path: Path) -> None:
    """Subdirectories are emptied with the same flag, so they stay too."""
    root = tmp_path / "out"
    _populate(root)

    empty_dir(root, remove_self=False)

    assert (root / "nested").is_dir()
    assert list((root / "nested").iterdir()) == []


@mark_fs
def test_empty_dir_remove_self_removes_tree(tmp_path: Path) -> None:
    """With remove_self the root and everything below it disappear."""
    root = tmp_path / "out"
    _populate(root)
    deep = root / "nested" / "deeper" / "deepest"
    deep.mkdir(parents=True)
    (deep / "leaf.txt").write_text("leaf")

    empty_dir(root, remove_self=True)

    assert not root.exists()
    assert tmp_path.is_dir()


@mark_fs
@pytest.mark.parametrize("remove_self", [False, True])
def test_empty_dir_missing_path_is_noop(tmp_path: Path, remove_self: bool) -> None:
    """Emptying a missing directory does not raise."""
    missing = tmp_path / "does" / "not" / "exist"
    empty_dir(missing, remove_self=remove_self)
    assert not missing.exists()


@mark_fs
def test_empty_dir_absolute_missing_path() -> None:
    """An absolute path that does not exist is tolerated."""
    empty_dir("/does/not/exist", False)


@mark_fs
def test_empty_dir_does_not_follow_symlinks(tmp_path: Path) -> None:
    """Symlinked directories are unlinked, their targets are left alone."""
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "precious.txt").write_text("keep me")
    root = tmp_path / "out"
    root.mkdir()
    try:
        (root / "link").symlink_to(outside, target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    empty_dir(root)

    assert not (root / "link").exists()
    assert (outside / "precious.txt").read_text() == "keep me"


@mark_fs
def test_empty_dir_remove_self_on_symlink_removes_only_the_link(tmp_path: Path) -> None:
    """A symlinked root is unlinked; the directory it points to is untouched."""
    real = tmp_path / "real"
    real.mkdir()
    (real / "f.txt").write_text("data")
    link = tmp_path / "link"
    try:
        link.symlink_to(real, target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    empty_dir(link, remove_self=True)

    assert not os.path.lexists(link)
    assert (real / "f.txt").read_text() == "data"


@mark_fs
def test_empty_dir_remove_self_on_dangling_symlink(tmp_path: Path) -> None:
    """A link whose target is gone is still removed."""
    link = tmp_path / "link"
    try:
        link.symlink_to(tmp_path / "gone", target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    empty_dir(link, remove_self=True)

    assert not os.path.lexists(link)


@mark_fs
def test_empty_dir_keep_self_on_symlink_empties_target(tmp_path: Path) -> None:
    """Without remove_self the link is kept and the target directory emptied."""
    real = tmp_path / "real"
    real.mkdir()
    (real / "f.txt").write_text("data")
    link = tmp_path / "link"
    try:
        link.symlink_to(real, target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    empty_dir(link)

    assert link.is_symlink()
    assert real.is_dir()
    assert list(real.iterdir()) == []


@mark_fs
def test_empty_dir_on_a_file_raises(tmp_path: Path) -> None:
    """A file is not a directory to empty."""
    f = tmp_path / "file.txt"
    f.write_text("x")
    with pytest.raises(NotADirectoryError):
        empty_dir(f)
