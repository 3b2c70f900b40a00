import errno
import os

import pytest

from conftest import touch

from plexart.utils import EngineIOError, file_util
from plexart.utils.file_util import is_dir_empty, is_locking_error, list_files, move_overwrite


def _cross_device(monkeypatch, fail_swap=False):
    """Make the first os.replace look like a cross-device rename."""
    real_replace = os.replace
    calls = []

    def _replace(src, dst):
        calls.append((src, dst))
        if len(calls) == 1:
            raise OSError(errno.EXDEV, "Invalid cross-device link")
        if fail_swap:
            raise OSError(errno.ENOSPC, "No space left on device")
        return real_replace(src, dst)

    monkeypatch.setattr(file_util.os, "replace", _replace)
    return calls


def test_move_overwrites_existing(tmp_path):
    src = touch(tmp_path / "a" / "backdrop.jpg", b"new")
    dst = touch(tmp_path / "b" / "backdrop.jpg", b"old")

    move_overwrite(src, dst)

    assert not src.exists()
    assert dst.read_bytes() == b"new"


def test_cross_device_move_replaces_destination(tmp_path, monkeypatch):
    src = touch(tmp_path / "a" / "folder.jpg", b"new")
    dst = touch(tmp_path / "b" / "folder.jpg", b"old")
    _cross_device(monkeypatch)

    move_overwrite(src, dst)

    assert not src.exists()
    assert dst.read_bytes() == b"new"
    assert sorted(p.name for p in dst.parent.iterdir()) == ["folder.jpg"]


def test_failed_cross_device_move_keeps_both_sides(tmp_path, monkeypatch):
    src = touch(tmp_path / "a" / "folder.jpg", b"new")
    dst = touch(tmp_path / "b" / "folder.jpg", b"old")
    _cross_device(monkeypatch, fail_swap=True)

    with pytest.raises(OSError):
        move_overwrite(src, dst)

    assert src.read_bytes() == b"new"
    assert dst.read_bytes() == b"old"
    assert sorted(p.name for p in dst.parent.iterdir()) == ["folder.jpg"]


def test_locking_errors():
    assert is_locking_error(PermissionError(errno.EACCES, "denied"))
    assert is_locking_error(OSError(errno.EBUSY, "busy"))
    assert not is_locking_error(OSError(errno.ENOENT, "missing"))
    assert not is_locking_error(OSError(errno.EIO, "io"))


def test_list_files_filters_extensions_case_insensitively(tmp_path):
    touch(tmp_path / "a.JPG")
    touch(tmp_path / "b.txt")
    (tmp_path / "c.jpg").mkdir()

    assert [p.name for p in list_files(tmp_path, {".jpg"})] == ["a.JPG"]


def test_list_files_on_missing_folder_raises_with_path(tmp_path):
    missing = tmp_path / "missing"
    with pytest.raises(EngineIOError) as info:
        list_files(missing)
    assert info.value.path == missing


def test_is_dir_empty_counts_hidden_entries(tmp_path):
    assert is_dir_empty(tmp_path)
    touch(tmp_path / ".hidden")
    assert not is_dir_empty(tmp_path)
