"""
Filesystem helpers shared by the staging, classification and relocation stages.

Listing helpers convert enumeration failures into `EngineIOError` so the
caller gets the offending path. Moves always overwrite: a same-volume move is
a single `os.replace`, a cross-volume move copies into a hidden partial file
beside the destination and swaps it in, so the destination is either fully
replaced or untouched and the source survives a failed move.
"""
import errno
import os
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List

from plexart.utils.constants import DELETE_MAX_ATTEMPTS, DELETE_RETRY_DELAY
from plexart.utils.errors import EngineIOError

# Windows sharing and lock violations
_LOCK_WINERRORS = {32, 33}
_LOCK_ERRNOS = {errno.EACCES, errno.EBUSY, errno.ETXTBSY}


def list_files(folder: Path, extensions: Iterable[str] | None = None) -> List[Path]:
    """Files directly inside `folder`, optionally filtered by lowercase extension."""
    exts = set(extensions) if extensions is not None else None
    try:
        entries = sorted(folder.iterdir())
    except OSError as e:
        raise EngineIOError(folder, e.strerror or str(e)) from e
    return [p for p in entries if p.is_file() and (exts is None or p.suffix.lower() in exts)]


def list_dirs(folder: Path) -> List[Path]:
    """Immediate subdirectories of `folder`."""
    try:
        entries = sorted(folder.iterdir())
    except OSError as e:
        raise EngineIOError(folder, e.strerror or str(e)) from e
    return [p for p in entries if p.is_dir()]


def iter_files_recursive(folder: Path, extensions: Iterable[str] | None = None) -> List[Path]:
    """Find all files recursively, optionally filtered by lowercase extension."""
    exts = set(extensions) if extensions is not None else None
    files = []
    for p in sorted(folder.rglob("*")):
        if p.is_file() and (exts is None or p.suffix.lower() in exts):
            files.append(p)
    return files


def rename_overwrite(src: Path, dst: Path) -> None:
    """Rename within one folder, replacing any existing `dst`."""
    os.replace(src, dst)


def move_overwrite(src: Path, dst: Path) -> None:
    """
    Move `src` to `dst`, replacing any existing file.

    The destination parent must already exist. On a cross-device move the
    bytes are copied into `.<name>.partial` next to `dst` and swapped in with
    `os.replace`; the source is only removed after the swap succeeded.
    """
    try:
        os.replace(src, dst)
        return
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise

    partial = dst.with_name(f".{dst.name}.partial")
    try:
        shutil.copy2(src, partial)
        os.replace(partial, dst)
    except OSError:
        partial.unlink(missing_ok=True)
        raise
    src.unlink()


def is_locking_error(error: OSError) -> bool:
    """True for errors caused by another handle holding the file open."""
    if isinstance(error, PermissionError):
        return True
    if getattr(error, "winerror", None) in _LOCK_WINERRORS:
        return True
    return error.errno in _LOCK_ERRNOS


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry with a fixed delay between attempts."""
    max_attempts: int = DELETE_MAX_ATTEMPTS
    delay: float = DELETE_RETRY_DELAY
    sleep: Callable[[float], None] = time.sleep


def delete_with_retry(path: Path, policy: RetryPolicy, on_locked: Callable[[int, OSError], None] | None = None) -> None:
    """
    Delete `path`, retrying only while the failure looks like a file lock.

    Raises the last error when every attempt failed, or immediately for a
    non-locking error.
    """
    for attempt in range(1, policy.max_attempts + 1):
        try:
            path.unlink()
            return
        except OSError as e:
            if not is_locking_error(e) or attempt == policy.max_attempts:
                raise
            if on_locked:
                on_locked(attempt, e)
            policy.sleep(policy.delay)


def is_dir_empty(folder: Path) -> bool:
    """True when `folder` has no entries at all, hidden or system ones included."""
    with os.scandir(folder) as it:
        return next(it, None) is None


def remove_empty_dirs(folder: Path) -> int:
    """Remove empty directories beneath `folder`, deepest first. Returns the count removed."""
    removed = 0
    for root, dirs, _files in os.walk(folder, topdown=False):
        for name in dirs:
            sub = Path(root) / name
            if is_dir_empty(sub):
                sub.rmdir()
                removed += 1
    return removed
