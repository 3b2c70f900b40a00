"""
Functions to unpack artwork archives with an external 7-Zip compatible tool.

This module runs the extractor for one archive, deletes the archive with a
bounded retry while another process still holds it open, and prunes
everything that is not an image from the extraction folder.
"""
from pathlib import Path
from typing import Tuple

from plexart.utils import IMAGE_EXTENSIONS, EventKind, file_util, system_util
from plexart.utils.events import EventSink
from plexart.utils.file_util import RetryPolicy


def extract_archive(extractor: str, archive: Path, destination: Path) -> Tuple[int, str]:
    """
    Extract `archive` into `destination`, overwriting existing files.

    The call blocks until the extractor exits; its error stream is fully
    drained before the exit code is checked.

    Returns:
        Tuple of (exit_code, stderr). A destination folder that cannot be
        created or an extractor that cannot be launched is reported as exit
        code -1 with the OS error text.
    """
    cmd = system_util.build_extract_cmd(extractor, archive, destination)
    try:
        destination.mkdir(parents=True, exist_ok=True)
        code, _out, err = system_util.run_cmd(cmd)
    except OSError as e:
        return -1, str(e)
    return code, err


def delete_archive(archive: Path, policy: RetryPolicy, on_event: EventSink) -> bool:
    """
    Delete an extracted archive.

    A lock that outlives the retries is only a warning and returns False.
    Any other OSError propagates to the caller.
    """

    def _locked(attempt: int, error: OSError) -> None:
        on_event(EventKind.ARCHIVE_LOCKED, archive, f"attempt {attempt}/{policy.max_attempts}: {error}")

    try:
        file_util.delete_with_retry(archive, policy, on_locked=_locked)
    except OSError as e:
        if not file_util.is_locking_error(e):
            raise
        on_event(EventKind.ARCHIVE_DELETE_FAILED, archive, str(e))
        return False
    on_event(EventKind.ARCHIVE_DELETED, archive, None)
    return True


def prune_non_images(folder: Path, on_event: EventSink) -> int:
    """Delete every file beneath `folder` that is not a .jpg/.jpeg/.png image, then empty subfolders."""
    removed = 0
    for file in file_util.iter_files_recursive(folder):
        if file.suffix.lower() in IMAGE_EXTENSIONS:
            continue
        file.unlink()
        on_event(EventKind.PRUNED, file, None)
        removed += 1
    file_util.remove_empty_dirs(folder)
    return removed
