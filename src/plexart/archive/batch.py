"""
This module stages artwork archives into the source tree.

Archives sitting directly in the source root whose base name is a show key
present in the target library are unpacked into a same-named subfolder,
deleted, and stripped of everything that is not an image. Unmatched
archives are left untouched.
"""
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from plexart.archive import core
from plexart.library.index import ShowIndex
from plexart.utils import ARCHIVE_EXTENSIONS, EventKind, file_util, system_util
from plexart.utils.events import EventSink
from plexart.utils.file_util import RetryPolicy
from plexart.utils.logger import log_event
from plexart.utils.results import StageOutcome, StageResult


def stage_archives(source_root: Path, shows: ShowIndex, extractor_path: Optional[str] = None,
                   on_event: EventSink = log_event, retry: Optional[RetryPolicy] = None,
                   progress: bool = True) -> StageResult:
    """
    Extract matched archives under `source_root`.

    Args:
        source_root: Folder holding the downloaded archives.
        shows: Target show index; archive base names are matched against it.
        extractor_path: Extractor executable; resolved from PATH and common
            install locations when omitted.
        on_event: Event sink.
        retry: Delete retry policy (5 attempts, 1 second apart by default).
        progress: Show a progress bar.

    Returns:
        StageResult whose `changed` is the number of archives extracted.
        NO_TARGETS, NO_ARCHIVES, NO_MATCHES and DEPENDENCY_MISSING end the
        stage before anything is extracted.
    """
    retry = retry or RetryPolicy()

    if not shows:
        on_event(EventKind.NO_TARGETS, None, None)
        return StageResult(StageOutcome.NO_TARGETS)

    archives = file_util.list_files(source_root, ARCHIVE_EXTENSIONS)
    if not archives:
        on_event(EventKind.NO_ARCHIVES, source_root, None)
        return StageResult(StageOutcome.NO_ARCHIVES)

    matched = []
    for archive in archives:
        if archive.stem in shows:
            matched.append(archive)
        else:
            on_event(EventKind.ARCHIVE_UNMATCHED, archive, "no target show with this name")
    if not matched:
        on_event(EventKind.NO_MATCHES, source_root, f"{len(archives)} archive(s), none matching")
        return StageResult(StageOutcome.NO_MATCHES)

    extractor = system_util.find_extractor(extractor_path)
    if extractor is None:
        on_event(EventKind.EXTRACTOR_MISSING, None, extractor_path or "7z")
        return StageResult(StageOutcome.DEPENDENCY_MISSING)

    result = StageResult()
    for archive in tqdm(matched, desc="Extracting archives", disable=not progress, leave=False):
        destination = source_root / archive.stem
        on_event(EventKind.EXTRACT_START, archive, str(destination))

        code, err = core.extract_archive(extractor, archive, destination)
        if code != 0:
            on_event(EventKind.EXTRACT_FAILED, archive, f"exit code {code}: {err.strip()}")
            result.errors.append(f"{archive}: extractor exit code {code}")
            continue
        result.changed += 1

        try:
            deleted = core.delete_archive(archive, retry, on_event)
        except OSError as e:
            on_event(EventKind.FILE_FAILED, archive, f"delete failed: {e}")
            result.errors.append(f"{archive}: {e}")
            continue
        if not deleted:
            continue
        try:
            core.prune_non_images(destination, on_event)
        except OSError as e:
            on_event(EventKind.FILE_FAILED, destination, f"cleanup failed: {e}")
            result.errors.append(f"{destination}: {e}")

    return result
