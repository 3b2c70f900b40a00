"""Stage runners applying the artwork resolvers to the source tree.

Loose images in the source root are moved straight into the matching target
show folder. Images inside a source subfolder named after a show key are
renamed in place; `plexart.relocate` moves them into the library afterwards.
Every destination is overwritten, and a failure on one file is reported and
never stops its siblings.
"""
from pathlib import Path
from typing import Callable, Optional

from tqdm import tqdm

from plexart.classify import resolvers
from plexart.classify.core import Classification
from plexart.library import parser
from plexart.library.index import ShowIndex, build_video_index
from plexart.utils import IMAGE_EXTENSIONS, EventKind, file_util
from plexart.utils.events import EventSink
from plexart.utils.logger import log_event
from plexart.utils.results import StageResult

LooseResolver = Callable[[Path, ShowIndex], Classification]
FolderResolver = Callable[[Path, str], Optional[Classification]]


def show_subfolders(source_root: Path, shows: ShowIndex, on_event: EventSink) -> list[Path]:
    """Source subfolders named after a show key that exists in the target index."""
    folders = []
    for folder in file_util.list_dirs(source_root):
        if not parser.is_show_key(folder.name):
            continue
        if folder.name not in shows:
            on_event(EventKind.FOLDER_SKIPPED, folder, "no matching target show")
            continue
        folders.append(folder)
    return folders


def apply_move(c: Classification, result: StageResult, on_event: EventSink) -> bool:
    """Move a classified file to its target, overwriting. Reports and records any failure."""
    if not c.target.parent.is_dir():
        message = f"destination folder missing: {c.target.parent}"
        on_event(EventKind.DESTINATION_MISSING, c.source, message)
        result.errors.append(f"{c.source}: {message}")
        return False
    try:
        file_util.move_overwrite(c.source, c.target)
    except OSError as e:
        on_event(EventKind.FILE_FAILED, c.source, f"move to {c.target} failed: {e}")
        result.errors.append(f"{c.source}: {e}")
        return False
    on_event(EventKind.MOVED, c.source, str(c.target))
    result.changed += 1
    return True


def apply_rename(c: Classification, result: StageResult, on_event: EventSink) -> bool:
    """Rename a classified file inside its own folder, overwriting."""
    if c.source == c.target:
        return False
    try:
        file_util.rename_overwrite(c.source, c.target)
    except OSError as e:
        on_event(EventKind.FILE_FAILED, c.source, f"rename to {c.target.name} failed: {e}")
        result.errors.append(f"{c.source}: {e}")
        return False
    on_event(EventKind.RENAMED, c.source, c.target.name)
    result.changed += 1
    return True


def _run_loose(source_root: Path, shows: ShowIndex, resolve: LooseResolver,
               result: StageResult, on_event: EventSink) -> None:
    for file in file_util.list_files(source_root, IMAGE_EXTENSIONS):
        c = resolve(file, shows)
        if c.recognized:
            apply_move(c, result, on_event)
        else:
            on_event(EventKind.NOT_MATCHED, file, c.reason)


def _run_folders(source_root: Path, shows: ShowIndex, resolve: FolderResolver, result: StageResult,
                 on_event: EventSink, progress: bool, desc: str) -> None:
    folders = show_subfolders(source_root, shows, on_event)
    for folder in tqdm(folders, desc=desc, disable=not progress, leave=False):
        for file in file_util.list_files(folder, IMAGE_EXTENSIONS):
            c = resolve(file, folder.name)
            if c is None:
                continue
            if c.recognized:
                apply_rename(c, result, on_event)
            else:
                on_event(EventKind.NOT_MATCHED, file, c.reason)


def process_backdrops(source_root: Path, shows: ShowIndex, on_event: EventSink = log_event,
                      progress: bool = True) -> StageResult:
    """Place "<ShowKey> - Backdrop" images as "backdrop.<ext>"."""
    result = StageResult()
    _run_loose(source_root, shows, resolvers.resolve_loose_backdrop, result, on_event)
    _run_folders(source_root, shows, resolvers.resolve_folder_backdrop, result, on_event, progress, "Backdrops")
    return result


def process_posters(source_root: Path, shows: ShowIndex, on_event: EventSink = log_event,
                    progress: bool = True) -> StageResult:
    """Place season posters and show folder posters under their media-server names."""
    result = StageResult()
    _run_loose(source_root, shows, resolvers.resolve_loose_poster, result, on_event)
    _run_folders(source_root, shows, resolvers.resolve_folder_poster, result, on_event, progress, "Posters")
    return result


def process_episode_thumbs(source_root: Path, shows: ShowIndex, on_event: EventSink = log_event,
                           progress: bool = True) -> StageResult:
    """
    Rename episode stills inside show subfolders to "<video base>-thumb.<ext>".

    The video index of a show is only built once an image turns up
    in its subfolder. A still whose episode key has no video is left as is
    and reported with a "key not found" event.
    """
    result = StageResult()
    folders = show_subfolders(source_root, shows, on_event)
    for folder in tqdm(folders, desc="Episode thumbnails", disable=not progress, leave=False):
        videos = None
        for file in file_util.list_files(folder, IMAGE_EXTENSIONS):
            if videos is None:
                videos = build_video_index(shows.get(folder.name))
            c = resolvers.resolve_episode_thumb(file, folder.name, videos)
            if c is None:
                continue
            if c.recognized:
                apply_rename(c, result, on_event)
            elif c.episode_key:
                on_event(EventKind.KEY_NOT_FOUND, file, f"no video with key {c.episode_key}")
                result.unrecognized += 1
            else:
                on_event(EventKind.UNRECOGNIZED, file, c.reason)
                result.unrecognized += 1
    return result
