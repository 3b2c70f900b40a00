"""
Final sweep moving normalized artwork from source show subfolders into the
target library.

For each source subfolder named after an indexed show, the show's season
folders are indexed, every image is classified by name alone, and recognized
files are moved (overwriting) to the show folder or the matching season
folder. A subfolder left completely empty is removed afterwards.
"""
import shutil
from pathlib import Path

from tqdm import tqdm

from plexart.classify.batch import apply_move, show_subfolders
from plexart.classify.resolvers import resolve_relocation
from plexart.library.index import ShowIndex, build_season_index
from plexart.utils import RELOCATE_IMAGE_EXTENSIONS, EventKind, file_util
from plexart.utils.events import EventSink
from plexart.utils.logger import log_event
from plexart.utils.results import StageResult


def relocate_folder(folder: Path, show_folder: Path, result: StageResult, on_event: EventSink) -> None:
    """Move recognized artwork out of one source subfolder, then remove it if empty."""
    seasons = build_season_index(show_folder)

    for file in file_util.list_files(folder, RELOCATE_IMAGE_EXTENSIONS):
        c = resolve_relocation(file, show_folder, seasons)
        if not c.recognized:
            on_event(EventKind.UNRECOGNIZED, file, c.reason)
            result.unrecognized += 1
            continue
        if c.target is None:
            on_event(EventKind.NO_DESTINATION, file, c.reason)
            result.errors.append(f"{file}: {c.reason}")
            continue
        if c.warning:
            on_event(EventKind.SEASON_MISSING, file, c.warning)
        apply_move(c, result, on_event)

    if file_util.is_dir_empty(folder):
        shutil.rmtree(folder)
        on_event(EventKind.FOLDER_REMOVED, folder, None)
    else:
        on_event(EventKind.FOLDER_NOT_EMPTY, folder, None)


def relocate_all(source_root: Path, shows: ShowIndex, on_event: EventSink = log_event,
                 progress: bool = True) -> StageResult:
    """Relocate every indexed show subfolder under `source_root`."""
    result = StageResult()
    folders = show_subfolders(source_root, shows, on_event)
    for folder in tqdm(folders, desc="Relocating", disable=not progress, leave=False):
        try:
            relocate_folder(folder, shows.get(folder.name), result, on_event)
        except OSError as e:
            on_event(EventKind.FILE_FAILED, folder, str(e))
            result.errors.append(f"{folder}: {e}")
    return result
