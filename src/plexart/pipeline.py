"""
Engine entry points.

Each stage is selected with an explicit `OperationKind` and receives the
source root and target roots as plain parameters; there is no engine-wide
state. The target show index is rebuilt at the start of every stage because
an earlier stage may have changed the target tree.

Order used by `run_all`: extract archives, backdrops, posters, episode
thumbnails, relocation.
"""
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Optional

from plexart.archive import stage_archives
from plexart.classify import process_backdrops, process_episode_thumbs, process_posters
from plexart.library import build_show_index
from plexart.relocate import relocate_all
from plexart.utils import EventKind
from plexart.utils.events import EventSink
from plexart.utils.file_util import RetryPolicy
from plexart.utils.logger import log_event
from plexart.utils.results import StageOutcome, StageResult


class OperationKind(Enum):
    EXTRACT = "extract"
    BACKDROPS = "backdrops"
    POSTERS = "posters"
    THUMBS = "thumbs"
    RELOCATE = "relocate"

    @property
    def requires_extractor(self) -> bool:
        return self is OperationKind.EXTRACT


PIPELINE_ORDER = [
    OperationKind.EXTRACT,
    OperationKind.BACKDROPS,
    OperationKind.POSTERS,
    OperationKind.THUMBS,
    OperationKind.RELOCATE,
]


def run_stage(kind: OperationKind, source_root: Path, target_roots: Iterable[Path],
              extractor_path: Optional[str] = None, on_event: EventSink = log_event,
              retry: Optional[RetryPolicy] = None, progress: bool = True) -> StageResult:
    """
    Run one stage against a fresh view of the filesystem.

    Args:
        kind: Which stage to run.
        source_root: Folder with downloaded artwork, archives and show subfolders.
        target_roots: Media library roots holding "Name (YYYY)" show folders,
            in priority order.
        extractor_path: Extractor executable, only used by EXTRACT.
        on_event: Event sink; defaults to the structured logger.
        retry: Archive delete retry policy, only used by EXTRACT.
        progress: Show progress bars.

    Returns:
        StageResult. A missing source root and an empty target index are
        reported as outcomes rather than raised.

    Raises:
        EngineIOError: A directory could not be enumerated.
    """
    source_root = Path(source_root)
    on_event(EventKind.STAGE_START, source_root, kind.value)

    if not source_root.is_dir():
        on_event(EventKind.SOURCE_MISSING, source_root, kind.value)
        return StageResult(StageOutcome.SOURCE_MISSING)

    shows = build_show_index(target_roots, on_event)
    if not shows:
        on_event(EventKind.NO_TARGETS, None, kind.value)
        return StageResult(StageOutcome.NO_TARGETS)

    if kind.requires_extractor:
        result = stage_archives(source_root, shows, extractor_path, on_event, retry, progress)
    elif kind is OperationKind.BACKDROPS:
        result = process_backdrops(source_root, shows, on_event, progress)
    elif kind is OperationKind.POSTERS:
        result = process_posters(source_root, shows, on_event, progress)
    elif kind is OperationKind.THUMBS:
        result = process_episode_thumbs(source_root, shows, on_event, progress)
    else:
        result = relocate_all(source_root, shows, on_event, progress)

    on_event(EventKind.STAGE_DONE, source_root,
             f"{kind.value}: {result.outcome.value}, changed={result.changed}, "
             f"unrecognized={result.unrecognized}, errors={len(result.errors)}")
    return result


def run_all(source_root: Path, target_roots: Iterable[Path], extractor_path: Optional[str] = None,
            on_event: EventSink = log_event, retry: Optional[RetryPolicy] = None,
            progress: bool = True) -> Dict[OperationKind, StageResult]:
    """Run every stage in order. A stage-level abort only ends that stage."""
    target_roots = list(target_roots)
    results = {}
    for kind in PIPELINE_ORDER:
        results[kind] = run_stage(kind, source_root, target_roots, extractor_path, on_event, retry, progress)
    return results
