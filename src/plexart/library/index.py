"""
Indexes of the target media library, rebuilt from disk on every stage run.

- `ShowIndex`: show key ("Name (YYYY)") -> show folder, case-insensitive,
  first target root wins on duplicates.
- `SeasonIndex`: zero-padded season key -> "Season N" folder of one show,
  plus the optional "Specials" folder.
- `build_video_index`: episode key ("S01E07") -> base filename of the first
  video carrying that key anywhere beneath one show folder.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple

from plexart.library import parser
from plexart.utils import VIDEO_EXTENSIONS, EventKind, file_util
from plexart.utils.events import EventSink
from plexart.utils.logger import log_event


class ShowIndex:
    """Read-only mapping of show key to target show folder, keyed case-insensitively."""

    def __init__(self):
        self._entries: Dict[str, Tuple[str, Path]] = {}

    def add(self, key: str, folder: Path) -> bool:
        """Insert `key` unless an equal key (ignoring case) is already present."""
        norm = parser.normalize_key(key)
        if norm in self._entries:
            return False
        self._entries[norm] = (key, folder)
        return True

    def get(self, key: str) -> Optional[Path]:
        entry = self._entries.get(parser.normalize_key(key))
        return entry[1] if entry else None

    def __contains__(self, key: str) -> bool:
        return parser.normalize_key(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._entries.values())


def build_show_index(target_roots: Iterable[Path], on_event: EventSink = log_event) -> ShowIndex:
    """
    Scan each target root for show folders.

    Roots that are not existing directories are reported and skipped. Only
    immediate subdirectories whose name matches "Name (YYYY)" are indexed;
    the first root to provide a key wins. An empty index is a valid result.
    """
    index = ShowIndex()
    for root in target_roots:
        root = Path(root).absolute()
        if not root.is_dir():
            on_event(EventKind.TARGET_ROOT_MISSING, root, None)
            continue
        for folder in file_util.list_dirs(root):
            if not parser.is_show_key(folder.name):
                continue
            if index.add(folder.name, folder):
                on_event(EventKind.SHOW_INDEXED, folder, None)
            else:
                on_event(EventKind.TARGET_DUPLICATE, folder, f"already indexed from {index.get(folder.name)}")
    return index


@dataclass
class SeasonIndex:
    """Season folders of one target show."""
    show_folder: Path
    seasons: Dict[str, Path] = field(default_factory=dict)
    specials: Optional[Path] = None

    def folder_for(self, season: int) -> Optional[Path]:
        """Folder holding `season`; season 0 prefers "Specials" over "Season 0"."""
        if season == 0 and self.specials is not None:
            return self.specials
        return self.seasons.get(f"{season:02d}")

    def has_season(self, season: int) -> bool:
        return self.folder_for(season) is not None


def build_season_index(show_folder: Path) -> SeasonIndex:
    """Map "Season N" subfolders of `show_folder` by zero-padded season number."""
    index = SeasonIndex(show_folder)
    if not show_folder.is_dir():
        return index
    for folder in file_util.list_dirs(show_folder):
        if parser.is_specials_folder(folder.name):
            index.specials = folder
            continue
        season = parser.parse_season_folder(folder.name)
        if season is not None:
            index.seasons.setdefault(f"{season:02d}", folder)
    return index


def build_video_index(show_folder: Path) -> Dict[str, str]:
    """
    Map each episode key found in video filenames beneath `show_folder` to
    the video's base filename. The first video seen per key wins.
    """
    videos: Dict[str, str] = {}
    if not show_folder.is_dir():
        return videos
    for video in file_util.iter_files_recursive(show_folder, VIDEO_EXTENSIONS):
        key = parser.parse_episode_key(video.name)
        if key and key not in videos:
            videos[key] = video.stem
    return videos
