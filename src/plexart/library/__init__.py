"""
Target library indexing for artwork placement.

Package organization:
- parser: Folder and filename grammar (show keys, season folders, episode tokens).
- formatter: Output artwork filenames (backdrop, folder, season posters, thumbnails).
- index: Show, season and video indexes built fresh from the target tree.
"""
from .formatter import format_season_file
from .index import (
    SeasonIndex,
    ShowIndex,
    build_season_index,
    build_show_index,
    build_video_index,
)
from .parser import is_show_key, parse_episode_key

__all__ = [
    "format_season_file",
    "is_show_key",
    "parse_episode_key",
    "ShowIndex",
    "SeasonIndex",
    "build_show_index",
    "build_season_index",
    "build_video_index",
]
