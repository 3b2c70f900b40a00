"""
Artwork classification for Plex-style show folders.

Package organization:
- core: The `Classification` result and `ArtworkKind` tags.
- resolvers: Pure filename rules for backdrops, posters, episode thumbnails
  and final relocation targets.
- batch: Stage runners applying the rules to the source tree.

Public API (top-level exports)
- `process_backdrops`, `process_posters`, `process_episode_thumbs`: stages.
- `resolve_*`: the underlying pure resolvers.
"""
from .core import ArtworkKind, Classification
from .resolvers import (
    resolve_episode_thumb,
    resolve_folder_backdrop,
    resolve_folder_poster,
    resolve_loose_backdrop,
    resolve_loose_poster,
    resolve_relocation,
)
from .batch import process_backdrops, process_episode_thumbs, process_posters

__all__ = [
    "ArtworkKind",
    "Classification",
    "resolve_loose_backdrop",
    "resolve_loose_poster",
    "resolve_folder_backdrop",
    "resolve_folder_poster",
    "resolve_episode_thumb",
    "resolve_relocation",
    "process_backdrops",
    "process_posters",
    "process_episode_thumbs",
]
