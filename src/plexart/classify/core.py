"""
Classification result shared by every resolver.

A `Classification` records what a source image is and, when it can be
placed, the full destination path, so the stage that acts on it never has
to re-parse the filename.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ArtworkKind(Enum):
    BACKDROP = "backdrop"
    SEASON_POSTER = "season poster"
    SPECIALS_POSTER = "specials poster"
    FOLDER_POSTER = "folder poster"
    EPISODE_THUMB = "episode thumbnail"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Classification:
    kind: ArtworkKind
    source: Path
    target: Optional[Path] = None
    season: Optional[int] = None
    video_name: Optional[str] = None
    episode_key: Optional[str] = None
    reason: Optional[str] = None
    warning: Optional[str] = None

    @property
    def recognized(self) -> bool:
        return self.kind is not ArtworkKind.UNRECOGNIZED


def unrecognized(source: Path, reason: str, episode_key: Optional[str] = None) -> Classification:
    return Classification(ArtworkKind.UNRECOGNIZED, source, reason=reason, episode_key=episode_key)
