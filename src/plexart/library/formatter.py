"""
Utilities to build the artwork filenames a Plex-style media server expects.

- "backdrop.<ext>"
- "folder.<ext>"
- "season01-poster.<ext>" / "season-specials-poster.<ext>"
- "<video base name>-thumb.<ext>"

Notes:
- The extension is passed through verbatim, so the source file's extension
  casing is preserved on output (".JPG" stays ".JPG").
- Season 0 is the specials season, not a missing season.
"""
from plexart.utils.constants import BACKDROP_NAME, FOLDER_NAME, SPECIALS_POSTER_NAME, THUMB_SUFFIX


def format_season_file(season: int) -> str:
    """
    Build the season poster stem.

    Examples:
    - format_season_file(0) -> "season-specials-poster"
    - format_season_file(1) -> "season01-poster"
    - format_season_file(12) -> "season12-poster"
    """
    if season == 0:
        return SPECIALS_POSTER_NAME
    return f"season{season:02d}-poster"


def season_poster_name(season: int, suffix: str) -> str:
    return f"{format_season_file(season)}{suffix}"


def backdrop_name(suffix: str) -> str:
    return f"{BACKDROP_NAME}{suffix}"


def folder_poster_name(suffix: str) -> str:
    return f"{FOLDER_NAME}{suffix}"


def thumb_name(video_base: str, suffix: str) -> str:
    """Thumbnail filename that pairs with the video `video_base` (no extension)."""
    return f"{video_base}{THUMB_SUFFIX}{suffix}"
