"""
Module for parsing folder and file names against the library grammar:
show keys ("Name (YYYY)"), season folders ("Season N"), episode tokens
("S01E07", "s1 e7") and the artwork suffixes (" - Backdrop", " - Season N").

All functions are pure string parsers; none of them touch the filesystem.
"""

from plexart.utils.constants import (
    BACKDROP_SUFFIX_REGEX,
    SEASON_EPISODE_REGEX,
    SEASON_FOLDER_REGEX,
    SEASON_POSTER_SUFFIX_REGEX,
    SHOW_KEY_REGEX,
    SPECIALS_FOLDER,
)


def is_show_key(name: str) -> bool:
    """True when `name` is an eligible show folder name like "Loki (2021)"."""
    return SHOW_KEY_REGEX.match(name) is not None


def normalize_key(name: str) -> str:
    """Case-insensitive comparison form of a show key."""
    return name.casefold()


def parse_episode(name: str) -> tuple[int | None, int | None]:
    """Extract season and episode numbers from a filename."""
    match = SEASON_EPISODE_REGEX.search(name)
    if match:
        return int(match.group(1)), int(match.group(2))
    return None, None


def parse_episode_key(name: str) -> str | None:
    """
    Extract the normalized episode key from a filename.

    Examples:
      "S01E07 - Pinkeye" -> "S01E07"
      "show s1 e7"       -> "S01E07"
      "Backdrop"         -> None
    """
    season, episode = parse_episode(name)
    if season is None:
        return None
    return format_episode_key(season, episode)


def format_episode_key(season: int, episode: int) -> str:
    return f"S{season:02d}E{episode:02d}"


def parse_season_folder(name: str) -> int | None:
    """Season number of a "Season N" folder, or None for anything else."""
    match = SEASON_FOLDER_REGEX.match(name)
    return int(match.group(1)) if match else None


def is_specials_folder(name: str) -> bool:
    """Only the literal "Specials" counts; case is not normalized."""
    return name == SPECIALS_FOLDER


def split_backdrop(stem: str) -> str | None:
    """Return the prefix of "<prefix> - Backdrop", or None."""
    match = BACKDROP_SUFFIX_REGEX.match(stem)
    return match.group("prefix") if match else None


def split_season_poster(stem: str) -> tuple[str, int] | None:
    """Return (prefix, season) for "<prefix> - Season <N>", or None."""
    match = SEASON_POSTER_SUFFIX_REGEX.match(stem)
    if not match:
        return None
    return match.group("prefix"), int(match.group("season"))
