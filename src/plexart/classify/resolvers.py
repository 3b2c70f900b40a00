"""
Pure classification of artwork filenames.

Every resolver takes a file path plus in-memory lookups and returns a
`Classification`; none of them touch the filesystem. Two populations are
handled:

- Loose files sitting directly in the source root, named after the show
  ("Loki (2021) - Backdrop.jpg"). Their destination is the target show folder.
- Files inside a per-show source subfolder named after the show key. They are
  renamed in place, and the relocation resolver later decides where each
  normalized name belongs in the target library.

Functions:
- resolve_loose_backdrop / resolve_folder_backdrop: "<ShowKey> - Backdrop.<ext>".
- resolve_loose_poster / resolve_folder_poster: season and folder posters.
- resolve_episode_thumb: episode stills paired with a video by S..E.. key.
- resolve_relocation: normalized names mapped to target show or season folders.
"""
from pathlib import Path
from typing import Mapping, Optional

from plexart.classify.core import ArtworkKind, Classification, unrecognized
from plexart.library import formatter, parser
from plexart.library.index import SeasonIndex, ShowIndex
from plexart.utils.constants import (
    BACKDROP_NAME,
    FOLDER_NAME,
    IMAGE_EXTENSIONS,
    RELOCATE_IMAGE_EXTENSIONS,
    SEASON_POSTER_NAME_REGEX,
    SPECIALS_POSTER_NAME,
    THUMB_NAME_REGEX,
    THUMB_SUFFIX,
)


def _is_image(file: Path) -> bool:
    return file.suffix.lower() in IMAGE_EXTENSIONS


def _same_key(a: str, b: str) -> bool:
    return parser.normalize_key(a) == parser.normalize_key(b)


def _season_poster(source: Path, target_folder: Path, season: int) -> Classification:
    kind = ArtworkKind.SPECIALS_POSTER if season == 0 else ArtworkKind.SEASON_POSTER
    target = target_folder / formatter.season_poster_name(season, source.suffix)
    return Classification(kind, source, target, season=season)


def resolve_loose_backdrop(file: Path, shows: ShowIndex) -> Classification:
    """
    Classify a loose "<ShowKey> - Backdrop.<ext>" image.

    Parameters:
    - file (Path): Image directly under the source root.
    - shows (ShowIndex): Target show index.

    Returns:
    Classification: BACKDROP targeting "<target show>/backdrop.<ext>", or
    UNRECOGNIZED when the name does not fit or the show is not in the library.
    """
    if not _is_image(file):
        return unrecognized(file, "not an image")
    prefix = parser.split_backdrop(file.stem)
    if prefix is None or not parser.is_show_key(prefix):
        return unrecognized(file, "not a backdrop name")
    show_folder = shows.get(prefix)
    if show_folder is None:
        return unrecognized(file, f"no target show for {prefix}")
    return Classification(ArtworkKind.BACKDROP, file, show_folder / formatter.backdrop_name(file.suffix))


def resolve_loose_poster(file: Path, shows: ShowIndex) -> Classification:
    """
    Classify a loose season or folder poster.

    "<ShowKey> - Season <N>.<ext>" becomes "season<NN>-poster.<ext>" (or
    "season-specials-poster.<ext>" for N=0) and "<ShowKey>.<ext>" becomes
    "folder.<ext>", both in the target show folder.
    """
    if not _is_image(file):
        return unrecognized(file, "not an image")

    season_match = parser.split_season_poster(file.stem)
    if season_match is not None:
        prefix, season = season_match
        if not parser.is_show_key(prefix):
            return unrecognized(file, "not a poster name")
        show_folder = shows.get(prefix)
        if show_folder is None:
            return unrecognized(file, f"no target show for {prefix}")
        return _season_poster(file, show_folder, season)

    if parser.is_show_key(file.stem):
        show_folder = shows.get(file.stem)
        if show_folder is None:
            return unrecognized(file, f"no target show for {file.stem}")
        return Classification(ArtworkKind.FOLDER_POSTER, file, show_folder / formatter.folder_poster_name(file.suffix))

    return unrecognized(file, "not a poster name")


def resolve_folder_backdrop(file: Path, show_key: str) -> Classification:
    """Any "* - Backdrop.<ext>" inside a show subfolder is renamed to "backdrop.<ext>" in place."""
    if not _is_image(file):
        return unrecognized(file, "not an image")
    if parser.split_backdrop(file.stem) is None:
        return unrecognized(file, "not a backdrop name")
    return Classification(ArtworkKind.BACKDROP, file, file.with_name(formatter.backdrop_name(file.suffix)))


def resolve_folder_poster(file: Path, show_key: str) -> Classification:
    """
    Classify a poster inside the subfolder named `show_key`.

    The season poster prefix and the folder poster name must both equal the
    subfolder's own show key (ignoring case); a poster for another show
    dropped into the wrong folder stays put.
    """
    if not _is_image(file):
        return unrecognized(file, "not an image")

    season_match = parser.split_season_poster(file.stem)
    if season_match is not None:
        prefix, season = season_match
        if not _same_key(prefix, show_key):
            return unrecognized(file, f"season poster for {prefix} inside {show_key}")
        return _season_poster(file, file.parent, season)

    if _same_key(file.stem, show_key):
        return Classification(ArtworkKind.FOLDER_POSTER, file, file.with_name(formatter.folder_poster_name(file.suffix)))

    return unrecognized(file, "not a poster name")


def _is_normalized_artwork(stem: str, show_key: str) -> bool:
    lowered = stem.lower()
    return (
        lowered in (FOLDER_NAME, BACKDROP_NAME, SPECIALS_POSTER_NAME)
        or lowered.endswith(THUMB_SUFFIX)
        or SEASON_POSTER_NAME_REGEX.match(stem) is not None
        or _same_key(stem, show_key)
    )


def resolve_episode_thumb(file: Path, show_key: str, videos: Mapping[str, str]) -> Optional[Classification]:
    """
    Pair an episode still with its video.

    Parameters:
    - file (Path): Image inside the show subfolder.
    - show_key (str): The subfolder's show key.
    - videos (Mapping[str, str]): Episode key -> video base name for the show.

    Returns:
    - None for images that are already normalized artwork (folder, backdrop,
      season posters, "-thumb" files, or the show key poster).
    - EPISODE_THUMB renamed in place to "<video base>-thumb.<ext>".
    - UNRECOGNIZED when no S..E.. token is present, or when the token's key
      is missing from `videos` (then `episode_key` is set so the miss can be
      reported loudly).
    """
    if not _is_image(file):
        return unrecognized(file, "not an image")
    if _is_normalized_artwork(file.stem, show_key):
        return None

    key = parser.parse_episode_key(file.stem)
    if key is None:
        return unrecognized(file, "no episode key in name")
    video_name = videos.get(key)
    if video_name is None:
        return unrecognized(file, f"key not found: {key}", episode_key=key)

    target = file.with_name(formatter.thumb_name(video_name, file.suffix))
    return Classification(ArtworkKind.EPISODE_THUMB, file, target, video_name=video_name, episode_key=key)


def resolve_relocation(file: Path, show_folder: Path, seasons: SeasonIndex) -> Classification:
    """
    Decide where a normalized artwork file goes in the target library.

    - "<base>-thumb.<ext>" with an S..E.. key in <base>: the matching season
      folder (or specials for season 0). Without that folder the result has
      no target and a "cannot determine destination" reason.
    - "season<NN>-poster.<ext>" and "season-specials-poster.<ext>": the show
      folder itself, with a warning when the season folder is absent.
    - "backdrop.<ext>" and "folder.<ext>": the show folder itself.
    - Anything else: UNRECOGNIZED.

    Filenames are kept unchanged.
    """
    if file.suffix.lower() not in RELOCATE_IMAGE_EXTENSIONS:
        return unrecognized(file, "not an image")

    stem = file.stem
    lowered = stem.lower()

    thumb_match = THUMB_NAME_REGEX.match(stem)
    if thumb_match:
        season, _episode = parser.parse_episode(thumb_match.group("base"))
        if season is not None:
            folder = seasons.folder_for(season)
            if folder is None:
                return Classification(ArtworkKind.EPISODE_THUMB, file, None, season=season,
                                      reason=f"cannot determine destination: no folder for season {season}")
            return Classification(ArtworkKind.EPISODE_THUMB, file, folder / file.name, season=season)

    poster_match = SEASON_POSTER_NAME_REGEX.match(stem)
    if poster_match:
        season = int(poster_match.group("season"))
        warning = None if seasons.has_season(season) else f"season {season} folder not found"
        return Classification(ArtworkKind.SEASON_POSTER, file, show_folder / file.name, season=season, warning=warning)

    if lowered == SPECIALS_POSTER_NAME:
        warning = None if seasons.has_season(0) else "specials folder not found"
        return Classification(ArtworkKind.SPECIALS_POSTER, file, show_folder / file.name, season=0, warning=warning)

    if lowered == BACKDROP_NAME:
        return Classification(ArtworkKind.BACKDROP, file, show_folder / file.name)

    if lowered == FOLDER_NAME:
        return Classification(ArtworkKind.FOLDER_POSTER, file, show_folder / file.name)

    return unrecognized(file, "no relocation rule")
