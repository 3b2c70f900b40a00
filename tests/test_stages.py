from conftest import touch

from plexart.classify import process_backdrops, process_episode_thumbs, process_posters
from plexart.library import build_show_index
from plexart.relocate import relocate_all
from plexart.utils import EventKind


def _library(target, events, *names):
    for name in names:
        (target / name).mkdir(parents=True, exist_ok=True)
    return build_show_index([target], events)


def test_loose_season_poster_moves_to_target(source, target, events):
    shows = _library(target, events, "Loki (2021)")
    loose = touch(source / "Loki (2021) - Season 1.jpg", b"poster")

    result = process_posters(source, shows, events, progress=False)

    assert result.changed == 1
    assert not loose.exists()
    assert (target / "Loki (2021)" / "season01-poster.jpg").read_bytes() == b"poster"


def test_loose_files_overwrite_existing_artwork(source, target, events):
    shows = _library(target, events, "Loki (2021)")
    touch(target / "Loki (2021)" / "backdrop.jpg", b"old")
    touch(target / "Loki (2021)" / "folder.png", b"old")
    touch(source / "Loki (2021) - Backdrop.jpg", b"new backdrop")
    touch(source / "LOKI (2021).png", b"new poster")

    process_backdrops(source, shows, events, progress=False)
    process_posters(source, shows, events, progress=False)

    assert (target / "Loki (2021)" / "backdrop.jpg").read_bytes() == b"new backdrop"
    assert (target / "Loki (2021)" / "folder.png").read_bytes() == b"new poster"
    assert list(source.iterdir()) == []


def test_loose_files_for_unknown_shows_stay(source, target, events):
    shows = _library(target, events, "Loki (2021)")
    stray = touch(source / "Dark (2017) - Backdrop.jpg")
    other = touch(source / "wallpaper.jpg")

    result = process_backdrops(source, shows, events, progress=False)

    assert result.changed == 0
    assert not result.errors
    assert stray.exists() and other.exists()


def test_subfolder_renames_in_place(source, target, events):
    shows = _library(target, events, "Loki (2021)")
    folder = source / "Loki (2021)"
    touch(folder / "fanart - Backdrop.JPG")
    touch(folder / "Loki (2021) - Season 0.png")
    touch(folder / "Loki (2021) - Season 2.jpg")
    touch(folder / "Loki (2021).jpeg")
    touch(folder / "Dark (2017) - Season 1.jpg")

    process_backdrops(source, shows, events, progress=False)
    process_posters(source, shows, events, progress=False)

    assert sorted(p.name for p in folder.iterdir()) == [
        "Dark (2017) - Season 1.jpg",
        "backdrop.JPG",
        "folder.jpeg",
        "season-specials-poster.png",
        "season02-poster.jpg",
    ]


def test_subfolder_without_target_show_is_skipped(source, target, events):
    shows = _library(target, events, "Loki (2021)")
    stray = touch(source / "Dark (2017)" / "x - Backdrop.jpg")

    process_backdrops(source, shows, events, progress=False)

    assert stray.exists()
    assert events.of(EventKind.FOLDER_SKIPPED)[0].path == source / "Dark (2017)"


def test_episode_thumbs_rename_and_relocate(source, target, events):
    shows = _library(target, events, "Show (2020)")
    touch(target / "Show (2020)" / "Season 01" / "S01E07 - Pinkeye.mkv")
    touch(source / "Show (2020)" / "S01E07 - Pinkeye.jpg", b"still")

    thumbs = process_episode_thumbs(source, shows, events, progress=False)

    renamed = source / "Show (2020)" / "S01E07 - Pinkeye-thumb.jpg"
    assert thumbs.changed == 1
    assert renamed.exists()

    moved = relocate_all(source, shows, events, progress=False)

    final = target / "Show (2020)" / "Season 01" / "S01E07 - Pinkeye-thumb.jpg"
    assert moved.changed == 1
    assert final.read_bytes() == b"still"
    assert not (source / "Show (2020)").exists()


def test_episode_thumb_key_not_found_is_reported(source, target, events):
    shows = _library(target, events, "Show (2020)")
    touch(target / "Show (2020)" / "Season 01" / "S01E01.mkv")
    orphan = touch(source / "Show (2020)" / "S01E09 - Missing.jpg")

    result = process_episode_thumbs(source, shows, events, progress=False)

    assert orphan.exists()
    assert result.unrecognized == 1
    [miss] = events.of(EventKind.KEY_NOT_FOUND)
    assert miss.path == orphan
    assert "S01E09" in miss.detail


def test_relocate_moves_show_artwork_to_show_root(source, target, events):
    show = target / "Show (2020)"
    (show / "Season 1").mkdir(parents=True)
    shows = _library(target, events, "Show (2020)")
    for name in ["backdrop.jpg", "folder.png", "season01-poster.jpg", "season03-poster.jpg",
                 "season-specials-poster.webp"]:
        touch(source / "Show (2020)" / name)

    result = relocate_all(source, shows, events, progress=False)

    assert result.changed == 5
    assert sorted(p.name for p in show.iterdir() if p.is_file()) == [
        "backdrop.jpg", "folder.png", "season-specials-poster.webp",
        "season01-poster.jpg", "season03-poster.jpg",
    ]
    warned = sorted(e.path.name for e in events.of(EventKind.SEASON_MISSING))
    assert warned == ["season-specials-poster.webp", "season03-poster.jpg"]
    assert EventKind.FOLDER_REMOVED in events.kinds()


def test_relocate_thumb_without_season_folder(source, target, events):
    shows = _library(target, events, "Show (2020)")
    thumb = touch(source / "Show (2020)" / "S02E01 - Pilot-thumb.jpg")
    touch(source / "Show (2020)" / "backdrop.jpg")

    result = relocate_all(source, shows, events, progress=False)

    assert thumb.exists()
    assert result.changed == 1
    assert len(result.errors) == 1
    assert EventKind.NO_DESTINATION in events.kinds()
    assert EventKind.FOLDER_NOT_EMPTY in events.kinds()


def test_relocate_leaves_unrecognized_files(source, target, events):
    shows = _library(target, events, "Show (2020)")
    odd = touch(source / "Show (2020)" / "cover art.jpg")

    result = relocate_all(source, shows, events, progress=False)

    assert odd.exists()
    assert result.unrecognized == 1
    assert not result.errors
    assert (source / "Show (2020)").is_dir()


def test_relocate_skips_missing_destination_folder(source, target, events):
    shows = _library(target, events, "Show (2020)")
    touch(source / "Show (2020)" / "backdrop.jpg")
    (target / "Show (2020)").rmdir()

    result = relocate_all(source, shows, events, progress=False)

    assert (source / "Show (2020)" / "backdrop.jpg").exists()
    assert len(result.errors) == 1
    assert EventKind.DESTINATION_MISSING in events.kinds()


def test_relocate_keeps_folder_with_hidden_entries(source, target, events):
    shows = _library(target, events, "Show (2020)")
    touch(source / "Show (2020)" / "backdrop.jpg")
    hidden = touch(source / "Show (2020)" / ".DS_Store")

    relocate_all(source, shows, events, progress=False)

    assert hidden.exists()
    assert EventKind.FOLDER_NOT_EMPTY in events.kinds()
