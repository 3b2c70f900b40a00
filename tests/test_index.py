from pathlib import Path

from conftest import touch

from plexart.library import build_season_index, build_show_index, build_video_index
from plexart.utils import EventKind


def test_show_index_keeps_only_show_folders(target, events):
    (target / "Loki (2021)").mkdir()
    (target / "Loki").mkdir()
    (target / "Movies").mkdir()
    touch(target / "Fake (2000)")

    shows = build_show_index([target], events)

    assert len(shows) == 1
    assert shows.get("loki (2021)") == target / "Loki (2021)"
    assert "LOKI (2021)" in shows
    assert list(shows) == ["Loki (2021)"]


def test_show_index_first_root_wins(tmp_path, events):
    first = tmp_path / "a"
    second = tmp_path / "b"
    (first / "Loki (2021)").mkdir(parents=True)
    (second / "loki (2021)").mkdir(parents=True)
    (second / "Dark (2017)").mkdir(parents=True)

    shows = build_show_index([first, second], events)

    assert shows.get("Loki (2021)") == first / "Loki (2021)"
    assert shows.get("Dark (2017)") == second / "Dark (2017)"
    assert len(events.of(EventKind.TARGET_DUPLICATE)) == 1


def test_show_index_missing_root_warns(tmp_path, target, events):
    (target / "Dark (2017)").mkdir()
    missing = tmp_path / "nowhere"

    shows = build_show_index([missing, target], events)

    assert len(shows) == 1
    [warning] = events.of(EventKind.TARGET_ROOT_MISSING)
    assert warning.path == missing


def test_show_index_empty_is_not_an_error(tmp_path, events):
    shows = build_show_index([tmp_path / "missing"], events)
    assert len(shows) == 0
    assert not shows


def test_season_index(target):
    show = target / "Show (2020)"
    (show / "Season 1").mkdir(parents=True)
    (show / "season 02").mkdir()
    (show / "Specials").mkdir()
    (show / "Extras").mkdir()

    seasons = build_season_index(show)

    assert seasons.seasons == {"01": show / "Season 1", "02": show / "season 02"}
    assert seasons.specials == show / "Specials"
    assert seasons.folder_for(0) == show / "Specials"
    assert seasons.folder_for(2) == show / "season 02"
    assert seasons.folder_for(3) is None


def test_season_zero_folder_without_specials(target):
    show = target / "Show (2020)"
    (show / "Season 0").mkdir(parents=True)
    (show / "specials").mkdir()

    seasons = build_season_index(show)

    assert seasons.specials is None
    assert seasons.folder_for(0) == show / "Season 0"


def test_video_index_scans_recursively(target):
    show = target / "Show (2020)"
    touch(show / "Season 01" / "S01E07 - Pinkeye.mkv")
    touch(show / "Season 01" / "deeper" / "show.s01e08.mp4")
    touch(show / "Season 02" / "S02E01.ts")
    touch(show / "Season 02" / "S02E02.srt")
    touch(show / "Season 02" / "S02E03.jpg")

    videos = build_video_index(show)

    assert videos == {
        "S01E07": "S01E07 - Pinkeye",
        "S01E08": "show.s01e08",
        "S02E01": "S02E01",
    }


def test_video_index_first_video_per_key_wins(target):
    show = target / "Show (2020)"
    touch(show / "Season 01" / "a S01E01.mkv")
    touch(show / "Season 01" / "b S01E01.mp4")

    assert build_video_index(show) == {"S01E01": "a S01E01"}


def test_video_index_of_missing_folder(tmp_path):
    assert build_video_index(Path(tmp_path / "missing")) == {}
