from pathlib import Path

import pytest

from plexart.utils.events import EventRecorder
from plexart.utils.file_util import RetryPolicy

NO_DELAY = RetryPolicy(max_attempts=5, delay=0, sleep=lambda _s: None)


def touch(path: Path, data: bytes = b"img") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture
def source(tmp_path: Path) -> Path:
    root = tmp_path / "source"
    root.mkdir()
    return root


@pytest.fixture
def target(tmp_path: Path) -> Path:
    root = tmp_path / "target"
    root.mkdir()
    return root


@pytest.fixture
def events() -> EventRecorder:
    return EventRecorder()
