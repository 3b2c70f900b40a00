"""
A module providing constants, utility functions, and logging mechanisms
for artwork processing tasks.

This module includes the extension sets and filename grammars used by every
stage, helpers for running the external extractor and for overwrite-safe
file moves, the engine event vocabulary, and the structured logger that
renders those events by default.
"""

from .constants import (
    ARCHIVE_EXTENSIONS,
    IMAGE_EXTENSIONS,
    RELOCATE_IMAGE_EXTENSIONS,
    SEASON_EPISODE_REGEX,
    SHOW_KEY_REGEX,
    VIDEO_EXTENSIONS,
)
from .errors import EngineIOError, PlexArtError
from .events import Event, EventKind, EventRecorder, EventSink
from .logger import LogLevel

__all__ = [
    "ARCHIVE_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "RELOCATE_IMAGE_EXTENSIONS",
    "VIDEO_EXTENSIONS",
    "SHOW_KEY_REGEX",
    "SEASON_EPISODE_REGEX",
    "EngineIOError",
    "PlexArtError",
    "Event",
    "EventKind",
    "EventRecorder",
    "EventSink",
    "LogLevel",
]
