"""Exception types raised across the engine boundary."""
from pathlib import Path


class PlexArtError(Exception):
    """Base error for the artwork engine."""


class EngineIOError(PlexArtError):
    """An unexpected filesystem failure, carrying the path it happened on."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")
