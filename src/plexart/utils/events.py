"""
Engine events reported to an `on_event(kind, path, detail)` callback.

The engine never prints. Each stage reports what it does through a callback
so the presentation layer (console, GUI, log file) can subscribe without
parsing engine internals. `logger.log_event` is the default subscriber.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from .logger import LogLevel

EventSink = Callable[["EventKind", Optional[Path], Optional[str]], None]


class EventKind(Enum):
    """Dotted event names, each carrying a default log level."""

    def __new__(cls, name: str, level: LogLevel):
        member = object.__new__(cls)
        member._value_ = name
        member.level = level
        return member

    # Stage lifecycle
    STAGE_START = ("stage.start", LogLevel.INFO)
    STAGE_DONE = ("stage.done", LogLevel.INFO)
    SOURCE_MISSING = ("stage.source_missing", LogLevel.ERROR)
    NO_TARGETS = ("stage.no_targets", LogLevel.INFO)

    # Target indexing
    TARGET_ROOT_MISSING = ("index.root_missing", LogLevel.WARN)
    TARGET_DUPLICATE = ("index.duplicate_show", LogLevel.DEBUG)
    SHOW_INDEXED = ("index.show", LogLevel.TRACE)

    # Archive staging
    NO_ARCHIVES = ("archive.none_found", LogLevel.INFO)
    NO_MATCHES = ("archive.no_matches", LogLevel.INFO)
    ARCHIVE_UNMATCHED = ("archive.unmatched", LogLevel.DEBUG)
    EXTRACTOR_MISSING = ("archive.extractor_missing", LogLevel.ERROR)
    EXTRACT_START = ("archive.extract", LogLevel.INFO)
    EXTRACT_FAILED = ("archive.extract_failed", LogLevel.ERROR)
    ARCHIVE_LOCKED = ("archive.delete_locked", LogLevel.DEBUG)
    ARCHIVE_DELETE_FAILED = ("archive.delete_failed", LogLevel.WARN)
    ARCHIVE_DELETED = ("archive.deleted", LogLevel.INFO)
    PRUNED = ("archive.pruned", LogLevel.DEBUG)

    # Classification and relocation
    RENAMED = ("artwork.renamed", LogLevel.INFO)
    MOVED = ("artwork.moved", LogLevel.INFO)
    UNRECOGNIZED = ("artwork.unrecognized", LogLevel.INFO)
    NOT_MATCHED = ("artwork.not_matched", LogLevel.TRACE)
    FOLDER_SKIPPED = ("artwork.folder_skipped", LogLevel.INFO)
    KEY_NOT_FOUND = ("thumb.key_not_found", LogLevel.WARN)
    SEASON_MISSING = ("relocate.season_missing", LogLevel.WARN)
    NO_DESTINATION = ("relocate.no_destination", LogLevel.ERROR)
    DESTINATION_MISSING = ("relocate.destination_missing", LogLevel.ERROR)
    FILE_FAILED = ("artwork.failed", LogLevel.ERROR)
    FOLDER_REMOVED = ("relocate.folder_removed", LogLevel.INFO)
    FOLDER_NOT_EMPTY = ("relocate.folder_not_empty", LogLevel.INFO)


@dataclass
class Event:
    kind: EventKind
    path: Optional[Path]
    detail: Optional[str]


@dataclass
class EventRecorder:
    """Event sink that keeps every event, optionally forwarding to another sink."""
    forward: Optional[EventSink] = None
    events: List[Event] = field(default_factory=list)

    def __call__(self, kind: EventKind, path: Optional[Path] = None, detail: Optional[str] = None) -> None:
        self.events.append(Event(kind, path, detail))
        if self.forward:
            self.forward(kind, path, detail)

    def kinds(self) -> List[EventKind]:
        return [e.kind for e in self.events]

    def of(self, kind: EventKind) -> List[Event]:
        return [e for e in self.events if e.kind is kind]
