"""
Provides structured logging with log levels.

This module provides a structured logging system with UTC timestamps, log levels,
and key-value pair formatting for better log parsing and analysis. Lines are
written through tqdm so an active progress bar is not torn apart.
"""
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from tqdm import tqdm

_separator = " | "


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, Path):
            value = str(value)
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'archive.extracted', 'relocate.moved')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    kv_str = _format_kv(kwargs) if kwargs else ""
    header = f"{timestamp}{_separator}[{level.name}]{_separator}{event}"

    if kv_str:
        tqdm.write(f"{header}{_separator}{kv_str}")
    else:
        tqdm.write(header)


def log_event(kind, path: Path | None = None, detail: str | None = None) -> None:
    """
    Default engine event sink: forward an event to the structured log.

    Args:
        kind: An `EventKind` member; its value is the event name and its
              `level` the log level.
        path: File or folder the event concerns, if any.
        detail: Free-form detail (target path, error message, ...).
    """
    fields: Dict[str, Any] = {}
    if path is not None:
        fields["path"] = path
    if detail:
        fields["detail"] = detail
    log(kind.value, kind.level, **fields)
