"""
JSON sidecar holding the last used source root and target roots.

The engine itself never reads this file; the command-line shell loads it
at startup and writes it back on request, then passes plain paths in.
"""
import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

from plexart.utils import logger
from plexart.utils.logger import LogLevel


@dataclass
class Settings:
    source: str = ""
    targets: List[str] = field(default_factory=list)


def load_settings(path: Path) -> Settings:
    """Read settings from `path`, falling back to defaults when absent or malformed."""
    if not path.is_file():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.log("settings.unreadable", LogLevel.WARN, path=path, error=str(e))
        return Settings()
    if not isinstance(data, dict):
        logger.log("settings.unreadable", LogLevel.WARN, path=path, error="not a JSON object")
        return Settings()

    source = data.get("source") or ""
    targets = data.get("targets") or []
    if not isinstance(source, str):
        source = ""
    if not isinstance(targets, list):
        targets = []
    return Settings(source=source, targets=[t for t in targets if isinstance(t, str) and t])


def save_settings(path: Path, settings: Settings) -> None:
    """Write settings to `path` as indented JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
    logger.log("settings.saved", LogLevel.DEBUG, path=path)
