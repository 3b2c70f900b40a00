"""Structured stage outcomes returned to callers instead of raised errors."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class StageOutcome(Enum):
    COMPLETED = "completed"
    SOURCE_MISSING = "source missing"
    NO_TARGETS = "no eligible target shows"
    NO_ARCHIVES = "no archives"
    NO_MATCHES = "no matching archives"
    DEPENDENCY_MISSING = "extractor not found"


@dataclass
class StageResult:
    """
    Summary of one stage run.

    `changed` counts files extracted, renamed or moved by the stage;
    `unrecognized` counts files left alone because no rule matched;
    `errors` holds one message per failed file or archive.
    """
    outcome: StageOutcome = StageOutcome.COMPLETED
    changed: int = 0
    unrecognized: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and self.outcome not in (StageOutcome.SOURCE_MISSING,
                                                        StageOutcome.DEPENDENCY_MISSING)
