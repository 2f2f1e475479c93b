"""
Value objects produced by a report run.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class RunState(Enum):
    """States of a report run."""

    IDLE = "ready"  # Waiting for a submit
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult:
    """Whether a translation by the selected author exists for one identifier."""

    uid: str
    author_available: bool


@dataclass
class ReportStats:
    """Counters for a single run, used for the closing summary."""

    items_total: int = 0
    items_processed: int = 0
    authors_found: int = 0

    @property
    def authors_missing(self) -> int:
        return self.items_processed - self.authors_found

    def record(self, result: LookupResult) -> None:
        self.items_processed += 1
        if result.author_available:
            self.authors_found += 1


@dataclass
class RunOutcome:
    """The terminal state of one submit and what it produced."""

    state: RunState
    message: str
    collection: str = ""
    author: str = ""
    filename: Optional[str] = None
    output_path: Optional[Path] = None
    csv_text: Optional[str] = None
    results: list[LookupResult] = field(default_factory=list)
    stats: ReportStats = field(default_factory=ReportStats)
    duration_s: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.state is RunState.SUCCESS
