from dataclasses import dataclass
from enum import StrEnum


class OutcomeStatus(StrEnum):
    SAVED = "saved"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass
class MetricOutcome:
    """Result of ingesting one metric entry of a health export."""

    metric: str
    status: OutcomeStatus
    message: str
    new_entries: int = 0
    replaced_incomplete: int = 0
    overwritten: int = 0


@dataclass
class IngestionResult:
    """Terminal outcome of a pipeline run."""

    success: bool
    message: str
