"""Route a ticket to exactly one ingestion pipeline by its title."""

import logging
from datetime import date
from pathlib import Path

from qsvault.config import ConflictPolicy, Settings
from qsvault.ingest.health import DEFAULT_HEALTHKIT_DIR, ingest_health_data
from qsvault.ingest.location import DEFAULT_LOCATION_FILE, ingest_location_data
from qsvault.ingest.notify import Notifier
from qsvault.ingest.results import IngestionResult
from qsvault.schemas.issue import Issue
from qsvault.vault.base import VaultReader, VaultWriter

logger = logging.getLogger(__name__)

HEALTH_ISSUE_TITLE = "HealthDataExport"
LOCATION_ISSUE_TITLE = "LocationDataExport"
PIPELINE_TITLES = (HEALTH_ISSUE_TITLE, LOCATION_ISSUE_TITLE)

NOT_ADDRESSED_MESSAGE = "Issue not intended for this processor"


class IssueDispatcher:
    """Selects the pipeline for a ticket and runs it against the injected vault."""

    def __init__(
        self,
        reader: VaultReader,
        writer: VaultWriter,
        *,
        healthkit_dir: str | Path = DEFAULT_HEALTHKIT_DIR,
        location_file: str | Path = DEFAULT_LOCATION_FILE,
        policy: ConflictPolicy = ConflictPolicy.KEEP_FIRST,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._healthkit_dir = healthkit_dir
        self._location_file = str(location_file)
        self._policy = policy

    @classmethod
    def from_settings(
        cls, settings: Settings, reader: VaultReader, writer: VaultWriter
    ) -> "IssueDispatcher":
        return cls(
            reader,
            writer,
            healthkit_dir=settings.healthkit_dir,
            location_file=settings.location_file,
            policy=settings.conflict_policy,
        )

    @staticmethod
    def handles(title: str) -> bool:
        return title in PIPELINE_TITLES

    async def dispatch(
        self,
        issue: Issue,
        notifier: Notifier | None = None,
        today: date | None = None,
    ) -> IngestionResult:
        """Run the pipeline addressed by `issue.title`.

        A title no pipeline answers to is not an error: the ticket belongs to
        someone else, so nothing is written and nothing is posted.
        """
        if issue.title == HEALTH_ISSUE_TITLE:
            return await ingest_health_data(
                issue.body,
                reader=self._reader,
                writer=self._writer,
                notifier=notifier,
                base_path=self._healthkit_dir,
                policy=self._policy,
            )

        if issue.title == LOCATION_ISSUE_TITLE:
            return await ingest_location_data(
                issue.body,
                reader=self._reader,
                writer=self._writer,
                notifier=notifier,
                file_path=self._location_file,
                today=today,
            )

        logger.info("Ignoring issue titled %r", issue.title)
        return IngestionResult(success=True, message=NOT_ADDRESSED_MESSAGE)
