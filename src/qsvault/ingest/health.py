"""Health export ingestion: validate, route, dedup and write each metric kind."""

import logging
from collections.abc import Sequence
from pathlib import Path

from qsvault.config import ConflictPolicy
from qsvault.ingest.dedup import deduplicate_metrics
from qsvault.ingest.notify import Notifier, safe_notify
from qsvault.ingest.parser import PayloadError, parse_health_export, validate_metric
from qsvault.ingest.results import IngestionResult, MetricOutcome, OutcomeStatus
from qsvault.ingest.router import route_to_file
from qsvault.ingest.state import read_metric_file
from qsvault.ingest.writer import write_metric_file
from qsvault.schemas.health import METRIC_RECORD_TYPES, HealthDataExport, RawMetric
from qsvault.vault.base import VaultReader, VaultWriter

logger = logging.getLogger(__name__)

DEFAULT_HEALTHKIT_DIR = "./vault/healthkit"


def _plural(count: int) -> str:
    return "entry" if count == 1 else "entries"


async def process_metric(
    metric: RawMetric,
    base_path: str | Path,
    reader: VaultReader,
    writer: VaultWriter,
    policy: ConflictPolicy = ConflictPolicy.KEEP_FIRST,
) -> MetricOutcome:
    """Ingest one metric entry into its vault file.

    Unknown kinds are skipped. A known kind whose entry does not match its
    schema is reported as an error without touching the file.

    Raises:
        Exception: Whatever the writer raises when the file cannot be written.
    """
    path = route_to_file(metric.name, base_path)
    if path is None:
        return MetricOutcome(
            metric=metric.name,
            status=OutcomeStatus.SKIPPED,
            message=f"Skipping unknown metric: {metric.name}",
        )

    try:
        validated = validate_metric(metric)
    except PayloadError as e:
        return MetricOutcome(metric=metric.name, status=OutcomeStatus.ERROR, message=str(e))

    state = await read_metric_file(path, METRIC_RECORD_TYPES[validated.name], reader)
    dedup = deduplicate_metrics(state.metrics, validated.data, policy)

    if not dedup.new and not dedup.removed:
        return MetricOutcome(
            metric=validated.name,
            status=OutcomeStatus.UNCHANGED,
            message=f"No new data for {validated.name} (already ingested)",
        )

    await write_metric_file(
        path,
        dedup.existing,
        dedup.new,
        writer,
        issue_created_at=state.issue_created_at,
    )

    message = f"Saved {len(dedup.new)} new entries for {validated.name} to {Path(path).name}"
    if dedup.replaced_incomplete:
        count = dedup.replaced_incomplete
        message += f" (replaced {count} incomplete {_plural(count)})"
    if dedup.overwritten:
        count = dedup.overwritten
        message += f" (overwrote {count} existing {_plural(count)})"

    return MetricOutcome(
        metric=validated.name,
        status=OutcomeStatus.SAVED,
        message=message,
        new_entries=len(dedup.new),
        replaced_incomplete=dedup.replaced_incomplete,
        overwritten=dedup.overwritten,
    )


async def _process_all(
    metrics: Sequence[RawMetric],
    base_path: str | Path,
    reader: VaultReader,
    writer: VaultWriter,
    policy: ConflictPolicy,
) -> list[MetricOutcome]:
    # Each read-modify-write completes before the next metric starts.
    outcomes: list[MetricOutcome] = []
    for metric in metrics:
        try:
            outcome = await process_metric(metric, base_path, reader, writer, policy)
        except Exception as e:
            outcome = MetricOutcome(
                metric=metric.name,
                status=OutcomeStatus.ERROR,
                message=f"Error processing {metric.name}: {e}",
            )

        if outcome.status is OutcomeStatus.ERROR:
            logger.error("%s", outcome.message)
        elif outcome.status is OutcomeStatus.SKIPPED:
            logger.warning("%s", outcome.message)
        else:
            logger.info("%s", outcome.message)
        outcomes.append(outcome)
    return outcomes


def summarize(outcomes: Sequence[MetricOutcome]) -> IngestionResult:
    """Fold per-metric outcomes into one result. Any error fails the whole run."""
    errors = [o.message for o in outcomes if o.status is OutcomeStatus.ERROR]
    if errors:
        return IngestionResult(success=False, message=f"Errors occurred: {'; '.join(errors)}")

    lines = [o.message for o in outcomes if o.status is not OutcomeStatus.SKIPPED]
    lines += [o.message for o in outcomes if o.status is OutcomeStatus.SKIPPED]
    return IngestionResult(
        success=True,
        message="Successfully ingested health data:\n" + "\n".join(lines),
    )


def format_notification(outcomes: Sequence[MetricOutcome]) -> str:
    """Multi-line ticket comment for a finished run."""
    errors = [o.message for o in outcomes if o.status is OutcomeStatus.ERROR]
    if errors:
        bullets = "\n".join(f"- {e}" for e in errors)
        return f"❌ Encountered errors while processing:\n{bullets}"

    ordered = [o for o in outcomes if o.status is not OutcomeStatus.SKIPPED]
    ordered += [o for o in outcomes if o.status is OutcomeStatus.SKIPPED]
    bullets = "\n".join(f"- {o.message}" for o in ordered)
    return f"✅ Successfully ingested health data!\n\n{bullets}"


async def ingest_health_export(
    export: HealthDataExport,
    *,
    reader: VaultReader,
    writer: VaultWriter,
    base_path: str | Path = DEFAULT_HEALTHKIT_DIR,
    policy: ConflictPolicy = ConflictPolicy.KEEP_FIRST,
) -> IngestionResult:
    """Ingest an already-parsed export, e.g. a file handed to the CLI."""
    outcomes = await _process_all(export.data.metrics, base_path, reader, writer, policy)
    return summarize(outcomes)


async def ingest_health_data(
    body: str,
    *,
    reader: VaultReader,
    writer: VaultWriter,
    notifier: Notifier | None = None,
    base_path: str | Path = DEFAULT_HEALTHKIT_DIR,
    policy: ConflictPolicy = ConflictPolicy.KEEP_FIRST,
) -> IngestionResult:
    """Ingest the JSON body of a health ticket.

    A body that fails to parse is a hard failure and nothing is written.
    Otherwise each metric is handled independently; files written for good
    metrics stay written even when another metric fails.
    """
    try:
        export = parse_health_export(body)
    except PayloadError as e:
        logger.error("Rejected health payload: %s", e)
        await safe_notify(notifier, f"❌ {e}")
        return IngestionResult(success=False, message=str(e))

    outcomes = await _process_all(export.data.metrics, base_path, reader, writer, policy)
    await safe_notify(notifier, format_notification(outcomes))
    return summarize(outcomes)
