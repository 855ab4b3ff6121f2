import json
import logging
from collections.abc import Sequence
from typing import Any

from qsvault.schemas.health import MetricFile, MetricRecord
from qsvault.schemas.location import LocationEntry
from qsvault.vault.base import VaultWriter

logger = logging.getLogger(__name__)


def serialize(document: Any) -> str:
    """Pretty-print a vault document; key order is preserved as given.

    Raises:
        ValueError: If the document holds NaN or an infinity.
    """
    return json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)


async def write_metric_file(
    path: str,
    existing: Sequence[MetricRecord],
    new: Sequence[MetricRecord],
    writer: VaultWriter,
    *,
    issue_created_at: str | None = None,
) -> MetricFile[MetricRecord]:
    """Overwrite a metric file with the kept stored records followed by the new ones."""
    merged = MetricFile[MetricRecord](
        metrics=[*existing, *new],
        issue_created_at=issue_created_at,
    )
    await writer.write(path, serialize(merged.to_wire()))
    logger.info("Wrote %s: kept %d, added %d", path, len(existing), len(new))
    return merged


async def write_location_file(
    path: str, entries: Sequence[LocationEntry], writer: VaultWriter
) -> None:
    await writer.write(path, serialize([entry.model_dump() for entry in entries]))
    logger.info("Wrote %s: %d entries", path, len(entries))
