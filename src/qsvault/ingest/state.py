"""Load the current contents of vault files.

A missing, unreadable, non-JSON or off-schema file is treated as empty so an
ingestion can always proceed as if starting fresh.
"""

import json
import logging

from pydantic import ValidationError

from qsvault.ingest.parser import format_validation_error
from qsvault.schemas.health import MetricFile, MetricRecord
from qsvault.schemas.location import LocationEntry, LocationFile
from qsvault.vault.base import VaultReader

logger = logging.getLogger(__name__)


async def _load_json(path: str, reader: VaultReader) -> object | None:
    try:
        content = await reader.read(path)
        return json.loads(content)
    except Exception:
        logger.debug("No readable state at %s, starting fresh", path, exc_info=True)
        return None


async def read_metric_file(
    path: str, record_type: type[MetricRecord], reader: VaultReader
) -> MetricFile[MetricRecord]:
    """Read one metric kind's file, validating records as `record_type`."""
    file_model = MetricFile[record_type]  # type: ignore[valid-type]
    payload = await _load_json(path, reader)
    if payload is None:
        return file_model()

    try:
        return file_model.model_validate(payload)
    except ValidationError as e:
        logger.warning("Validation failed for %s: %s", path, format_validation_error(e))
        return file_model()


async def read_location_file(path: str, reader: VaultReader) -> list[LocationEntry]:
    """Read the location history, oldest entry first."""
    payload = await _load_json(path, reader)
    if payload is None:
        return []

    try:
        return LocationFile.validate_python(payload)
    except ValidationError as e:
        logger.warning("Validation failed for %s: %s", path, format_validation_error(e))
        return []
