"""Location ticket ingestion.

The vault keeps a location history where consecutive entries never share a
city. A ticket naming the same city as the last entry is acknowledged and
dropped; a revisit after being elsewhere is appended like any other move.
"""

import logging
from datetime import date

from qsvault.ingest.notify import Notifier, safe_notify
from qsvault.ingest.parser import PayloadError, parse_location
from qsvault.ingest.results import IngestionResult
from qsvault.ingest.state import read_location_file
from qsvault.ingest.writer import write_location_file
from qsvault.schemas.location import LocationEntry
from qsvault.vault.base import VaultReader, VaultWriter

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_FILE = "./vault/location.json"


async def ingest_location_data(
    body: str,
    *,
    reader: VaultReader,
    writer: VaultWriter,
    notifier: Notifier | None = None,
    file_path: str = DEFAULT_LOCATION_FILE,
    today: date | None = None,
) -> IngestionResult:
    """Append the ticket's city to the location history unless it repeats the last one.

    The new entry is stamped with the processing date, never a date from the
    payload. Cities are compared case-sensitively and country is ignored.
    """
    try:
        payload = parse_location(body)
    except PayloadError as e:
        logger.error("Rejected location payload: %s", e)
        await safe_notify(notifier, f"❌ {e}")
        return IngestionResult(success=False, message=str(e))

    entries = await read_location_file(file_path, reader)
    last = entries[-1] if entries else None

    if last is not None and last.city == payload.city:
        message = (
            f"Location not updated: {payload.city}, {payload.country} "
            "is the same as the last entry"
        )
        logger.info(message)
        await safe_notify(notifier, f"ℹ️ {message}")
        return IngestionResult(success=True, message=message)

    today = today or date.today()
    entry = LocationEntry(date=today.isoformat(), city=payload.city, country=payload.country)

    try:
        await write_location_file(file_path, [*entries, entry], writer)
    except Exception as e:
        message = f"Error writing location data: {e}"
        logger.error(message)
        await safe_notify(notifier, f"❌ {message}")
        return IngestionResult(success=False, message=message)

    added = f"{entry.city}, {entry.country} ({entry.date})"
    await safe_notify(notifier, f"✅ Successfully updated location!\n\nAdded: {added}")
    return IngestionResult(success=True, message=f"Added location: {added}")
