from qsvault.ingest.dedup import DedupResult, deduplicate_metrics, record_key
from qsvault.ingest.dispatcher import (
    HEALTH_ISSUE_TITLE,
    LOCATION_ISSUE_TITLE,
    IssueDispatcher,
)
from qsvault.ingest.health import ingest_health_data, ingest_health_export, process_metric
from qsvault.ingest.location import ingest_location_data
from qsvault.ingest.notify import Notifier, safe_notify
from qsvault.ingest.parser import PayloadError
from qsvault.ingest.results import IngestionResult, MetricOutcome, OutcomeStatus
from qsvault.ingest.router import METRIC_FILES, route_to_file

__all__ = [
    "HEALTH_ISSUE_TITLE",
    "LOCATION_ISSUE_TITLE",
    "METRIC_FILES",
    "DedupResult",
    "IngestionResult",
    "IssueDispatcher",
    "MetricOutcome",
    "Notifier",
    "OutcomeStatus",
    "PayloadError",
    "deduplicate_metrics",
    "ingest_health_data",
    "ingest_health_export",
    "ingest_location_data",
    "process_metric",
    "record_key",
    "route_to_file",
    "safe_notify",
]
