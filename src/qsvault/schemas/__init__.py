from qsvault.schemas.health import (
    BodyTemperatureRecord,
    HealthDataExport,
    HealthMetric,
    HeartRateRecord,
    HeartRateVariabilityRecord,
    MetricFile,
    MetricRecord,
    RawMetric,
    RestingHeartRateRecord,
    SleepAnalysisRecord,
)
from qsvault.schemas.issue import Issue
from qsvault.schemas.location import LocationEntry, LocationFile, LocationPayload

__all__ = [
    "BodyTemperatureRecord",
    "HealthDataExport",
    "HealthMetric",
    "HeartRateRecord",
    "HeartRateVariabilityRecord",
    "Issue",
    "LocationEntry",
    "LocationFile",
    "LocationPayload",
    "MetricFile",
    "MetricRecord",
    "RawMetric",
    "RestingHeartRateRecord",
    "SleepAnalysisRecord",
]
