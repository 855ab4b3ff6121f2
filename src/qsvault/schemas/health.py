"""Models for Health Auto Export payloads and the per-kind vault files.

Record models keep unknown keys so newer export versions pass through
untouched. Field declaration order is the persisted key order.
"""

from types import MappingProxyType
from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

Number = StrictInt | StrictFloat


class MetricRecord(BaseModel):
    """Base for a single observation of any metric kind."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, allow_inf_nan=False)

    def to_wire(self) -> dict[str, Any]:
        """Dump only the keys the record was given, declared fields first."""
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        for key, value in (self.model_extra or {}).items():
            data.setdefault(key, value)
        return data

    def is_incomplete(self) -> bool:
        return False


class HeartRateRecord(MetricRecord):
    maximum: Number | None = Field(default=None, alias="Max")
    average: Number | None = Field(default=None, alias="Avg")
    minimum: Number | None = Field(default=None, alias="Min")
    source: str | None = None
    date: str


class HeartRateVariabilityRecord(MetricRecord):
    qty: Number
    date: str


class RestingHeartRateRecord(MetricRecord):
    qty: Number
    date: str


class SleepAnalysisRecord(MetricRecord):
    in_bed_start: str | None = Field(default=None, alias="inBedStart")
    awake: Number | None = None
    source: str | None = None
    sleep_start: str | None = Field(default=None, alias="sleepStart")
    total_sleep: Number | None = Field(default=None, alias="totalSleep")
    sleep_end: str | None = Field(default=None, alias="sleepEnd")
    date: str
    deep: Number | None = None
    rem: Number | None = None
    in_bed_end: str | None = Field(default=None, alias="inBedEnd")
    in_bed: Number | None = Field(default=None, alias="inBed")
    core: Number | None = None
    asleep: Number | None = None

    def is_incomplete(self) -> bool:
        """True for the source+date stubs an earlier export bug left behind."""
        return set(self.to_wire()) == {"source", "date"}


class BodyTemperatureRecord(MetricRecord):
    date: str
    qty: Number


# Tagged metric variants


class HeartRateMetric(BaseModel):
    name: Literal["heart_rate"]
    units: Literal["count/min"]
    data: list[HeartRateRecord]


class HeartRateVariabilityMetric(BaseModel):
    name: Literal["heart_rate_variability"]
    units: Literal["ms"]
    data: list[HeartRateVariabilityRecord]


class RestingHeartRateMetric(BaseModel):
    name: Literal["resting_heart_rate"]
    units: Literal["count/min"]
    data: list[RestingHeartRateRecord]


class SleepAnalysisMetric(BaseModel):
    name: Literal["sleep_analysis"]
    units: Literal["hr"]
    data: list[SleepAnalysisRecord]


class BodyTemperatureMetric(BaseModel):
    name: Literal["body_temperature"]
    units: Literal["degC"]
    data: list[BodyTemperatureRecord]


HealthMetric = Annotated[
    HeartRateMetric
    | HeartRateVariabilityMetric
    | RestingHeartRateMetric
    | SleepAnalysisMetric
    | BodyTemperatureMetric,
    Field(discriminator="name"),
]

METRIC_RECORD_TYPES: MappingProxyType[str, type[MetricRecord]] = MappingProxyType(
    {
        "heart_rate": HeartRateRecord,
        "heart_rate_variability": HeartRateVariabilityRecord,
        "resting_heart_rate": RestingHeartRateRecord,
        "sleep_analysis": SleepAnalysisRecord,
        "body_temperature": BodyTemperatureRecord,
    }
)


# Export envelope (lenient)


class RawMetric(BaseModel):
    """A metric entry before its kind is known; data items are unchecked."""

    model_config = ConfigDict(extra="allow")

    name: str
    units: str
    data: list[Any]


class ExportData(BaseModel):
    metrics: list[RawMetric]


class HealthDataExport(BaseModel):
    data: ExportData


# Vault file

RecordT = TypeVar("RecordT", bound=MetricRecord)


class MetricFile(BaseModel, Generic[RecordT]):
    """Contents of one metric kind's vault file."""

    model_config = ConfigDict(populate_by_name=True)

    metrics: list[RecordT] = Field(default_factory=list)
    issue_created_at: str | None = Field(default=None, alias="issueCreatedAt")

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {"metrics": [record.to_wire() for record in self.metrics]}
        if self.issue_created_at is not None:
            data["issueCreatedAt"] = self.issue_created_at
        return data
