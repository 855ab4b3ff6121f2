"""Parse ticket bodies and metric entries into validated payloads."""

import json
from typing import NoReturn

from pydantic import TypeAdapter, ValidationError

from qsvault.schemas.health import HealthDataExport, HealthMetric, RawMetric
from qsvault.schemas.location import LocationPayload

_health_metric_adapter: TypeAdapter[HealthMetric] = TypeAdapter(HealthMetric)


class PayloadError(ValueError):
    """Input that cannot be ingested. The message is fit to post on the ticket."""


def format_validation_error(error: ValidationError) -> str:
    """Render each issue as `field.path: message`, joined with `; `."""
    parts = []
    for issue in error.errors():
        path = ".".join(str(segment) for segment in issue["loc"]) or "body"
        parts.append(f"{path}: {issue['msg']}")
    return "; ".join(parts)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def _load_json(body: str, label: str) -> object:
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        raise PayloadError(f"Error parsing {label} data: {e}") from e


def parse_health_export(body: str) -> HealthDataExport:
    """Parse a health ticket body into the lenient export envelope.

    Raises:
        PayloadError: If the body is not JSON or lacks `data.metrics`.
    """
    payload = _load_json(body, "health")
    try:
        return HealthDataExport.model_validate(payload)
    except ValidationError as e:
        raise PayloadError(f"Validation failed: {format_validation_error(e)}") from e


def validate_metric(metric: RawMetric) -> HealthMetric:
    """Validate a metric entry of a known kind against that kind's schema.

    Raises:
        PayloadError: If the entry does not match its kind's shape.
    """
    try:
        return _health_metric_adapter.validate_python(metric.model_dump())
    except ValidationError as e:
        raise PayloadError(
            f"Invalid data for {metric.name}: {format_validation_error(e)}"
        ) from e


def parse_location(body: str) -> LocationPayload:
    """Parse a location ticket body.

    Raises:
        PayloadError: If the body is not JSON or lacks `city`/`country`.
    """
    payload = _load_json(body, "location")
    try:
        return LocationPayload.model_validate(payload)
    except ValidationError as e:
        raise PayloadError(f"Validation failed: {format_validation_error(e)}") from e
