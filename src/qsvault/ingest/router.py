from pathlib import Path
from types import MappingProxyType

# Metric kind name -> vault file name
METRIC_FILES: MappingProxyType[str, str] = MappingProxyType(
    {
        "heart_rate": "hr.json",
        "heart_rate_variability": "hrv.json",
        "resting_heart_rate": "restingHeartRate.json",
        "body_temperature": "bodySurfaceTemp.json",
        "sleep_analysis": "sleep.json",
    }
)


def route_to_file(metric_name: str, base_path: str | Path) -> str | None:
    """Return the vault path for a metric kind, or None if the kind is unsupported."""
    file_name = METRIC_FILES.get(metric_name)
    if file_name is None:
        return None
    return str(Path(base_path) / file_name)
