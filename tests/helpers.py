import json
from typing import Any

from qsvault.ingest.notify import Notifier
from qsvault.vault.memory import MemoryVaultStore

HEALTHKIT_DIR = "vault/healthkit"
LOCATION_FILE = "vault/location.json"

HR_PATH = f"{HEALTHKIT_DIR}/hr.json"
HRV_PATH = f"{HEALTHKIT_DIR}/hrv.json"
SLEEP_PATH = f"{HEALTHKIT_DIR}/sleep.json"
TEMP_PATH = f"{HEALTHKIT_DIR}/bodySurfaceTemp.json"
RHR_PATH = f"{HEALTHKIT_DIR}/restingHeartRate.json"

DAY_1 = "2025-10-27 00:00:00 +0530"
DAY_2 = "2025-10-28 00:00:00 +0530"
DAY_3 = "2025-10-29 00:00:00 +0530"

COMPLETE_SLEEP = {
    "inBedStart": "2025-10-26 22:00:00 +0530",
    "awake": 0.25,
    "source": "Ultrahuman",
    "sleepStart": "2025-10-26 22:00:00 +0530",
    "totalSleep": 4.6666666666666661,
    "sleepEnd": "2025-10-27 02:55:00 +0530",
    "date": DAY_1,
    "deep": 1.25,
    "rem": 1.3333333333333333,
    "inBedEnd": "2025-10-27 02:55:00 +0530",
    "inBed": 0,
    "core": 2.083333333333333,
    "asleep": 0,
}


class RecordingNotifier(Notifier):
    """Collects every message it is asked to post."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    async def notify(self, message: str) -> None:
        self.messages.append(message)


class FailingNotifier(Notifier):
    async def notify(self, message: str) -> None:
        raise RuntimeError("comment service is down")


class FailingWriter(MemoryVaultStore):
    """Memory store whose writes to the given paths raise."""

    def __init__(self, failing_paths: set[str], files: dict[str, str] | None = None) -> None:
        super().__init__(files)
        self.failing_paths = failing_paths

    async def write(self, path: str, content: str) -> None:
        if path in self.failing_paths:
            raise OSError(f"disk full: {path}")
        await super().write(path, content)


def health_body(*metrics: dict[str, Any]) -> str:
    return json.dumps({"data": {"metrics": list(metrics)}})


def metric(name: str, units: str, *records: dict[str, Any]) -> dict[str, Any]:
    return {"name": name, "units": units, "data": list(records)}


def heart_rate(*records: dict[str, Any]) -> dict[str, Any]:
    return metric("heart_rate", "count/min", *records)


def sleep(*records: dict[str, Any]) -> dict[str, Any]:
    return metric("sleep_analysis", "hr", *records)


def metric_file(*records: dict[str, Any], **extra: Any) -> str:
    return json.dumps({"metrics": list(records), **extra}, indent=2)


def read_json(store: MemoryVaultStore, path: str) -> Any:
    return json.loads(store.files[path])
