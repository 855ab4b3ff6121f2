"""Tests for reading and writing vault files."""

import json

import pytest

from qsvault.ingest.state import read_location_file, read_metric_file
from qsvault.ingest.writer import serialize, write_location_file, write_metric_file
from qsvault.schemas.health import HeartRateRecord, SleepAnalysisRecord
from qsvault.schemas.location import LocationEntry
from qsvault.vault.memory import MemoryVaultStore
from tests.helpers import DAY_1, DAY_2, HR_PATH, LOCATION_FILE, SLEEP_PATH, metric_file, read_json


class TestReadMetricFile:
    async def test_missing_file_is_empty(self, store: MemoryVaultStore) -> None:
        state = await read_metric_file(HR_PATH, HeartRateRecord, store)
        assert state.metrics == []
        assert state.issue_created_at is None

    async def test_reads_records_and_issue_created_at(self) -> None:
        store = MemoryVaultStore(
            {HR_PATH: metric_file({"Max": 80, "date": DAY_1}, issueCreatedAt="2025-10-27T10:00:00Z")}
        )

        state = await read_metric_file(HR_PATH, HeartRateRecord, store)

        assert [r.to_wire() for r in state.metrics] == [{"Max": 80, "date": DAY_1}]
        assert state.issue_created_at == "2025-10-27T10:00:00Z"

    async def test_non_json_is_empty(self) -> None:
        store = MemoryVaultStore({HR_PATH: "{not json"})
        state = await read_metric_file(HR_PATH, HeartRateRecord, store)
        assert state.metrics == []

    async def test_wrong_shape_is_empty(self) -> None:
        store = MemoryVaultStore({HR_PATH: json.dumps({"metrics": "nope"})})
        state = await read_metric_file(HR_PATH, HeartRateRecord, store)
        assert state.metrics == []

    async def test_record_missing_date_invalidates_file(self) -> None:
        store = MemoryVaultStore({SLEEP_PATH: metric_file({"source": "Ultrahuman"})})
        state = await read_metric_file(SLEEP_PATH, SleepAnalysisRecord, store)
        assert state.metrics == []


class TestReadLocationFile:
    async def test_missing_file_is_empty(self, store: MemoryVaultStore) -> None:
        assert await read_location_file(LOCATION_FILE, store) == []

    async def test_reads_entries_in_order(self) -> None:
        entries = [
            {"date": "2025-10-01", "city": "Paris", "country": "France"},
            {"date": "2025-10-05", "city": "Lyon", "country": "France"},
        ]
        store = MemoryVaultStore({LOCATION_FILE: json.dumps(entries)})

        result = await read_location_file(LOCATION_FILE, store)

        assert [e.city for e in result] == ["Paris", "Lyon"]

    async def test_non_list_is_empty(self) -> None:
        store = MemoryVaultStore({LOCATION_FILE: json.dumps({"city": "Paris"})})
        assert await read_location_file(LOCATION_FILE, store) == []


class TestWriters:
    async def test_metric_file_layout(self, store: MemoryVaultStore) -> None:
        existing = [HeartRateRecord.model_validate({"Max": 80, "date": DAY_1})]
        new = [HeartRateRecord.model_validate({"Max": 81, "date": DAY_2})]

        await write_metric_file(HR_PATH, existing, new, store)

        assert read_json(store, HR_PATH) == {
            "metrics": [{"Max": 80, "date": DAY_1}, {"Max": 81, "date": DAY_2}]
        }
        assert store.files[HR_PATH].startswith('{\n  "metrics": [\n    {')

    async def test_metric_file_keeps_issue_created_at(self, store: MemoryVaultStore) -> None:
        await write_metric_file(
            HR_PATH, [], [], store, issue_created_at="2025-10-27T10:00:00Z"
        )
        assert read_json(store, HR_PATH) == {
            "metrics": [],
            "issueCreatedAt": "2025-10-27T10:00:00Z",
        }

    async def test_location_file_layout(self, store: MemoryVaultStore) -> None:
        entry = LocationEntry(date="2025-10-27", city="São Paulo", country="Brazil")

        await write_location_file(LOCATION_FILE, [entry], store)

        assert read_json(store, LOCATION_FILE) == [
            {"date": "2025-10-27", "city": "São Paulo", "country": "Brazil"}
        ]
        assert "São Paulo" in store.files[LOCATION_FILE]

    def test_serialize_uses_two_space_indent(self) -> None:
        assert serialize({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}'


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_serialize_refuses_non_finite_numbers(value: float) -> None:
    with pytest.raises(ValueError):
        serialize({"metrics": [{"qty": value, "date": DAY_1}]})


async def test_non_finite_value_fails_the_write(store: MemoryVaultStore) -> None:
    record = HeartRateRecord.model_construct(maximum=float("inf"), date=DAY_1)

    with pytest.raises(ValueError):
        await write_metric_file(HR_PATH, [], [record], store)
    assert store.writes == []
