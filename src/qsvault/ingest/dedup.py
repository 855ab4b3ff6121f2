"""Deduplicate incoming metric records against the records already in the vault.

Records are identified by their `date`. Re-delivering a batch never grows a
file. A stored sleep stub (source + date only) is dropped as soon as a batch
carries that date, so the complete record takes its place. Any other stored
record for a re-delivered date is resolved by the conflict policy:

- KEEP_FIRST: the stored record stays, the incoming one is discarded.
- REPLACE: the stored record is dropped when the incoming one differs.

Surviving stored records keep their order and new records are appended in
input order. Nothing is sorted.
"""

import json
import logging
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

from qsvault.config import ConflictPolicy
from qsvault.schemas.health import MetricRecord

logger = logging.getLogger(__name__)


@dataclass
class DedupResult:
    """New records to append and stored records to keep."""

    new: list[MetricRecord] = field(default_factory=list)
    existing: list[MetricRecord] = field(default_factory=list)
    replaced_incomplete: int = 0
    overwritten: int = 0

    @property
    def removed(self) -> int:
        return self.replaced_incomplete + self.overwritten


def record_key(record: MetricRecord) -> str:
    """Identity of a record: its date, or its canonical JSON when it has none."""
    date = getattr(record, "date", None)
    if date:
        return str(date)
    return json.dumps(record.to_wire(), sort_keys=True, separators=(",", ":"))


def deduplicate_metrics(
    existing: Sequence[MetricRecord],
    new: Sequence[MetricRecord],
    policy: ConflictPolicy = ConflictPolicy.KEEP_FIRST,
) -> DedupResult:
    """Filter both sides of a merge so the result holds one record per key.

    Args:
        existing: Records currently stored for one metric kind.
        new: Incoming records for the same kind.
        policy: How to resolve a complete stored record whose key is re-delivered.

    Returns:
        DedupResult whose `existing + new` is the merged file content.
    """
    result = DedupResult()

    incoming: dict[str, list[MetricRecord]] = defaultdict(list)
    for record in new:
        incoming[record_key(record)].append(record)

    for record in existing:
        key = record_key(record)
        group = incoming.get(key)
        if not group:
            result.existing.append(record)
            continue

        if record.is_incomplete():
            result.replaced_incomplete += 1
            continue

        if policy is ConflictPolicy.REPLACE and group[-1].to_wire() != record.to_wire():
            result.overwritten += 1
            continue

        result.existing.append(record)

    kept_keys = {record_key(record) for record in result.existing}
    survivors: dict[str, MetricRecord] = {}
    for record in new:
        key = record_key(record)
        if key in kept_keys:
            continue
        if key not in survivors or policy is ConflictPolicy.REPLACE:
            survivors[key] = record

    result.new = list(survivors.values())

    dropped = len(new) - len(result.new)
    if dropped:
        logger.debug("Dropped %d duplicate incoming record(s)", dropped)
    return result
