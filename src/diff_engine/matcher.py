"""
Entry matching.

Aligns the old and new collections of one record type by key. Output order
is fixed so identical inputs always produce identical reports: old-side
order for matched and removed entries, then new-only entries in new-side
order.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from src.power_records import AnyRecord, RecordSchema

from .errors import DuplicateKeyError, InvalidKeyError, SchemaMismatchError
from .keys import resolve_key
from .models import DiffDiagnostic, RecordKey, SnapshotSide


@dataclass(frozen=True)
class MatchedPair:
    """Old and new versions of the same record."""

    key: RecordKey
    old: AnyRecord
    new: AnyRecord


@dataclass
class MatchResult:
    """
    Partition of two collections by key.

    Attributes:
        record_type: Record type that was matched
        matched: Keys present on both sides
        old_only: Keys present only in the old collection (removed)
        new_only: Keys present only in the new collection (added)
        order: Every key exactly once, in report order
        invalid: Records excluded because they have no valid key
    """

    record_type: str
    matched: dict[RecordKey, MatchedPair] = field(default_factory=dict)
    old_only: dict[RecordKey, AnyRecord] = field(default_factory=dict)
    new_only: dict[RecordKey, AnyRecord] = field(default_factory=dict)
    order: list[RecordKey] = field(default_factory=list)
    invalid: list[DiffDiagnostic] = field(default_factory=list)


def _index_records(
    records: Sequence[AnyRecord],
    record_type: str,
    side: SnapshotSide,
) -> tuple[dict[RecordKey, AnyRecord], list[DiffDiagnostic]]:
    """
    Map key -> record for one side, in input order.

    Records with blank key fields are skipped and reported.

    Raises:
        DuplicateKeyError: If two records resolve to the same key
    """
    index: dict[RecordKey, AnyRecord] = {}
    positions: dict[RecordKey, int] = {}
    invalid: list[DiffDiagnostic] = []

    for i, record in enumerate(records):
        try:
            key = resolve_key(record)
        except InvalidKeyError as e:
            invalid.append(e.to_diagnostic().model_copy(
                update={"side": side, "record_index": i}
            ))
            continue

        if key in index:
            raise DuplicateKeyError(
                f"{record_type} key '{key.render()}' appears twice in the "
                f"{side.value} snapshot (records {positions[key]} and {i})",
                record_type=record_type,
                key=key.render(),
                side=side,
                record_index=i,
            )

        index[key] = record
        positions[key] = i

    return index, invalid


def match_entries(
    old_records: Sequence[AnyRecord],
    new_records: Sequence[AnyRecord],
    record_type: str,
) -> MatchResult:
    """
    Partition old and new records of one type into matched, old-only and new-only.

    Args:
        old_records: Records from the old snapshot
        new_records: Records from the new snapshot
        record_type: Record type being matched (for reporting)

    Returns:
        MatchResult covering every validly-keyed record exactly once

    Raises:
        DuplicateKeyError: If a key repeats within one side
    """
    old_index, old_invalid = _index_records(old_records, record_type, SnapshotSide.OLD)
    new_index, new_invalid = _index_records(new_records, record_type, SnapshotSide.NEW)

    result = MatchResult(record_type=record_type, invalid=old_invalid + new_invalid)

    for key, old in old_index.items():
        if key in new_index:
            result.matched[key] = MatchedPair(key=key, old=old, new=new_index[key])
        else:
            result.old_only[key] = old
        result.order.append(key)

    for key, new in new_index.items():
        if key not in old_index:
            result.new_only[key] = new
            result.order.append(key)

    return result


def _schema_signature(schema: RecordSchema) -> tuple[frozenset[str], tuple[str, ...]]:
    return schema.field_set, schema.key_fields


def check_schemas(
    old_records: Sequence[AnyRecord],
    new_records: Sequence[AnyRecord],
    record_type: str,
) -> Optional[RecordSchema]:
    """
    Verify every record of the declared type exposes the same field set.

    The first old record's schema (or the first new record's, if the old
    side is empty) is the reference; field order may differ between
    versions, field sets and key designations may not.

    Returns:
        The reference schema, or None if both collections are empty

    Raises:
        SchemaMismatchError: On a foreign record type or a differing field set
    """
    reference: Optional[RecordSchema] = None

    for side, records in ((SnapshotSide.OLD, old_records), (SnapshotSide.NEW, new_records)):
        for i, record in enumerate(records):
            schema = record.describe()

            if schema.record_type != record_type:
                raise SchemaMismatchError(
                    f"{record_type} collection contains a {schema.record_type} record",
                    record_type=record_type,
                    side=side,
                    record_index=i,
                )

            if reference is None:
                reference = schema
                continue

            if _schema_signature(schema) != _schema_signature(reference):
                missing = sorted(reference.field_set - schema.field_set)
                extra = sorted(schema.field_set - reference.field_set)
                raise SchemaMismatchError(
                    f"{record_type} records expose different field sets "
                    f"(missing: {missing or 'none'}, extra: {extra or 'none'})",
                    record_type=record_type,
                    side=side,
                    record_index=i,
                )

    return reference
