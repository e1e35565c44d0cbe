"""
Diff aggregation service.

Main entry point for comparing two snapshots. Runs the pipeline per record
type:
    1. Schema check
    2. Entry matching by key
    3. Field diff of matched pairs
    4. Aggregation into EntryDiffs

Structural problems (blank keys, duplicate keys, schema mismatches) are
returned as diagnostics on the result, never raised to the caller.
"""

import logging
from typing import Sequence

from src.power_records import AnyRecord, DataSet, Project, PROJECT_METADATA_FIELDS
from src.power_records.dataset import COLLECTION_FIELDS

from .differ import diff_fields, diff_values
from .errors import DiffEngineError
from .matcher import MatchResult, check_schemas, match_entries
from .models import (
    ChangeType,
    DataSetDiff,
    DiffDiagnostic,
    EntryDiff,
    ProjectDiff,
)

logger = logging.getLogger(__name__)


def aggregate(match: MatchResult, record_type: str) -> DataSetDiff:
    """
    Build the DataSetDiff for one matched record type.

    Matched pairs become UNCHANGED or MODIFIED depending on their field
    diff, old-only keys become REMOVED and new-only keys ADDED. Entries
    follow ``match.order``.

    Args:
        match: Output of match_entries
        record_type: Record type name written on every entry

    Returns:
        DataSetDiff carrying the matcher's invalid-key diagnostics

    Raises:
        SchemaMismatchError: If a matched pair exposes different field sets
    """
    entries: list[EntryDiff] = []

    for key in match.order:
        rendered = key.render()

        if key in match.matched:
            pair = match.matched[key]
            changes = diff_fields(pair.old, pair.new)
            entries.append(EntryDiff(
                key=rendered,
                record_type=record_type,
                change_type=ChangeType.MODIFIED if changes else ChangeType.UNCHANGED,
                property_changes=changes
            ))
        elif key in match.old_only:
            entries.append(EntryDiff(
                key=rendered,
                record_type=record_type,
                change_type=ChangeType.REMOVED
            ))
        else:
            entries.append(EntryDiff(
                key=rendered,
                record_type=record_type,
                change_type=ChangeType.ADDED
            ))

    return DataSetDiff(entries=entries, diagnostics=list(match.invalid))


def _log_diagnostics(diagnostics: Sequence[DiffDiagnostic]) -> None:
    for d in diagnostics:
        logger.warning("Diff diagnostic | kind=%s type=%s %s", d.kind.value, d.record_type, d.message)


def diff_records(
    old_records: Sequence[AnyRecord],
    new_records: Sequence[AnyRecord],
    record_type: str,
) -> DataSetDiff:
    """
    Compare the old and new collections of one record type.

    A duplicate key or a schema mismatch fails the whole record type: the
    result then holds a single diagnostic and no entries, since picking a
    winner would make the report unreliable. Records with blank keys are
    left out and reported individually; the rest still get diffed.

    Args:
        old_records: Records from the old snapshot
        new_records: Records from the new snapshot
        record_type: Declared record type of both collections

    Returns:
        DataSetDiff for this record type

    Example:
        >>> result = diff_records([Bus(id="BUS1", base_kv="13.8")],
        ...                       [Bus(id="BUS1", base_kv="4.16")], "Bus")
        >>> result.modified_count
        1
    """
    try:
        check_schemas(old_records, new_records, record_type)
        match = match_entries(old_records, new_records, record_type)
        result = aggregate(match, record_type)
    except DiffEngineError as e:
        diagnostic = e.to_diagnostic()
        _log_diagnostics([diagnostic])
        return DataSetDiff(diagnostics=[diagnostic])

    _log_diagnostics(result.diagnostics)
    logger.debug(
        "Diffed %s | old=%d new=%d added=%d removed=%d modified=%d",
        record_type,
        len(old_records),
        len(new_records),
        result.added_count,
        result.removed_count,
        result.modified_count,
    )
    return result


def _record_type_order(old: dict[str, list], new: dict[str, list]) -> list[str]:
    """Catalog types first in catalog order, then other types old-then-new."""
    present = set(old) | set(new)
    order = [name for name in COLLECTION_FIELDS if name in present]
    for name in list(old) + list(new):
        if name not in COLLECTION_FIELDS and name not in order:
            order.append(name)
    return order


def diff_datasets(old: DataSet, new: DataSet) -> DataSetDiff:
    """
    Compare two snapshots across all record types.

    Each record type is diffed independently; a failure in one type is
    reported as a diagnostic and does not affect the others.

    Args:
        old: Old snapshot
        new: New snapshot

    Returns:
        Merged DataSetDiff, record types in catalog order
    """
    old_collections = dict(old.collections())
    new_collections = dict(new.collections())

    entries: list[EntryDiff] = []
    diagnostics: list[DiffDiagnostic] = []

    for record_type in _record_type_order(old_collections, new_collections):
        result = diff_records(
            old_collections.get(record_type, []),
            new_collections.get(record_type, []),
            record_type
        )
        entries.extend(result.entries)
        diagnostics.extend(result.diagnostics)

    merged = DataSetDiff(entries=entries, diagnostics=diagnostics)
    logger.info("Dataset diff complete | %s", merged.summary())
    return merged


def diff_projects(old: Project, new: Project) -> ProjectDiff:
    """
    Compare two projects: metadata, settings, then record snapshots.

    Metadata fields are compared in PROJECT_METADATA_FIELDS order. Settings
    in ``properties`` are reported as "properties.<name>", old key order
    first, then keys only the new project has; a missing setting counts
    as an empty value.

    Args:
        old: Old project
        new: New project

    Returns:
        ProjectDiff with metadata changes and the dataset diff
    """
    changes = diff_values(
        old.metadata_values(),
        new.metadata_values(),
        PROJECT_METADATA_FIELDS
    )

    setting_names = list(old.properties)
    setting_names += [name for name in new.properties if name not in old.properties]
    changes.extend(diff_values(
        old.properties,
        new.properties,
        setting_names,
        prefix="properties"
    ))

    data_diff = diff_datasets(old.data, new.data)

    logger.info(
        "Project diff complete | metadata_changes=%d %s",
        len(changes),
        data_diff.summary(),
    )
    return ProjectDiff(project_property_changes=changes, data_diff=data_diff)
