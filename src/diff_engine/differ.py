"""
Field-level comparison of two matched records.

Values are compared as exact strings. The only normalization is that None
and "" are both treated as "no value". "100" vs "100.0" is a change.
"""

from typing import Mapping, Optional, Sequence

from src.power_records import AnyRecord

from .errors import SchemaMismatchError
from .models import ChangeType, PropertyChange


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def values_equal(old: Optional[str], new: Optional[str]) -> bool:
    """Exact string equality, with None and "" equal."""
    return (old or None) == (new or None)


def diff_values(
    old_values: Mapping[str, Optional[str]],
    new_values: Mapping[str, Optional[str]],
    fields: Sequence[str],
    prefix: str = "",
) -> list[PropertyChange]:
    """
    Compare two value mappings over a fixed field list.

    Args:
        old_values: Field values from the old side
        new_values: Field values from the new side
        fields: Fields to compare, in output order
        prefix: Optional path prefix (gives "prefix.field" paths)

    Returns:
        One MODIFIED PropertyChange per differing field; unchanged fields
        are omitted
    """
    changes: list[PropertyChange] = []

    for name in fields:
        old = old_values.get(name)
        new = new_values.get(name)
        if values_equal(old, new):
            continue
        changes.append(PropertyChange(
            path=_join(prefix, name),
            old_value=old,
            new_value=new,
            change_type=ChangeType.MODIFIED
        ))

    return changes


def diff_fields(
    old_record: AnyRecord,
    new_record: AnyRecord,
    prefix: str = "",
) -> list[PropertyChange]:
    """
    Compare two versions of the same record field by field.

    Identity and scenario fields are the match key and are not compared.
    Output follows the record type's declared field order.

    Args:
        old_record: Record from the old snapshot
        new_record: Record from the new snapshot
        prefix: Optional path prefix

    Returns:
        List of changed fields (empty when the records are equal)

    Raises:
        SchemaMismatchError: If the two records expose different field sets

    Example:
        >>> diff_fields(Bus(id="BUS-1", base_kv="13.8"), Bus(id="BUS-1", base_kv="4.16"))
        [PropertyChange(path='base_kv', old_value='13.8', new_value='4.16', ...)]
    """
    old_schema = old_record.describe()
    new_schema = new_record.describe()

    if old_schema.field_set != new_schema.field_set:
        raise SchemaMismatchError(
            f"Cannot compare {old_schema.record_type} records with different field sets",
            record_type=old_schema.record_type,
        )

    return diff_values(
        old_record.field_values(),
        new_record.field_values(),
        old_schema.content_fields,
        prefix=prefix
    )
