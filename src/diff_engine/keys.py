"""
Key resolution.

Equipment records are keyed by id alone; study results by (id, scenario).
Key values are used verbatim: no trimming or case folding, so two ids that
differ only in whitespace are different records.
"""

from typing import Optional

from src.power_records import AnyRecord, RecordSchema

from .errors import InvalidKeyError
from .models import CompositeKey, RecordKey, SimpleKey


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def resolve_key(record: AnyRecord, schema: Optional[RecordSchema] = None) -> RecordKey:
    """
    Derive the comparison key for a record.

    For records with several identity fields (e.g., ShortCircuit's bus and
    equipment names) the key keeps one component per field. Components are
    joined with "|" only when rendered, with "|" and "\\" inside a value
    escaped.

    Args:
        record: Record to key
        schema: Schema to key by (defaults to the record's own)

    Returns:
        SimpleKey for equipment types, CompositeKey for study-result types

    Raises:
        InvalidKeyError: If an identity or scenario field is absent or blank

    Example:
        >>> resolve_key(Bus(id="BUS-1")).render()
        'BUS-1'
        >>> resolve_key(ArcFlash(id="BUS-1", scenario="Main-Max")).render()
        'BUS-1|Main-Max'
    """
    schema = schema or record.describe()
    values = record.field_values()

    for name in schema.key_fields:
        if _is_blank(values.get(name)):
            raise InvalidKeyError(
                f"{schema.record_type} record has blank key field '{name}': {record}",
                record_type=schema.record_type,
            )

    id_parts = tuple(values[name] for name in schema.identity_fields)

    if schema.keyed_by_scenario:
        return CompositeKey(id_parts=id_parts, scenario=values[schema.scenario_field])
    return SimpleKey(id_parts=id_parts)
