"""
Catalog of the built-in record types.

Order here is the order record types appear in dataset diffs.
"""

from .base import PowerRecord
from .equipment import (
    Bus,
    LVBreaker,
    Fuse,
    Cable,
    Transformer,
    Motor,
    Generator,
    Utility,
    Capacitor,
    Load,
)
from .schema import RecordSchema
from .studies import ArcFlash, ShortCircuit


RECORD_TYPES: dict[str, type[PowerRecord]] = {
    cls.describe().record_type: cls
    for cls in (
        ArcFlash,
        ShortCircuit,
        LVBreaker,
        Fuse,
        Cable,
        Bus,
        Transformer,
        Motor,
        Generator,
        Utility,
        Capacitor,
        Load,
    )
}


def get_record_class(record_type: str) -> type[PowerRecord]:
    """
    Look up a built-in record class by type name.

    Raises:
        KeyError: If the record type is not in the catalog
    """
    try:
        return RECORD_TYPES[record_type]
    except KeyError:
        raise KeyError(f"Unknown record type: {record_type}") from None


def schema_for(record_type: str) -> RecordSchema:
    """Static schema of a built-in record type."""
    return get_record_class(record_type).describe()


def scenario_keyed_types() -> list[str]:
    """Names of the record types identified by (id, scenario)."""
    return [name for name, cls in RECORD_TYPES.items() if cls.describe().keyed_by_scenario]
