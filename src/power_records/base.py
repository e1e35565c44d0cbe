"""
Base record types.

Every record exposes the same two-method contract used by the diff engine:
    - describe(): the static RecordSchema of its type
    - field_values(): field name -> string value (or None), declared order
"""

from functools import lru_cache
from typing import ClassVar, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .schema import RecordSchema


class PowerRecord(BaseModel):
    """
    Base class for the typed equipment and study-result records.

    Subclasses declare a ``record_type`` literal tag and their fields as
    ``Optional[str]``. Field order in the class body is the declared order
    used for stable diffs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    identity_fields: ClassVar[tuple[str, ...]] = ("id",)
    scenario_field: ClassVar[Optional[str]] = None

    @classmethod
    @lru_cache(maxsize=None)
    def describe(cls) -> RecordSchema:
        """Static schema for this record type (cached per class)."""
        names = tuple(name for name in cls.model_fields if name != "record_type")
        return RecordSchema(
            record_type=cls.model_fields["record_type"].default,
            field_names=names,
            identity_fields=cls.identity_fields,
            scenario_field=cls.scenario_field,
        )

    def field_values(self) -> dict[str, Optional[str]]:
        """Field values in declared order."""
        return {name: getattr(self, name) for name in self.describe().field_names}

    def __str__(self) -> str:
        schema = self.describe()
        key = ", ".join(f"{name}={getattr(self, name)}" for name in schema.key_fields)
        return f"{schema.record_type}({key})"


class DynamicRecord(BaseModel):
    """
    A record whose schema is supplied by the caller.

    Used for record types outside the built-in catalog, or for snapshots
    imported with a different column set than the catalog declares.

    Example:
        >>> schema = RecordSchema(record_type="Meter", field_names=("id", "ct_ratio"))
        >>> meter = DynamicRecord(record_schema=schema, values={"id": "M1", "ct_ratio": "400:5"})
        >>> meter.field_values()
        {'id': 'M1', 'ct_ratio': '400:5'}
    """

    model_config = ConfigDict(frozen=True)

    record_schema: RecordSchema = Field(
        ...,
        description="Schema describing this record's type"
    )
    values: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Field values keyed by field name"
    )

    @model_validator(mode="after")
    def values_must_be_declared(self) -> "DynamicRecord":
        """Reject values for fields the schema does not declare."""
        unknown = [name for name in self.values if name not in self.record_schema.field_set]
        if unknown:
            raise ValueError(
                f"{self.record_schema.record_type}: undeclared fields {sorted(unknown)}"
            )
        return self

    @property
    def record_type(self) -> str:
        return self.record_schema.record_type

    def describe(self) -> RecordSchema:
        return self.record_schema

    def field_values(self) -> dict[str, Optional[str]]:
        return {name: self.values.get(name) for name in self.record_schema.field_names}

    def __str__(self) -> str:
        key = ", ".join(
            f"{name}={self.values.get(name)}" for name in self.record_schema.key_fields
        )
        return f"{self.record_type}({key})"


AnyRecord = Union[PowerRecord, DynamicRecord]
