"""
Static schema descriptors for power-system records.

A schema names the record type, its ordered field set and which fields
identify a record. Nothing here is inferred at runtime from record values.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class RecordSchema(BaseModel):
    """
    Describes one record type.

    Identity fields form the record id (joined with "|" when there are
    several). Scenario-keyed study results additionally carry a scenario
    field that is part of their identity.

    Example:
        >>> RecordSchema(
        ...     record_type="ArcFlash",
        ...     field_names=("id", "scenario", "incident_energy"),
        ...     identity_fields=("id",),
        ...     scenario_field="scenario",
        ... ).content_fields
        ('incident_energy',)
    """

    model_config = ConfigDict(frozen=True)

    record_type: str = Field(
        ...,
        min_length=1,
        description="Record type name (e.g., 'Bus', 'ArcFlash')"
    )
    field_names: tuple[str, ...] = Field(
        ...,
        description="Field names in declared order, identity fields included"
    )
    identity_fields: tuple[str, ...] = Field(
        default=("id",),
        min_length=1,
        description="Fields whose values form the record id"
    )
    scenario_field: Optional[str] = Field(
        default=None,
        description="Scenario field for scenario-keyed study results"
    )

    @model_validator(mode="after")
    def key_fields_must_be_declared(self) -> "RecordSchema":
        """Identity and scenario fields must be part of the field set."""
        if not self.record_type.strip():
            raise ValueError("record_type cannot be blank")
        if len(set(self.field_names)) != len(self.field_names):
            raise ValueError(f"{self.record_type}: duplicate field names")
        for name in self.identity_fields:
            if name not in self.field_names:
                raise ValueError(
                    f"{self.record_type}: identity field '{name}' is not declared"
                )
        if self.scenario_field is not None:
            if self.scenario_field not in self.field_names:
                raise ValueError(
                    f"{self.record_type}: scenario field "
                    f"'{self.scenario_field}' is not declared"
                )
            if self.scenario_field in self.identity_fields:
                raise ValueError(
                    f"{self.record_type}: scenario field cannot also be an identity field"
                )
        return self

    @property
    def keyed_by_scenario(self) -> bool:
        """True for study-result types identified by (id, scenario)."""
        return self.scenario_field is not None

    @property
    def key_fields(self) -> tuple[str, ...]:
        """Identity fields followed by the scenario field, if any."""
        if self.scenario_field is None:
            return self.identity_fields
        return self.identity_fields + (self.scenario_field,)

    @property
    def content_fields(self) -> tuple[str, ...]:
        """Comparable fields in declared order (key fields excluded)."""
        key_fields = set(self.key_fields)
        return tuple(f for f in self.field_names if f not in key_fields)

    @property
    def field_set(self) -> frozenset[str]:
        return frozenset(self.field_names)
