"""
Snapshot containers: DataSet (records) and Project (metadata + records).
"""

from typing import Iterator, Optional, Sequence
from pydantic import BaseModel, Field, model_validator

from .base import AnyRecord, DynamicRecord
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
from .studies import ArcFlash, ShortCircuit


# Record type -> DataSet attribute, in diff order
COLLECTION_FIELDS: dict[str, str] = {
    "ArcFlash": "arc_flash",
    "ShortCircuit": "short_circuit",
    "LVBreaker": "lv_breakers",
    "Fuse": "fuses",
    "Cable": "cables",
    "Bus": "buses",
    "Transformer": "transformers",
    "Motor": "motors",
    "Generator": "generators",
    "Utility": "utilities",
    "Capacitor": "capacitors",
    "Load": "loads",
}

# Project metadata fields compared by the project diff, in order
PROJECT_METADATA_FIELDS: tuple[str, ...] = (
    "study_date",
    "preferred_date_format",
    "revision",
    "project_number",
    "client",
    "site_name",
    "site_address",
    "address_line1",
    "address_line2",
    "address_line3",
    "city",
    "state",
    "zip",
    "study_engineer",
    "comments",
)


class DataSet(BaseModel):
    """
    All records of one snapshot, one ordered list per record type.

    Records of types outside the built-in catalog (or of a catalog type but
    a different column set) go in ``extra`` keyed by record type.
    """

    software_version: Optional[str] = Field(
        default=None,
        description="Version of the study software the data came from"
    )

    arc_flash: list[ArcFlash] = Field(default_factory=list, description="Arc flash results")
    short_circuit: list[ShortCircuit] = Field(default_factory=list, description="Equipment duty results")
    lv_breakers: list[LVBreaker] = Field(default_factory=list, description="Low-voltage breakers")
    fuses: list[Fuse] = Field(default_factory=list, description="Fuses")
    cables: list[Cable] = Field(default_factory=list, description="Cables")
    buses: list[Bus] = Field(default_factory=list, description="Buses")
    transformers: list[Transformer] = Field(default_factory=list, description="Transformers")
    motors: list[Motor] = Field(default_factory=list, description="Motors")
    generators: list[Generator] = Field(default_factory=list, description="Generators")
    utilities: list[Utility] = Field(default_factory=list, description="Utility sources")
    capacitors: list[Capacitor] = Field(default_factory=list, description="Capacitor banks")
    loads: list[Load] = Field(default_factory=list, description="Loads")

    extra: dict[str, list[DynamicRecord]] = Field(
        default_factory=dict,
        description="Dynamic records keyed by record type"
    )

    @model_validator(mode="after")
    def extra_keys_match_record_types(self) -> "DataSet":
        """Every dynamic record must sit under its own record type."""
        for record_type, records in self.extra.items():
            for record in records:
                if record.record_type != record_type:
                    raise ValueError(
                        f"extra['{record_type}'] contains a {record.record_type} record"
                    )
        return self

    def collections(self) -> Iterator[tuple[str, list[AnyRecord]]]:
        """
        Yield (record_type, records) in diff order.

        Catalog types come first (typed records followed by any dynamic
        records of the same type), then the remaining dynamic record types
        in insertion order. Empty collections are skipped.
        """
        for record_type, attr in COLLECTION_FIELDS.items():
            records: list[AnyRecord] = list(getattr(self, attr))
            records.extend(self.extra.get(record_type, []))
            if records:
                yield record_type, records

        for record_type, records in self.extra.items():
            if record_type not in COLLECTION_FIELDS and records:
                yield record_type, list(records)

    def records_of(self, record_type: str) -> list[AnyRecord]:
        """All records of one type (empty list if none)."""
        for name, records in self.collections():
            if name == record_type:
                return records
        return []

    def add(self, records: Sequence[AnyRecord]) -> "DataSet":
        """Append records to their collections (fluent interface)."""
        for record in records:
            record_type = record.describe().record_type
            attr = COLLECTION_FIELDS.get(record_type)
            if attr is not None and not isinstance(record, DynamicRecord):
                getattr(self, attr).append(record)
            else:
                self.extra.setdefault(record_type, []).append(record)
        return self

    @property
    def total_entries(self) -> int:
        return sum(len(records) for _, records in self.collections())


class Project(BaseModel):
    """A study project: descriptive metadata plus its record snapshot."""

    study_date: Optional[str] = Field(default=None, description="Study date")
    preferred_date_format: Optional[str] = Field(default=None, description="Preferred date format")
    revision: Optional[str] = Field(default=None, description="Study revision")
    project_number: Optional[str] = Field(default=None, description="Project number")
    client: Optional[str] = Field(default=None, description="Client name")
    site_name: Optional[str] = Field(default=None, description="Site name")
    site_address: Optional[str] = Field(default=None, description="Site address")
    address_line1: Optional[str] = Field(default=None, description="Address line 1")
    address_line2: Optional[str] = Field(default=None, description="Address line 2")
    address_line3: Optional[str] = Field(default=None, description="Address line 3")
    city: Optional[str] = Field(default=None, description="City")
    state: Optional[str] = Field(default=None, description="State")
    zip: Optional[str] = Field(default=None, description="ZIP code")
    study_engineer: Optional[str] = Field(default=None, description="Study engineer")
    comments: Optional[str] = Field(default=None, description="Free-form comments")

    properties: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Free-form project settings"
    )
    data: DataSet = Field(
        default_factory=DataSet,
        description="Record snapshot"
    )

    def metadata_values(self) -> dict[str, Optional[str]]:
        """Compared metadata fields in order."""
        return {name: getattr(self, name) for name in PROJECT_METADATA_FIELDS}
