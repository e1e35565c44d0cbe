"""
Pydantic models for diff results.

All result objects are frozen: they are built once per comparison and never
mutated afterwards. Counts on DataSetDiff are computed from ``entries`` on
access rather than stored.
"""

from enum import Enum
from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator


class ChangeType(str, Enum):
    """Classification of an entry or a field."""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


# --- Keys ---

KEY_SEPARATOR = "|"


def _escape(part: str) -> str:
    """Escape backslashes and separators so rendered keys stay unambiguous."""
    return part.replace("\\", "\\\\").replace(KEY_SEPARATOR, "\\" + KEY_SEPARATOR)


def render_parts(parts: tuple[str, ...]) -> str:
    """Join key components with "|", escaping any "|" or "\\" inside them."""
    return KEY_SEPARATOR.join(_escape(p) for p in parts)


class SimpleKey(BaseModel):
    """
    Key of an equipment record: its id.

    ``id_parts`` holds one value per identity field. Keys compare and hash
    on the components, never on a joined string.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["simple"] = "simple"
    id_parts: tuple[str, ...] = Field(min_length=1, description="Identity field values in order")

    @property
    def id(self) -> str:
        return render_parts(self.id_parts)

    def render(self) -> str:
        return self.id


class CompositeKey(BaseModel):
    """Key of a study-result record: (id, scenario)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["composite"] = "composite"
    id_parts: tuple[str, ...] = Field(min_length=1, description="Identity field values in order")
    scenario: str = Field(description="Scenario name")

    @property
    def id(self) -> str:
        return render_parts(self.id_parts)

    def render(self) -> str:
        return render_parts(self.id_parts + (self.scenario,))


RecordKey = Union[SimpleKey, CompositeKey]


# --- Field and entry level ---

class PropertyChange(BaseModel):
    """A single field-level change between two matched records."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Field name, dotted for nested values (e.g., 'properties.Units')")
    old_value: Optional[str] = Field(default=None, description="Value in the old snapshot")
    new_value: Optional[str] = Field(default=None, description="Value in the new snapshot")
    change_type: ChangeType = Field(
        default=ChangeType.MODIFIED,
        description="Field classification (unchanged or modified)"
    )

    @field_validator("change_type")
    @classmethod
    def field_changes_are_unchanged_or_modified(cls, v: ChangeType) -> ChangeType:
        """Fields are never added or removed within a record type."""
        if v not in (ChangeType.UNCHANGED, ChangeType.MODIFIED):
            raise ValueError("property change_type must be 'unchanged' or 'modified'")
        return v


class EntryDiff(BaseModel):
    """
    Diff result for one record, identified by its rendered key.

    ``property_changes`` is non-empty exactly when ``change_type`` is
    MODIFIED. Added and removed entries carry no field changes.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Rendered record key (e.g., 'BUS-1' or 'BUS-1|Main-Max')")
    record_type: str = Field(description="Record type name")
    change_type: ChangeType = Field(description="Entry classification")
    property_changes: list[PropertyChange] = Field(
        default_factory=list,
        description="Changed fields in declared field order"
    )

    @model_validator(mode="after")
    def changes_only_when_modified(self) -> "EntryDiff":
        """Modified <=> at least one property change."""
        modified = self.change_type == ChangeType.MODIFIED
        if modified and not self.property_changes:
            raise ValueError("modified entry requires at least one property change")
        if not modified and self.property_changes:
            raise ValueError(
                f"{self.change_type.value} entry cannot carry property changes"
            )
        return self


# --- Diagnostics ---

class DiagnosticKind(str, Enum):
    """Structural problems found in the input snapshots."""

    INVALID_KEY = "invalid_key"
    DUPLICATE_KEY = "duplicate_key"
    SCHEMA_MISMATCH = "schema_mismatch"


class SnapshotSide(str, Enum):
    """Which input snapshot a diagnostic refers to."""

    OLD = "old"
    NEW = "new"


class DiffDiagnostic(BaseModel):
    """A structural problem reported alongside the diff."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind = Field(description="Problem type")
    record_type: str = Field(description="Record type affected")
    message: str = Field(description="Human-readable description")
    key: Optional[str] = Field(default=None, description="Rendered key involved, if any")
    side: Optional[SnapshotSide] = Field(default=None, description="Snapshot the problem was found in")
    record_index: Optional[int] = Field(
        default=None,
        ge=0,
        description="Position of the offending record in its input collection"
    )


# --- Aggregates ---

class DataSetDiff(BaseModel):
    """Entry diffs for one or more record types, plus diagnostics."""

    model_config = ConfigDict(frozen=True)

    entries: list[EntryDiff] = Field(
        default_factory=list,
        description="Entry diffs in deterministic order"
    )
    diagnostics: list[DiffDiagnostic] = Field(
        default_factory=list,
        description="Structural problems found while comparing"
    )

    def _count(self, change_type: ChangeType) -> int:
        return sum(1 for e in self.entries if e.change_type == change_type)

    @computed_field
    @property
    def added_count(self) -> int:
        return self._count(ChangeType.ADDED)

    @computed_field
    @property
    def removed_count(self) -> int:
        return self._count(ChangeType.REMOVED)

    @computed_field
    @property
    def modified_count(self) -> int:
        return self._count(ChangeType.MODIFIED)

    @computed_field
    @property
    def unchanged_count(self) -> int:
        return self._count(ChangeType.UNCHANGED)

    @property
    def has_changes(self) -> bool:
        """True if any entry was added, removed or modified."""
        return any(e.change_type != ChangeType.UNCHANGED for e in self.entries)

    def entries_of(self, change_type: ChangeType) -> list[EntryDiff]:
        return [e for e in self.entries if e.change_type == change_type]

    def for_record_type(self, record_type: str) -> list[EntryDiff]:
        return [e for e in self.entries if e.record_type == record_type]

    def summary(self) -> str:
        """
        Quick summary of the diff.

        Returns:
            Summary like '2 added, 1 removed, 5 modified, 40 unchanged'
        """
        text = (
            f"{self.added_count} added, {self.removed_count} removed, "
            f"{self.modified_count} modified, {self.unchanged_count} unchanged"
        )
        if self.diagnostics:
            text += f" ({len(self.diagnostics)} diagnostics)"
        return text


class ProjectDiff(BaseModel):
    """Project metadata changes plus the record-level diff."""

    model_config = ConfigDict(frozen=True)

    project_property_changes: list[PropertyChange] = Field(
        default_factory=list,
        description="Changed project metadata and settings"
    )
    data_diff: DataSetDiff = Field(
        default_factory=DataSetDiff,
        description="Diff of the record snapshots"
    )

    @property
    def has_changes(self) -> bool:
        return bool(self.project_property_changes) or self.data_diff.has_changes
