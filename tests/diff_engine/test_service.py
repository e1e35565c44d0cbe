"""Tests for the diff aggregation service."""

import pytest
from src.diff_engine import (
    ChangeType,
    DataSetDiff,
    EntryDiff,
    PropertyChange,
    aggregate,
    diff_datasets,
    diff_projects,
    diff_records,
    match_entries,
)
from src.diff_engine.models import DiagnosticKind, SnapshotSide
from src.power_records import (
    ArcFlash,
    Bus,
    DataSet,
    DynamicRecord,
    Project,
    RecordSchema,
    ShortCircuit,
)


class TestDiffRecords:
    """Tests for diffing one record type."""

    def test_unchanged(self):
        """Identical records give one UNCHANGED entry."""
        result = diff_records([Bus(id="BUS1", base_kv="13.8")], [Bus(id="BUS1", base_kv="13.8")], "Bus")
        assert len(result.entries) == 1
        entry = result.entries[0]
        assert entry.key == "BUS1"
        assert entry.record_type == "Bus"
        assert entry.change_type == ChangeType.UNCHANGED
        assert entry.property_changes == []

    def test_modified(self):
        """A changed value gives one MODIFIED entry with the change."""
        result = diff_records([Bus(id="BUS1", base_kv="13.8")], [Bus(id="BUS1", base_kv="4.16")], "Bus")
        entry = result.entries[0]
        assert entry.change_type == ChangeType.MODIFIED
        assert entry.property_changes == [
            PropertyChange(path="base_kv", old_value="13.8", new_value="4.16")
        ]

    def test_added(self):
        result = diff_records([], [Bus(id="BUS2", base_kv="13.8")], "Bus")
        assert [(e.key, e.change_type) for e in result.entries] == [("BUS2", ChangeType.ADDED)]
        assert result.entries[0].property_changes == []

    def test_removed(self):
        result = diff_records([Bus(id="BUS3")], [], "Bus")
        assert [(e.key, e.change_type) for e in result.entries] == [("BUS3", ChangeType.REMOVED)]

    def test_scenario_change_is_remove_and_add(self):
        """Changing a scenario is a different record, not a modification."""
        old = [ArcFlash(id="AF1", scenario="Normal", incident_energy="1.2")]
        new = [ArcFlash(id="AF1", scenario="Alt", incident_energy="1.2")]
        result = diff_records(old, new, "ArcFlash")
        assert [(e.key, e.change_type) for e in result.entries] == [
            ("AF1|Normal", ChangeType.REMOVED),
            ("AF1|Alt", ChangeType.ADDED),
        ]

    def test_short_circuit_key_rendering(self):
        old = [ShortCircuit(bus_name="SWBD", equipment_name="CB-1", scenario="Max", half_cycle_duty_ka="22")]
        new = [ShortCircuit(bus_name="SWBD", equipment_name="CB-1", scenario="Max", half_cycle_duty_ka="25")]
        result = diff_records(old, new, "ShortCircuit")
        assert result.entries[0].key == "SWBD|CB-1|Max"
        assert result.entries[0].change_type == ChangeType.MODIFIED

    def test_entry_order(self):
        """Old-side order for matched and removed, then new-only."""
        old = [Bus(id="C"), Bus(id="A", base_kv="1"), Bus(id="B")]
        new = [Bus(id="D"), Bus(id="A", base_kv="2"), Bus(id="C")]
        result = diff_records(old, new, "Bus")
        assert [(e.key, e.change_type.value) for e in result.entries] == [
            ("C", "unchanged"),
            ("A", "modified"),
            ("B", "removed"),
            ("D", "added"),
        ]

    def test_count_symmetry(self):
        """Entry counts reconcile with both input sizes."""
        old = [Bus(id=i, base_kv="1") for i in "ABCDE"]
        new = [Bus(id=i, base_kv="2" if i == "C" else "1") for i in "CDEFG"]
        result = diff_records(old, new, "Bus")
        matched = result.modified_count + result.unchanged_count
        assert matched + result.removed_count == len(old)
        assert matched + result.added_count == len(new)
        assert (result.added_count, result.removed_count, result.modified_count) == (2, 2, 1)

    def test_self_diff(self):
        """A snapshot compared to itself is all unchanged."""
        records = [Bus(id=i, base_kv="0.48") for i in "ABC"]
        result = diff_records(records, records, "Bus")
        assert result.unchanged_count == 3
        assert not result.has_changes

    def test_deterministic(self):
        """Repeated runs produce identical output."""
        old = [Bus(id=i, base_kv=i) for i in "QWERTY"]
        new = [Bus(id=i, base_kv=i.lower()) for i in "YTREWQZ"]
        first = diff_records(old, new, "Bus").model_dump_json()
        second = diff_records(old, new, "Bus").model_dump_json()
        assert first == second

    def test_separator_in_identity_values(self):
        """Values containing "|" neither collide nor render ambiguously."""
        short_circuit = [
            ShortCircuit(bus_name="A|B", equipment_name="C", scenario="Max"),
            ShortCircuit(bus_name="A", equipment_name="B|C", scenario="Max"),
        ]
        result = diff_records(short_circuit, short_circuit, "ShortCircuit")
        assert result.diagnostics == []
        assert result.unchanged_count == 2

        arc_flash = [ArcFlash(id="A|B", scenario="C"), ArcFlash(id="A", scenario="B|C")]
        keys = [e.key for e in diff_records(arc_flash, [], "ArcFlash").entries]
        assert len(keys) == len(set(keys)) == 2


class TestDiffRecordsDiagnostics:
    """Tests for structural problems in the input."""

    def test_duplicate_key_fails_type(self):
        """A duplicate key gives one diagnostic and no entries."""
        result = diff_records([Bus(id="A"), Bus(id="A")], [Bus(id="A")], "Bus")
        assert result.entries == []
        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.kind == DiagnosticKind.DUPLICATE_KEY
        assert diagnostic.key == "A"
        assert diagnostic.side == SnapshotSide.OLD
        assert diagnostic.record_index == 1

    def test_invalid_key_excludes_record(self):
        """Blank-keyed records are reported; the rest still diff."""
        result = diff_records([Bus(id="A")], [Bus(id="A"), Bus(base_kv="13.8")], "Bus")
        assert [e.key for e in result.entries] == ["A"]
        assert [d.kind for d in result.diagnostics] == [DiagnosticKind.INVALID_KEY]
        assert result.diagnostics[0].side == SnapshotSide.NEW

    def test_schema_mismatch_fails_type(self):
        narrow = RecordSchema(record_type="Meter", field_names=("id", "ct"))
        wide = RecordSchema(record_type="Meter", field_names=("id", "ct", "pt"))
        result = diff_records(
            [DynamicRecord(record_schema=narrow, values={"id": "M1"})],
            [DynamicRecord(record_schema=wide, values={"id": "M1"})],
            "Meter",
        )
        assert result.entries == []
        assert result.diagnostics[0].kind == DiagnosticKind.SCHEMA_MISMATCH


class TestAggregate:
    """Tests for building entries from a match."""

    def test_modified_iff_changes(self):
        match = match_entries(
            [Bus(id="A", base_kv="1"), Bus(id="B", base_kv="1")],
            [Bus(id="A", base_kv="1"), Bus(id="B", base_kv="2")],
            "Bus",
        )
        for entry in aggregate(match, "Bus").entries:
            assert (entry.change_type == ChangeType.MODIFIED) == bool(entry.property_changes)


class TestEntryDiffModel:
    """Tests for result model validation."""

    def test_modified_requires_changes(self):
        with pytest.raises(ValueError):
            EntryDiff(key="A", record_type="Bus", change_type=ChangeType.MODIFIED)

    def test_added_cannot_carry_changes(self):
        with pytest.raises(ValueError):
            EntryDiff(
                key="A",
                record_type="Bus",
                change_type=ChangeType.ADDED,
                property_changes=[PropertyChange(path="base_kv", old_value=None, new_value="1")],
            )

    def test_property_change_cannot_be_added(self):
        with pytest.raises(ValueError):
            PropertyChange(path="base_kv", change_type=ChangeType.ADDED)

    def test_summary(self):
        result = DataSetDiff(entries=[
            EntryDiff(key="A", record_type="Bus", change_type=ChangeType.ADDED),
            EntryDiff(key="B", record_type="Bus", change_type=ChangeType.UNCHANGED),
        ])
        assert result.summary() == "1 added, 0 removed, 0 modified, 1 unchanged"


class TestDiffDatasets:
    """Tests for diffing whole snapshots."""

    def test_merges_record_types(self, old_dataset, new_dataset):
        result = diff_datasets(old_dataset, new_dataset)
        assert result.added_count == 1
        assert result.removed_count == 1
        assert result.modified_count == 2
        assert result.unchanged_count == 2
        assert result.diagnostics == []

    def test_record_type_order(self, old_dataset, new_dataset):
        """Record types follow catalog order."""
        result = diff_datasets(old_dataset, new_dataset)
        types = []
        for entry in result.entries:
            if entry.record_type not in types:
                types.append(entry.record_type)
        assert types == ["ArcFlash", "LVBreaker", "Bus"]

    def test_for_record_type(self, old_dataset, new_dataset):
        result = diff_datasets(old_dataset, new_dataset)
        buses = result.for_record_type("Bus")
        assert [(e.key, e.change_type) for e in buses] == [
            ("BUS-1", ChangeType.MODIFIED),
            ("BUS-2", ChangeType.REMOVED),
            ("BUS-3", ChangeType.ADDED),
        ]

    def test_failure_isolated_to_type(self, old_dataset, new_dataset):
        """A duplicate in one type does not affect the others."""
        old_dataset.buses.append(Bus(id="BUS-1"))
        result = diff_datasets(old_dataset, new_dataset)
        assert result.for_record_type("Bus") == []
        assert len(result.for_record_type("ArcFlash")) == 2
        assert [d.record_type for d in result.diagnostics] == ["Bus"]

    def test_dynamic_types_after_catalog(self, old_dataset, new_dataset):
        schema = RecordSchema(record_type="Meter", field_names=("id", "ct"))
        new_dataset.add([DynamicRecord(record_schema=schema, values={"id": "M1", "ct": "400:5"})])
        result = diff_datasets(old_dataset, new_dataset)
        assert result.entries[-1].record_type == "Meter"
        assert result.entries[-1].change_type == ChangeType.ADDED

    def test_empty(self):
        result = diff_datasets(DataSet(), DataSet())
        assert result.entries == []
        assert result.summary() == "0 added, 0 removed, 0 modified, 0 unchanged"


class TestDiffProjects:
    """Tests for project-level diffs."""

    def test_metadata_changes(self):
        old = Project(revision="A", client="Acme", city="Boise")
        new = Project(revision="B", client="Acme", city="")
        result = diff_projects(old, new)
        assert [(c.path, c.old_value, c.new_value) for c in result.project_property_changes] == [
            ("revision", "A", "B"),
            ("city", "Boise", ""),
        ]
        assert result.has_changes

    def test_property_paths(self):
        """Settings are reported under properties.<name>."""
        old = Project(properties={"Units": "Imperial", "Standard": "IEEE 1584"})
        new = Project(properties={"Units": "Metric", "Standard": "IEEE 1584", "Freq": "60"})
        changes = diff_projects(old, new).project_property_changes
        assert [(c.path, c.old_value, c.new_value) for c in changes] == [
            ("properties.Units", "Imperial", "Metric"),
            ("properties.Freq", None, "60"),
        ]

    def test_includes_data_diff(self, old_dataset, new_dataset):
        result = diff_projects(Project(data=old_dataset), Project(data=new_dataset))
        assert result.project_property_changes == []
        assert result.data_diff == diff_datasets(old_dataset, new_dataset)

    def test_identical_projects(self, old_dataset):
        project = Project(revision="A", data=old_dataset)
        assert not diff_projects(project, project).has_changes
