"""
Entry counts per record type and scenario.

Used to summarize a snapshot before comparing it: a study-result type whose
scenarios hold different entry counts usually means an incomplete import.
"""

from pydantic import BaseModel, Field

from .dataset import DataSet


class ScenarioStatistics(BaseModel):
    """Entry count for one scenario of a study-result type."""

    scenario_name: str = Field(description="Scenario name")
    entry_count: int = Field(default=0, ge=0, description="Entries in this scenario")

    def __str__(self) -> str:
        return f"{self.scenario_name}: {self.entry_count} entries"


class DataTypeStatistics(BaseModel):
    """Entry counts for one record type."""

    data_type_name: str = Field(description="Record type name")
    total_entries: int = Field(default=0, ge=0, description="Total entries")
    scenarios: list[ScenarioStatistics] = Field(
        default_factory=list,
        description="Per-scenario counts (study-result types only)"
    )

    @property
    def has_uniform_scenarios(self) -> bool:
        """True when every scenario holds the same number of entries."""
        if len(self.scenarios) <= 1:
            return True
        return len({s.entry_count for s in self.scenarios}) == 1

    @property
    def display(self) -> str:
        if self.total_entries == 0:
            return "0 entries"
        if not self.scenarios:
            return f"{self.total_entries} entries"
        if self.has_uniform_scenarios:
            return f"{self.scenarios[0].entry_count} entries"
        return "? Mixed"

    def __str__(self) -> str:
        return (
            f"{self.data_type_name}: {self.total_entries} entries "
            f"({len(self.scenarios)} scenarios)"
        )


def compute_statistics(dataset: DataSet) -> list[DataTypeStatistics]:
    """
    Count entries per record type, and per scenario for study results.

    Scenarios are listed in the order they first appear. Records with a
    blank scenario are counted under "" so totals always add up.

    Args:
        dataset: Snapshot to summarize

    Returns:
        One DataTypeStatistics per non-empty record type, in diff order
    """
    results: list[DataTypeStatistics] = []

    for record_type, records in dataset.collections():
        schema = records[0].describe()
        scenarios: list[ScenarioStatistics] = []

        if schema.keyed_by_scenario:
            counts: dict[str, int] = {}
            for record in records:
                scenario = record.field_values().get(schema.scenario_field) or ""
                counts[scenario] = counts.get(scenario, 0) + 1
            scenarios = [
                ScenarioStatistics(scenario_name=name, entry_count=count)
                for name, count in counts.items()
            ]

        results.append(DataTypeStatistics(
            data_type_name=record_type,
            total_entries=len(records),
            scenarios=scenarios
        ))

    return results
