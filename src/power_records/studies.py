"""
Study-result record types.

Study results are identified by (id, scenario): the same bus or device
appears once per analysis scenario (e.g., "Main-Max", "Main-Min").
"""

from typing import ClassVar, Literal, Optional
from pydantic import Field

from .base import PowerRecord


class ArcFlash(PowerRecord):
    """Arc flash study result for one bus in one scenario."""

    record_type: Literal["ArcFlash"] = "ArcFlash"

    identity_fields: ClassVar[tuple[str, ...]] = ("id",)
    scenario_field: ClassVar[Optional[str]] = "scenario"

    id: Optional[str] = Field(default=None, description="Arc fault bus name")
    worst_case: Optional[str] = Field(default=None, description="Worst case flag")
    scenario: Optional[str] = Field(default=None, description="Study scenario name")
    bus_kv: Optional[str] = Field(default=None, description="Bus voltage in kV")
    upstream_device: Optional[str] = Field(default=None, description="Upstream trip device")
    upstream_trip_function: Optional[str] = Field(default=None, description="Upstream trip function")
    equipment_type: Optional[str] = Field(default=None, description="Equipment type")
    electrode_configuration: Optional[str] = Field(default=None, description="Electrode configuration")
    electrode_gap_mm: Optional[str] = Field(default=None, description="Electrode gap in mm")
    bolted_fault_ka: Optional[str] = Field(default=None, description="Bolted fault current in kA")
    arc_fault_ka: Optional[str] = Field(default=None, description="Arcing fault current in kA")
    trip_time: Optional[str] = Field(default=None, description="Trip time in seconds")
    opening_time: Optional[str] = Field(default=None, description="Opening time in seconds")
    arc_time: Optional[str] = Field(default=None, description="Arc duration in seconds")
    arc_flash_boundary_inches: Optional[str] = Field(default=None, description="Arc flash boundary in inches")
    working_distance: Optional[str] = Field(default=None, description="Working distance in inches")
    incident_energy: Optional[str] = Field(default=None, description="Incident energy in cal/cm2")
    comments: Optional[str] = Field(default=None, description="Free-form comments")

    def __str__(self) -> str:
        return (
            f"Id: {self.id}, Scenario: {self.scenario}, "
            f"IE: {self.incident_energy}, Bdry: {self.arc_flash_boundary_inches}"
        )


class ShortCircuit(PowerRecord):
    """
    Equipment duty result for one device on one bus in one scenario.

    Identified by (bus_name, equipment_name) plus scenario; the rendered id
    is "bus|equipment".
    """

    record_type: Literal["ShortCircuit"] = "ShortCircuit"

    identity_fields: ClassVar[tuple[str, ...]] = ("bus_name", "equipment_name")
    scenario_field: ClassVar[Optional[str]] = "scenario"

    bus_name: Optional[str] = Field(default=None, description="Bus location")
    equipment_name: Optional[str] = Field(default=None, description="Device name")
    scenario: Optional[str] = Field(default=None, description="Study scenario name")
    worst_case: Optional[str] = Field(default=None, description="Worst case flag")
    fault_type: Optional[str] = Field(default=None, description="Fault type")
    vpu: Optional[str] = Field(default=None, description="Pre-fault voltage in per-unit")
    bus_base_kv: Optional[str] = Field(default=None, description="Bus base kV")
    bus_no_of_phases: Optional[str] = Field(default=None, description="Bus number of phases")
    equipment_manufacturer: Optional[str] = Field(default=None, description="Equipment manufacturer")
    equipment_style: Optional[str] = Field(default=None, description="Equipment style")
    test_standard: Optional[str] = Field(default=None, description="Test standard")
    half_cycle_rating_ka: Optional[str] = Field(default=None, description="1/2 cycle rating in kA")
    half_cycle_duty_ka: Optional[str] = Field(default=None, description="1/2 cycle duty in kA")
    half_cycle_duty_percent: Optional[str] = Field(default=None, description="1/2 cycle duty in percent of rating")
    comments: Optional[str] = Field(default=None, description="Free-form comments")

    def __str__(self) -> str:
        return (
            f"EquipmentName: {self.equipment_name}, BusName: {self.bus_name}, "
            f"Scenario: {self.scenario}, Duty: {self.half_cycle_duty_ka} kA "
            f"({self.half_cycle_duty_percent}%)"
        )
