"""
Equipment record types.

All equipment records are keyed by a single ``id``. Values are kept as the
strings the study software exported (no unit parsing).
"""

from typing import Literal, Optional
from pydantic import Field

from .base import PowerRecord


class Bus(PowerRecord):
    """Bus / switchgear record."""

    record_type: Literal["Bus"] = "Bus"

    id: Optional[str] = Field(default=None, description="Bus name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    base_kv: Optional[str] = Field(default=None, description="Base voltage in kV")
    service: Optional[str] = Field(default=None, description="Service type")
    area: Optional[str] = Field(default=None, description="Area")
    zone: Optional[str] = Field(default=None, description="Zone")
    manufacturer: Optional[str] = Field(default=None, description="Manufacturer")
    bus_type: Optional[str] = Field(default=None, description="Bus type")
    bus_rating_a: Optional[str] = Field(default=None, description="Continuous rating in amps")
    bus_bracing: Optional[str] = Field(default=None, description="Bracing in kA")
    test_standard: Optional[str] = Field(default=None, description="Test standard")
    material: Optional[str] = Field(default=None, description="Bus material")
    mounting: Optional[str] = Field(default=None, description="Mounting")
    equipment: Optional[str] = Field(default=None, description="Arc flash equipment class")
    working_distance_inches: Optional[str] = Field(default=None, description="Working distance in inches")
    electrode_gap_mm: Optional[str] = Field(default=None, description="Electrode gap in mm")
    electrode_configuration: Optional[str] = Field(default=None, description="Electrode configuration (VCB, HCB, ...)")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class LVBreaker(PowerRecord):
    """Low-voltage circuit breaker with its trip unit settings flattened in."""

    record_type: Literal["LVBreaker"] = "LVBreaker"

    id: Optional[str] = Field(default=None, description="Breaker name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    on_bus: Optional[str] = Field(default=None, description="Bus the breaker is connected to")
    base_kv: Optional[str] = Field(default=None, description="Base voltage in kV")
    conn_type: Optional[str] = Field(default=None, description="Connection type")
    breaker_class: Optional[str] = Field(default=None, description="Breaker class")
    options: Optional[str] = Field(default=None, description="Options")
    breaker_mfr: Optional[str] = Field(default=None, description="Breaker manufacturer")
    breaker_type: Optional[str] = Field(default=None, description="Breaker type")
    breaker_style: Optional[str] = Field(default=None, description="Breaker style")
    frame_a: Optional[str] = Field(default=None, description="Frame size in amps")

    # Trip unit
    trip: Optional[str] = Field(default=None, description="Trip type (thermal-magnetic, electronic, ...)")
    trip_mfr: Optional[str] = Field(default=None, description="Trip unit manufacturer")
    trip_type: Optional[str] = Field(default=None, description="Trip unit type")
    trip_style: Optional[str] = Field(default=None, description="Trip unit style")
    sensor_frame: Optional[str] = Field(default=None, description="Sensor / frame rating")
    plug_tap_trip: Optional[str] = Field(default=None, description="Plug / tap / trip rating")
    ltpu_setting: Optional[str] = Field(default=None, description="Long-time pickup setting")
    ltpu_mult: Optional[str] = Field(default=None, description="Long-time pickup multiplier")
    trip_a: Optional[str] = Field(default=None, description="Trip amps")
    lt_curve: Optional[str] = Field(default=None, description="Long-time curve")
    ltd_band: Optional[str] = Field(default=None, description="Long-time delay band")
    trip_adjust: Optional[str] = Field(default=None, description="Thermal trip adjustment")
    trip_pickup: Optional[str] = Field(default=None, description="Trip pickup")
    stpu_setting: Optional[str] = Field(default=None, description="Short-time pickup setting")
    stpu_band: Optional[str] = Field(default=None, description="Short-time delay band")
    stpu_i2t: Optional[str] = Field(default=None, description="Short-time I2t in/out")
    stpu_a: Optional[str] = Field(default=None, description="Short-time pickup amps")
    inst_setting: Optional[str] = Field(default=None, description="Instantaneous setting")
    inst_override: Optional[str] = Field(default=None, description="Instantaneous override")
    inst_a: Optional[str] = Field(default=None, description="Instantaneous pickup amps")
    maint_mode: Optional[str] = Field(default=None, description="Maintenance mode")
    maint_setting: Optional[str] = Field(default=None, description="Maintenance mode setting")
    maint_a: Optional[str] = Field(default=None, description="Maintenance mode amps")
    gnd_sensor: Optional[str] = Field(default=None, description="Ground sensor")
    gnd_pickup: Optional[str] = Field(default=None, description="Ground pickup")
    gnd_delay: Optional[str] = Field(default=None, description="Ground delay band")
    gnd_i2t: Optional[str] = Field(default=None, description="Ground I2t in/out")
    gnd_a: Optional[str] = Field(default=None, description="Ground pickup amps")

    sc_int_ka: Optional[str] = Field(default=None, description="Interrupting rating in kA")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class Fuse(PowerRecord):
    """Fuse record."""

    record_type: Literal["Fuse"] = "Fuse"

    id: Optional[str] = Field(default=None, description="Fuse name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    on_bus: Optional[str] = Field(default=None, description="Bus the fuse is connected to")
    base_kv: Optional[str] = Field(default=None, description="Base voltage in kV")
    conn_type: Optional[str] = Field(default=None, description="Connection type")
    standard: Optional[str] = Field(default=None, description="Standard")
    normal_state: Optional[str] = Field(default=None, description="Normal state")
    fuse_mfr: Optional[str] = Field(default=None, description="Fuse manufacturer")
    fuse_type: Optional[str] = Field(default=None, description="Fuse type")
    fuse_style: Optional[str] = Field(default=None, description="Fuse style")
    size: Optional[str] = Field(default=None, description="Fuse size")
    sc_int_ka: Optional[str] = Field(default=None, description="Interrupting rating in kA")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class Cable(PowerRecord):
    """Cable / conductor record."""

    record_type: Literal["Cable"] = "Cable"

    id: Optional[str] = Field(default=None, description="Cable name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    from_bus_id: Optional[str] = Field(default=None, description="From bus")
    to_bus_id: Optional[str] = Field(default=None, description="To bus")
    unit: Optional[str] = Field(default=None, description="Length unit")
    cable_type: Optional[str] = Field(default=None, description="Cable type")
    no_per_phase: Optional[str] = Field(default=None, description="Conductors per phase")
    size: Optional[str] = Field(default=None, description="Conductor size")
    length: Optional[str] = Field(default=None, description="Length")
    insulation: Optional[str] = Field(default=None, description="Insulation type")
    rating_a: Optional[str] = Field(default=None, description="Ampacity")
    material: Optional[str] = Field(default=None, description="Conductor material")
    raceway_type: Optional[str] = Field(default=None, description="Raceway type")
    conduit_size: Optional[str] = Field(default=None, description="Conduit size")
    gnd_size: Optional[str] = Field(default=None, description="Ground conductor size")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class Transformer(PowerRecord):
    """Two-winding transformer record."""

    record_type: Literal["Transformer"] = "Transformer"

    id: Optional[str] = Field(default=None, description="Transformer name")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    from_bus_id: Optional[str] = Field(default=None, description="Primary bus")
    to_bus_id: Optional[str] = Field(default=None, description="Secondary bus")
    from_conn: Optional[str] = Field(default=None, description="Primary connection")
    to_conn: Optional[str] = Field(default=None, description="Secondary connection")
    from_nom_kv: Optional[str] = Field(default=None, description="Primary nominal kV")
    to_nom_kv: Optional[str] = Field(default=None, description="Secondary nominal kV")
    from_tap_kv: Optional[str] = Field(default=None, description="Primary tap kV")
    mva: Optional[str] = Field(default=None, description="Rating in MVA")
    mva_ol: Optional[str] = Field(default=None, description="Overload rating in MVA")
    z: Optional[str] = Field(default=None, description="Impedance in percent")
    xr: Optional[str] = Field(default=None, description="X/R ratio")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class Motor(PowerRecord):
    """Motor record."""

    record_type: Literal["Motor"] = "Motor"

    id: Optional[str] = Field(default=None, description="Motor name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    to_bus_id: Optional[str] = Field(default=None, description="Bus the motor is fed from")
    base_kv: Optional[str] = Field(default=None, description="Base voltage in kV")
    motor_kv: Optional[str] = Field(default=None, description="Motor rated kV")
    hp_or_kw: Optional[str] = Field(default=None, description="Rating in HP or kW")
    rpm: Optional[str] = Field(default=None, description="Rated speed")
    fla: Optional[str] = Field(default=None, description="Full load amps")
    power_factor: Optional[str] = Field(default=None, description="Power factor")
    efficiency: Optional[str] = Field(default=None, description="Efficiency")
    starting_lr_mult: Optional[str] = Field(default=None, description="Locked rotor multiplier")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class Generator(PowerRecord):
    """Generator record."""

    record_type: Literal["Generator"] = "Generator"

    id: Optional[str] = Field(default=None, description="Generator name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    to_bus_id: Optional[str] = Field(default=None, description="Bus the generator connects to")
    base_kv: Optional[str] = Field(default=None, description="Base voltage in kV")
    gen_kv: Optional[str] = Field(default=None, description="Generator rated kV")
    rating: Optional[str] = Field(default=None, description="Rating")
    rating_unit: Optional[str] = Field(default=None, description="Rating unit")
    gen_type: Optional[str] = Field(default=None, description="Generator type")
    power_factor: Optional[str] = Field(default=None, description="Power factor")
    mw: Optional[str] = Field(default=None, description="Real power output in MW")
    mvar: Optional[str] = Field(default=None, description="Reactive power output in MVAR")
    xdv: Optional[str] = Field(default=None, description="Subtransient reactance")
    xr: Optional[str] = Field(default=None, description="X/R ratio")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class Utility(PowerRecord):
    """Utility source record."""

    record_type: Literal["Utility"] = "Utility"

    id: Optional[str] = Field(default=None, description="Utility name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    to_bus_id: Optional[str] = Field(default=None, description="Point of connection bus")
    base_kv: Optional[str] = Field(default=None, description="Base voltage in kV")
    util_kv: Optional[str] = Field(default=None, description="Utility kV")
    fault_unit: Optional[str] = Field(default=None, description="Fault duty unit (MVA, kA)")
    sc_3ph_1: Optional[str] = Field(default=None, description="Three-phase fault duty, case 1")
    sc_3ph_2: Optional[str] = Field(default=None, description="Three-phase fault duty, case 2")
    sc_slg_1: Optional[str] = Field(default=None, description="Single line to ground duty, case 1")
    sc_slg_2: Optional[str] = Field(default=None, description="Single line to ground duty, case 2")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class Capacitor(PowerRecord):
    """Capacitor bank record."""

    record_type: Literal["Capacitor"] = "Capacitor"

    id: Optional[str] = Field(default=None, description="Capacitor name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    on_bus: Optional[str] = Field(default=None, description="Bus the bank is connected to")
    base_kv: Optional[str] = Field(default=None, description="Base voltage in kV")
    kvar: Optional[str] = Field(default=None, description="Rating in kVAR")
    rated_kv: Optional[str] = Field(default=None, description="Rated kV")
    cap_type: Optional[str] = Field(default=None, description="Capacitor type")
    bank_configuration: Optional[str] = Field(default=None, description="Bank configuration")
    manufacturer: Optional[str] = Field(default=None, description="Manufacturer")
    control_type: Optional[str] = Field(default=None, description="Control type")
    fuse_size: Optional[str] = Field(default=None, description="Fuse size")
    comments: Optional[str] = Field(default=None, description="Free-form comments")


class Load(PowerRecord):
    """Lumped load record."""

    record_type: Literal["Load"] = "Load"

    id: Optional[str] = Field(default=None, description="Load name")
    ac_dc: Optional[str] = Field(default=None, description="AC or DC")
    status: Optional[str] = Field(default=None, description="In/out of service")
    no_of_phases: Optional[str] = Field(default=None, description="Number of phases")
    to_bus_id: Optional[str] = Field(default=None, description="Bus the load is fed from")
    to_base_kv: Optional[str] = Field(default=None, description="Base voltage in kV")
    conn: Optional[str] = Field(default=None, description="Connection")
    load_class: Optional[str] = Field(default=None, description="Load class")
    load_unit: Optional[str] = Field(default=None, description="Load unit")
    demand_factor: Optional[str] = Field(default=None, description="Demand factor")
    quantity: Optional[str] = Field(default=None, description="Quantity")
    const_mva_mw: Optional[str] = Field(default=None, description="Constant-power MW")
    const_mva_mvar: Optional[str] = Field(default=None, description="Constant-power MVAR")
    const_mva_pf: Optional[str] = Field(default=None, description="Constant-power power factor")
    comments: Optional[str] = Field(default=None, description="Free-form comments")
