"""
Power-System Record Model

Typed equipment and study-result records, their static schemas, and the
snapshot containers compared by the diff engine.
"""

__version__ = "0.1.0"

from .schema import RecordSchema
from .base import AnyRecord, DynamicRecord, PowerRecord
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
from .catalog import RECORD_TYPES, get_record_class, schema_for, scenario_keyed_types
from .dataset import DataSet, Project, PROJECT_METADATA_FIELDS
from .statistics import DataTypeStatistics, ScenarioStatistics, compute_statistics

__all__ = [
    "__version__",
    "RecordSchema",
    "AnyRecord",
    "DynamicRecord",
    "PowerRecord",
    "Bus",
    "LVBreaker",
    "Fuse",
    "Cable",
    "Transformer",
    "Motor",
    "Generator",
    "Utility",
    "Capacitor",
    "Load",
    "ArcFlash",
    "ShortCircuit",
    "RECORD_TYPES",
    "get_record_class",
    "schema_for",
    "scenario_keyed_types",
    "DataSet",
    "Project",
    "PROJECT_METADATA_FIELDS",
    "DataTypeStatistics",
    "ScenarioStatistics",
    "compute_statistics",
]
