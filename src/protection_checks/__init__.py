"""
Protection Device Checks

Derived predicates over breaker and study-result records, used to filter
equipment lists. Pure functions; no side effects.
"""

__version__ = "0.1.0"

from .adjustability import (
    INDICATOR_FIELDS,
    is_meaningful,
    is_adjustable,
    filter_adjustable,
)
from .ratings import (
    DEFAULT_INCIDENT_ENERGY_LIMIT,
    is_over_dutied,
    exceeds_incident_energy,
)

__all__ = [
    "__version__",
    "INDICATOR_FIELDS",
    "is_meaningful",
    "is_adjustable",
    "filter_adjustable",
    "DEFAULT_INCIDENT_ENERGY_LIMIT",
    "is_over_dutied",
    "exceeds_incident_energy",
]
