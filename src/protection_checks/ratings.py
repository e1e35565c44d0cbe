"""
Study-result rating checks.

These predicates parse numbers out of study values; they are flags for
filtering and review, and play no part in diff comparison.
"""

from typing import Optional

from src.power_records import ArcFlash, ShortCircuit


# Incident energy above which PPE is not rated (cal/cm2)
DEFAULT_INCIDENT_ENERGY_LIMIT = 40.0


def _parse_number(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None


def is_over_dutied(result: ShortCircuit) -> bool:
    """
    Check whether the 1/2 cycle duty exceeds the device rating.

    Returns False when either value is missing or not a number.
    """
    duty = _parse_number(result.half_cycle_duty_ka)
    rating = _parse_number(result.half_cycle_rating_ka)
    if duty is None or rating is None:
        return False
    return duty > rating


def exceeds_incident_energy(
    result: ArcFlash,
    limit: float = DEFAULT_INCIDENT_ENERGY_LIMIT
) -> bool:
    """
    Check whether incident energy is above a limit.

    Args:
        result: Arc flash result
        limit: Limit in cal/cm2 (default 40)

    Returns:
        True if the incident energy parses and is above the limit
    """
    energy = _parse_number(result.incident_energy)
    if energy is None:
        return False
    return energy > limit
