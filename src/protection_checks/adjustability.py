"""
Adjustable trip unit detection for low-voltage breakers.

A breaker counts as adjustable when its trip type says so, or when any of
its trip unit setting fields holds a real value. The one exception is a
breaker with an unflagged trip type whose only setting is a fixed
instantaneous pickup in amps.
"""

from typing import Iterable, Optional

from src.power_records import LVBreaker


# Trip types containing any of these words are adjustable
ADJUSTABLE_TRIP_WORDS = ("adj", "adjustable", "electronic")

# Values that mean "no setting"
NON_VALUES = ("0", "n/a", "na", "none")

# Trip unit setting fields that indicate an adjustable unit
INDICATOR_FIELDS = (
    "ltpu_mult",
    "ltd_band",
    "lt_curve",
    "stpu_setting",
    "stpu_band",
    "stpu_i2t",
    "inst_setting",
    "trip_adjust",
    "inst_a",
    "maint_setting",
    "gnd_a",
    "gnd_delay",
    "gnd_i2t",
)


def is_meaningful(value: Optional[str]) -> bool:
    """
    Check whether a setting value is real.

    Blank values and "0", "n/a", "na", "none" (any case, trimmed) are not.
    """
    if value is None or not value.strip():
        return False
    return value.strip().lower() not in NON_VALUES


def is_adjustable(breaker: LVBreaker) -> bool:
    """
    Decide whether a breaker has an adjustable trip unit.

    Rules, in order:
        1. flagged: trip type contains "adj", "adjustable" or "electronic"
        2. has_indicators: any INDICATOR_FIELDS value is meaningful
        3. neither -> not adjustable
        4. trip type not flagged, inst_setting is "fixed" and, apart from
           inst_setting itself, inst_a is the only meaningful indicator
           -> not adjustable
        5. otherwise adjustable

    Args:
        breaker: Breaker record

    Returns:
        True if the trip unit is adjustable

    Example:
        >>> is_adjustable(LVBreaker(id="CB-1", trip="Electronic"))
        True
        >>> is_adjustable(LVBreaker(id="CB-2", trip="Fixed", inst_setting="fixed", inst_a="800"))
        False
    """
    trip = (breaker.trip or "").strip().lower()
    flagged = any(word in trip for word in ADJUSTABLE_TRIP_WORDS)

    meaningful = [name for name in INDICATOR_FIELDS if is_meaningful(getattr(breaker, name))]
    has_indicators = bool(meaningful)

    if not (flagged or has_indicators):
        return False

    # A "fixed" inst_setting is the fixed state itself, not a setting
    inst_fixed = (breaker.inst_setting or "").strip().lower() == "fixed"
    if inst_fixed and not flagged:
        settings = [name for name in meaningful if name != "inst_setting"]
        if settings == ["inst_a"]:
            return False

    return True


def filter_adjustable(breakers: Iterable[LVBreaker]) -> list[LVBreaker]:
    """Breakers with adjustable trip units, in input order."""
    return [b for b in breakers if is_adjustable(b)]
