"""Time units: the closed Unit set, hierarchy and text parsing.

Public API:
    parse_unit(value, fuzzy=None) -> Unit
        Resolve "months", "wk", Unit.DAY, ... to a Unit member

    unit_rank(unit) -> int
        Position in the hierarchy (second = 0 ... year = 7)

    unit_duration(unit, steps=1) -> (amount, Unit)
        Calendar step used to navigate a Period of that unit

Examples:
    >>> from usetemporal.units import Unit, parse_unit
    >>> parse_unit("Weeks") is Unit.WEEK
    True
"""

from usetemporal.units.unitapi import (
    Unit,
    UnitLike,
    CALENDAR_UNITS,
    parse_unit,
    unit_rank,
    is_smaller_unit,
    unit_duration,
)
from usetemporal.units.unitnorm import normalize_unit_text

__all__ = [
    "Unit",
    "UnitLike",
    "CALENDAR_UNITS",
    "parse_unit",
    "unit_rank",
    "is_smaller_unit",
    "unit_duration",
    "normalize_unit_text",
]
