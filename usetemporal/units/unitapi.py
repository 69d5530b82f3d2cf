"""Public API for time units.

Units form a closed set. Strings are accepted at the public boundary and
resolved once through parse_unit(); everything below works on Unit members.

Hierarchy (largest first):
    year > quarter > month > week > day > hour > minute > second

stableMonth ranks with month (it is a month-anchored grid); custom has no
rank and cannot take part in hierarchical operations.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from usetemporal.config import get_config
from usetemporal.errors import InvalidUnitError
from usetemporal.units.unitnorm import build_alias_index, normalize_unit_text

logger = logging.getLogger(__name__)


class Unit(str, Enum):
    """Granularity tag of a Period."""

    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    STABLE_MONTH = "stableMonth"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


# Units every adapter must understand
CALENDAR_UNITS = (
    Unit.YEAR,
    Unit.QUARTER,
    Unit.MONTH,
    Unit.WEEK,
    Unit.DAY,
    Unit.HOUR,
    Unit.MINUTE,
    Unit.SECOND,
)

_RANKS = {
    Unit.SECOND: 0,
    Unit.MINUTE: 1,
    Unit.HOUR: 2,
    Unit.DAY: 3,
    Unit.WEEK: 4,
    Unit.MONTH: 5,
    Unit.STABLE_MONTH: 5,
    Unit.QUARTER: 6,
    Unit.YEAR: 7,
}

_ALIAS_INDEX = build_alias_index()

UnitLike = Union[Unit, str]


def parse_unit(value: UnitLike, *, fuzzy: Optional[bool] = None) -> Unit:
    """
    Resolve a Unit or unit string to a Unit member.

    Resolution Strategy:
      1. Unit instances pass through
      2. Exact enum value ("stableMonth")
      3. Normalized alias lookup ("Months", "wk", "stable-month")
      4. Fuzzy match against aliases with rapidfuzz (only when enabled)

    Args:
        value: Unit member or string
        fuzzy: Enable fuzzy matching; None uses the fuzzy_units config key

    Returns:
        Unit member

    Raises:
        InvalidUnitError: If the value cannot be resolved

    Examples:
        >>> parse_unit("months")
        <Unit.MONTH: 'month'>

        >>> parse_unit("mnth", fuzzy=True)
        <Unit.MONTH: 'month'>
    """
    if isinstance(value, Unit):
        return value

    if not isinstance(value, str):
        raise InvalidUnitError(f"Unit must be a Unit or str, got {type(value).__name__}")

    try:
        return Unit(value)
    except ValueError:
        pass

    text_norm = normalize_unit_text(value)
    canonical = _ALIAS_INDEX.get(text_norm)
    if canonical:
        return Unit(canonical)

    config = get_config()
    if fuzzy is None:
        fuzzy = config["fuzzy_units"]

    # Plain ratio: WRatio's partial scoring lets one-letter aliases ("h") win
    if fuzzy and text_norm:
        match = process.extractOne(
            text_norm,
            list(_ALIAS_INDEX.keys()),
            scorer=fuzz.ratio,
            score_cutoff=config["fuzzy_score_cutoff"],
        )
        if match:
            alias, score, _ = match
            logger.warning(f"Fuzzy-matched unit {value!r} to {_ALIAS_INDEX[alias]!r} (score {score:.0f})")
            return Unit(_ALIAS_INDEX[alias])

    raise InvalidUnitError(f"Unknown unit: {value!r}")


def unit_rank(unit: UnitLike) -> int:
    """
    Position of a unit in the hierarchy (second = 0 ... year = 7).

    Raises:
        InvalidUnitError: For custom, which has no rank
    """
    unit = parse_unit(unit)
    if unit not in _RANKS:
        raise InvalidUnitError(f"Unit {unit.value!r} has no place in the unit hierarchy")
    return _RANKS[unit]


def is_smaller_unit(unit: UnitLike, than: UnitLike) -> bool:
    """True if ``unit`` ranks strictly below ``than``."""
    return unit_rank(unit) < unit_rank(than)


def unit_duration(unit: UnitLike, steps: int = 1) -> tuple[int, Unit]:
    """
    Calendar amount used to move a Period of ``unit`` by ``steps``.

    quarter moves 3 months and stableMonth moves 1 month; every other
    calendar unit moves one of itself.

    Returns:
        (amount, adapter_unit) tuple, e.g. (6, Unit.MONTH) for 2 quarters

    Raises:
        InvalidUnitError: For custom, which has no calendar duration

    Examples:
        >>> unit_duration("quarter", 2)
        (6, <Unit.MONTH: 'month'>)
    """
    unit = parse_unit(unit)
    if unit == Unit.QUARTER:
        return (3 * steps, Unit.MONTH)
    if unit == Unit.STABLE_MONTH:
        return (steps, Unit.MONTH)
    if unit in CALENDAR_UNITS:
        return (steps, unit)
    raise InvalidUnitError(f"Unit {unit.value!r} has no calendar duration")


__all__ = [
    "Unit",
    "UnitLike",
    "CALENDAR_UNITS",
    "parse_unit",
    "unit_rank",
    "is_smaller_unit",
    "unit_duration",
]
