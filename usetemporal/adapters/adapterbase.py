"""Adapter contract
----------------

An Adapter supplies the calendar primitives the period engine is built on.
Backends subclass Adapter and implement the four abstract methods; the
derived operations (subtract, is_same, each_interval) come for free.

Adapters only know the eight calendar units (year ... second). stableMonth
and custom are engine concepts and are rejected here.

Conventions:
  - week_starts_on uses 0 = Sunday, 1 = Monday ... 6 = Saturday
  - end_of() returns the last representable instant, i.e. one microsecond
    before the start of the following unit
  - tzinfo on input datetimes is preserved on output
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Iterator, Mapping, Optional, Union

from dateutil.relativedelta import relativedelta

from usetemporal.errors import InvalidUnitError
from usetemporal.units import CALENDAR_UNITS, Unit, UnitLike, parse_unit

# Smallest step a Python datetime can represent
RESOLUTION = timedelta(microseconds=1)

DURATION_KEYS = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "microseconds",
)

Duration = Union[Mapping[str, int], relativedelta]


def js_weekday(date: datetime) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return (date.weekday() + 1) % 7


def validate_week_starts_on(week_starts_on: int) -> int:
    if isinstance(week_starts_on, bool) or not isinstance(week_starts_on, int):
        raise ValueError(f"week_starts_on must be an integer 0-6, got {week_starts_on!r}")
    if not 0 <= week_starts_on <= 6:
        raise ValueError(f"week_starts_on must be between 0 and 6, got {week_starts_on}")
    return week_starts_on


def duration_parts(duration: Duration) -> dict[str, int]:
    """
    Normalize a duration mapping or relativedelta to its non-zero parts.

    Args:
        duration: {"weeks": 2} style mapping or a dateutil relativedelta

    Returns:
        Dict restricted to DURATION_KEYS with zero parts dropped

    Raises:
        ValueError: On unknown keys or absolute (singular) relativedelta fields

    Examples:
        >>> duration_parts({"days": 2, "hours": 12})
        {'days': 2, 'hours': 12}

        >>> duration_parts(relativedelta(weeks=2))
        {'days': 14}
    """
    if isinstance(duration, relativedelta):
        absolute = [
            name
            for name in ("year", "month", "day", "weekday", "hour", "minute", "second", "microsecond")
            if getattr(duration, name) is not None
        ]
        if absolute:
            raise ValueError(f"Duration must be relative; absolute fields set: {absolute}")
        parts = {key: getattr(duration, key) for key in DURATION_KEYS if key != "weeks"}
    elif isinstance(duration, Mapping):
        unknown = set(duration) - set(DURATION_KEYS)
        if unknown:
            raise ValueError(f"Unknown duration keys: {sorted(unknown)}. Use {list(DURATION_KEYS)}")
        parts = dict(duration)
    else:
        raise ValueError(f"Duration must be a mapping or relativedelta, got {type(duration).__name__}")

    for key, value in parts.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Duration part {key!r} must be an integer, got {value!r}")

    return {key: value for key, value in parts.items() if value}


class Adapter(ABC):
    """Calendar capability set consumed by the period engine."""

    name = "abstract"

    def __init__(self, week_starts_on: int = 1):
        self.week_starts_on = validate_week_starts_on(week_starts_on)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(week_starts_on={self.week_starts_on})"

    # ---- Abstract primitives ----

    @abstractmethod
    def start_of(self, date: datetime, unit: UnitLike, week_starts_on: Optional[int] = None) -> datetime:
        """Earliest instant of the unit containing ``date``."""

    @abstractmethod
    def end_of(self, date: datetime, unit: UnitLike, week_starts_on: Optional[int] = None) -> datetime:
        """Latest instant of the unit containing ``date``."""

    @abstractmethod
    def add(self, date: datetime, amount: int, unit: UnitLike) -> datetime:
        """Move ``date`` by ``amount`` units, calendar-correct (month ends, leap years)."""

    @abstractmethod
    def add_duration(self, date: datetime, duration: Duration) -> datetime:
        """Move ``date`` by a composite duration such as {"days": 2, "hours": 12}."""

    # ---- Derived operations ----

    def subtract(self, date: datetime, amount: int, unit: UnitLike) -> datetime:
        return self.add(date, -amount, unit)

    def is_same(
        self,
        date_a: datetime,
        date_b: datetime,
        unit: UnitLike,
        week_starts_on: Optional[int] = None,
    ) -> bool:
        """True if both dates fall in the same unit bucket."""
        return self.start_of(date_a, unit, week_starts_on) == self.start_of(date_b, unit, week_starts_on)

    def each_interval(
        self,
        start: datetime,
        end: datetime,
        unit: UnitLike,
        week_starts_on: Optional[int] = None,
    ) -> Iterator[datetime]:
        """
        Yield one representative date per unit instance overlapping [start, end].

        The first date is the start of the unit containing ``start`` (which may
        precede ``start``); iteration stops once a unit start passes ``end``.
        This is a lazy generator; callers enforce their own iteration caps.
        """
        unit = self.calendar_unit(unit)
        current = self.start_of(start, unit, week_starts_on)
        while current <= end:
            yield current
            current = self.add(current, 1, unit)

    # ---- Helpers ----

    def calendar_unit(self, unit: UnitLike) -> Unit:
        """Parse ``unit`` and reject anything an adapter cannot handle."""
        unit = parse_unit(unit)
        if unit not in CALENDAR_UNITS:
            raise InvalidUnitError(f"{self.name} adapter does not handle unit {unit.value!r}")
        return unit

    def resolve_week_start(self, week_starts_on: Optional[int]) -> int:
        if week_starts_on is None:
            return self.week_starts_on
        return validate_week_starts_on(week_starts_on)


__all__ = [
    "Adapter",
    "Duration",
    "DURATION_KEYS",
    "RESOLUTION",
    "duration_parts",
    "js_weekday",
    "validate_week_starts_on",
]
