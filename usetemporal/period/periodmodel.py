"""Period and TemporalContext data model.

A Period is an immutable, inclusive span of time tagged with a Unit. Two
Periods are equal when unit, start and end match; reference_date and
number describe how the Period was derived and do not take part in
equality.

A TemporalContext bundles the adapter and week configuration with the two
mutable cursors (browsing, now). Cursors are replaced, never mutated, and
writes go through a lock so zoom calls from several threads do not race.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime

from usetemporal.adapters import Adapter, validate_week_starts_on
from usetemporal.units import Unit, parse_unit


@dataclass(frozen=True, eq=False)
class Period:
    """Inclusive time span [start, end] of a given unit."""

    unit: Unit
    start: datetime
    end: datetime
    reference_date: datetime
    number: int = 0

    def __post_init__(self):
        object.__setattr__(self, "unit", parse_unit(self.unit))
        if self.start > self.end:
            raise ValueError(f"Period start {self.start} is after end {self.end}")

    def __eq__(self, other):
        if not isinstance(other, Period):
            return NotImplemented
        return (self.unit, self.start, self.end) == (other.unit, other.start, other.end)

    def __hash__(self):
        return hash((self.unit, self.start, self.end))

    def __repr__(self) -> str:
        return (
            f"Period(unit={self.unit.value!r}, start={self.start.isoformat()}, "
            f"end={self.end.isoformat()}, number={self.number})"
        )


@dataclass
class TemporalContext:
    """Adapter, week configuration and the browsing/now cursors."""

    adapter: Adapter
    week_starts_on: int
    browsing: Period
    now: Period
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.adapter, Adapter):
            raise TypeError(f"adapter must be an Adapter, got {type(self.adapter).__name__}")
        validate_week_starts_on(self.week_starts_on)

    def set_browsing(self, period: Period) -> Period:
        """Replace the browsing cursor; returns the previous value."""
        with self._lock:
            previous, self.browsing = self.browsing, period
        return previous

    def set_now(self, period: Period) -> Period:
        """Replace the now cursor; returns the previous value."""
        with self._lock:
            previous, self.now = self.now, period
        return previous


__all__ = [
    "Period",
    "TemporalContext",
]
