"""Native datetime adapter.

Backed by the standard ``datetime`` type and ``dateutil.relativedelta`` for
calendar arithmetic. Arithmetic is wall-clock: adding one day to 10:00 gives
10:00 the next day, and tzinfo is carried through unchanged.

Examples:
    >>> adapter = NativeAdapter()
    >>> adapter.start_of(datetime(2024, 5, 15, 13, 45), "month")
    datetime.datetime(2024, 5, 1, 0, 0)

    >>> adapter.end_of(datetime(2024, 2, 10), "month")
    datetime.datetime(2024, 2, 29, 23, 59, 59, 999999)

    >>> adapter.add(datetime(2024, 1, 31), 1, "month")
    datetime.datetime(2024, 2, 29, 0, 0)
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from usetemporal.adapters.adapterbase import (
    RESOLUTION,
    Adapter,
    Duration,
    duration_parts,
    js_weekday,
)
from usetemporal.units import Unit, UnitLike


# Unit -> relativedelta keyword for a single step
_STEP_KEYWORDS = {
    Unit.YEAR: "years",
    Unit.MONTH: "months",
    Unit.WEEK: "weeks",
    Unit.DAY: "days",
    Unit.HOUR: "hours",
    Unit.MINUTE: "minutes",
    Unit.SECOND: "seconds",
}


class NativeAdapter(Adapter):
    """datetime + relativedelta backend."""

    name = "native"

    def start_of(self, date: datetime, unit: UnitLike, week_starts_on: Optional[int] = None) -> datetime:
        unit = self.calendar_unit(unit)

        if unit == Unit.SECOND:
            return date.replace(microsecond=0)
        if unit == Unit.MINUTE:
            return date.replace(second=0, microsecond=0)
        if unit == Unit.HOUR:
            return date.replace(minute=0, second=0, microsecond=0)

        day_start = date.replace(hour=0, minute=0, second=0, microsecond=0)

        if unit == Unit.DAY:
            return day_start
        if unit == Unit.WEEK:
            week_starts_on = self.resolve_week_start(week_starts_on)
            offset = (js_weekday(date) - week_starts_on) % 7
            return day_start - timedelta(days=offset)
        if unit == Unit.MONTH:
            return day_start.replace(day=1)
        if unit == Unit.QUARTER:
            quarter_start_month = 3 * ((date.month - 1) // 3) + 1
            return day_start.replace(month=quarter_start_month, day=1)
        # Unit.YEAR
        return day_start.replace(month=1, day=1)

    def end_of(self, date: datetime, unit: UnitLike, week_starts_on: Optional[int] = None) -> datetime:
        unit = self.calendar_unit(unit)
        start = self.start_of(date, unit, week_starts_on)
        return self.add(start, 1, unit) - RESOLUTION

    def add(self, date: datetime, amount: int, unit: UnitLike) -> datetime:
        unit = self.calendar_unit(unit)
        if unit == Unit.QUARTER:
            return date + relativedelta(months=3 * amount)
        return date + relativedelta(**{_STEP_KEYWORDS[unit]: amount})

    def add_duration(self, date: datetime, duration: Duration) -> datetime:
        return date + relativedelta(**duration_parts(duration))


__all__ = [
    "NativeAdapter",
]
