"""pandas adapter.

Backed by ``pandas.Timestamp`` and ``pandas.DateOffset``. Calendar units
(day and larger) are computed on the naive wall-clock value and then
re-localized to the input's timezone, so day/week/month boundaries land on
local midnight even across DST transitions. Clock units (hour, minute,
second) move by absolute elapsed time: the spring-forward day holds 23
hours, the fall-back day holds 25 and the repeated hour is told apart by
``datetime.fold``.

Inputs may be ``datetime`` or ``pandas.Timestamp``; outputs are always
``datetime`` so Periods built from either adapter compare equal.

Range: ``pandas.Timestamp`` is nanosecond based and only spans roughly
1677-09-21 to 2262-04-11. Dates outside it raise DateOutOfRangeError (a
ValueError); use the native adapter for them.
"""

from __future__ import annotations

from datetime import datetime, timezone
from functools import wraps
from typing import Optional

import pandas as pd
from pandas.errors import OutOfBoundsDatetime, OutOfBoundsTimedelta

from usetemporal.adapters.adapterbase import (
    RESOLUTION,
    Adapter,
    Duration,
    duration_parts,
)
from usetemporal.errors import DateOutOfRangeError
from usetemporal.units import Unit, UnitLike


_PERIOD_FREQS = {
    Unit.YEAR: "Y",
    Unit.QUARTER: "Q",
    Unit.MONTH: "M",
}

_CLOCK_UNITS = {
    Unit.HOUR: "hours",
    Unit.MINUTE: "minutes",
    Unit.SECOND: "seconds",
}

_CALENDAR_OFFSETS = {
    Unit.YEAR: "years",
    Unit.MONTH: "months",
    Unit.WEEK: "weeks",
    Unit.DAY: "days",
}

_LAST_INSTANT = pd.Timedelta(RESOLUTION)


def _bounded(method):
    """Re-raise pandas out-of-bounds errors as DateOutOfRangeError."""

    @wraps(method)
    def wrapper(self, date, *args, **kwargs):
        try:
            return method(self, date, *args, **kwargs)
        except (OutOfBoundsDatetime, OutOfBoundsTimedelta) as e:
            raise DateOutOfRangeError(
                f"{date!r} is outside the pandas adapter range "
                f"({pd.Timestamp.min.date()} to {pd.Timestamp.max.date()}); "
                f"use the native adapter for such dates"
            ) from e

    return wrapper


def _as_datetime(date: datetime) -> datetime:
    if isinstance(date, pd.Timestamp):
        return date.to_pydatetime()
    return date


def _split_tz(date: datetime) -> tuple[pd.Timestamp, object]:
    """Return (naive wall-clock Timestamp, tz or None)."""
    ts = pd.Timestamp(date)
    if ts.tz is None:
        return ts, None
    return ts.tz_localize(None), ts.tz


def _localize(naive: pd.Timestamp, tz) -> datetime:
    if tz is not None:
        naive = naive.tz_localize(tz, ambiguous=True, nonexistent="shift_forward")
    return naive.to_pydatetime()


def _shift_instant(date: datetime, delta: pd.Timedelta) -> datetime:
    """Move ``date`` by elapsed time, keeping its tzinfo and setting fold."""
    date = _as_datetime(date)
    if date.tzinfo is None:
        return (pd.Timestamp(date) + delta).to_pydatetime()
    # astimezone honours fold on the way in and sets it on the way out
    utc = pd.Timestamp(date.astimezone(timezone.utc)) + delta
    return utc.to_pydatetime().astimezone(date.tzinfo)


class PandasAdapter(Adapter):
    """pandas Timestamp/DateOffset backend."""

    name = "pandas"

    @_bounded
    def start_of(self, date: datetime, unit: UnitLike, week_starts_on: Optional[int] = None) -> datetime:
        unit = self.calendar_unit(unit)

        # Clock units truncate in place so the fold of a repeated hour survives
        if unit in _CLOCK_UNITS:
            date = _as_datetime(date)
            if unit == Unit.SECOND:
                return date.replace(microsecond=0)
            if unit == Unit.MINUTE:
                return date.replace(second=0, microsecond=0)
            return date.replace(minute=0, second=0, microsecond=0)

        naive, tz = _split_tz(date)
        if unit == Unit.DAY:
            start = naive.normalize()
        elif unit == Unit.WEEK:
            week_starts_on = self.resolve_week_start(week_starts_on)
            # pandas dayofweek: Monday = 0; shift to Sunday = 0
            offset = ((naive.dayofweek + 1) % 7 - week_starts_on) % 7
            start = naive.normalize() - pd.Timedelta(days=offset)
        else:
            start = naive.to_period(_PERIOD_FREQS[unit]).start_time

        return _localize(start, tz)

    @_bounded
    def end_of(self, date: datetime, unit: UnitLike, week_starts_on: Optional[int] = None) -> datetime:
        unit = self.calendar_unit(unit)
        start = self.start_of(date, unit, week_starts_on)
        # Step back in elapsed time; the wall clock may repeat after a fall-back
        return _shift_instant(self.add(start, 1, unit), -_LAST_INSTANT)

    @_bounded
    def add(self, date: datetime, amount: int, unit: UnitLike) -> datetime:
        unit = self.calendar_unit(unit)

        if unit in _CLOCK_UNITS:
            return _shift_instant(date, pd.Timedelta(**{_CLOCK_UNITS[unit]: amount}))

        naive, tz = _split_tz(date)
        if unit == Unit.QUARTER:
            shifted = naive + pd.DateOffset(months=3 * amount)
        else:
            shifted = naive + pd.DateOffset(**{_CALENDAR_OFFSETS[unit]: amount})
        return _localize(shifted, tz)

    @_bounded
    def add_duration(self, date: datetime, duration: Duration) -> datetime:
        parts = duration_parts(duration)
        calendar = {key: value for key, value in parts.items() if key in _CALENDAR_OFFSETS.values()}
        clock = {key: value for key, value in parts.items() if key not in calendar}

        result = _as_datetime(date)
        if calendar:
            naive, tz = _split_tz(result)
            result = _localize(naive + pd.DateOffset(**calendar), tz)
        if clock:
            result = _shift_instant(result, pd.Timedelta(**clock))
        return result


__all__ = [
    "PandasAdapter",
]
