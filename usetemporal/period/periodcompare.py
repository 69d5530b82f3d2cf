"""Period predicates: containment and unit-bucket equality.

All predicates are total: None inputs give False instead of raising.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from usetemporal.period.periodmodel import Period, TemporalContext
from usetemporal.units import Unit, UnitLike, parse_unit

DateOrPeriod = Union[datetime, Period]


def contains(period: Optional[Period], target: Optional[DateOrPeriod]) -> bool:
    """
    Check whether ``period`` contains a datetime or another Period.

    A datetime is contained when start <= target <= end (both ends
    inclusive). A Period is contained only when it lies entirely inside.

    Examples:
        >>> day = create_period(ctx, "day", datetime(2024, 3, 10))
        >>> contains(day, day.start), contains(day, day.end)
        (True, True)
    """
    if period is None or target is None:
        return False
    if isinstance(target, Period):
        return target.start >= period.start and target.end <= period.end
    return period.start <= target <= period.end


def _reference(value: DateOrPeriod) -> datetime:
    return value.reference_date if isinstance(value, Period) else value


def is_same(
    ctx: TemporalContext,
    a: Optional[DateOrPeriod],
    b: Optional[DateOrPeriod],
    unit: UnitLike,
) -> bool:
    """
    Check whether two dates (or Periods' reference dates) share a unit bucket.

    quarter, stableMonth and custom are decided here; every other unit is
    delegated to the adapter with the context's week start.

    Examples:
        >>> is_same(ctx, datetime(2024, 1, 15), datetime(2024, 2, 20), "quarter")
        True
        >>> is_same(ctx, datetime(2024, 3, 31), datetime(2024, 4, 1), "quarter")
        False
    """
    if a is None or b is None:
        return False

    unit = parse_unit(unit)
    date_a, date_b = _reference(a), _reference(b)

    if unit == Unit.QUARTER:
        return date_a.year == date_b.year and (date_a.month - 1) // 3 == (date_b.month - 1) // 3
    if unit == Unit.STABLE_MONTH:
        # Each calendar month anchors exactly one grid
        return (date_a.year, date_a.month) == (date_b.year, date_b.month)
    if unit == Unit.CUSTOM:
        return date_a == date_b

    return ctx.adapter.is_same(date_a, date_b, unit, ctx.week_starts_on)


def is_today(ctx: TemporalContext, period: Optional[Period]) -> bool:
    """True if the Period's reference date falls on the same day as ctx.now."""
    return is_same(ctx, period, ctx.now, Unit.DAY)


def is_weekend(period: Period) -> bool:
    """True if the reference date is a Saturday or Sunday."""
    return period.reference_date.weekday() >= 5


def is_weekday(period: Period) -> bool:
    return not is_weekend(period)


__all__ = [
    "contains",
    "is_same",
    "is_today",
    "is_weekend",
    "is_weekday",
]
