"""Period Division
----------------

divide() breaks a Period into child Periods of a smaller unit; split()
layers count- and duration-based partitioning on top of it.

Guarantees for both:
  - children are chronological, non-overlapping and contiguous
  - the union of the children is exactly [parent.start, parent.end]

Division rules:
  - stableMonth is never a division target (build it with create_period)
  - custom periods cannot be divided and custom is not a target
  - a stableMonth parent divides only into its 42 days or 6 weeks
  - otherwise the target must rank strictly below the parent's unit;
    children that overhang the parent (e.g. the partial weeks at the
    edges of a month) are clamped to the parent's bounds
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from usetemporal.adapters import RESOLUTION, Duration, duration_parts
from usetemporal.config import get_config
from usetemporal.errors import (
    InconsistentAdapterError,
    InvalidDivisionError,
    IterationOverflowError,
    MissingSplitStrategyError,
)
from usetemporal.period.periodcreate import create_custom_period, period_number
from usetemporal.period.periodmodel import Period, TemporalContext
from usetemporal.units import Unit, UnitLike, is_smaller_unit, parse_unit

logger = logging.getLogger(__name__)


def _check_iterations(count: int, limit: int, what: str) -> None:
    if count >= limit:
        raise IterationOverflowError(
            f"{what} exceeded {limit} iterations; check the adapter or raise max_iterations"
        )


# ---- divide ----

def _divide_stable_month(ctx: TemporalContext, period: Period, unit: Unit) -> list[Period]:
    """Split a stableMonth grid into its days, optionally grouped into weeks."""
    if unit not in (Unit.DAY, Unit.WEEK):
        raise InvalidDivisionError(f"stableMonth can only be divided by 'day' or 'week', not {unit.value!r}")

    adapter = ctx.adapter
    limit = get_config()["max_iterations"]

    days = []
    current = period.start
    while current <= period.end:
        _check_iterations(len(days), limit, "stableMonth division")
        days.append(
            Period(
                Unit.DAY,
                adapter.start_of(current, Unit.DAY),
                adapter.end_of(current, Unit.DAY),
                current,
                period_number(Unit.DAY, current),
            )
        )
        current = adapter.add(current, 1, Unit.DAY)

    if unit == Unit.DAY:
        return days

    weeks = []
    for i in range(0, len(days), 7):
        week_days = days[i:i + 7]
        first = week_days[0]
        weeks.append(
            Period(
                Unit.WEEK,
                first.start,
                week_days[-1].end,
                first.reference_date,
                period_number(Unit.WEEK, first.reference_date),
            )
        )
    return weeks


def divide(ctx: TemporalContext, period: Period, unit: UnitLike) -> list[Period]:
    """
    Divide a Period into child Periods of a smaller unit.

    Args:
        ctx: Temporal context
        period: Parent Period
        unit: Child unit, strictly smaller than the parent's unit

    Returns:
        Chronological list of child Periods covering the parent exactly

    Raises:
        InvalidDivisionError: Target is stableMonth/custom, parent is custom,
            or the target is not smaller than the parent unit
        IterationOverflowError: More than max_iterations children

    Examples:
        >>> year = create_period(ctx, "year", datetime(2024, 6, 15))
        >>> [m.number for m in divide(ctx, year, "month")]
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    """
    unit = parse_unit(unit)

    if unit == Unit.STABLE_MONTH:
        raise InvalidDivisionError(
            "Cannot divide by stableMonth; use create_period(ctx, 'stableMonth', date) or zoom_out() instead"
        )
    if unit == Unit.CUSTOM:
        raise InvalidDivisionError("Cannot divide by custom; use split() with count or duration instead")
    if period.unit == Unit.CUSTOM:
        raise InvalidDivisionError("Cannot divide a custom period; use split() with count or duration instead")

    if period.unit == Unit.STABLE_MONTH:
        children = _divide_stable_month(ctx, period, unit)
    else:
        if not is_smaller_unit(unit, period.unit):
            raise InvalidDivisionError(
                f"Cannot divide {period.unit.value!r} by {unit.value!r}: target unit must be smaller"
            )

        adapter = ctx.adapter
        limit = get_config()["max_iterations"]
        children = []

        dates = adapter.each_interval(period.start, period.end, unit, ctx.week_starts_on)
        for i, date in enumerate(dates):
            _check_iterations(i, limit, f"Dividing {period.unit.value} by {unit.value}")

            start = max(adapter.start_of(date, unit, ctx.week_starts_on), period.start)
            end = min(adapter.end_of(date, unit, ctx.week_starts_on), period.end)
            if start > end:
                raise InconsistentAdapterError(
                    f"{type(adapter).__name__} returned inverted {unit.value} bounds for {date}: "
                    f"start {start} is after end {end}"
                )

            children.append(Period(unit, start, end, start, period_number(unit, start)))

    logger.debug(f"Divided {period.unit.value} {period.start} into {len(children)} {unit.value} periods")
    return children


# ---- split ----

def _split_by_count(period: Period, count: int) -> list[Period]:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise ValueError(f"count must be a positive integer, got {count!r}")

    # Number of representable instants in the inclusive span
    instants = (period.end - period.start) // RESOLUTION + 1
    if count > instants:
        raise ValueError(f"Cannot split {instants} microseconds into {count} non-empty parts")

    def boundary(i: int) -> datetime:
        return period.start + RESOLUTION * (instants * i // count)

    slices = []
    for i in range(count):
        start = boundary(i)
        # Last slice snaps to the parent end to absorb rounding drift
        end = boundary(i + 1) - RESOLUTION if i < count - 1 else period.end
        slices.append(create_custom_period(start, end, number=i + 1))
    return slices


def _split_by_duration(ctx: TemporalContext, period: Period, duration: Duration) -> list[Period]:
    parts = duration_parts(duration)
    if not parts:
        raise ValueError("duration must contain at least one non-zero part")

    adapter = ctx.adapter
    limit = get_config()["max_iterations"]

    slices = []
    current = period.start
    while current <= period.end:
        _check_iterations(len(slices), limit, "Splitting by duration")

        step = adapter.add_duration(current, parts)
        if step <= current:
            raise ValueError(f"duration {parts} does not move forward from {current}")

        end = min(step - RESOLUTION, period.end)
        slices.append(create_custom_period(current, end, number=len(slices) + 1))
        current = step
    return slices


def split(
    ctx: TemporalContext,
    period: Period,
    *,
    by: Optional[UnitLike] = None,
    count: Optional[int] = None,
    duration: Optional[Duration] = None,
) -> list[Period]:
    """
    Partition a Period with exactly one strategy.

    Strategies:
      - by: a unit; delegates to divide()
      - count: N equal-length custom slices, the last ending exactly at
        period.end
      - duration: custom slices of a calendar duration such as
        {"weeks": 2} or relativedelta(months=1), the last clamped to
        period.end

    Raises:
        MissingSplitStrategyError: If zero or several strategies are given
        ValueError: On a non-positive count or non-advancing duration

    Examples:
        >>> month = create_period(ctx, "month", datetime(2024, 1, 15))
        >>> parts = split(ctx, month, count=3)
        >>> parts[-1].end == month.end
        True
    """
    supplied = [name for name, value in (("by", by), ("count", count), ("duration", duration)) if value is not None]
    if len(supplied) != 1:
        raise MissingSplitStrategyError(
            f"split() needs exactly one of 'by', 'count' or 'duration', got {supplied or 'none'}"
        )

    if by is not None:
        return divide(ctx, period, by)
    if count is not None:
        return _split_by_count(period, count)
    return _split_by_duration(ctx, period, duration)


__all__ = [
    "divide",
    "split",
]
