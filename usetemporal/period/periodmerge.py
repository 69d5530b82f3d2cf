"""Period merging.

merge() combines Periods into one. It never fails on odd input: mixed
units, gaps and overlaps all degrade to a custom Period spanning the
earliest start to the latest end. When the inputs line up exactly with a
larger calendar unit (7 days forming a week, 3 months forming a quarter)
that "natural" unit is returned instead.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from usetemporal.adapters import RESOLUTION
from usetemporal.period.periodcreate import create_custom_period, create_period
from usetemporal.period.periodmodel import Period, TemporalContext
from usetemporal.units import Unit, UnitLike, parse_unit

logger = logging.getLogger(__name__)


def _is_contiguous(periods: list[Period]) -> bool:
    return all(b.start == a.end + RESOLUTION for a, b in zip(periods, periods[1:]))


def _detect_natural_unit(ctx: TemporalContext, periods: list[Period]) -> Optional[Period]:
    """
    Return a week or quarter Period if the sorted inputs form one exactly.

    Week: 7 contiguous day Periods matching the week boundaries for the
    configured week start.
    Quarter: 3 month Periods of one year with consecutive months starting
    at January, April, July or October.
    """
    units = {p.unit for p in periods}
    adapter = ctx.adapter

    if len(periods) == 7 and units == {Unit.DAY}:
        week_start = adapter.start_of(periods[0].reference_date, Unit.WEEK, ctx.week_starts_on)
        week_end = adapter.end_of(periods[-1].reference_date, Unit.WEEK, ctx.week_starts_on)
        if periods[0].start == week_start and periods[-1].end == week_end and _is_contiguous(periods):
            return create_period(ctx, Unit.WEEK, periods[3].reference_date)

    if len(periods) == 3 and units == {Unit.MONTH}:
        dates = [p.reference_date for p in periods]
        months = [d.month for d in dates]
        same_year = len({d.year for d in dates}) == 1
        if (
            same_year
            and (months[0] - 1) % 3 == 0
            and months[1] == months[0] + 1
            and months[2] == months[0] + 2
        ):
            return create_period(ctx, Unit.QUARTER, periods[1].reference_date)

    return None


def merge(
    ctx: TemporalContext,
    periods: Iterable[Period],
    unit: Optional[UnitLike] = None,
) -> Optional[Period]:
    """
    Merge Periods into a single Period.

    Resolution Strategy:
      1. No periods -> None; one period -> returned unchanged
      2. Natural unit (week from 7 days, quarter from 3 months)
      3. Explicit ``unit`` built around the midpoint of the combined span
      4. custom Period from the earliest start to the latest end

    Args:
        ctx: Temporal context
        periods: Periods in any order
        unit: Optional unit to build when no natural unit is detected

    Returns:
        Merged Period or None for empty input

    Examples:
        >>> days = divide(ctx, create_period(ctx, "week", datetime(2024, 1, 10)), "day")
        >>> merge(ctx, days).unit
        <Unit.WEEK: 'week'>
    """
    periods = list(periods)
    if not periods:
        return None
    if len(periods) == 1:
        return periods[0]

    ordered = sorted(periods, key=lambda p: p.start)

    natural = _detect_natural_unit(ctx, ordered)
    if natural is not None:
        logger.debug(f"Merged {len(ordered)} periods into natural {natural.unit.value}")
        return natural

    start = ordered[0].start
    end = max(p.end for p in ordered)

    if unit is not None and parse_unit(unit) != Unit.CUSTOM:
        midpoint = start + (end - start) / 2
        return create_period(ctx, unit, midpoint)

    return create_custom_period(start, end)


__all__ = [
    "merge",
]
