"""Zoom operations.

zoom_in descends to child Periods (it is divide). zoom_out and zoom_to
rebuild the Period's reference date at another unit and move the
context's browsing cursor to that day, so a calendar UI keeps its place
while switching views.
"""

from __future__ import annotations

import logging

from usetemporal.errors import InvalidDivisionError
from usetemporal.period.periodcreate import create_period
from usetemporal.period.perioddivide import divide
from usetemporal.period.periodmodel import Period, TemporalContext
from usetemporal.units import Unit, UnitLike, parse_unit, unit_rank

logger = logging.getLogger(__name__)


def _browse_to(ctx: TemporalContext, period: Period) -> None:
    ctx.set_browsing(create_period(ctx, Unit.DAY, period.reference_date))


def zoom_in(ctx: TemporalContext, period: Period, unit: UnitLike) -> list[Period]:
    """Descend into ``period``; same rules and errors as divide()."""
    return divide(ctx, period, unit)


def zoom_out(ctx: TemporalContext, period: Period, unit: UnitLike) -> Period:
    """
    Rebuild ``period.reference_date`` at a larger (or equal-rank) unit.

    Sets ctx.browsing to the day containing the reference date.

    Raises:
        InvalidDivisionError: If ``unit`` ranks below the Period's unit

    Examples:
        >>> day = create_period(ctx, "day", datetime(2024, 6, 15))
        >>> zoom_out(ctx, day, "month").number
        6
    """
    unit = parse_unit(unit)

    if Unit.CUSTOM not in (unit, period.unit) and unit_rank(unit) < unit_rank(period.unit):
        raise InvalidDivisionError(
            f"Cannot zoom out from {period.unit.value!r} to smaller unit {unit.value!r}; use zoom_in or zoom_to"
        )

    _browse_to(ctx, period)
    logger.debug(f"Zoomed out from {period.unit.value} to {unit.value} at {period.reference_date}")
    return create_period(ctx, unit, period)


def zoom_to(ctx: TemporalContext, period: Period, unit: UnitLike) -> Period:
    """
    Rebuild ``period.reference_date`` at any unit, hierarchical or not.

    Sets ctx.browsing to the day containing the reference date.
    """
    unit = parse_unit(unit)
    _browse_to(ctx, period)
    logger.debug(f"Zoomed from {period.unit.value} to {unit.value} at {period.reference_date}")
    return create_period(ctx, unit, period)


__all__ = [
    "zoom_in",
    "zoom_out",
    "zoom_to",
]
