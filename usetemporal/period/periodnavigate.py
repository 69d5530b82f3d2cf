"""Period navigation.

Moving a Period translates its reference date by a calendar duration and
rebuilds the Period around the new date. Start/end are never shifted
directly: months run 28-31 days and DST changes day lengths, so only a
rebuild lands on correct boundaries.

Custom Periods have no calendar unit and instead shift by their own
length.
"""

from __future__ import annotations

from usetemporal.adapters import RESOLUTION
from usetemporal.period.periodcreate import create_period
from usetemporal.period.periodmodel import Period, TemporalContext
from usetemporal.units import Unit, unit_duration


def go(ctx: TemporalContext, period: Period, steps: int) -> Period:
    """
    Move a Period forward (steps > 0) or backward (steps < 0).

    Args:
        ctx: Temporal context
        period: Period to move
        steps: Number of units to move; 0 returns ``period`` unchanged

    Returns:
        Period of the same unit

    Raises:
        InvalidUnitError: If the Period's unit has no calendar duration
        ValueError: If steps is not an integer

    Examples:
        >>> jan = create_period(ctx, "month", datetime(2024, 1, 31))
        >>> go(ctx, jan, 1).start
        datetime.datetime(2024, 2, 1, 0, 0)
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValueError(f"steps must be an integer, got {steps!r}")
    if steps == 0:
        return period

    if period.unit == Unit.CUSTOM:
        shift = (period.end - period.start + RESOLUTION) * steps
        return Period(
            Unit.CUSTOM,
            period.start + shift,
            period.end + shift,
            period.reference_date + shift,
            period.number,
        )

    amount, adapter_unit = unit_duration(period.unit, steps)
    if amount > 0:
        reference = ctx.adapter.add(period.reference_date, amount, adapter_unit)
    else:
        reference = ctx.adapter.subtract(period.reference_date, -amount, adapter_unit)

    return create_period(ctx, period.unit, reference)


def next_period(ctx: TemporalContext, period: Period) -> Period:
    """The Period immediately after ``period``."""
    return go(ctx, period, 1)


def previous_period(ctx: TemporalContext, period: Period) -> Period:
    """The Period immediately before ``period``."""
    return go(ctx, period, -1)


__all__ = [
    "go",
    "next_period",
    "previous_period",
]
