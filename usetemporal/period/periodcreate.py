"""Period Construction
-------------------

Builds Periods from reference dates.

Supports:
  - Calendar units: boundaries straight from the adapter's start_of/end_of
  - stableMonth: a fixed 6-week (42-day) grid covering a calendar month
  - custom: explicit start/end, reference date at the midpoint

Key Design Principles:
  1. The result always contains its reference date
  2. Creating from an existing Period reuses its reference_date, so
     re-deriving at another unit is deterministic
  3. Week numbers are ISO 8601 (isoweek library) regardless of week_starts_on
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from usetemporal.adapters import Adapter, get_adapter
from usetemporal.config import get_config
from usetemporal.period.periodmodel import Period, TemporalContext
from usetemporal.units import Unit, UnitLike, parse_unit

logger = logging.getLogger(__name__)

STABLE_MONTH_WEEKS = 6
STABLE_MONTH_DAYS = 7 * STABLE_MONTH_WEEKS


# ---- Period numbers ----

def period_number(unit: Unit, date: datetime) -> int:
    """
    Calendar number of the unit containing ``date``.

    Week numbers are always the ISO 8601 (Monday-start) week of ``date``,
    whatever week_starts_on is. A Sunday-start week therefore gives its
    Sunday the previous ISO week number.

    Examples:
        >>> period_number(Unit.QUARTER, datetime(2024, 5, 15))
        2

        >>> period_number(Unit.WEEK, datetime(2025, 1, 8))
        2
    """
    if unit == Unit.YEAR:
        return date.year
    if unit == Unit.QUARTER:
        return (date.month - 1) // 3 + 1
    if unit in (Unit.MONTH, Unit.STABLE_MONTH):
        return date.month
    if unit == Unit.WEEK:
        return Week.withdate(date.date()).week
    if unit == Unit.DAY:
        return date.day
    if unit == Unit.HOUR:
        return date.hour
    if unit == Unit.MINUTE:
        return date.minute
    if unit == Unit.SECOND:
        return date.second
    return 0


# ---- Factories ----

def create_period(
    ctx: TemporalContext,
    unit: UnitLike,
    value: Union[datetime, Period],
) -> Period:
    """
    Create a Period of ``unit`` around a reference date.

    Args:
        ctx: Temporal context (adapter + week_starts_on)
        unit: Target unit
        value: Reference datetime, or a Period whose reference_date is reused

    Returns:
        Period of the requested unit containing the reference date.
        For unit "custom", a Period input is returned unchanged and a bare
        datetime becomes a zero-length custom Period.

    Raises:
        InvalidUnitError: If ``unit`` is not a known unit

    Examples:
        >>> month = create_period(ctx, "month", datetime(2024, 2, 10))
        >>> month.start, month.end
        (datetime(2024, 2, 1, 0, 0), datetime(2024, 2, 29, 23, 59, 59, 999999))
    """
    unit = parse_unit(unit)

    if unit == Unit.CUSTOM:
        if isinstance(value, Period):
            return value
        return Period(Unit.CUSTOM, value, value, value, 0)

    reference = value.reference_date if isinstance(value, Period) else value
    adapter = ctx.adapter

    if unit == Unit.STABLE_MONTH:
        first_of_month = adapter.start_of(reference, Unit.MONTH)
        start = adapter.start_of(first_of_month, Unit.WEEK, ctx.week_starts_on)
        last_day = adapter.add(start, STABLE_MONTH_DAYS - 1, Unit.DAY)
        end = adapter.end_of(last_day, Unit.DAY)
    else:
        start = adapter.start_of(reference, unit, ctx.week_starts_on)
        end = adapter.end_of(reference, unit, ctx.week_starts_on)

    return Period(unit, start, end, reference, period_number(unit, reference))


def to_period(ctx: TemporalContext, date: datetime, unit: UnitLike = Unit.DAY) -> Period:
    """Convert a datetime to the Period of ``unit`` containing it (default: day)."""
    return create_period(ctx, unit, date)


def create_custom_period(start: datetime, end: datetime, number: int = 0) -> Period:
    """
    Create a custom Period with explicit boundaries.

    The reference date is the midpoint of the span.

    Raises:
        ValueError: If start is after end
    """
    if start > end:
        raise ValueError(f"Custom period start {start} is after end {end}")
    midpoint = start + (end - start) / 2
    return Period(Unit.CUSTOM, start, end, midpoint, number)


# ---- Context ----

def create_temporal(
    adapter: Union[Adapter, str, None] = None,
    *,
    date: Optional[datetime] = None,
    now: Optional[datetime] = None,
    week_starts_on: Optional[int] = None,
) -> TemporalContext:
    """
    Create a TemporalContext.

    Args:
        adapter: Adapter instance or registry name; default from config
        date: Initial browsing date (default: now)
        now: Current moment (default: datetime.now())
        week_starts_on: 0 = Sunday ... 6 = Saturday; default from config

    Returns:
        TemporalContext whose browsing and now cursors are day Periods

    Raises:
        ValueError: On an unknown adapter name or invalid week_starts_on

    Examples:
        >>> ctx = create_temporal("native", date=datetime(2024, 6, 15), week_starts_on=0)
        >>> ctx.browsing.unit
        <Unit.DAY: 'day'>
    """
    config = get_config()
    if week_starts_on is None:
        week_starts_on = config["week_starts_on"]

    if adapter is None:
        adapter = config["default_adapter"]
    if isinstance(adapter, str):
        adapter = get_adapter(adapter, week_starts_on=week_starts_on)

    current = now if now is not None else datetime.now()
    browsing_date = date if date is not None else current

    # Cursors are placeholders until the context exists to build them
    placeholder = Period(Unit.DAY, current, current, current)
    ctx = TemporalContext(adapter, week_starts_on, placeholder, placeholder)
    ctx.set_browsing(to_period(ctx, browsing_date))
    ctx.set_now(to_period(ctx, current))

    logger.debug(f"Created temporal context with {adapter!r}, week_starts_on={week_starts_on}")
    return ctx


__all__ = [
    "STABLE_MONTH_DAYS",
    "STABLE_MONTH_WEEKS",
    "period_number",
    "create_period",
    "to_period",
    "create_custom_period",
    "create_temporal",
]
