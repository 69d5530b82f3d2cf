"""Period engine: create, divide, merge, split, navigate, compare and zoom.

Public API:
    create_temporal(adapter=None, date=None, now=None, week_starts_on=None)
        Build a TemporalContext

    create_period(ctx, unit, value) -> Period
        Period of a unit around a reference date (or Period)

    divide(ctx, period, unit) -> list[Period]
    split(ctx, period, by=..., count=..., duration=...) -> list[Period]
    merge(ctx, periods, unit=None) -> Period | None

    next_period / previous_period / go
    contains / is_same / is_today / is_weekday / is_weekend
    zoom_in / zoom_out / zoom_to

Examples:
    >>> from datetime import datetime
    >>> from usetemporal.period import create_temporal, create_period, divide
    >>> ctx = create_temporal("native", week_starts_on=1)
    >>> year = create_period(ctx, "year", datetime(2024, 6, 15))
    >>> len(divide(ctx, year, "month"))
    12
"""

from usetemporal.period.periodmodel import Period, TemporalContext
from usetemporal.period.periodcreate import (
    STABLE_MONTH_DAYS,
    STABLE_MONTH_WEEKS,
    period_number,
    create_period,
    to_period,
    create_custom_period,
    create_temporal,
)
from usetemporal.period.perioddivide import divide, split
from usetemporal.period.periodmerge import merge
from usetemporal.period.periodnavigate import go, next_period, previous_period
from usetemporal.period.periodcompare import (
    contains,
    is_same,
    is_today,
    is_weekend,
    is_weekday,
)
from usetemporal.period.periodzoom import zoom_in, zoom_out, zoom_to

__all__ = [
    "Period",
    "TemporalContext",
    "STABLE_MONTH_DAYS",
    "STABLE_MONTH_WEEKS",
    "period_number",
    "create_period",
    "to_period",
    "create_custom_period",
    "create_temporal",
    "divide",
    "split",
    "merge",
    "go",
    "next_period",
    "previous_period",
    "contains",
    "is_same",
    "is_today",
    "is_weekend",
    "is_weekday",
    "zoom_in",
    "zoom_out",
    "zoom_to",
]
