"""usetemporal - calendar periods and temporal operations

Public API for building, subdividing, merging, navigating and comparing
spans of time tagged with a calendar unit.

Usage:
    from datetime import datetime
    from usetemporal import create_temporal, create_period, divide, merge, next_period

    ctx = create_temporal("native", week_starts_on=1)

    # A month and its days
    month = create_period(ctx, "month", datetime(2024, 2, 10))
    days = divide(ctx, month, "day")          # 29 day Periods

    # Seven days of one week merge back into the week
    week = merge(ctx, days[4:11])              # Period(unit='week', ...)

    # Navigation rebuilds boundaries from the calendar
    march = next_period(ctx, month)

    # Calendar grid for a month view: always 6 weeks
    grid = create_period(ctx, "stableMonth", datetime(2024, 2, 10))
"""

__version__ = "0.1.0"

# ============================================================================
# Units
# ============================================================================

from .units import (
    Unit,              # Closed set of period units
    parse_unit,        # "months" / "wk" / Unit.DAY -> Unit
    unit_rank,         # Position in the year > ... > second hierarchy
)

# ============================================================================
# Adapters
# ============================================================================

from .adapters import (
    Adapter,           # Abstract calendar backend
    NativeAdapter,     # datetime + dateutil
    PandasAdapter,     # pandas Timestamp/DateOffset
    get_adapter,       # Build a backend by name
    register_adapter,  # Add a backend to the registry
    list_adapters,     # Registered backend names
)

# ============================================================================
# Period Engine
# ============================================================================

from .period import (
    Period,
    TemporalContext,
    create_temporal,
    create_period,
    to_period,
    create_custom_period,
    divide,
    split,
    merge,
    go,
    next_period,
    previous_period,
    contains,
    is_same,
    is_today,
    is_weekday,
    is_weekend,
    zoom_in,
    zoom_out,
    zoom_to,
)

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    TemporalError,
    InvalidDivisionError,
    InvalidUnitError,
    MissingSplitStrategyError,
    IterationOverflowError,
    InconsistentAdapterError,
    DateOutOfRangeError,
)

__all__ = [
    "__version__",
    # Units
    "Unit",
    "parse_unit",
    "unit_rank",
    # Adapters
    "Adapter",
    "NativeAdapter",
    "PandasAdapter",
    "get_adapter",
    "register_adapter",
    "list_adapters",
    # Period engine
    "Period",
    "TemporalContext",
    "create_temporal",
    "create_period",
    "to_period",
    "create_custom_period",
    "divide",
    "split",
    "merge",
    "go",
    "next_period",
    "previous_period",
    "contains",
    "is_same",
    "is_today",
    "is_weekday",
    "is_weekend",
    "zoom_in",
    "zoom_out",
    "zoom_to",
    # Errors
    "TemporalError",
    "InvalidDivisionError",
    "InvalidUnitError",
    "MissingSplitStrategyError",
    "IterationOverflowError",
    "InconsistentAdapterError",
    "DateOutOfRangeError",
]
