"""Date adapters: the calendar primitives behind the period engine.

Public API:
    Adapter
        Abstract base class every backend implements

    NativeAdapter / PandasAdapter
        dateutil and pandas backends

    get_adapter(name, week_starts_on=1) -> Adapter
        Build a backend by registry name

Examples:
    >>> from datetime import datetime
    >>> from usetemporal.adapters import get_adapter
    >>> get_adapter("pandas").start_of(datetime(2024, 5, 15), "quarter")
    datetime.datetime(2024, 4, 1, 0, 0)
"""

from usetemporal.adapters.adapterbase import (
    Adapter,
    Duration,
    DURATION_KEYS,
    RESOLUTION,
    duration_parts,
    js_weekday,
    validate_week_starts_on,
)
from usetemporal.adapters.nativeadapter import NativeAdapter
from usetemporal.adapters.pandasadapter import PandasAdapter
from usetemporal.adapters.adapterapi import (
    register_adapter,
    get_adapter,
    list_adapters,
)

__all__ = [
    "Adapter",
    "Duration",
    "DURATION_KEYS",
    "RESOLUTION",
    "duration_parts",
    "js_weekday",
    "validate_week_starts_on",
    "NativeAdapter",
    "PandasAdapter",
    "register_adapter",
    "get_adapter",
    "list_adapters",
]
