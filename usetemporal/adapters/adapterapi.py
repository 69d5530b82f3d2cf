"""Adapter registry.

Maps short names to adapter factories so a context can be configured with
a string ("native", "pandas") from code, YAML or the environment.

Examples:
    >>> get_adapter("native")
    NativeAdapter(week_starts_on=1)

    >>> list_adapters()
    ['native', 'pandas']
"""

import logging
from typing import Callable

from usetemporal.adapters.adapterbase import Adapter
from usetemporal.adapters.nativeadapter import NativeAdapter
from usetemporal.adapters.pandasadapter import PandasAdapter

logger = logging.getLogger(__name__)

AdapterFactory = Callable[..., Adapter]

_REGISTRY: dict[str, AdapterFactory] = {
    "native": NativeAdapter,
    "pandas": PandasAdapter,
}


def register_adapter(name: str, factory: AdapterFactory) -> None:
    """
    Register an adapter factory under ``name``.

    Args:
        name: Registry key (case-insensitive)
        factory: Callable accepting ``week_starts_on`` and returning an Adapter
    """
    key = name.strip().lower()
    if not key:
        raise ValueError("Adapter name must be non-empty")
    if key in _REGISTRY:
        logger.warning(f"Adapter {key!r} is already registered, overwriting previous factory")
    _REGISTRY[key] = factory


def get_adapter(name: str, *, week_starts_on: int = 1) -> Adapter:
    """
    Build a registered adapter.

    Raises:
        ValueError: If no adapter is registered under ``name``
    """
    key = name.strip().lower()
    factory = _REGISTRY.get(key)
    if factory is None:
        raise ValueError(f"Unknown adapter: {name!r}. Available: {list_adapters()}")

    adapter = factory(week_starts_on=week_starts_on)
    if not isinstance(adapter, Adapter):
        raise TypeError(f"Factory for {key!r} returned {type(adapter).__name__}, not an Adapter")
    return adapter


def list_adapters() -> list[str]:
    return sorted(_REGISTRY)


__all__ = [
    "register_adapter",
    "get_adapter",
    "list_adapters",
]
