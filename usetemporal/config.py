"""Package configuration.

Defaults live in ``temporalconfig.yaml`` next to this module. Environment
variables override individual keys:

  USETEMPORAL_WEEK_STARTS_ON   int 0-6 (0 = Sunday)
  USETEMPORAL_MAX_ITERATIONS   int > 0
  USETEMPORAL_ADAPTER          registry name ("native", "pandas")
  USETEMPORAL_FUZZY_UNITS      "1"/"true"/"yes" to enable fuzzy unit parsing

Examples:
  >>> get_config()["week_starts_on"]
  1
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent / "temporalconfig.yaml"

_DEFAULTS: Dict[str, Any] = {
    "week_starts_on": 1,
    "max_iterations": 10000,
    "default_adapter": "native",
    "fuzzy_units": False,
    "fuzzy_score_cutoff": 85,
}

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load config mapping from YAML, or an empty dict if the file is missing."""
    if not path.exists():
        return {}

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _validate(config: Dict[str, Any]) -> Dict[str, Any]:
    week_starts_on = config["week_starts_on"]
    if not isinstance(week_starts_on, int) or not 0 <= week_starts_on <= 6:
        raise ValueError(f"week_starts_on must be an integer 0-6, got {week_starts_on!r}")

    max_iterations = config["max_iterations"]
    if not isinstance(max_iterations, int) or max_iterations <= 0:
        raise ValueError(f"max_iterations must be a positive integer, got {max_iterations!r}")

    return config


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Return the merged configuration (defaults < YAML < environment).

    The result is cached; call reload_config() after changing the
    environment.

    Returns:
        Dict with keys week_starts_on, max_iterations, default_adapter,
        fuzzy_units, fuzzy_score_cutoff

    Raises:
        ValueError: If a value is out of range or not parseable
    """
    config = dict(_DEFAULTS)
    config.update(_load_yaml(CONFIG_PATH))

    week_starts_on = _env_int("USETEMPORAL_WEEK_STARTS_ON")
    if week_starts_on is not None:
        config["week_starts_on"] = week_starts_on

    max_iterations = _env_int("USETEMPORAL_MAX_ITERATIONS")
    if max_iterations is not None:
        config["max_iterations"] = max_iterations

    adapter = os.environ.get("USETEMPORAL_ADAPTER")
    if adapter:
        config["default_adapter"] = adapter.strip().lower()

    fuzzy = os.environ.get("USETEMPORAL_FUZZY_UNITS")
    if fuzzy is not None:
        config["fuzzy_units"] = fuzzy.strip().lower() in _TRUE_STRINGS

    logger.debug(f"Loaded usetemporal config: {config}")
    return _validate(config)


def reload_config() -> Dict[str, Any]:
    """Clear the cached configuration and load it again."""
    get_config.cache_clear()
    return get_config()


__all__ = [
    "CONFIG_PATH",
    "get_config",
    "reload_config",
]
