"""Exception taxonomy for temporal operations.

All of these signal programmer errors (bad units, impossible divisions,
missing split options) or adapter faults and are raised to the caller, never swallowed.
The ValueError/RuntimeError bases keep them catchable by generic handlers.
"""


class TemporalError(Exception):
    """Base class for all usetemporal errors."""


class InvalidDivisionError(TemporalError, ValueError):
    """Dividing by an equal/larger unit, by stableMonth, or a custom period."""


class InvalidUnitError(TemporalError, ValueError):
    """An unrecognized unit tag reached creation or navigation."""


class MissingSplitStrategyError(TemporalError, ValueError):
    """split() called without exactly one of by/count/duration."""


class IterationOverflowError(TemporalError, RuntimeError):
    """An enumeration loop exceeded its safety cap."""


class InconsistentAdapterError(TemporalError, RuntimeError):
    """An adapter returned bounds that cannot form a Period (start after end)."""


class DateOutOfRangeError(TemporalError, ValueError):
    """A date falls outside the range an adapter can represent."""


__all__ = [
    "TemporalError",
    "InvalidDivisionError",
    "InvalidUnitError",
    "MissingSplitStrategyError",
    "IterationOverflowError",
    "InconsistentAdapterError",
    "DateOutOfRangeError",
]
