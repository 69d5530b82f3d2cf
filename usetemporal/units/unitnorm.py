"""Unit Text Normalization
-------------------------

Normalizes free-form unit strings before they are resolved to a Unit.

Examples:
  >>> normalize_unit_text("  Months ")
  'months'

  >>> normalize_unit_text("stable-month")
  'stable_month'

  >>> normalize_unit_text("stableMonth")
  'stable_month'
"""

import re
import unicodedata


# Canonical unit value -> accepted spellings (already normalized)
UNIT_ALIASES = {
    "year": ["year", "years", "yr", "yrs", "y"],
    "quarter": ["quarter", "quarters", "qtr", "qtrs", "q"],
    "month": ["month", "months", "mon", "mo", "mos"],
    "week": ["week", "weeks", "wk", "wks", "w"],
    "day": ["day", "days", "d"],
    "hour": ["hour", "hours", "hr", "hrs", "h"],
    "minute": ["minute", "minutes", "min", "mins"],
    "second": ["second", "seconds", "sec", "secs", "s"],
    "stableMonth": ["stable_month", "stable_months", "stablemonth", "calendar_month_grid"],
    "custom": ["custom"],
}


def normalize_unit_text(text: str) -> str:
    """
    Normalize a unit string for alias lookup.

    Transformations:
      - Unicode normalization (NFC)
      - camelCase split into snake_case ("stableMonth" -> "stable_month")
      - Lowercase, strip
      - Spaces and hyphens collapse to a single underscore

    Args:
        text: Raw unit text (e.g., "Months", "stable month")

    Returns:
        Normalized text, or "" for empty input
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text).strip()

    # camelCase -> snake_case before lowercasing loses the boundary
    text = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", text)
    text = text.lower()

    text = re.sub(r"[\s\-]+", "_", text)
    return text.strip("_")


def build_alias_index() -> dict[str, str]:
    """
    Flatten UNIT_ALIASES into alias -> canonical value.

    Examples:
        >>> build_alias_index()["wk"]
        'week'
    """
    index = {}
    for canonical, aliases in UNIT_ALIASES.items():
        for alias in aliases:
            index[alias] = canonical
    return index


__all__ = [
    "UNIT_ALIASES",
    "normalize_unit_text",
    "build_alias_index",
]
