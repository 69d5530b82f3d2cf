"""Shared test fixtures for usetemporal tests."""

from datetime import datetime

import pytest

from usetemporal.config import get_config
from usetemporal.period import create_temporal


ADAPTER_NAMES = ["native", "pandas"]


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached config around every test.

    Tests that monkeypatch USETEMPORAL_* variables see their values on the
    next get_config() call, and later tests reload the real environment.
    """
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(params=ADAPTER_NAMES)
def adapter_name(request):
    """Name of each registered backend; tests using it run once per adapter."""
    return request.param


@pytest.fixture
def ctx(adapter_name):
    """Monday-start context browsing June 15 2024, for every adapter."""
    return create_temporal(
        adapter_name,
        date=datetime(2024, 6, 15),
        now=datetime(2024, 6, 15, 10, 30),
        week_starts_on=1,
    )


@pytest.fixture
def sunday_ctx(adapter_name):
    """Sunday-start context, for every adapter."""
    return create_temporal(
        adapter_name,
        date=datetime(2024, 1, 10),
        now=datetime(2024, 1, 10, 9, 0),
        week_starts_on=0,
    )


@pytest.fixture
def new_york():
    """America/New_York, or skip where no tz database is installed."""
    zoneinfo = pytest.importorskip("zoneinfo")
    try:
        return zoneinfo.ZoneInfo("America/New_York")
    except zoneinfo.ZoneInfoNotFoundError:
        pytest.skip("tz database not available")


@pytest.fixture
def test_dates():
    """Named reference dates used across test modules.

    2024-01-01 is a Monday; 2024 is a leap year.
    """
    return {
        "jan1": datetime(2024, 1, 1),
        "jan10": datetime(2024, 1, 10),     # Wednesday
        "jan15": datetime(2024, 1, 15),
        "jan31": datetime(2024, 1, 31),
        "feb20": datetime(2024, 2, 20),
        "mar31": datetime(2024, 3, 31),
        "apr1": datetime(2024, 4, 1),
        "jun15": datetime(2024, 6, 15),     # Saturday
        "dec31": datetime(2024, 12, 31),
    }
