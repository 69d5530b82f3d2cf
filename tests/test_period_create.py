"""Tests for Period construction and the TemporalContext."""

import dataclasses
from datetime import datetime, timedelta

import pytest

from usetemporal.adapters import NativeAdapter, PandasAdapter
from usetemporal.errors import InvalidUnitError
from usetemporal.period import (
    STABLE_MONTH_DAYS,
    Period,
    TemporalContext,
    create_custom_period,
    create_period,
    create_temporal,
    period_number,
    to_period,
)
from usetemporal.units import Unit


END_OF_DAY = timedelta(hours=23, minutes=59, seconds=59, microseconds=999999)


class TestPeriodModel:
    """Test the Period value type"""

    def test_unit_string_is_parsed(self):
        """Unit strings are resolved on construction"""
        p = Period("months", datetime(2024, 1, 1), datetime(2024, 1, 31), datetime(2024, 1, 15))
        assert p.unit is Unit.MONTH

    def test_start_after_end_raises(self):
        """start must not be after end"""
        with pytest.raises(ValueError):
            Period(Unit.DAY, datetime(2024, 1, 2), datetime(2024, 1, 1), datetime(2024, 1, 1))

    def test_unknown_unit_raises(self):
        """An unknown unit tag is rejected"""
        with pytest.raises(InvalidUnitError):
            Period("fortnight", datetime(2024, 1, 1), datetime(2024, 1, 2), datetime(2024, 1, 1))

    def test_structural_equality(self):
        """Equality ignores reference_date and number"""
        a = Period(Unit.DAY, datetime(2024, 1, 1), datetime(2024, 1, 1) + END_OF_DAY, datetime(2024, 1, 1, 8), 1)
        b = Period(Unit.DAY, datetime(2024, 1, 1), datetime(2024, 1, 1) + END_OF_DAY, datetime(2024, 1, 1, 20), 7)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_unit_takes_part_in_equality(self):
        """Same span with a different unit is a different Period"""
        start, end = datetime(2024, 1, 1), datetime(2024, 1, 1) + END_OF_DAY
        assert Period(Unit.DAY, start, end, start) != Period(Unit.CUSTOM, start, end, start)

    def test_immutable(self):
        """Periods are frozen"""
        p = Period(Unit.DAY, datetime(2024, 1, 1), datetime(2024, 1, 1), datetime(2024, 1, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.start = datetime(2023, 1, 1)

    def test_repr(self):
        """repr shows the unit and ISO boundaries"""
        p = Period(Unit.DAY, datetime(2024, 1, 1), datetime(2024, 1, 1), datetime(2024, 1, 1), 1)
        assert repr(p) == "Period(unit='day', start=2024-01-01T00:00:00, end=2024-01-01T00:00:00, number=1)"


class TestCreatePeriod:
    """Test create_period for calendar units"""

    @pytest.mark.parametrize("unit,start,end", [
        ("year", datetime(2024, 1, 1), datetime(2024, 12, 31)),
        ("quarter", datetime(2024, 4, 1), datetime(2024, 6, 30)),
        ("month", datetime(2024, 6, 1), datetime(2024, 6, 30)),
        ("week", datetime(2024, 6, 10), datetime(2024, 6, 16)),
        ("day", datetime(2024, 6, 15), datetime(2024, 6, 15)),
    ])
    def test_calendar_boundaries(self, ctx, unit, start, end):
        """Boundaries come from the calendar"""
        period = create_period(ctx, unit, datetime(2024, 6, 15, 10, 30))
        assert period.unit == Unit(unit)
        assert period.start == start
        assert period.end == end + END_OF_DAY

    def test_clock_units(self, ctx):
        """hour, minute and second Periods"""
        date = datetime(2024, 6, 15, 10, 30, 45, 500)
        hour = create_period(ctx, "hour", date)
        assert hour.start == datetime(2024, 6, 15, 10)
        assert hour.end == datetime(2024, 6, 15, 10, 59, 59, 999999)
        second = create_period(ctx, "second", date)
        assert second.start == datetime(2024, 6, 15, 10, 30, 45)
        assert second.end == datetime(2024, 6, 15, 10, 30, 45, 999999)

    def test_contains_reference_date(self, ctx):
        """Every created Period contains its reference date"""
        date = datetime(2024, 6, 15, 10, 30)
        for unit in ("year", "quarter", "month", "week", "day", "hour", "minute", "second", "stableMonth"):
            period = create_period(ctx, unit, date)
            assert period.start <= date <= period.end
            assert period.reference_date == date

    def test_leap_february(self, ctx):
        """February 2024 ends on the 29th"""
        feb = create_period(ctx, "month", datetime(2024, 2, 10))
        assert feb.end == datetime(2024, 2, 29) + END_OF_DAY

    def test_common_february(self, ctx):
        """February 2023 ends on the 28th"""
        feb = create_period(ctx, "month", datetime(2023, 2, 10))
        assert feb.end == datetime(2023, 2, 28) + END_OF_DAY

    def test_week_monday_start(self, ctx):
        """Jan 10 2024 is in the Monday-start week Jan 8-14"""
        week = create_period(ctx, "week", datetime(2024, 1, 10))
        assert week.start == datetime(2024, 1, 8)
        assert week.end == datetime(2024, 1, 14) + END_OF_DAY

    def test_week_sunday_start(self, sunday_ctx):
        """Jan 10 2024 is in the Sunday-start week Jan 7-13"""
        week = create_period(sunday_ctx, "week", datetime(2024, 1, 10))
        assert week.start == datetime(2024, 1, 7)
        assert week.end == datetime(2024, 1, 13) + END_OF_DAY

    def test_from_period_reuses_reference(self, ctx):
        """A Period input contributes its reference date"""
        day = create_period(ctx, "day", datetime(2024, 6, 15, 10, 30))
        month = create_period(ctx, "month", day)
        assert month.reference_date == day.reference_date
        assert month.start == datetime(2024, 6, 1)

    def test_unit_aliases(self, ctx):
        """Unit aliases are accepted"""
        assert create_period(ctx, "Months", datetime(2024, 6, 15)).unit is Unit.MONTH

    def test_unknown_unit(self, ctx):
        """Unknown units raise InvalidUnitError"""
        with pytest.raises(InvalidUnitError):
            create_period(ctx, "fortnight", datetime(2024, 6, 15))

    def test_to_period_defaults_to_day(self, ctx):
        """to_period builds a day Period by default"""
        period = to_period(ctx, datetime(2024, 6, 15, 10, 30))
        assert period.unit is Unit.DAY
        assert period.start == datetime(2024, 6, 15)

    def test_to_period_with_unit(self, ctx):
        """to_period accepts an explicit unit"""
        assert to_period(ctx, datetime(2024, 6, 15), "year").start == datetime(2024, 1, 1)


class TestStableMonth:
    """Test the 6-week month grid"""

    def test_february_2026_monday_start(self, ctx):
        """Feb 2026 starts Sunday the 1st, so the Monday grid runs Jan 26 - Mar 8"""
        grid = create_period(ctx, "stableMonth", datetime(2026, 2, 15))
        assert grid.unit is Unit.STABLE_MONTH
        assert grid.start == datetime(2026, 1, 26)
        assert grid.end == datetime(2026, 3, 8) + END_OF_DAY

    def test_february_2026_sunday_start(self, sunday_ctx):
        """With Sunday start the grid begins on Feb 1"""
        grid = create_period(sunday_ctx, "stableMonth", datetime(2026, 2, 15))
        assert grid.start == datetime(2026, 2, 1)
        assert grid.end == datetime(2026, 3, 14) + END_OF_DAY

    @pytest.mark.parametrize("month", range(1, 13))
    def test_always_42_days_covering_month(self, ctx, month):
        """The grid spans 42 days and covers the whole calendar month"""
        date = datetime(2024, month, 15)
        grid = create_period(ctx, "stableMonth", date)
        calendar_month = create_period(ctx, "month", date)
        assert grid.end - grid.start == timedelta(days=STABLE_MONTH_DAYS) - timedelta(microseconds=1)
        assert grid.start <= calendar_month.start
        assert grid.end >= calendar_month.end

    def test_grid_starts_on_week_start(self, ctx):
        """The grid starts on the configured week start"""
        grid = create_period(ctx, "stableMonth", datetime(2024, 9, 10))
        assert grid.start.weekday() == 0

    def test_number_is_month(self, ctx):
        """stableMonth numbers by calendar month"""
        assert create_period(ctx, "stableMonth", datetime(2024, 9, 10)).number == 9


class TestCustomPeriods:
    """Test custom Period construction"""

    def test_custom_from_period_passthrough(self, ctx):
        """create_period(custom) returns a Period input unchanged"""
        month = create_period(ctx, "month", datetime(2024, 6, 15))
        assert create_period(ctx, "custom", month) is month

    def test_custom_from_datetime(self, ctx):
        """create_period(custom) from a datetime is zero-length"""
        date = datetime(2024, 6, 15, 10)
        period = create_period(ctx, "custom", date)
        assert period.unit is Unit.CUSTOM
        assert period.start == period.end == period.reference_date == date

    def test_create_custom_period_midpoint(self):
        """The reference date is the midpoint"""
        period = create_custom_period(datetime(2024, 1, 1), datetime(2024, 1, 3), number=4)
        assert period.unit is Unit.CUSTOM
        assert period.reference_date == datetime(2024, 1, 2)
        assert period.number == 4

    def test_create_custom_period_order(self):
        """start after end raises ValueError"""
        with pytest.raises(ValueError):
            create_custom_period(datetime(2024, 1, 3), datetime(2024, 1, 1))


class TestPeriodNumber:
    """Test calendar numbering"""

    @pytest.mark.parametrize("unit,date,expected", [
        (Unit.YEAR, datetime(2024, 5, 15), 2024),
        (Unit.QUARTER, datetime(2024, 5, 15), 2),
        (Unit.QUARTER, datetime(2024, 12, 31), 4),
        (Unit.MONTH, datetime(2024, 5, 15), 5),
        (Unit.WEEK, datetime(2025, 1, 8), 2),
        (Unit.WEEK, datetime(2024, 12, 30), 1),
        (Unit.DAY, datetime(2024, 5, 15), 15),
        (Unit.HOUR, datetime(2024, 5, 15, 13, 45, 30), 13),
        (Unit.MINUTE, datetime(2024, 5, 15, 13, 45, 30), 45),
        (Unit.SECOND, datetime(2024, 5, 15, 13, 45, 30), 30),
        (Unit.CUSTOM, datetime(2024, 5, 15), 0),
    ])
    def test_numbers(self, unit, date, expected):
        """Numbers follow the calendar (ISO weeks)"""
        assert period_number(unit, date) == expected

    def test_created_period_numbered(self, ctx):
        """create_period fills in the number"""
        assert create_period(ctx, "quarter", datetime(2024, 6, 15)).number == 2

    def test_week_number_is_iso_for_sunday_start(self, sunday_ctx):
        """A Sunday-start week numbers its Sunday with the previous ISO week"""
        sunday = create_period(sunday_ctx, "week", datetime(2024, 1, 7))
        monday = create_period(sunday_ctx, "week", datetime(2024, 1, 8))
        assert sunday == monday
        assert (sunday.number, monday.number) == (1, 2)


class TestCreateTemporal:
    """Test TemporalContext construction"""

    def test_cursors_are_day_periods(self):
        """browsing and now are day Periods"""
        ctx = create_temporal("native", date=datetime(2024, 6, 15, 9), now=datetime(2024, 7, 1, 12))
        assert ctx.browsing.unit is Unit.DAY
        assert ctx.browsing.start == datetime(2024, 6, 15)
        assert ctx.now.start == datetime(2024, 7, 1)

    def test_browsing_defaults_to_now(self):
        """Without a date, browsing starts at now"""
        ctx = create_temporal("native", now=datetime(2024, 7, 1, 12))
        assert ctx.browsing == ctx.now

    def test_defaults_from_config(self):
        """Adapter and week start default to the packaged config"""
        ctx = create_temporal()
        assert isinstance(ctx.adapter, NativeAdapter)
        assert ctx.week_starts_on == 1

    def test_environment_overrides(self, monkeypatch):
        """USETEMPORAL_ADAPTER and USETEMPORAL_WEEK_STARTS_ON change the defaults"""
        monkeypatch.setenv("USETEMPORAL_ADAPTER", "pandas")
        monkeypatch.setenv("USETEMPORAL_WEEK_STARTS_ON", "0")
        ctx = create_temporal()
        assert isinstance(ctx.adapter, PandasAdapter)
        assert ctx.week_starts_on == 0
        assert ctx.adapter.week_starts_on == 0

    def test_adapter_instance(self):
        """An Adapter instance is used as-is"""
        adapter = PandasAdapter()
        assert create_temporal(adapter).adapter is adapter

    def test_unknown_adapter_name(self):
        """Unknown adapter names raise ValueError"""
        with pytest.raises(ValueError):
            create_temporal("arrow")

    def test_invalid_week_start(self):
        """week_starts_on outside 0-6 raises ValueError"""
        with pytest.raises(ValueError):
            create_temporal("native", week_starts_on=7)

    def test_context_requires_adapter(self):
        """TemporalContext rejects non-Adapter backends"""
        day = Period(Unit.DAY, datetime(2024, 1, 1), datetime(2024, 1, 1), datetime(2024, 1, 1))
        with pytest.raises(TypeError):
            TemporalContext("native", 1, day, day)

    def test_set_browsing_returns_previous(self, ctx):
        """set_browsing swaps the cursor and returns the old one"""
        old = ctx.browsing
        new = create_period(ctx, "month", datetime(2024, 1, 1))
        assert ctx.set_browsing(new) is old
        assert ctx.browsing is new

    def test_set_now_returns_previous(self, ctx):
        """set_now swaps the cursor and returns the old one"""
        old = ctx.now
        new = to_period(ctx, datetime(2025, 1, 1))
        assert ctx.set_now(new) is old
        assert ctx.now is new
