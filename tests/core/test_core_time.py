"""
Tests for core.time — Clock protocol and period algebra.
"""

import pytest
from datetime import date, datetime

from core.time.clock import (
    FixedClock,
    SystemClock,
    get_default_clock,
    set_default_clock,
    today,
)
from core.time.periods import Period, advance, retreat


# ── Clock Tests ──────────────────────────────────────────────

class TestSystemClock:
    def test_returns_calendar_date(self):
        value = SystemClock().today()
        assert isinstance(value, date)
        assert not isinstance(value, datetime)


class TestFixedClock:
    def test_returns_fixed_date(self):
        clock = FixedClock(date(2025, 6, 15))
        assert clock.today() == date(2025, 6, 15)
        assert clock.today() == date(2025, 6, 15)  # Same every time

    def test_rejects_datetime(self):
        with pytest.raises(ValueError, match="calendar date"):
            FixedClock(datetime(2025, 1, 1, 12, 0))

    def test_rejects_non_date(self):
        with pytest.raises(ValueError):
            FixedClock("2025-01-01")

    def test_advance(self):
        clock = FixedClock(date(2025, 6, 15))
        clock.advance(20)
        assert clock.today() == date(2025, 7, 5)


class TestDefaultClock:
    def test_set_and_get_default(self):
        original = get_default_clock()
        fixed = FixedClock(date(2025, 1, 1))
        set_default_clock(fixed)
        try:
            assert get_default_clock() is fixed
            assert today() == date(2025, 1, 1)
        finally:
            set_default_clock(original)


# ── Period Algebra ───────────────────────────────────────────

class TestAdvance:
    def test_weeks(self):
        assert advance(date(2025, 1, 1), 2, Period.WEEKLY) == date(2025, 1, 15)

    def test_months_keep_day_of_month(self):
        assert advance(date(2025, 1, 15), 1, Period.MONTHLY) == date(2025, 2, 15)

    def test_months_roll_over_year(self):
        assert advance(date(2025, 11, 30), 3, Period.MONTHLY) == date(2026, 2, 28)

    def test_month_end_clamps_to_shorter_month(self):
        assert advance(date(2025, 1, 31), 1, Period.MONTHLY) == date(2025, 2, 28)
        assert advance(date(2024, 1, 31), 1, Period.MONTHLY) == date(2024, 2, 29)

    def test_years(self):
        assert advance(date(2021, 11, 1), 1, Period.YEARLY) == date(2022, 11, 1)

    def test_leap_day_plus_one_year(self):
        assert advance(date(2024, 2, 29), 1, Period.YEARLY) == date(2025, 2, 28)


class TestRetreat:
    def test_weeks(self):
        assert retreat(date(2022, 11, 1), 1, Period.WEEKLY) == date(2022, 10, 25)

    def test_months_clamp(self):
        assert retreat(date(2025, 3, 31), 1, Period.MONTHLY) == date(2025, 2, 28)

    def test_years(self):
        assert retreat(date(2025, 6, 1), 2, Period.YEARLY) == date(2023, 6, 1)

    def test_retreat_undoes_advance_when_no_clamping(self):
        start = date(2025, 5, 10)
        for unit in Period:
            assert retreat(advance(start, 3, unit), 3, unit) == start
