"""
PropMon Core Time — Explicit Clock Protocol
=============================================
Doctrine: NO date.today() inside registry or query logic.
"As of now" is resolved through an injected Clock so that
overdue / notice-due checks are deterministic under test.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Protocol


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable calendar source."""

    def today(self) -> date:
        """Return the current calendar date."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock — real system date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """
    Test clock — returns a fixed calendar date.

    Usage:
        clock = FixedClock(date(2025, 1, 1))
        assert clock.today().year == 2025
    """

    def __init__(self, fixed_date: date) -> None:
        if isinstance(fixed_date, datetime) or not isinstance(fixed_date, date):
            raise ValueError("FixedClock requires a calendar date, not a datetime.")
        self._fixed_date = fixed_date

    def today(self) -> date:
        return self._fixed_date

    def advance(self, days: int) -> None:
        """Advance the fixed date (useful for multi-step test scenarios)."""
        self._fixed_date = self._fixed_date + timedelta(days=days)


# ══════════════════════════════════════════════════════════════
# DEFAULT CLOCK
# ══════════════════════════════════════════════════════════════

_default_clock: Clock = SystemClock()


def set_default_clock(clock: Clock) -> None:
    """Override the default clock (testing only)."""
    global _default_clock
    _default_clock = clock


def get_default_clock() -> Clock:
    """Get the current default clock."""
    return _default_clock


def today() -> date:
    """Convenience: get the current date from the default clock."""
    return _default_clock.today()
