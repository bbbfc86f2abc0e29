"""
PropMon Core Time — Period Algebra
====================================
Pure calendar arithmetic for recurring schedules.

advance(d, n, unit)  → d + n weeks | months | years
retreat(d, n, unit)  → d - n weeks | months | years

Month and year steps are calendar steps, not fixed durations:
the day-of-month is kept where the target month has it and is
clamped to the last day otherwise (31 Jan + 1 month → 28/29 Feb,
29 Feb + 1 year → 28 Feb).

All functions take explicit dates — no hidden clock.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from enum import Enum


# ══════════════════════════════════════════════════════════════
# PERIOD UNIT
# ══════════════════════════════════════════════════════════════

class Period(Enum):
    """Recurrence / notice unit."""
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


# ══════════════════════════════════════════════════════════════
# PURE CALENDAR FUNCTIONS
# ══════════════════════════════════════════════════════════════

def _shift_months(base: date, months: int) -> date:
    month_index = base.year * 12 + (base.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(base.day, last_day))


def _shift(base: date, count: int, unit: Period) -> date:
    if unit is Period.WEEKLY:
        return base + timedelta(weeks=count)
    if unit is Period.MONTHLY:
        return _shift_months(base, count)
    if unit is Period.YEARLY:
        return _shift_months(base, count * 12)
    raise ValueError(f"Unknown period unit: {unit!r}")


def advance(base: date, count: int, unit: Period) -> date:
    """Move `base` forward by `count` units."""
    return _shift(base, count, unit)


def retreat(base: date, count: int, unit: Period) -> date:
    """Move `base` back by `count` units."""
    return _shift(base, -count, unit)
