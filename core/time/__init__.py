"""
PropMon Core Time — Public API
================================
Explicit clock protocol and calendar period algebra.
Doctrine: NO date.today() in registry or query logic.
"""

from core.time.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    set_default_clock,
    today,
)
from core.time.periods import Period, advance, retreat

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "get_default_clock",
    "set_default_clock",
    "today",
    "Period",
    "advance",
    "retreat",
]
