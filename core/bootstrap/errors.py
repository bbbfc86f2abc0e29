"""
PropMon Bootstrap — Errors
============================
If the monitor cannot be assembled, it must not start half-wired.
"""

from core.primitives.errors import MonitorError


class BootstrapError(MonitorError):
    """
    Raised when the property monitor cannot be built.

    No fallback store is substituted; the message names the step.
    """

    def __init__(self, step: str, detail: str):
        self.step = step
        self.detail = detail
        super().__init__(f"PropMon bootstrap failure — {step}: {detail}")
