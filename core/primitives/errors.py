"""
PropMon Primitives — Errors
=============================
Entity-level error taxonomy shared by the primitives and the registry.

ValidationError subclasses ValueError so that constructor failures
read like any other bad-argument failure to plain Python callers.
"""

from __future__ import annotations

from typing import Any, Optional


class MonitorError(Exception):
    """Base error for property monitor operations."""

    def __init__(self, message: str, subject: Optional[Any] = None):
        self.subject = subject
        super().__init__(message)


class ValidationError(MonitorError, ValueError):
    """Missing / null required field or out-of-range numeric field."""
    pass


class DuplicateError(MonitorError):
    """Entity with the same identity is already registered."""
    pass


class NotFoundError(MonitorError):
    """Referenced entity is not present where update/removal expected it."""
    pass
