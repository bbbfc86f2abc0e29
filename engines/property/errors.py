"""
PropMon Property Engine — Errors
==================================
Full synchronous error taxonomy of the registry, importable
from one place. PersistenceError is listed for completeness;
the registry never raises it (it travels in storage FAILED).
"""

from core.primitives.errors import (
    DuplicateError,
    MonitorError,
    NotFoundError,
    ValidationError,
)
from core.storage.errors import PersistenceError


class UnknownOwnerError(MonitorError):
    """An item's owner (or a queried property) is not registered."""
    pass


__all__ = [
    "MonitorError",
    "ValidationError",
    "DuplicateError",
    "NotFoundError",
    "UnknownOwnerError",
    "PersistenceError",
]
