"""
PropMon Property Engine
=========================
Registry of properties, their monitored items and inventory,
plus the schedule queries that run over it.
"""

from engines.property.errors import (
    DuplicateError,
    MonitorError,
    NotFoundError,
    PersistenceError,
    UnknownOwnerError,
    ValidationError,
)
from engines.property.monitor import PropertyMonitor
from engines.property.outcomes import MutationOutcome, MutationStatus
from engines.property.queries import (
    notified_items_for,
    overdue_items_for,
    with_overdue_items,
    with_overdue_notices,
)

__all__ = [
    "PropertyMonitor",
    "MutationOutcome",
    "MutationStatus",
    "MonitorError",
    "ValidationError",
    "DuplicateError",
    "NotFoundError",
    "UnknownOwnerError",
    "PersistenceError",
    "with_overdue_items",
    "with_overdue_notices",
    "overdue_items_for",
    "notified_items_for",
]
