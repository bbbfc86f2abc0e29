"""
PropMon Notification Bus — Notification Types
===============================================
Typed notifications published by the registry and the store.

Categories and outcomes:
    property        ADD | CHANGED | REMOVED | FAILED
    monitoreditem   ADD | CHANGED | REMOVED | FAILED
    inventoryitem   ADD | CHANGED | REMOVED | FAILED
    storage         STARTED | COMPLETE | FAILED   (payload: StorageReport)

A Notification is (type, source, optional subject). Category
filtering is the listener's responsibility.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

PROPERTY_CATEGORY = "property"
MONITORED_ITEM_CATEGORY = "monitoreditem"
INVENTORY_ITEM_CATEGORY = "inventoryitem"
STORAGE_CATEGORY = "storage"


# ══════════════════════════════════════════════════════════════
# NOTIFICATION TYPES
# ══════════════════════════════════════════════════════════════

class PropertyNotificationType(Enum):
    ADD = "add"
    CHANGED = "changed"
    REMOVED = "removed"
    FAILED = "failed"

    @property
    def category(self) -> str:
        return PROPERTY_CATEGORY


class MonitoredItemNotificationType(Enum):
    ADD = "add"
    CHANGED = "changed"
    REMOVED = "removed"
    FAILED = "failed"

    @property
    def category(self) -> str:
        return MONITORED_ITEM_CATEGORY


class InventoryItemNotificationType(Enum):
    ADD = "add"
    CHANGED = "changed"
    REMOVED = "removed"
    FAILED = "failed"

    @property
    def category(self) -> str:
        return INVENTORY_ITEM_CATEGORY


class StorageNotificationType(Enum):
    STARTED = "started"
    COMPLETE = "complete"
    FAILED = "failed"

    @property
    def category(self) -> str:
        return STORAGE_CATEGORY


class StorageOperation(Enum):
    """Which storage lifecycle a storage notification belongs to."""
    STORE = "STORE"
    LOAD = "LOAD"


# ══════════════════════════════════════════════════════════════
# PAYLOADS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class StorageReport:
    """
    Lifecycle payload of a storage notification.

    Fields:
        operation:       STORE or LOAD
        target:          Human-readable store target (file path, table set)
        property_count:  Properties written / read
        sequence:        Store invocation number (pairs STARTED with its terminal)
        error:           The PersistenceError for FAILED, else None
    """

    operation: StorageOperation
    target: str
    property_count: int = 0
    sequence: int = 0
    error: Optional[Exception] = None


@dataclass(frozen=True)
class PropertyReplacement:
    """CHANGED payload for an address-level property replacement."""

    old: Any
    new: Any


# ══════════════════════════════════════════════════════════════
# NOTIFICATION ENVELOPE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Notification:
    """
    Fields:
        notification_type: One of the *NotificationType enum members
        source:            Publisher (registry or store instance)
        subject:           Optional payload (entity, error, StorageReport)
    """

    notification_type: Enum
    source: Any
    subject: Any = None

    @property
    def category(self) -> str:
        return self.notification_type.category

    @property
    def is_failure(self) -> bool:
        return self.notification_type.value == "failed"
