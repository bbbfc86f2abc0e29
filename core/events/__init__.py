"""
PropMon Notification Bus — Public API
=======================================
The registry changes state. The bus tells whoever is listening.
State must be applied before it is heard.
"""

from core.events.bus import NotificationBus
from core.events.dispatcher import dispatch
from core.events.errors import (
    DuplicateListenerError,
    InvalidListenerError,
    NotificationBusError,
)
from core.events.notifications import (
    INVENTORY_ITEM_CATEGORY,
    MONITORED_ITEM_CATEGORY,
    PROPERTY_CATEGORY,
    STORAGE_CATEGORY,
    InventoryItemNotificationType,
    MonitoredItemNotificationType,
    Notification,
    PropertyNotificationType,
    PropertyReplacement,
    StorageNotificationType,
    StorageOperation,
    StorageReport,
)
from core.events.registry import ListenerRegistry

__all__ = [
    "NotificationBus",
    "ListenerRegistry",
    "dispatch",
    "Notification",
    "PropertyNotificationType",
    "MonitoredItemNotificationType",
    "InventoryItemNotificationType",
    "StorageNotificationType",
    "StorageOperation",
    "StorageReport",
    "PropertyReplacement",
    "PROPERTY_CATEGORY",
    "MONITORED_ITEM_CATEGORY",
    "INVENTORY_ITEM_CATEGORY",
    "STORAGE_CATEGORY",
    "NotificationBusError",
    "InvalidListenerError",
    "DuplicateListenerError",
]
