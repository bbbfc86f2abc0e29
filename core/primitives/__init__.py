"""
PropMon Core Primitives — Entities of the Property Register
=============================================================
Primitives are the building blocks the registry works with:

- Pure Python (no Django dependency)
- Items are immutable (frozen dataclasses); changes return new snapshots
- Validated on construction (ValidationError)
- Serialisable through an explicit record contract (to_dict / from_dict)

Primitives:
    address         — PostCode + Address (property identity)
    monitored_item  — Recurring maintenance obligation with derived schedule
    inventory_item  — Owned asset record
    property_aggregate — Address-keyed aggregate owning both item kinds
"""

from core.primitives.address import Address, PostCode
from core.primitives.errors import (
    DuplicateError,
    MonitorError,
    NotFoundError,
    ValidationError,
)
from core.primitives.inventory_item import InventoryItem
from core.primitives.monitored_item import MonitoredItem
from core.primitives.property_aggregate import Property

__all__ = [
    "Address",
    "PostCode",
    "InventoryItem",
    "MonitoredItem",
    "Property",
    "MonitorError",
    "ValidationError",
    "DuplicateError",
    "NotFoundError",
]
