"""
PropMon Property Primitive — Address-Keyed Aggregate
======================================================
A Property exclusively owns two ordered collections:
    monitored items  (recurring obligations, keyed by description)
    inventory items  (assets, keyed by description)

RULES:
- Identity, equality and ordering are by Address
- No two items of the same kind share a description
- Items are stamped with the property's Address on insertion
- copy() yields an independent aggregate (items are immutable,
  so copying the collections is enough)

Mutating methods are meant for the registry only; callers go
through PropertyMonitor so that audit, persistence and
notification happen for every change.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, Optional, Tuple, Union

from core.primitives.address import Address
from core.primitives.errors import DuplicateError, NotFoundError, ValidationError
from core.primitives.inventory_item import InventoryItem
from core.primitives.monitored_item import MonitoredItem

Item = Union[MonitoredItem, InventoryItem]


class Property:
    """Physical property and the records attached to it."""

    def __init__(
        self,
        address: Address,
        monitored_items: Iterable[MonitoredItem] = (),
        inventory_items: Iterable[InventoryItem] = (),
    ):
        if not isinstance(address, Address):
            raise ValidationError("Property: address was null")
        self._address = address
        self._monitored: Dict[str, MonitoredItem] = {}
        self._inventory: Dict[str, InventoryItem] = {}
        for item in monitored_items:
            self.add_item(item)
        for item in inventory_items:
            self.add_item(item)

    @property
    def address(self) -> Address:
        return self._address

    @property
    def monitored_items(self) -> Tuple[MonitoredItem, ...]:
        return tuple(self._monitored.values())

    @property
    def inventory_items(self) -> Tuple[InventoryItem, ...]:
        return tuple(self._inventory.values())

    # ── Item lookup ───────────────────────────────────────────

    def _collection_for(self, item: Item) -> Dict[str, Item]:
        if isinstance(item, MonitoredItem):
            return self._monitored
        if isinstance(item, InventoryItem):
            return self._inventory
        if item is None:
            raise ValidationError("Property: item was null")
        raise ValidationError(
            f"Property: unsupported item type {type(item).__name__}"
        )

    def has_item(self, item: Item) -> bool:
        return item.description in self._collection_for(item)

    def find_monitored_item(self, description: str) -> Optional[MonitoredItem]:
        return self._monitored.get(description)

    def find_inventory_item(self, description: str) -> Optional[InventoryItem]:
        return self._inventory.get(description)

    # ── Item mutation ─────────────────────────────────────────

    def add_item(self, item: Item) -> Item:
        """Insert an item, stamped with this property's address."""
        collection = self._collection_for(item)
        if item.description in collection:
            raise DuplicateError(f"Property: item {item} already exists", item)
        adopted = item.with_owner(self._address)
        collection[item.description] = adopted
        return adopted

    def replace_item(self, item: Item) -> Item:
        """Replace the item sharing this item's description."""
        collection = self._collection_for(item)
        if item.description not in collection:
            raise NotFoundError(f"Property: item {item} not found", item)
        adopted = item.with_owner(self._address)
        collection[item.description] = adopted
        return adopted

    def remove_item(self, item: Item) -> Item:
        """Remove and return the stored item sharing this item's description."""
        collection = self._collection_for(item)
        if item.description not in collection:
            raise NotFoundError(f"Property: item {item} not found", item)
        return collection.pop(item.description)

    # ── Schedule queries ──────────────────────────────────────

    def are_items_overdue(self, as_of: date) -> bool:
        return any(item.overdue(as_of) for item in self._monitored.values())

    def are_notices_overdue(self, as_of: date) -> bool:
        return any(item.notice_due(as_of) for item in self._monitored.values())

    # ── Copy / identity ───────────────────────────────────────

    def copy(self) -> Property:
        return Property(
            self._address,
            monitored_items=self._monitored.values(),
            inventory_items=self._inventory.values(),
        )

    def __eq__(self, other):
        if not isinstance(other, Property):
            return NotImplemented
        return self._address == other._address

    def __hash__(self):
        return hash(self._address)

    def __lt__(self, other):
        if not isinstance(other, Property):
            return NotImplemented
        return self._address < other._address

    def __str__(self) -> str:
        return str(self._address)

    def __repr__(self) -> str:
        return (
            f"Property({self._address!s}, monitored={len(self._monitored)}, "
            f"inventory={len(self._inventory)})"
        )

    # ── Record contract ───────────────────────────────────────

    def to_dict(self) -> dict:
        record = self._address.to_dict()
        record["monitoredItems"] = [i.to_dict() for i in self._monitored.values()]
        record["inventoryItems"] = [i.to_dict() for i in self._inventory.values()]
        return record

    @classmethod
    def from_dict(cls, data: dict) -> Property:
        try:
            address = Address.from_dict(data)
        except KeyError as exc:
            raise ValidationError(
                f"Property: record is missing {exc.args[0]}"
            ) from exc
        return cls(
            address,
            monitored_items=[
                MonitoredItem.from_dict(record, owner=address)
                for record in data.get("monitoredItems", ())
            ],
            inventory_items=[
                InventoryItem.from_dict(record, owner=address)
                for record in data.get("inventoryItems", ())
            ],
        )
