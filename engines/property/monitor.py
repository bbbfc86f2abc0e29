"""
PropMon Property Engine — Property Monitor Registry
=====================================================
The single authoritative in-memory registry of properties and
the items they own.

Every mutation follows one template, under one lock:
    1. Validate            (nothing is touched if this fails)
    2. Mutate              (in-memory aggregate)
    3. Audit               (fire-and-forget)
    4. Notify              (entity ADD / CHANGED / REMOVED)
    5. Persist             (snapshot handed to the write-behind store)

The entity notification is published before the snapshot is handed
to the store, so it always precedes that write's storage STARTED.

A rejected operation publishes exactly one FAILED notification of
the matching category (subject = the error), returns a REJECTED
MutationOutcome internally and raises the error to the caller.

Threading:
- One non-reentrant lock serializes every read and write
- Listeners run on the mutating thread while the lock is held and
  must not call back into the registry
- Storage notifications arrive later on the store's worker thread

Construct one instance per process (see core.bootstrap) and pass
it to whoever needs it.
"""

from __future__ import annotations

import logging
from enum import Enum
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional, Union

from core.audit.models import ChangeKind, ObjectKind
from core.audit.sink import AuditSink, LoggingAuditSink
from core.events.bus import NotificationBus
from core.events.notifications import (
    InventoryItemNotificationType,
    MonitoredItemNotificationType,
    PropertyNotificationType,
    PropertyReplacement,
    StorageNotificationType,
    StorageOperation,
    StorageReport,
)
from core.primitives.address import Address
from core.primitives.errors import (
    DuplicateError,
    MonitorError,
    NotFoundError,
    ValidationError,
)
from core.primitives.inventory_item import InventoryItem
from core.primitives.monitored_item import MonitoredItem
from core.primitives.property_aggregate import Property
from core.storage.errors import PersistenceError
from core.storage.store import WriteBehindStore
from core.time.clock import Clock, get_default_clock
from engines.property.errors import UnknownOwnerError
from engines.property.outcomes import MutationOutcome, accept, reject

logger = logging.getLogger("propmon.registry")

Item = Union[MonitoredItem, InventoryItem]


def _item_kinds(item: Any):
    """(notification type enum, audit object kind, label) for an item."""
    if isinstance(item, InventoryItem):
        return InventoryItemNotificationType, ObjectKind.INVENTORY_ITEM, "inventoryItem"
    return MonitoredItemNotificationType, ObjectKind.MONITORED_ITEM, "monitoredItem"


class PropertyMonitor:
    def __init__(
        self,
        bus: NotificationBus,
        store: WriteBehindStore,
        audit_sink: Optional[AuditSink] = None,
        clock: Optional[Clock] = None,
    ):
        self._bus = bus
        self._store = store
        self._audit_sink = audit_sink or LoggingAuditSink()
        self._clock = clock or get_default_clock()
        self._lock = Lock()
        self._properties: Dict[Address, Property] = {}

    @property
    def bus(self) -> NotificationBus:
        return self._bus

    @property
    def store(self) -> WriteBehindStore:
        return self._store

    @property
    def clock(self) -> Clock:
        return self._clock

    # ══════════════════════════════════════════════════════════
    # OUTCOME STEPS
    # ══════════════════════════════════════════════════════════

    def _reject(self, failed_type: Enum, error: MonitorError) -> MutationOutcome:
        logger.warning(
            f"{failed_type.category} operation rejected: "
            f"{type(error).__name__}: {error}"
        )
        self._bus.notify(failed_type, self, error)
        return reject(failed_type, error)

    def _accept(
        self,
        notification_type: Enum,
        subject: Any,
        change_kind: ChangeKind,
        object_kind: ObjectKind,
        description: str,
    ) -> MutationOutcome:
        self._audit(change_kind, object_kind, description)
        self._bus.notify(notification_type, self, subject)
        self._persist()
        logger.info(
            f"{object_kind.name.replace('_', ' ').capitalize()} "
            f"{change_kind.name.lower()}: {description}"
        )
        return accept(notification_type, subject)

    def _audit(
        self, change_kind: ChangeKind, object_kind: ObjectKind, description: str
    ) -> None:
        try:
            self._audit_sink.record(change_kind, object_kind, description)
        except Exception:
            logger.error(
                f"Audit sink failed to record {object_kind.value} "
                f"{change_kind.value}: {description}",
                exc_info=True,
            )

    def _persist(self) -> None:
        try:
            self._store.persist(self._sorted_properties())
        except PersistenceError as exc:
            logger.error(f"Snapshot could not be queued: {exc}")
            self._bus.notify(
                StorageNotificationType.FAILED,
                self,
                StorageReport(
                    operation=StorageOperation.STORE,
                    target=self._store.target,
                    property_count=len(self._properties),
                    error=exc,
                ),
            )

    def _sorted_properties(self) -> List[Property]:
        return sorted(self._properties.values())

    # ── Validation helpers (return the error, never raise) ───

    def _property_error(self, prop: Any) -> Optional[MonitorError]:
        if prop is None:
            return ValidationError("PropertyMonitor: property was null")
        if not isinstance(prop, Property):
            return ValidationError(
                f"PropertyMonitor: expected Property, got {type(prop).__name__}"
            )
        return None

    def _owner_error(self, item: Any) -> Optional[MonitorError]:
        _, _, label = _item_kinds(item)
        if item is None:
            return ValidationError(f"PropertyMonitor: {label} was null")
        if not isinstance(item, (MonitoredItem, InventoryItem)):
            return ValidationError(
                f"PropertyMonitor: unsupported item type {type(item).__name__}"
            )
        if item.owner is None:
            return ValidationError("PropertyMonitor: property was null")
        if item.owner not in self._properties:
            return UnknownOwnerError(
                f"PropertyMonitor: property {item.owner} was not known", item.owner
            )
        return None

    # ══════════════════════════════════════════════════════════
    # PROPERTY OPERATIONS
    # ══════════════════════════════════════════════════════════

    def add_property(self, prop: Property) -> MutationOutcome:
        with self._lock:
            outcome = self._add_property(prop)
        return outcome.raise_if_rejected()

    def _add_property(self, prop: Property) -> MutationOutcome:
        failed = PropertyNotificationType.FAILED
        error = self._property_error(prop)
        if error is None and prop.address in self._properties:
            error = DuplicateError(
                f"PropertyMonitor: property {prop} already exists", prop.address
            )
        if error is not None:
            return self._reject(failed, error)

        stored = prop.copy()
        self._properties[stored.address] = stored
        return self._accept(
            PropertyNotificationType.ADD,
            stored.copy(),
            ChangeKind.ADDED,
            ObjectKind.PROPERTY,
            str(stored),
        )

    def replace_property(self, old: Property, new: Property) -> MutationOutcome:
        """
        Swap one registered address for another.

        Items owned by old are NOT carried over: the registry holds
        new exactly as given (with whatever items it already owns).
        """
        with self._lock:
            outcome = self._replace_property(old, new)
        return outcome.raise_if_rejected()

    def _replace_property(self, old: Property, new: Property) -> MutationOutcome:
        failed = PropertyNotificationType.FAILED
        error = self._property_error(old) or self._property_error(new)
        if error is None and old.address not in self._properties:
            error = NotFoundError(
                f"PropertyMonitor: property {old} was not known", old.address
            )
        if error is None and new.address in self._properties:
            error = DuplicateError(
                f"PropertyMonitor: property {new} already exists", new.address
            )
        if error is not None:
            return self._reject(failed, error)

        replaced = self._properties.pop(old.address)
        stored = new.copy()
        self._properties[stored.address] = stored
        return self._accept(
            PropertyNotificationType.CHANGED,
            PropertyReplacement(old=replaced, new=stored.copy()),
            ChangeKind.CHANGED,
            ObjectKind.PROPERTY,
            str(stored),
        )

    def remove_property(self, prop: Property) -> MutationOutcome:
        with self._lock:
            outcome = self._remove_property(prop)
        return outcome.raise_if_rejected()

    def _remove_property(self, prop: Property) -> MutationOutcome:
        failed = PropertyNotificationType.FAILED
        error = self._property_error(prop)
        if error is None and prop.address not in self._properties:
            error = NotFoundError(
                f"PropertyMonitor: property {prop} was not known", prop.address
            )
        if error is not None:
            return self._reject(failed, error)

        removed = self._properties.pop(prop.address)
        return self._accept(
            PropertyNotificationType.REMOVED,
            removed,
            ChangeKind.REMOVED,
            ObjectKind.PROPERTY,
            str(removed),
        )

    # ══════════════════════════════════════════════════════════
    # ITEM OPERATIONS (monitored and inventory)
    # ══════════════════════════════════════════════════════════

    def add_item(self, item: Item) -> MutationOutcome:
        """Attach item to the registered property named by item.owner."""
        with self._lock:
            outcome = self._add_item(item)
        return outcome.raise_if_rejected()

    def _add_item(self, item: Item) -> MutationOutcome:
        notification_type, object_kind, _ = _item_kinds(item)
        error = self._owner_error(item)
        if error is None:
            owner = self._properties[item.owner]
            if owner.has_item(item):
                error = DuplicateError(
                    f"Property: item {item} already exists", item
                )
        if error is not None:
            return self._reject(notification_type.FAILED, error)

        adopted = owner.add_item(item)
        return self._accept(
            notification_type.ADD,
            adopted,
            ChangeKind.ADDED,
            object_kind,
            str(adopted),
        )

    def replace_item(self, item: Item) -> MutationOutcome:
        """Replace the stored item sharing item's description."""
        with self._lock:
            outcome = self._replace_item(item)
        return outcome.raise_if_rejected()

    def _replace_item(self, item: Item) -> MutationOutcome:
        notification_type, object_kind, _ = _item_kinds(item)
        error = self._owner_error(item)
        if error is None:
            owner = self._properties[item.owner]
            if not owner.has_item(item):
                error = NotFoundError(f"Property: item {item} not found", item)
        if error is not None:
            return self._reject(notification_type.FAILED, error)

        adopted = owner.replace_item(item)
        return self._accept(
            notification_type.CHANGED,
            adopted,
            ChangeKind.CHANGED,
            object_kind,
            str(adopted),
        )

    def remove_item(self, item: Item) -> MutationOutcome:
        """
        Detach the stored item sharing item's description.

        The REMOVED payload is the stored item with its owner severed.
        """
        with self._lock:
            outcome = self._remove_item(item)
        return outcome.raise_if_rejected()

    def _remove_item(self, item: Item) -> MutationOutcome:
        notification_type, object_kind, _ = _item_kinds(item)
        error = self._owner_error(item)
        if error is None:
            owner = self._properties[item.owner]
            if not owner.has_item(item):
                error = NotFoundError(f"Property: item {item} not found", item)
        if error is not None:
            return self._reject(notification_type.FAILED, error)

        removed = owner.remove_item(item).with_owner(None)
        return self._accept(
            notification_type.REMOVED,
            removed,
            ChangeKind.REMOVED,
            object_kind,
            str(removed),
        )

    # ══════════════════════════════════════════════════════════
    # WHOLE-REGISTRY OPERATIONS
    # ══════════════════════════════════════════════════════════

    def clear(self) -> MutationOutcome:
        """
        Empty the registry. No entity notification or audit record;
        one (empty) snapshot is still written.
        """
        with self._lock:
            count = len(self._properties)
            self._properties.clear()
            self._persist()
        logger.info(f"Registry cleared ({count} properties dropped)")
        return accept(None)

    def restore(self, properties: Iterable[Property]) -> MutationOutcome:
        """
        Replace registry contents with a loaded snapshot.

        Publishes ADD per property; nothing is audited or re-persisted.
        """
        with self._lock:
            outcome = self._restore(list(properties))
        return outcome.raise_if_rejected()

    def _restore(self, properties: List[Property]) -> MutationOutcome:
        failed = PropertyNotificationType.FAILED
        seen = set()
        for prop in properties:
            error = self._property_error(prop)
            if error is None and prop.address in seen:
                error = DuplicateError(
                    f"PropertyMonitor: property {prop} already exists", prop.address
                )
            if error is not None:
                return self._reject(failed, error)
            seen.add(prop.address)

        self._properties = {prop.address: prop.copy() for prop in properties}
        for prop in self._sorted_properties():
            self._bus.notify(PropertyNotificationType.ADD, self, prop.copy())
        logger.info(f"Registry restored with {len(properties)} properties")
        return accept(PropertyNotificationType.ADD, len(properties))

    def load(self) -> MutationOutcome:
        """Restore from the store. StorageLoadError propagates."""
        return self.restore(self._store.load())

    # ══════════════════════════════════════════════════════════
    # READS (copies only)
    # ══════════════════════════════════════════════════════════

    def properties(self) -> List[Property]:
        with self._lock:
            return [prop.copy() for prop in self._sorted_properties()]

    def find_property(self, address: Union[Address, Property]) -> Optional[Property]:
        with self._lock:
            key = self._address_of(address, PropertyNotificationType.FAILED)
            found = self._properties.get(key)
            return found.copy() if found is not None else None

    def monitored_items_for(
        self, prop: Union[Property, Address]
    ) -> List[MonitoredItem]:
        with self._lock:
            stored = self._registered(prop, MonitoredItemNotificationType.FAILED)
            return sorted(stored.monitored_items)

    def inventory_items_for(
        self, prop: Union[Property, Address]
    ) -> List[InventoryItem]:
        with self._lock:
            stored = self._registered(prop, InventoryItemNotificationType.FAILED)
            return sorted(stored.inventory_items)

    def all_monitored_items(self) -> List[MonitoredItem]:
        with self._lock:
            return sorted(
                item
                for prop in self._properties.values()
                for item in prop.monitored_items
            )

    def _address_of(self, value: Any, failed_type: Enum) -> Address:
        if isinstance(value, Property):
            return value.address
        if isinstance(value, Address):
            return value
        error = ValidationError("PropertyMonitor: property was null")
        if value is not None:
            error = ValidationError(
                f"PropertyMonitor: expected Property or Address, "
                f"got {type(value).__name__}"
            )
        self._reject(failed_type, error).raise_if_rejected()

    def _registered(self, value: Any, failed_type: Enum) -> Property:
        address = self._address_of(value, failed_type)
        stored = self._properties.get(address)
        if stored is None:
            self._reject(
                failed_type,
                UnknownOwnerError(
                    f"PropertyMonitor: property {address} was not known", address
                ),
            ).raise_if_rejected()
        return stored

    def property_count(self) -> int:
        with self._lock:
            return len(self._properties)
