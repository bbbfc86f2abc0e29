"""
Tests for core.storage — write-behind stores (memory and XML file).
"""

import threading
import pytest

from core.events import NotificationBus, StorageNotificationType, StorageOperation
from core.primitives import Address, InventoryItem, Property
from core.storage import InMemoryStore, StorageLoadError, WriteBehindStore, XmlFileStore
from core.storage.errors import PersistenceError

WAIT_SECONDS = 5
ADDRESS = Address("CW3 9ST", ("99 The Street", "The Town", "The County"))


class _StorageWatcher:
    """Collects storage notifications; signals on each terminal one."""

    def __init__(self, bus):
        self.received = []
        self.terminal = threading.Event()
        bus.register(self.on_notification)

    def on_notification(self, notification):
        if notification.category != "storage":
            return
        self.received.append(notification)
        if notification.notification_type is not StorageNotificationType.STARTED:
            self.terminal.set()

    def wait(self):
        assert self.terminal.wait(WAIT_SECONDS), "no terminal storage notification"
        self.terminal.clear()

    @property
    def types(self):
        return [n.notification_type for n in self.received]


@pytest.fixture
def bus():
    return NotificationBus()


@pytest.fixture
def memory_store(bus):
    store = InMemoryStore(bus)
    yield store
    store.close()


# ── Store lifecycle ──────────────────────────────────────────

class TestPersist:
    def test_started_then_complete(self, bus, memory_store):
        watcher = _StorageWatcher(bus)
        memory_store.persist([Property(ADDRESS)])
        watcher.wait()
        assert watcher.types == [
            StorageNotificationType.STARTED,
            StorageNotificationType.COMPLETE,
        ]
        report = watcher.received[-1].subject
        assert report.operation is StorageOperation.STORE
        assert report.property_count == 1
        assert report.sequence == 1

    def test_snapshot_copied_before_return(self, bus, memory_store):
        watcher = _StorageWatcher(bus)
        prop = Property(ADDRESS)
        memory_store.persist([prop])
        prop.add_item(InventoryItem("Added after persist"))
        watcher.wait()
        (stored,) = memory_store.load()
        assert stored.inventory_items == ()

    def test_writes_complete_in_submission_order(self, bus, memory_store):
        watcher = _StorageWatcher(bus)
        for count in range(1, 4):
            memory_store.persist([
                Property(Address(f"CW{n} 1AA", ("1 Road",))) for n in range(count)
            ])
        assert memory_store.flush(WAIT_SECONDS)
        completes = [
            n.subject.sequence for n in watcher.received
            if n.notification_type is StorageNotificationType.COMPLETE
        ]
        assert completes == [1, 2, 3]
        assert len(memory_store.load()) == 3
        assert memory_store.write_count == 3

    def test_closed_store_refuses_persist(self, bus):
        store = InMemoryStore(bus)
        store.close()
        with pytest.raises(PersistenceError, match="closed"):
            store.persist([])

    def test_persist_returns_nothing(self, bus, memory_store):
        assert memory_store.persist([]) is None
        assert memory_store.flush(WAIT_SECONDS)

    def test_backend_without_contract_cannot_be_built(self, bus):
        class _NoBackend(WriteBehindStore):
            pass

        with pytest.raises(TypeError):
            _NoBackend(bus)


class TestLoad:
    def test_nothing_stored_loads_empty(self, bus, memory_store):
        watcher = _StorageWatcher(bus)
        assert memory_store.load() == []
        assert watcher.types == [
            StorageNotificationType.STARTED,
            StorageNotificationType.COMPLETE,
        ]
        assert watcher.received[0].subject.operation is StorageOperation.LOAD

    def test_malformed_data_fails_load(self, bus):
        store = InMemoryStore(bus, initial=b"<properties><oops")
        watcher = _StorageWatcher(bus)
        try:
            with pytest.raises(StorageLoadError):
                store.load()
        finally:
            store.close()
        assert watcher.types[-1] is StorageNotificationType.FAILED
        assert isinstance(watcher.received[-1].subject.error, StorageLoadError)


# ── XML file backend ─────────────────────────────────────────

class TestXmlFileStore:
    def test_round_trip_through_file(self, bus, tmp_path):
        path = tmp_path / "propertymonitor" / "model" / "property.dat"
        store = XmlFileStore(path, bus)
        watcher = _StorageWatcher(bus)
        try:
            store.persist([Property(ADDRESS, inventory_items=[InventoryItem("Boiler")])])
            watcher.wait()
            assert path.is_file()
            assert not path.with_name("property.dat.tmp").exists()
            (loaded,) = store.load()
        finally:
            store.close()
        assert loaded.address == ADDRESS
        assert loaded.inventory_items[0].owner == ADDRESS

    def test_missing_file_loads_empty(self, bus, tmp_path):
        store = XmlFileStore(tmp_path / "absent.dat", bus)
        try:
            assert store.load() == []
        finally:
            store.close()

    def test_write_failure_is_reported_not_raised(self, bus, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file where a directory should be")
        store = XmlFileStore(blocker / "model" / "property.dat", bus)
        watcher = _StorageWatcher(bus)
        try:
            store.persist([Property(ADDRESS)])
            watcher.wait()
        finally:
            store.close()
        failed = watcher.received[-1]
        assert failed.notification_type is StorageNotificationType.FAILED
        assert isinstance(failed.subject.error, PersistenceError)
        assert "PropertyWrite" in str(failed.subject.error)
