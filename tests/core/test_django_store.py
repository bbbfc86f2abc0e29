"""
Tests for core.storage.django_store — ORM-backed write-behind store.
"""

import threading
import pytest
from datetime import date

from core.events import NotificationBus, StorageNotificationType
from core.primitives import Address, InventoryItem, MonitoredItem, Property
from core.storage.django_store import DjangoSnapshotStore
from core.storage.models import MonitoredItemRecord, PropertyRecord
from core.time.periods import Period

pytestmark = pytest.mark.django_db(transaction=True)

WAIT_SECONDS = 10
LINES = ("99 The Street", "The Town", "The County")


def _property(postcode: str) -> Property:
    return Property(
        Address(postcode, LINES),
        monitored_items=[
            MonitoredItem(
                description="Gas safety check",
                period_for_next_action=Period.YEARLY,
                notice_every=1,
                last_action_performed=date(2021, 11, 1),
                advance_notice=1,
                period_for_next_notice=Period.WEEKLY,
            ),
        ],
        inventory_items=[InventoryItem("Boiler", "Worcester", purchase_date=date(2020, 3, 4))],
    )


def _store_and_wait(store, bus, properties):
    done = threading.Event()
    outcome = []

    def on_notification(notification):
        if notification.notification_type in (
            StorageNotificationType.COMPLETE,
            StorageNotificationType.FAILED,
        ):
            outcome.append(notification.notification_type)
            done.set()

    bus.register(on_notification)
    try:
        store.persist(properties)
        assert done.wait(WAIT_SECONDS)
    finally:
        bus.deregister(on_notification)
    return outcome[0]


@pytest.fixture
def bus():
    return NotificationBus()


@pytest.fixture
def store(bus):
    django_store = DjangoSnapshotStore(bus)
    yield django_store
    django_store.close()


def test_persist_writes_rows(store, bus):
    result = _store_and_wait(store, bus, [_property("CW3 9ST"), _property("CW3 9SU")])

    assert result is StorageNotificationType.COMPLETE
    assert PropertyRecord.objects.count() == 2
    assert MonitoredItemRecord.objects.count() == 2
    first = PropertyRecord.objects.order_by("position").first()
    assert first.address_lines.split("\n") == list(LINES)


def test_each_store_replaces_previous_snapshot(store, bus):
    _store_and_wait(store, bus, [_property("CW3 9ST"), _property("CW3 9SU")])
    _store_and_wait(store, bus, [_property("CW3 9SU")])

    assert list(PropertyRecord.objects.values_list("postcode", flat=True)) == ["CW3 9SU"]


def test_load_round_trip(store, bus):
    _store_and_wait(store, bus, [_property("CW3 9ST")])

    (loaded,) = store.load()
    assert loaded.address == Address("CW3 9ST", LINES)
    (item,) = loaded.monitored_items
    assert item.owner == loaded.address
    assert item.time_for_next_notice == date(2022, 10, 25)
    assert loaded.inventory_items[0].purchase_date == date(2020, 3, 4)


def test_empty_tables_load_empty(store):
    assert store.load() == []
