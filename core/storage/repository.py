"""
PropMon Storage — Snapshot Repository
=======================================
Low-level ORM helpers used by DjangoSnapshotStore.
The caller owns threading and notification concerns.
"""

from __future__ import annotations

from typing import List

from django.db import transaction

from core.primitives.address import Address
from core.primitives.inventory_item import InventoryItem
from core.primitives.monitored_item import MonitoredItem
from core.primitives.property_aggregate import Property
from core.storage.models import (
    InventoryItemRecord,
    MonitoredItemRecord,
    PropertyRecord,
)
from core.time.periods import Period

LINE_SEPARATOR = "\n"


def replace_snapshot(properties: List[Property]) -> None:
    """Replace every stored row with the given snapshot, atomically."""
    with transaction.atomic():
        MonitoredItemRecord.objects.all().delete()
        InventoryItemRecord.objects.all().delete()
        PropertyRecord.objects.all().delete()

        for position, prop in enumerate(properties):
            record = PropertyRecord.objects.create(
                postcode=prop.address.postcode.value,
                address_lines=LINE_SEPARATOR.join(prop.address.lines),
                position=position,
            )
            MonitoredItemRecord.objects.bulk_create([
                MonitoredItemRecord(
                    property=record,
                    position=index,
                    description=item.description,
                    period_for_next_action=item.period_for_next_action.value,
                    notice_every=item.notice_every,
                    last_action_performed=item.last_action_performed,
                    advance_notice=item.advance_notice,
                    period_for_next_notice=item.period_for_next_notice.value,
                    email_sent_on=item.email_sent_on,
                )
                for index, item in enumerate(prop.monitored_items)
            ])
            InventoryItemRecord.objects.bulk_create([
                InventoryItemRecord(
                    property=record,
                    position=index,
                    description=item.description,
                    manufacturer=item.manufacturer,
                    model=item.model,
                    serial_number=item.serial_number,
                    supplier=item.supplier,
                    purchase_date=item.purchase_date,
                )
                for index, item in enumerate(prop.inventory_items)
            ])


def load_snapshot() -> List[Property]:
    """Rebuild properties in stored order, children included."""
    properties: List[Property] = []
    records = PropertyRecord.objects.prefetch_related(
        "monitored_items", "inventory_items"
    ).order_by("position")
    for record in records:
        address = Address(
            postcode=record.postcode,
            lines=tuple(record.address_lines.split(LINE_SEPARATOR)),
        )
        properties.append(Property(
            address,
            monitored_items=[
                MonitoredItem(
                    description=row.description,
                    period_for_next_action=Period(row.period_for_next_action),
                    notice_every=row.notice_every,
                    last_action_performed=row.last_action_performed,
                    advance_notice=row.advance_notice,
                    period_for_next_notice=Period(row.period_for_next_notice),
                    email_sent_on=row.email_sent_on,
                )
                for row in record.monitored_items.all()
            ],
            inventory_items=[
                InventoryItem(
                    description=row.description,
                    manufacturer=row.manufacturer,
                    model=row.model,
                    serial_number=row.serial_number,
                    supplier=row.supplier,
                    purchase_date=row.purchase_date,
                )
                for row in record.inventory_items.all()
            ],
        ))
    return properties


def has_rows() -> bool:
    return PropertyRecord.objects.exists()
