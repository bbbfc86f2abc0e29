"""
PropMon Inventory Item Primitive — Owned Asset Record
=======================================================
An inventory item records an asset held at a property
(boiler, cooker, alarm panel ...). It has no schedule.

RULES:
- Identity is the description alone
- Text fields may be empty but never None
- Ordering is (manufacturer, model, serial_number)
- Empty optional fields are omitted from the persisted record
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.primitives.address import Address
from core.primitives.errors import ValidationError
from core.primitives.formats import (
    format_for_display,
    format_for_storage,
    is_calendar_date,
    is_storable_text,
    parse_storage_date,
)

_TEXT_FIELDS = (
    ("manufacturer", "manufacturer"),
    ("model", "model"),
    ("serial_number", "serialNumber"),
    ("supplier", "supplier"),
)


@dataclass(frozen=True, eq=False)
class InventoryItem:
    """
    Asset record owned by a property.

    Fields:
        description:   Identity key within the owning property
        manufacturer:  Free text ("" when unknown)
        model:         Free text ("" when unknown)
        serial_number: Free text ("" when unknown)
        supplier:      Free text ("" when unknown)
        purchase_date: Optional calendar date
        owner:         Address of the owning property, if attached
    """

    description: str
    manufacturer: str = ""
    model: str = ""
    serial_number: str = ""
    supplier: str = ""
    purchase_date: Optional[date] = None
    owner: Optional[Address] = None

    def __post_init__(self):
        if not isinstance(self.description, str) or not self.description.strip():
            raise ValidationError("InventoryItem: description was missing")
        if not is_storable_text(self.description):
            raise ValidationError("InventoryItem: description contains control characters")
        for attr, label in _TEXT_FIELDS:
            value = getattr(self, attr)
            if not isinstance(value, str):
                raise ValidationError(f"InventoryItem: {label} was null")
            if not is_storable_text(value):
                raise ValidationError(
                    f"InventoryItem: {label} contains control characters"
                )
        if self.purchase_date is not None and not is_calendar_date(self.purchase_date):
            raise ValidationError("InventoryItem: purchaseDate must be a date")
        if self.owner is not None and not isinstance(self.owner, Address):
            raise ValidationError("InventoryItem: owner must be an Address")

    def with_owner(self, owner: Optional[Address]) -> InventoryItem:
        return dataclasses.replace(self, owner=owner)

    @property
    def purchase_date_display(self) -> str:
        return format_for_display(self.purchase_date)

    def __eq__(self, other):
        if not isinstance(other, InventoryItem):
            return NotImplemented
        return self.description == other.description

    def __hash__(self):
        return hash(self.description)

    def __lt__(self, other):
        if not isinstance(other, InventoryItem):
            return NotImplemented
        return (self.manufacturer, self.model, self.serial_number) < (
            other.manufacturer, other.model, other.serial_number,
        )

    def __str__(self) -> str:
        return (
            f"{self.description}, {self.manufacturer}, "
            f"{self.model}, {self.serial_number}"
        )

    def to_dict(self) -> dict:
        record = {"description": self.description}
        for attr, key in _TEXT_FIELDS:
            value = getattr(self, attr)
            if value:
                record[key] = value
        if self.purchase_date is not None:
            record["purchaseDate"] = format_for_storage(self.purchase_date)
        return record

    @classmethod
    def from_dict(
        cls, data: dict, owner: Optional[Address] = None
    ) -> InventoryItem:
        if "description" not in data:
            raise ValidationError("InventoryItem: record is missing description")
        purchase_text = data.get("purchaseDate")
        return cls(
            description=data["description"],
            manufacturer=data.get("manufacturer") or "",
            model=data.get("model") or "",
            serial_number=data.get("serialNumber") or "",
            supplier=data.get("supplier") or "",
            purchase_date=(
                parse_storage_date(purchase_text, "purchaseDate")
                if purchase_text else None
            ),
            owner=owner,
        )
