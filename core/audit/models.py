"""
PropMon Core Audit — Immutable Audit Models
=============================================
One AuditRecord is written after every successful registry mutation.
Records are frozen dataclasses — once created, never modified.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


# ══════════════════════════════════════════════════════════════
# ENUMS
# ══════════════════════════════════════════════════════════════

class ChangeKind(Enum):
    """What happened."""
    ADDED = "added"
    CHANGED = "changed"
    REMOVED = "deleted"


class ObjectKind(Enum):
    """What it happened to."""
    PROPERTY = "property"
    MONITORED_ITEM = "event"
    INVENTORY_ITEM = "item"


# ══════════════════════════════════════════════════════════════
# AUDIT RECORD
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AuditRecord:
    """
    Immutable record of a registry change.

    Fields:
        record_id:    Unique identifier
        change_kind:  ADDED | CHANGED | REMOVED
        object_kind:  PROPERTY | MONITORED_ITEM | INVENTORY_ITEM
        description:  Human-readable rendering of the changed object
        occurred_at:  When the record was written
    """

    record_id: uuid.UUID
    change_kind: ChangeKind
    object_kind: ObjectKind
    description: str
    occurred_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.change_kind, ChangeKind):
            raise ValueError("change_kind must be ChangeKind enum.")
        if not isinstance(self.object_kind, ObjectKind):
            raise ValueError("object_kind must be ObjectKind enum.")
        if not isinstance(self.description, str):
            raise ValueError("description must be a string.")

    def to_dict(self) -> dict:
        return {
            "record_id": str(self.record_id),
            "change_kind": self.change_kind.value,
            "object_kind": self.object_kind.value,
            "description": self.description,
            "occurred_at": self.occurred_at.isoformat(),
        }
