"""
PropMon Core Audit — Pure Audit Functions
===========================================
Factory for audit records. Pure — returns new frozen objects.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from core.audit.models import AuditRecord, ChangeKind, ObjectKind


def create_audit_record(
    change_kind: ChangeKind,
    object_kind: ObjectKind,
    description: str,
    occurred_at: Optional[datetime] = None,
) -> AuditRecord:
    """Create an immutable audit record."""
    return AuditRecord(
        record_id=uuid.uuid4(),
        change_kind=change_kind,
        object_kind=object_kind,
        description=description,
        occurred_at=occurred_at or datetime.now(timezone.utc),
    )
