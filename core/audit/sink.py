"""
PropMon Core Audit — Audit Sinks
==================================
The registry hands every successful change to an AuditSink:

    sink.record(change_kind, object_kind, description)

Fire-and-forget: the registry never inspects a return value and a
failing sink never fails the mutation that triggered it.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import List, Protocol

from core.audit.functions import create_audit_record
from core.audit.models import AuditRecord, ChangeKind, ObjectKind

logger = logging.getLogger("propmon.audit")


class AuditSink(Protocol):
    def record(
        self, change_kind: ChangeKind, object_kind: ObjectKind, description: str
    ) -> None:
        ...  # pragma: no cover


class LoggingAuditSink:
    """Writes audit records to the propmon.audit logger."""

    def __init__(self, audit_logger: logging.Logger | None = None):
        self._logger = audit_logger or logger

    def record(
        self, change_kind: ChangeKind, object_kind: ObjectKind, description: str
    ) -> None:
        entry = create_audit_record(change_kind, object_kind, description)
        self._logger.info(
            f"{entry.object_kind.value} {entry.change_kind.value}: "
            f"{entry.description}",
            extra={"audit": entry.to_dict()},
        )


class InMemoryAuditLog:
    """
    Append-only in-memory audit log.
    Used in tests and when embedding the registry.
    """

    def __init__(self) -> None:
        self._entries: List[AuditRecord] = []
        self._lock = Lock()

    def record(
        self, change_kind: ChangeKind, object_kind: ObjectKind, description: str
    ) -> None:
        entry = create_audit_record(change_kind, object_kind, description)
        with self._lock:
            self._entries.append(entry)

    @property
    def entries(self) -> List[AuditRecord]:
        """Read-only access to all entries."""
        with self._lock:
            return list(self._entries)

    def query_by_object(self, object_kind: ObjectKind) -> List[AuditRecord]:
        return [e for e in self.entries if e.object_kind == object_kind]
