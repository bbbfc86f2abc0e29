"""
PropMon Core Audit — Public API
=================================
Immutable audit records and fire-and-forget sinks.
"""

from core.audit.functions import create_audit_record
from core.audit.models import AuditRecord, ChangeKind, ObjectKind
from core.audit.sink import AuditSink, InMemoryAuditLog, LoggingAuditSink

__all__ = [
    "AuditRecord",
    "ChangeKind",
    "ObjectKind",
    "create_audit_record",
    "AuditSink",
    "LoggingAuditSink",
    "InMemoryAuditLog",
]
