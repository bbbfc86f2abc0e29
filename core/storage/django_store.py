"""
PropMon Storage — Django ORM Backend
======================================
Write-behind store over the propmon_storage tables.

Writes run on the store's worker thread, which holds its own
database connection; it is closed after every write so the
worker never keeps a stale connection between snapshots.

Requires Django to be configured with "core.storage" installed.
"""

from __future__ import annotations

from typing import List

from django.db import DatabaseError, connections

from core.primitives.errors import MonitorError
from core.primitives.property_aggregate import Property
from core.storage import repository
from core.storage.errors import StorageLoadError
from core.storage.store import WriteBehindStore


class DjangoSnapshotStore(WriteBehindStore):
    @property
    def target(self) -> str:
        return "django:propmon_storage"

    def write_snapshot(self, properties: List[Property]) -> None:
        try:
            repository.replace_snapshot(properties)
        finally:
            connections.close_all()

    def read_snapshot(self) -> List[Property]:
        try:
            return repository.load_snapshot()
        except (DatabaseError, MonitorError, ValueError) as exc:
            if isinstance(exc, StorageLoadError):
                raise
            raise StorageLoadError(
                f"PropertyRead: Exception occurred - {exc}"
            ) from exc

    def has_data(self) -> bool:
        try:
            return repository.has_rows()
        except DatabaseError as exc:
            raise StorageLoadError(
                f"PropertyRead: Exception occurred - {exc}"
            ) from exc
