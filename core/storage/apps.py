"""
PropMon Storage — App Configuration
=====================================
Registers the relational snapshot tables used by
DjangoSnapshotStore (STORE_BACKEND="django").

This app:
- Owns the property / monitored item / inventory item tables
- Stores the latest snapshot only (each store replaces the rows)

This app does NOT:
- Decide what to store (the registry hands it snapshots)
- Publish notifications (WriteBehindStore does that)
"""

from django.apps import AppConfig


class StorageConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core.storage"
    label = "propmon_storage"
    verbose_name = "PropMon Snapshot Storage"
