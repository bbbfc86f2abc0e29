"""
PropMon Storage — Public API
==============================
Write-behind snapshot stores and the XML snapshot codec.

The Django backend is imported from core.storage.django_store
directly; importing this package never touches Django settings.
"""

from core.storage.codec import decode_snapshot, encode_snapshot
from core.storage.errors import PersistenceError, StorageLoadError
from core.storage.file_store import XmlFileStore
from core.storage.memory import InMemoryStore
from core.storage.store import WriteBehindStore

__all__ = [
    "PersistenceError",
    "StorageLoadError",
    "WriteBehindStore",
    "XmlFileStore",
    "InMemoryStore",
    "encode_snapshot",
    "decode_snapshot",
]
