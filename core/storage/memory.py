"""
PropMon Storage — In-Memory Backend
=====================================
Keeps the encoded XML document in memory. Used by tests and by
STORE_BACKEND="memory"; exercises the same codec as the file store.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from core.primitives.property_aggregate import Property
from core.storage.codec import decode_snapshot, encode_snapshot
from core.storage.store import WriteBehindStore


class InMemoryStore(WriteBehindStore):
    def __init__(self, bus, executor=None, initial: Optional[bytes] = None):
        super().__init__(bus, executor=executor)
        self._data_lock = threading.Lock()
        self._data = initial
        self.write_count = 0

    @property
    def target(self) -> str:
        return "memory"

    @property
    def data(self) -> Optional[bytes]:
        with self._data_lock:
            return self._data

    def write_snapshot(self, properties: List[Property]) -> None:
        encoded = encode_snapshot(properties)
        with self._data_lock:
            self._data = encoded
            self.write_count += 1

    def read_snapshot(self) -> List[Property]:
        return decode_snapshot(self.data)

    def has_data(self) -> bool:
        return self.data is not None
