"""
PropMon Storage — XML File Backend
====================================
Persists the snapshot to a single XML file
(default <root>/<application>/model/property.dat).

Writes go to a sibling temporary file which then replaces the
target, so a reader never sees a half-written document.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union

from core.primitives.property_aggregate import Property
from core.storage.codec import decode_snapshot, encode_snapshot
from core.storage.errors import StorageLoadError
from core.storage.store import WriteBehindStore


class XmlFileStore(WriteBehindStore):
    def __init__(self, path: Union[str, Path], bus, executor=None):
        super().__init__(bus, executor=executor)
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def target(self) -> str:
        return str(self._path)

    def write_snapshot(self, properties: List[Property]) -> None:
        data = encode_snapshot(properties)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        with open(tmp_path, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, self._path)

    def read_snapshot(self) -> List[Property]:
        try:
            data = self._path.read_bytes()
        except OSError as exc:
            raise StorageLoadError(
                f"PropertyRead: Exception occurred - {exc}"
            ) from exc
        return decode_snapshot(data)

    def has_data(self) -> bool:
        return self._path.is_file()
