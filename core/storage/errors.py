"""
PropMon Storage — Errors
==========================
PersistenceError is never raised by the registry: a failed
write-behind store travels only inside the storage FAILED
notification. StorageLoadError is raised synchronously by load()
and is an OSError so callers can treat it as ordinary I/O failure.
"""

from core.primitives.errors import MonitorError


class PersistenceError(MonitorError):
    """A snapshot could not be written to the durable store."""
    pass


class StorageLoadError(PersistenceError, OSError):
    """A persisted snapshot could not be read or was malformed."""
    pass
