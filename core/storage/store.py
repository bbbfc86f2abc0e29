"""
PropMon Storage — Write-Behind Store
======================================
Durable persistence of registry snapshots off the caller's thread.

Flow for every persist(snapshot):
    1. Snapshot copied and numbered on the caller's thread
    2. Submitted to a single-worker executor (writes never overlap
       and complete in submission order)
    3. Worker publishes storage STARTED, writes, then publishes
       exactly one of COMPLETE or FAILED

A failed write never raises into the mutating caller; the
PersistenceError is carried in the FAILED StorageReport and logged.

load() runs synchronously on the caller's thread and publishes the
same STARTED → COMPLETE | FAILED sequence with operation=LOAD.

Backends implement write_snapshot / read_snapshot / has_data.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from typing import Iterable, List, Optional

from core.events.bus import NotificationBus
from core.events.notifications import (
    StorageNotificationType,
    StorageOperation,
    StorageReport,
)
from core.primitives.property_aggregate import Property
from core.storage.errors import PersistenceError, StorageLoadError

logger = logging.getLogger("propmon.storage")


class WriteBehindStore(ABC):
    """Base class for asynchronous snapshot stores."""

    def __init__(self, bus: NotificationBus, executor: Optional[Executor] = None):
        self._bus = bus
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="propmon-store"
        )
        self._lock = threading.Lock()
        self._sequence = 0
        self._pending: List[Future] = []
        self._closed = False

    # ── Backend contract ──────────────────────────────────────

    @property
    @abstractmethod
    def target(self) -> str:
        """Human-readable name of where snapshots go."""
        ...

    @abstractmethod
    def write_snapshot(self, properties: List[Property]) -> None:
        """Durably replace the stored snapshot. Runs on the worker thread."""
        ...

    @abstractmethod
    def read_snapshot(self) -> List[Property]:
        """Decode the stored snapshot."""
        ...

    @abstractmethod
    def has_data(self) -> bool:
        """True once a snapshot has been stored."""
        ...

    # ══════════════════════════════════════════════════════════
    # STORE (asynchronous)
    # ══════════════════════════════════════════════════════════

    def persist(self, properties: Iterable[Property]) -> None:
        """
        Hand a snapshot to the background writer.

        The snapshot is copied before this returns, so later registry
        mutations never leak into an in-flight write.
        Completion is reported only through storage notifications.

        Raises:
            PersistenceError: the store has been closed
        """
        snapshot = [prop.copy() for prop in properties]
        with self._lock:
            if self._closed:
                raise PersistenceError(
                    f"PropertyWrite: store {self.target} is closed"
                )
            self._sequence += 1
            sequence = self._sequence
            future = self._executor.submit(self._run_store, snapshot, sequence)
            self._pending = [f for f in self._pending if not f.done()]
            self._pending.append(future)
        logger.debug(
            f"Queued snapshot #{sequence} ({len(snapshot)} properties) "
            f"for {self.target}"
        )

    def _run_store(self, snapshot: List[Property], sequence: int) -> StorageReport:
        started = StorageReport(
            operation=StorageOperation.STORE,
            target=self.target,
            property_count=len(snapshot),
            sequence=sequence,
        )
        self._bus.notify(StorageNotificationType.STARTED, self, started)
        logger.debug(f"Storing snapshot #{sequence} to {self.target}")

        try:
            self.write_snapshot(snapshot)
        except Exception as exc:
            error = PersistenceError(
                f"PropertyWrite: Exception occurred - {exc}", snapshot
            )
            error.__cause__ = exc
            logger.error(
                f"Snapshot #{sequence} failed to store to {self.target}: {exc}",
                exc_info=True,
            )
            report = StorageReport(
                operation=StorageOperation.STORE,
                target=self.target,
                property_count=len(snapshot),
                sequence=sequence,
                error=error,
            )
            self._bus.notify(StorageNotificationType.FAILED, self, report)
            return report

        logger.info(
            f"Stored snapshot #{sequence} ({len(snapshot)} properties) "
            f"to {self.target}"
        )
        self._bus.notify(StorageNotificationType.COMPLETE, self, started)
        return started

    # ══════════════════════════════════════════════════════════
    # LOAD (synchronous)
    # ══════════════════════════════════════════════════════════

    def load(self) -> List[Property]:
        """
        Read the persisted snapshot.

        Returns an empty list when nothing has been stored yet.

        Raises:
            StorageLoadError: the snapshot exists but cannot be read
        """
        self._bus.notify(
            StorageNotificationType.STARTED,
            self,
            StorageReport(operation=StorageOperation.LOAD, target=self.target),
        )
        try:
            properties = self.read_snapshot() if self.has_data() else []
        except Exception as exc:
            error = (
                exc if isinstance(exc, StorageLoadError)
                else StorageLoadError(f"PropertyRead: Exception occurred - {exc}")
            )
            if error is not exc:
                error.__cause__ = exc
            logger.error(f"Failed to load from {self.target}: {exc}")
            self._bus.notify(
                StorageNotificationType.FAILED,
                self,
                StorageReport(
                    operation=StorageOperation.LOAD,
                    target=self.target,
                    error=error,
                ),
            )
            raise error

        logger.info(f"Loaded {len(properties)} properties from {self.target}")
        self._bus.notify(
            StorageNotificationType.COMPLETE,
            self,
            StorageReport(
                operation=StorageOperation.LOAD,
                target=self.target,
                property_count=len(properties),
            ),
        )
        return properties

    # ── Lifecycle ─────────────────────────────────────────────

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for queued writes. True iff all finished within timeout."""
        with self._lock:
            pending = list(self._pending)
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def close(self, wait_for_pending: bool = True) -> None:
        with self._lock:
            self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=wait_for_pending)
        elif wait_for_pending:
            self.flush()
