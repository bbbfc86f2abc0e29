"""
PropMon Bootstrap — Monitor Wiring
====================================
Constructs a ready-to-use PropertyMonitor from configuration.

    monitor = build_property_monitor(load_monitor_config())

Steps:
    1. Bus        (given, else a fresh NotificationBus)
    2. Store      (file | django | memory, per config.store_backend)
    3. Registry   (PropertyMonitor with audit sink and clock)
    4. Load       (optional: restore the persisted snapshot)

Callers own the returned instance; tear down with
monitor.clear() / monitor.store.close().
"""

from __future__ import annotations

import logging
from typing import Optional

from core.audit.sink import AuditSink
from core.config.settings import (
    BACKEND_DJANGO,
    BACKEND_FILE,
    BACKEND_MEMORY,
    MonitorConfig,
    load_monitor_config,
)
from core.bootstrap.errors import BootstrapError
from core.events.bus import NotificationBus
from core.storage.file_store import XmlFileStore
from core.storage.memory import InMemoryStore
from core.storage.store import WriteBehindStore
from core.time.clock import Clock
from engines.property.monitor import PropertyMonitor

logger = logging.getLogger("propmon.bootstrap")


def build_store(config: MonitorConfig, bus: NotificationBus) -> WriteBehindStore:
    if config.store_backend == BACKEND_FILE:
        try:
            config.model_directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BootstrapError(
                "model directory",
                f"unable to create {config.model_directory}: {exc}",
            ) from exc
        return XmlFileStore(config.data_file, bus)
    if config.store_backend == BACKEND_MEMORY:
        return InMemoryStore(bus)
    if config.store_backend == BACKEND_DJANGO:
        from core.storage.django_store import DjangoSnapshotStore
        return DjangoSnapshotStore(bus)
    raise BootstrapError("store", f"unknown backend '{config.store_backend}'")


def build_property_monitor(
    config: Optional[MonitorConfig] = None,
    bus: Optional[NotificationBus] = None,
    audit_sink: Optional[AuditSink] = None,
    clock: Optional[Clock] = None,
    load: bool = True,
) -> PropertyMonitor:
    config = config or load_monitor_config()
    bus = bus or NotificationBus()
    store = build_store(config, bus)
    monitor = PropertyMonitor(bus, store, audit_sink=audit_sink, clock=clock)
    logger.info(
        f"Property monitor built with {config.store_backend} store "
        f"at {store.target}"
    )
    if load:
        monitor.load()
    return monitor
