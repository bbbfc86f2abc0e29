"""
PropMon Notification Bus — Publish / Subscribe Channel
========================================================
Decouples mutators (registry, store) from observers (UI, tests).

    bus = NotificationBus()
    bus.register(listener)
    bus.notify(PropertyNotificationType.ADD, source=monitor, subject=prop)

Delivery is synchronous: publish() returns after every listener
registered at publish time has been called.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from core.events.dispatcher import dispatch
from core.events.notifications import Notification
from core.events.registry import ListenerRegistry


class NotificationBus:
    def __init__(self, registry: ListenerRegistry | None = None):
        self._registry = registry or ListenerRegistry()

    def register(self, listener: Callable[[Notification], Any]) -> None:
        self._registry.register(listener)

    def deregister(self, listener: Callable[[Notification], Any]) -> bool:
        return self._registry.deregister(listener)

    def publish(self, notification: Notification) -> dict:
        return dispatch(notification, self._registry.snapshot())

    def notify(
        self, notification_type: Enum, source: Any, subject: Any = None
    ) -> dict:
        return self.publish(
            Notification(
                notification_type=notification_type,
                source=source,
                subject=subject,
            )
        )

    def is_registered(self, listener: Callable[[Notification], Any]) -> bool:
        return self._registry.is_registered(listener)

    def listener_count(self) -> int:
        return self._registry.listener_count()
