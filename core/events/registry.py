"""
PropMon Notification Bus — Listener Registry
==============================================
Controls which listeners receive published notifications.

Rules:
- Every listener receives every notification (no per-category routing)
- Duplicate registration of the same listener is forbidden
- Copy-on-write: registration swaps in a new tuple, so a fan-out
  in progress iterates a stable snapshot and listeners may
  (de)register from inside a handler
- In-memory only, thread-safe
"""

import logging
from threading import Lock
from typing import Callable, Tuple

from core.events.errors import DuplicateListenerError, InvalidListenerError

logger = logging.getLogger("propmon.events")


def listener_name(listener: Callable) -> str:
    return getattr(listener, "__qualname__", repr(listener))


class ListenerRegistry:
    """In-memory, copy-on-write registry of notification listeners."""

    def __init__(self):
        self._listeners: Tuple[Callable, ...] = ()
        self._lock = Lock()

    def register(self, listener: Callable) -> None:
        """
        Register a listener.

        Raises:
            InvalidListenerError:   listener is not callable
            DuplicateListenerError: listener already registered
        """
        if not callable(listener):
            raise InvalidListenerError(listener)

        with self._lock:
            if self.is_registered(listener):
                raise DuplicateListenerError(listener_name(listener))
            self._listeners = self._listeners + (listener,)

        logger.debug(f"Listener registered: {listener_name(listener)}")

    def deregister(self, listener: Callable) -> bool:
        """
        Remove a listener. Returns False if it was not registered.
        """
        with self._lock:
            remaining = tuple(
                existing for existing in self._listeners
                if existing != listener
            )
            removed = len(remaining) != len(self._listeners)
            self._listeners = remaining

        if removed:
            logger.debug(f"Listener deregistered: {listener_name(listener)}")
        return removed

    def snapshot(self) -> Tuple[Callable, ...]:
        """Listeners registered right now, in registration order."""
        return self._listeners

    def is_registered(self, listener: Callable) -> bool:
        return any(existing == listener for existing in self._listeners)

    def listener_count(self) -> int:
        return len(self._listeners)
