"""
PropMon Notification Bus — Errors
===================================
Error types for listener registration.
Separate from registry errors — the bus is routing, not state.
"""


class NotificationBusError(Exception):
    """Base error for notification bus operations."""
    pass


class InvalidListenerError(NotificationBusError):
    """Listener is not callable."""

    def __init__(self, listener):
        self.listener = listener
        super().__init__(
            f"Listener must be callable, got {type(listener).__name__}."
        )


class DuplicateListenerError(NotificationBusError):
    """Same listener already registered."""

    def __init__(self, listener_name: str):
        self.listener_name = listener_name
        super().__init__(
            f"Listener '{listener_name}' is already registered."
        )
