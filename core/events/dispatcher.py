"""
PropMon Notification Bus — Dispatcher
=======================================
Synchronous fan-out of one notification to a listener snapshot.

Dispatch behavior:
1. Execute listeners sequentially, on the publisher's thread
2. Catch listener exceptions per listener
3. Log failure
4. Continue to next listener
5. NEVER undo the change that produced the notification

No buffering, no replay: a listener sees a notification only if
it was registered when the notification was published.
"""

import logging
from typing import Callable, Iterable

from core.events.notifications import Notification
from core.events.registry import listener_name

logger = logging.getLogger("propmon.events")


def dispatch(notification: Notification, listeners: Iterable[Callable]) -> dict:
    """
    Deliver a notification to every listener.

    Returns:
        {
            'notification_type': str,
            'listeners_notified': int,
            'listeners_failed': int,
            'failures': list[dict]
        }

    This function NEVER raises listener exceptions.
    """
    type_name = (
        f"{notification.category}.{notification.notification_type.value}"
    )
    result = {
        "notification_type": type_name,
        "listeners_notified": 0,
        "listeners_failed": 0,
        "failures": [],
    }

    for listener in listeners:
        name = listener_name(listener)
        try:
            listener(notification)
            result["listeners_notified"] += 1
        except Exception as exc:
            result["listeners_failed"] += 1
            result["failures"].append({
                "listener": name,
                "error": str(exc),
                "error_type": type(exc).__name__,
            })
            logger.error(
                f"Listener failed: {name} for {type_name}: {exc}",
                exc_info=True,
            )

    logger.debug(
        f"Dispatch complete: {type_name} — "
        f"{result['listeners_notified']} notified, "
        f"{result['listeners_failed']} failed"
    )
    return result
