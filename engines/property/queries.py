"""
PropMon Property Engine — Schedule Queries
============================================
Stateless selections over a registry snapshot.

    with_overdue_items(monitor)       properties with an overdue item today
    with_overdue_notices(monitor)     properties with a notice due today
    overdue_items_for(monitor, d)     items whose next action is exactly d
    notified_items_for(monitor, d)    items whose next notice is exactly d

"Today" comes from the supplied clock, else the monitor's clock.
Results are sorted by the natural ordering of what is returned.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from core.primitives.errors import ValidationError
from core.primitives.formats import is_calendar_date
from core.primitives.monitored_item import MonitoredItem
from core.primitives.property_aggregate import Property
from core.time.clock import Clock

logger = logging.getLogger("propmon.query")


def _as_of(monitor, clock: Optional[Clock]) -> date:
    return (clock or monitor.clock).today()


def _require_date(value, name: str) -> date:
    if not is_calendar_date(value):
        raise ValidationError(f"PropertySelect: {name} was null")
    return value


def with_overdue_items(monitor, clock: Optional[Clock] = None) -> List[Property]:
    today = _as_of(monitor, clock)
    selected = [p for p in monitor.properties() if p.are_items_overdue(today)]
    logger.debug(f"{len(selected)} properties with overdue items as of {today}")
    return selected


def with_overdue_notices(monitor, clock: Optional[Clock] = None) -> List[Property]:
    today = _as_of(monitor, clock)
    selected = [p for p in monitor.properties() if p.are_notices_overdue(today)]
    logger.debug(f"{len(selected)} properties with notices due as of {today}")
    return selected


def overdue_items_for(monitor, when: date) -> List[MonitoredItem]:
    """Items whose next action falls exactly on `when`."""
    when = _require_date(when, "date")
    return [
        item for item in monitor.all_monitored_items()
        if item.time_for_next_action == when
    ]


def notified_items_for(monitor, when: date) -> List[MonitoredItem]:
    """Items whose next notice falls exactly on `when`."""
    when = _require_date(when, "date")
    return [
        item for item in monitor.all_monitored_items()
        if item.time_for_next_notice == when
    ]
