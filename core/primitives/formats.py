"""
PropMon Primitives — Storage Formats
======================================
Storage uses ISO dates; display uses day/month/year.
Stored text must be representable in an XML 1.0 document.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from core.primitives.errors import ValidationError

STORAGE_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"


def is_calendar_date(value) -> bool:
    """True for date instances that are not datetimes."""
    return isinstance(value, date) and not isinstance(value, datetime)


def format_for_storage(value: Optional[date]) -> str:
    if value is None:
        return ""
    return value.strftime(STORAGE_DATE_FORMAT)


def format_for_display(value: Optional[date]) -> str:
    if value is None:
        return ""
    return value.strftime(DISPLAY_DATE_FORMAT)


def parse_storage_date(text: str, field_name: str) -> date:
    try:
        return datetime.strptime(text.strip(), STORAGE_DATE_FORMAT).date()
    except (AttributeError, ValueError) as exc:
        raise ValidationError(
            f"{field_name}: '{text}' is not a {STORAGE_DATE_FORMAT} date"
        ) from exc


# Tab and newline are the only control characters the snapshot codec
# carries unchanged (XML 1.0 forbids the rest, and folds CR into LF).
_UNSTORABLE_TEXT = re.compile(r"[\x00-\x08\x0b-\x1f\ud800-\udfff\ufffe\uffff]")


def is_storable_text(value: str) -> bool:
    """True if value survives a store/load round trip unchanged."""
    return _UNSTORABLE_TEXT.search(value) is None
