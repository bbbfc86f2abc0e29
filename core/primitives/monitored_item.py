"""
PropMon Monitored Item Primitive — Recurring Maintenance Obligation
=====================================================================
A monitored item is a recurring obligation attached to a property
(gas safety check, boiler service, gutter clearance ...).

Schedule (derived, recomputed whenever an input changes):
    time_for_next_action = last_action_performed + notice_every × period_for_next_action
    time_for_next_notice = time_for_next_action − advance_notice × period_for_next_notice

RULES:
- Items are immutable snapshots; every change returns a new item
  whose derived dates are recomputed from the new inputs
- Identity is the description alone (replace/remove look items up by it)
- Ordering is by time_for_next_action
- The owner is a read-only Address reference, never a Property object
- time_for_next_notice may fall before last_action_performed when the
  notice window is wider than the recurrence; this is allowed

This file contains NO persistence logic beyond the record contract.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from core.primitives.address import Address
from core.primitives.errors import ValidationError
from core.primitives.formats import (
    format_for_display,
    format_for_storage,
    is_calendar_date,
    is_storable_text,
    parse_storage_date,
)
from core.time.periods import Period, advance, retreat


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_period(text: str, field_name: str) -> Period:
    try:
        return Period(text.strip().upper())
    except (AttributeError, ValueError) as exc:
        raise ValidationError(
            f"MonitoredItem: {field_name} '{text}' is not a known period"
        ) from exc


def _parse_count(text: str, field_name: str) -> int:
    try:
        return int(str(text).strip())
    except ValueError as exc:
        raise ValidationError(
            f"MonitoredItem: {field_name} '{text}' is not a number"
        ) from exc


# ══════════════════════════════════════════════════════════════
# MONITORED ITEM
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True, eq=False)
class MonitoredItem:
    """
    Recurring maintenance obligation.

    Fields:
        description:            Identity key within the owning property
        period_for_next_action: Recurrence unit
        notice_every:           Recurrence interval count (>= 1)
        last_action_performed:  Date the obligation was last satisfied
        advance_notice:         Reminder lead count (>= 1)
        period_for_next_notice: Reminder lead unit
        email_sent_on:          Date a reminder was actually dispatched
        owner:                  Address of the owning property, if attached
    """

    description: str
    period_for_next_action: Period
    notice_every: int
    last_action_performed: date
    advance_notice: int
    period_for_next_notice: Period
    email_sent_on: Optional[date] = None
    owner: Optional[Address] = None
    time_for_next_action: date = field(init=False, repr=False)
    time_for_next_notice: date = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.description, str) or not self.description.strip():
            raise ValidationError("MonitoredItem: description not specified")
        if not is_storable_text(self.description):
            raise ValidationError("MonitoredItem: description contains control characters")
        if not isinstance(self.period_for_next_action, Period):
            raise ValidationError("MonitoredItem: period was null")
        if not _is_count(self.notice_every) or self.notice_every < 1:
            raise ValidationError("MonitoredItem: noticeEvery less than 1")
        if not _is_count(self.advance_notice) or self.advance_notice < 1:
            raise ValidationError("MonitoredItem: advanceNotice less than 1")
        if not is_calendar_date(self.last_action_performed):
            raise ValidationError("MonitoredItem: lastActioned was null")
        if not isinstance(self.period_for_next_notice, Period):
            raise ValidationError("MonitoredItem: periodForNextNotice was null")
        if self.email_sent_on is not None and not is_calendar_date(self.email_sent_on):
            raise ValidationError("MonitoredItem: emailSentOn must be a date")
        if self.owner is not None and not isinstance(self.owner, Address):
            raise ValidationError("MonitoredItem: owner must be an Address")

        try:
            next_action = advance(
                self.last_action_performed,
                self.notice_every,
                self.period_for_next_action,
            )
            next_notice = retreat(
                next_action, self.advance_notice, self.period_for_next_notice
            )
        except (ValueError, OverflowError) as exc:
            raise ValidationError(
                "MonitoredItem: schedule out of date range"
            ) from exc
        object.__setattr__(self, "time_for_next_action", next_action)
        object.__setattr__(self, "time_for_next_notice", next_notice)

    # ── Schedule changes (each returns a recomputed snapshot) ──

    def action_performed(self, when: date) -> MonitoredItem:
        """Record a new last-action date."""
        return dataclasses.replace(self, last_action_performed=when)

    def with_period_for_next_action(self, period: Period) -> MonitoredItem:
        return dataclasses.replace(self, period_for_next_action=period)

    def with_notice_every(self, notice_every: int) -> MonitoredItem:
        return dataclasses.replace(self, notice_every=notice_every)

    def with_advance_notice(self, advance_notice: int) -> MonitoredItem:
        return dataclasses.replace(self, advance_notice=advance_notice)

    def with_period_for_next_notice(self, period: Period) -> MonitoredItem:
        return dataclasses.replace(self, period_for_next_notice=period)

    def with_email_sent_on(self, when: Optional[date]) -> MonitoredItem:
        return dataclasses.replace(self, email_sent_on=when)

    def with_owner(self, owner: Optional[Address]) -> MonitoredItem:
        return dataclasses.replace(self, owner=owner)

    # ── Schedule queries ──────────────────────────────────────

    def overdue(self, as_of: date) -> bool:
        """True iff as_of is strictly after the next action date."""
        if not is_calendar_date(as_of):
            raise ValidationError("MonitoredItem: date was null")
        return as_of > self.time_for_next_action

    def notice_due(self, as_of: date) -> bool:
        """True iff as_of is strictly after the next notice date."""
        if not is_calendar_date(as_of):
            raise ValidationError("MonitoredItem: date was null")
        return as_of > self.time_for_next_notice

    def display_dates(self) -> dict:
        return {
            "last_action": format_for_display(self.last_action_performed),
            "next_action": format_for_display(self.time_for_next_action),
            "next_notice": format_for_display(self.time_for_next_notice),
            "email_sent": format_for_display(self.email_sent_on),
        }

    # ── Identity & ordering ───────────────────────────────────

    def __eq__(self, other):
        if not isinstance(other, MonitoredItem):
            return NotImplemented
        return self.description == other.description

    def __hash__(self):
        return hash(self.description)

    def __lt__(self, other):
        if not isinstance(other, MonitoredItem):
            return NotImplemented
        return self.time_for_next_action < other.time_for_next_action

    def __str__(self) -> str:
        return self.description

    # ── Record contract ───────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Persisted record. Derived dates are NOT stored;
        they are recomputed from the inputs on load.
        """
        record = {
            "description": self.description,
            "periodForNextAction": self.period_for_next_action.value,
            "noticeEvery": self.notice_every,
            "lastActionPerformed": format_for_storage(self.last_action_performed),
            "advanceNotice": self.advance_notice,
            "periodForNextNotice": self.period_for_next_notice.value,
        }
        if self.email_sent_on is not None:
            record["emailSentOn"] = format_for_storage(self.email_sent_on)
        return record

    @classmethod
    def from_dict(
        cls, data: dict, owner: Optional[Address] = None
    ) -> MonitoredItem:
        try:
            email_text = data.get("emailSentOn")
            return cls(
                description=data["description"],
                period_for_next_action=_parse_period(
                    data["periodForNextAction"], "periodForNextAction"
                ),
                notice_every=_parse_count(data["noticeEvery"], "noticeEvery"),
                last_action_performed=parse_storage_date(
                    data["lastActionPerformed"], "lastActionPerformed"
                ),
                advance_notice=_parse_count(data["advanceNotice"], "advanceNotice"),
                period_for_next_notice=_parse_period(
                    data["periodForNextNotice"], "periodForNextNotice"
                ),
                email_sent_on=(
                    parse_storage_date(email_text, "emailSentOn")
                    if email_text else None
                ),
                owner=owner,
            )
        except KeyError as exc:
            raise ValidationError(
                f"MonitoredItem: record is missing {exc.args[0]}"
            ) from exc
