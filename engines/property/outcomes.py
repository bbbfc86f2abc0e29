"""
PropMon Property Engine — Mutation Outcome
============================================
Every registry operation produces exactly one outcome.

ACCEPTED → the change was applied, announced and queued for storage.
REJECTED → nothing changed; error is mandatory and a FAILED
           notification of the matching category was published.

Rules:
- Outcome is immutable (frozen dataclass)
- REJECTED must carry the error
- ACCEPTED must NOT carry an error
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from core.primitives.errors import MonitorError


class MutationStatus(Enum):
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class MutationOutcome:
    """
    Fields:
        status:            ACCEPTED or REJECTED
        notification_type: The notification published for this outcome
        subject:           Payload of that notification
        error:             The MonitorError (REJECTED only)
    """

    status: MutationStatus
    notification_type: Optional[Enum] = None
    subject: Any = None
    error: Optional[MonitorError] = None

    def __post_init__(self):
        if not isinstance(self.status, MutationStatus):
            raise ValueError(
                f"status must be MutationStatus, got {type(self.status).__name__}."
            )
        if self.status == MutationStatus.REJECTED and self.error is None:
            raise ValueError("REJECTED outcome must include the error.")
        if self.status == MutationStatus.ACCEPTED and self.error is not None:
            raise ValueError("ACCEPTED outcome must NOT include an error.")

    @property
    def is_accepted(self) -> bool:
        return self.status == MutationStatus.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status == MutationStatus.REJECTED

    def raise_if_rejected(self) -> MutationOutcome:
        if self.error is not None:
            raise self.error
        return self


def accept(notification_type: Optional[Enum], subject: Any = None) -> MutationOutcome:
    return MutationOutcome(
        status=MutationStatus.ACCEPTED,
        notification_type=notification_type,
        subject=subject,
    )


def reject(notification_type: Enum, error: MonitorError) -> MutationOutcome:
    return MutationOutcome(
        status=MutationStatus.REJECTED,
        notification_type=notification_type,
        subject=error,
        error=error,
    )
