"""
PropMon Address Primitive — Postal Identity of a Property
===========================================================
A property is identified by its postal address: ordered lines
plus a postcode. Both are immutable values.

Ordering is (postcode, lines) so that registry snapshots sort
deterministically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from core.primitives.errors import ValidationError
from core.primitives.formats import is_storable_text


# ══════════════════════════════════════════════════════════════
# POSTCODE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True, order=True)
class PostCode:
    """Upper-cased, whitespace-normalised postcode."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("PostCode: postcode was null")
        if not is_storable_text(self.value):
            raise ValidationError("PostCode: postcode contains control characters")
        object.__setattr__(self, "value", " ".join(self.value.upper().split()))

    def __str__(self) -> str:
        return self.value


# ══════════════════════════════════════════════════════════════
# ADDRESS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True, order=True)
class Address:
    """
    Postal address.

    Fields:
        postcode: PostCode (a plain string is accepted and converted)
        lines:    Ordered, non-empty address lines
    """

    postcode: PostCode
    lines: Tuple[str, ...]

    def __post_init__(self):
        if isinstance(self.postcode, str):
            object.__setattr__(self, "postcode", PostCode(self.postcode))
        if not isinstance(self.postcode, PostCode):
            raise ValidationError("Address: postcode was null")
        if self.lines is None or isinstance(self.lines, str):
            raise ValidationError("Address: lines of address were null")
        lines = tuple(self.lines)
        if not lines:
            raise ValidationError("Address: lines of address were empty")
        for line in lines:
            if not isinstance(line, str) or not line.strip():
                raise ValidationError("Address: line of address was blank")
            if not is_storable_text(line):
                raise ValidationError("Address: line of address contains control characters")
        object.__setattr__(self, "lines", tuple(line.strip() for line in lines))

    def __str__(self) -> str:
        return f"{', '.join(self.lines)} {self.postcode}"

    def to_dict(self) -> dict:
        return {
            "address": list(self.lines),
            "postcode": self.postcode.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Address:
        return cls(
            postcode=PostCode(data["postcode"]),
            lines=tuple(data["address"]),
        )
