from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

INT64_MAX = 2**63 - 1

_CANONICAL_RE = re.compile(r"\+3598[7-9][2-9][0-9]{6}")


class NormalizedPhoneNumber(BaseModel):
    """Canonical Bulgarian mobile number, e.g. ``+359878123456``.

    Built by ``phonebook.parser.normalize``; the validator only guards the
    canonical shape so an unchecked literal cannot slip through.
    """

    model_config = ConfigDict(frozen=True)

    normalized: str

    @field_validator("normalized")
    @classmethod
    def validate_normalized(cls, v: str) -> str:
        if not _CANONICAL_RE.fullmatch(v):
            raise ValueError(f"Not a canonical phone number: {v!r}")
        return v

    def __str__(self) -> str:
        return self.normalized


class PhoneEntry(BaseModel):
    """Directory entry: a name, its number and the outgoing call count.

    Identity is the name alone. Two entries with the same name compare equal
    whatever their numbers or call counts, which is what the directory and
    the top cache rely on for containment. Ranking by call count is a
    separate concern (see ``rank_key``).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    number: NormalizedPhoneNumber
    call_count: int = Field(default=0, ge=0, le=INT64_MAX)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PhoneEntry):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name}, {self.number}, {self.call_count}"

    def with_calls(self, delta: int) -> PhoneEntry:
        """Return a validated copy with ``call_count`` moved by ``delta``."""
        return PhoneEntry(name=self.name, number=self.number, call_count=self.call_count + delta)


def rank_key(entry: PhoneEntry) -> tuple[int, str]:
    """Sort key placing the most called entry first, ties broken by name."""
    return (-entry.call_count, entry.name)
