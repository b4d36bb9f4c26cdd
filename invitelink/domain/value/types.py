"""Domain value objects for InviteLink."""

from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from invitelink.domain.value.common import ValueObject


class RsvpStatus(str, Enum):
    """Guest response to an invite."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class Party(str, Enum):
    """Who is being admitted at the door."""

    PRINCIPAL = "principal"
    PLUS_ONE = "plus_one"


class AdmissionState(str, Enum):
    """Door-side progress of an invite."""

    NOT_ADMITTED = "not_admitted"
    PARTIALLY_ADMITTED = "partially_admitted"
    FULLY_ADMITTED = "fully_admitted"


class PlusOne(ValueObject):
    """Additional guest attached to an invite."""

    name: str
    phone: str = ""

    @field_validator("name", "phone")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Normalise surrounding whitespace."""
        return v.strip()


class CheckInEntry(ValueObject):
    """One recorded admission event.

    A plain admission has ``reentry=False``. Re-entries of a party that was
    already admitted are recorded separately with ``reentry=True``.
    """

    party: Party
    slot: int | None = Field(default=None, ge=0)
    scanned_at: datetime
    scanned_by: str
    reentry: bool = False
