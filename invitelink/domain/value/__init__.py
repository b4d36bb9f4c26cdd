"""Domain value objects for InviteLink."""

from invitelink.domain.value.identifiers import (
    EventId,
    InviteId,
    is_invite_id,
    new_invite_id,
)
from invitelink.domain.value.types import (
    AdmissionState,
    CheckInEntry,
    Party,
    PlusOne,
    RsvpStatus,
)

__all__ = [
    # Identifiers
    "EventId",
    "InviteId",
    "is_invite_id",
    "new_invite_id",
    # Types
    "AdmissionState",
    "CheckInEntry",
    "Party",
    "PlusOne",
    "RsvpStatus",
]
