"""Invite entity.

An invite is one guest's invitation to one event. It is created pending,
mutated exactly once by the RSVP, then zero or more times by door check-ins.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from invitelink.domain.model.common import DomainModel
from invitelink.domain.value import (
    AdmissionState,
    CheckInEntry,
    EventId,
    InviteId,
    Party,
    PlusOne,
    RsvpStatus,
)

# Column widths of the invites table
EVENT_ID_MAX_LENGTH = 255
GUEST_NAME_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 50


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - ``plus_ones`` never exceeds ``allowed_plus_ones``
    - Plus-ones and parking are only stored when the guest accepted
    - Admission is tracked per plus-one slot (``plus_one_admitted_at`` runs
      parallel to ``plus_ones``), not by a bare counter, so a re-scan of the
      same plus-one is told apart from a different plus-one arriving
    - Every plain admission appends exactly one ``check_in_log`` entry;
      re-entries are extra entries tagged ``reentry``
    """

    id: InviteId
    event_id: EventId = Field(min_length=1, max_length=EVENT_ID_MAX_LENGTH)
    guest_name: str = Field(min_length=1, max_length=GUEST_NAME_MAX_LENGTH)
    phone: str = Field(min_length=1, max_length=PHONE_MAX_LENGTH)
    allowed_plus_ones: int = Field(ge=0)
    rsvp_status: RsvpStatus = RsvpStatus.PENDING
    plus_ones: list[PlusOne] = Field(default_factory=list)
    parking_required: bool = False
    checked_in_principal: bool = False
    plus_one_admitted_at: list[Optional[datetime]] = Field(default_factory=list)
    check_in_log: list[CheckInEntry] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    responded_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_invariants(self) -> "Invite":
        """Reject any snapshot that breaks the invite invariants."""
        if len(self.plus_ones) > self.allowed_plus_ones:
            raise ValueError("plus_ones exceeds allowed_plus_ones")
        if len(self.plus_one_admitted_at) != len(self.plus_ones):
            raise ValueError("plus_one_admitted_at must run parallel to plus_ones")

        if self.rsvp_status != RsvpStatus.ACCEPTED:
            if self.plus_ones or self.parking_required:
                raise ValueError("plus-one and parking data require an accepted RSVP")
            if self.checked_in_principal or self.check_in_log:
                raise ValueError("check-in requires an accepted RSVP")

        self._check_log()
        return self

    def _check_log(self) -> None:
        """Each admitted party has exactly one admission entry, logged before
        any re-entry of that party.
        """
        logged: set[int | None] = set()  # None is the principal, ints are slots
        for entry in self.check_in_log:
            if entry.party == Party.PRINCIPAL:
                if entry.slot is not None:
                    raise ValueError("principal check_in_log entry cannot carry a slot")
                party = None
            else:
                if entry.slot is None or entry.slot >= len(self.plus_ones):
                    raise ValueError(
                        f"check_in_log entry for unknown plus-one slot {entry.slot}"
                    )
                party = entry.slot

            if entry.reentry:
                if party not in logged:
                    raise ValueError("check_in_log re-entry before admission")
            elif party in logged:
                raise ValueError("check_in_log admits the same party twice")
            else:
                logged.add(party)

        admitted: set[int | None] = {
            slot for slot, at in enumerate(self.plus_one_admitted_at) if at is not None
        }
        if self.checked_in_principal:
            admitted.add(None)
        if logged != admitted:
            raise ValueError("check_in_log does not match admitted parties")

    @property
    def checked_in_plus_ones(self) -> int:
        """Number of plus-one slots admitted so far."""
        return sum(1 for admitted in self.plus_one_admitted_at if admitted is not None)

    @property
    def checked_in_count(self) -> int:
        """Principal (as 0/1) plus admitted plus-ones."""
        return int(self.checked_in_principal) + self.checked_in_plus_ones

    @property
    def guest_count(self) -> int:
        """Expected party size: principal plus plus-ones when accepted, else 0."""
        if self.rsvp_status != RsvpStatus.ACCEPTED:
            return 0
        return 1 + len(self.plus_ones)

    @property
    def admission_state(self) -> AdmissionState:
        """Door-side admission progress."""
        if self.checked_in_count == 0:
            return AdmissionState.NOT_ADMITTED
        if self.checked_in_count >= self.guest_count:
            return AdmissionState.FULLY_ADMITTED
        return AdmissionState.PARTIALLY_ADMITTED

    def is_slot_admitted(self, index: int) -> bool:
        """Whether the plus-one at ``index`` has been admitted."""
        return self.plus_one_admitted_at[index] is not None

    def evolve(self, **changes: Any) -> "Invite":
        """Return a re-validated copy with ``changes`` applied.

        Unlike ``model_copy``, the result goes through validation, so an
        update can never produce a snapshot that breaks the invariants.
        """
        return type(self).model_validate({**self.model_dump(), **changes})
