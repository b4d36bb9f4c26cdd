"""Get invite details use case."""

from datetime import datetime

from pydantic import BaseModel

from invitelink.application.usecase.base import BaseUseCase
from invitelink.domain.model import Invite
from invitelink.domain.service import InviteStore
from invitelink.domain.value import AdmissionState, InviteId, RsvpStatus


class PlusOneItem(BaseModel):
    """Plus-one with its door status."""

    name: str
    phone: str = ""
    checked_in: bool = False


class InviteDetails(BaseModel):
    """Invite as seen by collaborators."""

    invite_id: str
    event_id: str
    guest_name: str
    phone: str
    allowed_plus_ones: int
    rsvp_status: RsvpStatus
    checked_in: bool  # Principal admitted
    plus_ones: list[PlusOneItem]
    parking_required: bool
    checked_in_count: int
    admission_state: AdmissionState
    created_at: datetime
    responded_at: datetime | None = None

    @classmethod
    def from_invite(cls, invite: Invite) -> "InviteDetails":
        """Build details from a domain snapshot."""
        return cls(
            invite_id=invite.id,
            event_id=invite.event_id,
            guest_name=invite.guest_name,
            phone=invite.phone,
            allowed_plus_ones=invite.allowed_plus_ones,
            rsvp_status=invite.rsvp_status,
            checked_in=invite.checked_in_principal,
            plus_ones=[
                PlusOneItem(
                    name=plus_one.name,
                    phone=plus_one.phone,
                    checked_in=invite.is_slot_admitted(index),
                )
                for index, plus_one in enumerate(invite.plus_ones)
            ],
            parking_required=invite.parking_required,
            checked_in_count=invite.checked_in_count,
            admission_state=invite.admission_state,
            created_at=invite.created_at,
            responded_at=invite.responded_at,
        )


class GetInviteDetailsRequest(BaseModel):
    """Get invite details request."""

    invite_id: str


class GetInviteDetailsUseCase(
    BaseUseCase[GetInviteDetailsRequest, InviteDetails]
):
    """Use case for reading one invite."""

    def __init__(self, invite_store: InviteStore) -> None:
        self.invite_store = invite_store

    async def execute(self, request: GetInviteDetailsRequest) -> InviteDetails:
        """Return the invite's details.

        Raises:
            NotFoundError: If invite doesn't exist
        """
        invite = await self.invite_store.get(InviteId(request.invite_id))
        return InviteDetails.from_invite(invite)
