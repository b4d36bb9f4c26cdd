"""Create invite use case."""

import logfire
from pydantic import BaseModel

from invitelink.application.usecase.base import BaseUseCase
from invitelink.config import Settings
from invitelink.domain.service import InviteStore, QRCodec


class CreateInviteRequest(BaseModel):
    """Request to create an invite."""

    event_id: str
    guest_name: str
    phone: str
    allowed_plus_ones: int = 0


class CreateInviteResponse(BaseModel):
    """Response after creating an invite."""

    invite_id: str
    qr_code_url: str  # PNG of the signed payload
    rsvp_url: str  # Guest-facing RSVP page
    qr_payload: str  # Raw payload, for clients that render their own code


class CreateInviteUseCase(
    BaseUseCase[CreateInviteRequest, CreateInviteResponse]
):
    """Use case for creating an invite and its shareable code."""

    def __init__(
        self, invite_store: InviteStore, qr_codec: QRCodec, settings: Settings
    ) -> None:
        """Initialize use case.

        Args:
            invite_store: Invite store
            qr_codec: QR payload codec
            settings: Application settings
        """
        self.invite_store = invite_store
        self.qr_codec = qr_codec
        self.settings = settings

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Create the invite and build its links.

        Raises:
            InvalidInputError: If the request fields are invalid
        """
        with logfire.span("create_invite", event_id=request.event_id):
            invite = await self.invite_store.create(
                event_id=request.event_id,
                guest_name=request.guest_name,
                phone=request.phone,
                allowed_plus_ones=request.allowed_plus_ones,
            )

            return CreateInviteResponse(
                invite_id=invite.id,
                qr_code_url=f"{self.settings.api.base_url}/invites/{invite.id}/qr",
                rsvp_url=f"{self.settings.api.frontend_url}/rsvp/{invite.id}",
                qr_payload=self.qr_codec.encode(invite.id),
            )
