"""Decode a scanned code and look up its invite."""

import logfire
from pydantic import BaseModel

from invitelink.application.usecase.base import BaseUseCase
from invitelink.application.usecase.invite.get_invite_details import InviteDetails
from invitelink.domain.service import InviteStore, QRCodec


class DecodeAndLookupRequest(BaseModel):
    """Scanned payload."""

    code: str


class DecodeAndLookupUseCase(BaseUseCase[DecodeAndLookupRequest, InviteDetails]):
    """Use case for the door scanner preview.

    The payload is verified before the store is consulted, so a damaged code
    is reported as malformed and never as a missing invite.
    """

    def __init__(self, qr_codec: QRCodec, invite_store: InviteStore) -> None:
        """Initialize use case.

        Args:
            qr_codec: QR payload codec
            invite_store: Invite store
        """
        self.qr_codec = qr_codec
        self.invite_store = invite_store

    async def execute(self, request: DecodeAndLookupRequest) -> InviteDetails:
        """Decode, then look up.

        Raises:
            MalformedCodeError: If the payload is invalid
            NotFoundError: If the payload is valid but the invite is unknown
        """
        with logfire.span("decode_and_lookup"):
            invite_id = self.qr_codec.decode(request.code)
            invite = await self.invite_store.get(invite_id)
            logfire.info(
                "Scanned invite resolved",
                invite_id=invite.id,
                rsvp_status=invite.rsvp_status.value,
            )
            return InviteDetails.from_invite(invite)
