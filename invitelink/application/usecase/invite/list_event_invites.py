"""List event invites use case."""

from pydantic import BaseModel, Field

from invitelink.application.usecase.base import BaseUseCase
from invitelink.application.usecase.invite.get_invite_details import InviteDetails
from invitelink.domain.service import InviteStore
from invitelink.domain.value import EventId, RsvpStatus


class ListEventInvitesRequest(BaseModel):
    """Guest list request."""

    event_id: str
    status: RsvpStatus | None = None
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ListEventInvitesResponse(BaseModel):
    """Guest list page."""

    invites: list[InviteDetails]
    total: int


class ListEventInvitesUseCase(
    BaseUseCase[ListEventInvitesRequest, ListEventInvitesResponse]
):
    """Use case for the door-side guest list of one event."""

    def __init__(self, invite_store: InviteStore) -> None:
        self.invite_store = invite_store

    async def execute(
        self, request: ListEventInvitesRequest
    ) -> ListEventInvitesResponse:
        """List invites of the event, oldest first."""
        invites, total = await self.invite_store.list_for_event(
            EventId(request.event_id),
            status=request.status,
            limit=request.limit,
            offset=request.offset,
        )
        return ListEventInvitesResponse(
            invites=[InviteDetails.from_invite(invite) for invite in invites],
            total=total,
        )
