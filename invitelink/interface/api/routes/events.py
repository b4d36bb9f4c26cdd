"""Event guest list routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from invitelink.application.engine import InviteLifecycleEngine
from invitelink.application.usecase.invite import ListEventInvitesRequest
from invitelink.domain.value import RsvpStatus
from invitelink.interface.api.schema import EventInvitesAPIResponse

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)


@router.get("/{event_id}/invites", response_model=EventInvitesAPIResponse)
async def list_event_invites(
    event_id: str,
    engine: FromDishka[InviteLifecycleEngine],
    status_filter: RsvpStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> EventInvitesAPIResponse:
    """Get the guest list of one event.

    Args:
        event_id: Event whose invites to list
        engine: Invite lifecycle engine from DI
        status_filter: Optional RSVP status filter (pending, accepted, declined)
        limit: Maximum number of results (1-200)
        offset: Number of results to skip

    Returns:
        Page of invites ordered by creation time, with the total count
    """
    response = await engine.list_event_invites(
        ListEventInvitesRequest(
            event_id=event_id,
            status=status_filter,
            limit=limit,
            offset=offset,
        )
    )
    return EventInvitesAPIResponse.from_response(response)
