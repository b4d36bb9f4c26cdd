"""Invite lifecycle engine.

The one surface that API handlers, scripts and UI adapters talk to. It only
sequences use cases; every rule lives in the domain services, and domain
errors pass through unchanged for the caller to map (see
``invitelink.interface.error``).
"""

from invitelink.application.usecase.invite import (
    CheckInRequest,
    CheckInResponse,
    CheckInUseCase,
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    DecodeAndLookupRequest,
    DecodeAndLookupUseCase,
    GetInviteDetailsRequest,
    GetInviteDetailsUseCase,
    InviteDetails,
    ListEventInvitesRequest,
    ListEventInvitesResponse,
    ListEventInvitesUseCase,
    SubmitRsvpRequest,
    SubmitRsvpResponse,
    SubmitRsvpUseCase,
)


class InviteLifecycleEngine:
    """Create -> RSVP -> check-in state machine exposed to collaborators."""

    def __init__(
        self,
        create_invite: CreateInviteUseCase,
        get_invite_details: GetInviteDetailsUseCase,
        submit_rsvp: SubmitRsvpUseCase,
        decode_and_lookup: DecodeAndLookupUseCase,
        check_in: CheckInUseCase,
        list_event_invites: ListEventInvitesUseCase,
    ) -> None:
        self._create_invite = create_invite
        self._get_invite_details = get_invite_details
        self._submit_rsvp = submit_rsvp
        self._decode_and_lookup = decode_and_lookup
        self._check_in = check_in
        self._list_event_invites = list_event_invites

    async def create_invite(self, request: CreateInviteRequest) -> CreateInviteResponse:
        return await self._create_invite.execute(request)

    async def get_invite_details(self, invite_id: str) -> InviteDetails:
        return await self._get_invite_details.execute(
            GetInviteDetailsRequest(invite_id=invite_id)
        )

    async def submit_rsvp(self, request: SubmitRsvpRequest) -> SubmitRsvpResponse:
        return await self._submit_rsvp.execute(request)

    async def decode_and_lookup(self, code: str) -> InviteDetails:
        return await self._decode_and_lookup.execute(DecodeAndLookupRequest(code=code))

    async def check_in(self, request: CheckInRequest) -> CheckInResponse:
        return await self._check_in.execute(request)

    async def list_event_invites(
        self, request: ListEventInvitesRequest
    ) -> ListEventInvitesResponse:
        return await self._list_event_invites.execute(request)
