"""Invite use cases."""

from invitelink.application.usecase.invite.check_in import (
    CheckInRequest,
    CheckInResponse,
    CheckInUseCase,
)
from invitelink.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from invitelink.application.usecase.invite.decode_and_lookup import (
    DecodeAndLookupRequest,
    DecodeAndLookupUseCase,
)
from invitelink.application.usecase.invite.get_invite_details import (
    GetInviteDetailsRequest,
    GetInviteDetailsUseCase,
    InviteDetails,
    PlusOneItem,
)
from invitelink.application.usecase.invite.list_event_invites import (
    ListEventInvitesRequest,
    ListEventInvitesResponse,
    ListEventInvitesUseCase,
)
from invitelink.application.usecase.invite.submit_rsvp import (
    PlusOneInfo,
    SubmitRsvpRequest,
    SubmitRsvpResponse,
    SubmitRsvpUseCase,
)

__all__ = [
    "CheckInRequest",
    "CheckInResponse",
    "CheckInUseCase",
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "DecodeAndLookupRequest",
    "DecodeAndLookupUseCase",
    "GetInviteDetailsRequest",
    "GetInviteDetailsUseCase",
    "InviteDetails",
    "ListEventInvitesRequest",
    "ListEventInvitesResponse",
    "ListEventInvitesUseCase",
    "PlusOneInfo",
    "PlusOneItem",
    "SubmitRsvpRequest",
    "SubmitRsvpResponse",
    "SubmitRsvpUseCase",
]
