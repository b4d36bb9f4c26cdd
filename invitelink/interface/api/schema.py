"""HTTP payload models.

The wire format is camelCase; use case models stay snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from invitelink.application.usecase.invite import (
    CheckInResponse,
    InviteDetails,
    ListEventInvitesResponse,
)
from invitelink.domain.value import AdmissionState, RsvpStatus


class CamelModel(BaseModel):
    """Base for API models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlusOneAPIItem(CamelModel):
    """Plus-one with its door status."""

    name: str
    phone: str = ""
    checked_in: bool = False


class InviteDetailsAPIResponse(CamelModel):
    """Invite details as returned over HTTP."""

    invite_id: str
    event_id: str
    guest_name: str
    phone: str
    allowed_plus_ones: int
    rsvp_status: RsvpStatus
    checked_in: bool
    plus_ones: list[PlusOneAPIItem]
    parking_required: bool
    checked_in_count: int
    admission_state: AdmissionState
    created_at: datetime
    responded_at: datetime | None = None

    @classmethod
    def from_details(cls, details: InviteDetails) -> "InviteDetailsAPIResponse":
        return cls.model_validate(details.model_dump())


class EventInvitesAPIResponse(CamelModel):
    """One page of an event's guest list."""

    invites: list[InviteDetailsAPIResponse]
    total: int

    @classmethod
    def from_response(
        cls, response: ListEventInvitesResponse
    ) -> "EventInvitesAPIResponse":
        return cls.model_validate(response.model_dump())


class CheckInAPIFields(CamelModel):
    """Fields shared by every door scan request."""

    # Server time is used when the scanner does not send its own clock
    scanned_at: datetime = Field(default_factory=datetime.now)
    scanned_by: str
    plus_one_index: int | None = None
    allow_reentry: bool = False


class CheckInAPIResponse(CamelModel):
    """Counts after an admission."""

    success: bool
    invite_id: str
    guest_name: str
    allowed_plus_ones: int
    checked_in_count: int
    checked_in_plus_ones: int
    admission_state: AdmissionState
    reentry: bool

    @classmethod
    def from_response(cls, response: CheckInResponse) -> "CheckInAPIResponse":
        return cls.model_validate(response.model_dump())
