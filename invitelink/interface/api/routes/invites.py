"""Invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import Field

from invitelink.adapter.qr import render_qr_png
from invitelink.application.engine import InviteLifecycleEngine
from invitelink.application.usecase.invite import (
    CheckInRequest,
    CreateInviteRequest,
    PlusOneInfo,
    SubmitRsvpRequest,
)
from invitelink.config import QRSettings
from invitelink.domain.service import QRCodec
from invitelink.domain.value import InviteId, RsvpStatus
from invitelink.interface.api.schema import (
    CamelModel,
    CheckInAPIFields,
    CheckInAPIResponse,
    InviteDetailsAPIResponse,
)

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class CreateInviteAPIRequest(CamelModel):
    """API request for creating an invite."""

    event_id: str
    guest_name: str
    phone: str
    allowed_plus_ones: int = 0


class CreateInviteAPIResponse(CamelModel):
    """Links handed to the host after creating an invite."""

    invite_id: str
    qr_code_url: str
    rsvp_url: str
    qr_payload: str


class PlusOneAPIInfo(CamelModel):
    """Plus-one as submitted on the RSVP page."""

    name: str
    phone: str = ""


class SubmitRsvpAPIRequest(CamelModel):
    """API request for answering an invite."""

    attending: bool
    plus_ones: list[PlusOneAPIInfo] = Field(default_factory=list)
    parking_required: bool = False


class SubmitRsvpAPIResponse(CamelModel):
    """RSVP outcome."""

    success: bool
    message: str
    rsvp_status: RsvpStatus
    guest_count: int


class DecodeAPIRequest(CamelModel):
    """Raw QR payload to resolve."""

    code: str


@router.post(
    "", response_model=CreateInviteAPIResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    request: CreateInviteAPIRequest,
    engine: FromDishka[InviteLifecycleEngine],
) -> CreateInviteAPIResponse:
    """Create a pending invite and return its QR and RSVP links.

    Raises:
        InvalidInputError: If a required field is empty (422)
    """
    response = await engine.create_invite(
        CreateInviteRequest(
            event_id=request.event_id,
            guest_name=request.guest_name,
            phone=request.phone,
            allowed_plus_ones=request.allowed_plus_ones,
        )
    )
    return CreateInviteAPIResponse.model_validate(response.model_dump())


@router.post("/decode", response_model=InviteDetailsAPIResponse)
async def decode_invite(
    request: DecodeAPIRequest,
    engine: FromDishka[InviteLifecycleEngine],
) -> InviteDetailsAPIResponse:
    """Resolve a scanned payload to its invite without admitting anyone."""
    details = await engine.decode_and_lookup(request.code)
    return InviteDetailsAPIResponse.from_details(details)


@router.get("/{invite_id}", response_model=InviteDetailsAPIResponse)
async def get_invite(
    invite_id: str,
    engine: FromDishka[InviteLifecycleEngine],
) -> InviteDetailsAPIResponse:
    """Get an invite with its RSVP and door status."""
    details = await engine.get_invite_details(invite_id)
    return InviteDetailsAPIResponse.from_details(details)


@router.post("/{invite_id}/rsvp", response_model=SubmitRsvpAPIResponse)
async def submit_rsvp(
    invite_id: str,
    request: SubmitRsvpAPIRequest,
    engine: FromDishka[InviteLifecycleEngine],
) -> SubmitRsvpAPIResponse:
    """Record the guest's one-time response."""
    response = await engine.submit_rsvp(
        SubmitRsvpRequest(
            invite_id=invite_id,
            attending=request.attending,
            plus_ones=[
                PlusOneInfo(name=plus_one.name, phone=plus_one.phone)
                for plus_one in request.plus_ones
            ],
            parking_required=request.parking_required,
        )
    )
    return SubmitRsvpAPIResponse.model_validate(response.model_dump())


@router.post("/{invite_id}/checkin", response_model=CheckInAPIResponse)
async def check_in(
    invite_id: str,
    request: CheckInAPIFields,
    engine: FromDishka[InviteLifecycleEngine],
) -> CheckInAPIResponse:
    """Admit the principal, or one plus-one when plusOneIndex is given."""
    response = await engine.check_in(
        CheckInRequest(
            invite_id=invite_id,
            plus_one_index=request.plus_one_index,
            scanned_at=request.scanned_at,
            scanned_by=request.scanned_by,
            allow_reentry=request.allow_reentry,
        )
    )
    return CheckInAPIResponse.from_response(response)


@router.get(
    "/{invite_id}/qr",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def get_invite_qr(
    invite_id: str,
    engine: FromDishka[InviteLifecycleEngine],
    qr_codec: FromDishka[QRCodec],
    qr_settings: FromDishka[QRSettings],
) -> Response:
    """Render the invite's signed payload as a PNG.

    Raises:
        NotFoundError: If invite doesn't exist (404)
    """
    details = await engine.get_invite_details(invite_id)
    png = render_qr_png(
        qr_codec.encode(InviteId(details.invite_id)),
        box_size=qr_settings.box_size,
        border=qr_settings.border,
    )
    return Response(content=png, media_type="image/png")
