"""Submit RSVP use case."""

from pydantic import BaseModel

from invitelink.application.usecase.base import BaseUseCase
from invitelink.domain.service import RsvpProcessor
from invitelink.domain.value import InviteId, PlusOne, RsvpStatus

ACCEPTED_MESSAGE = "Thank you for confirming your attendance!"
DECLINED_MESSAGE = "We're sorry you can't make it. Your response has been recorded."


class PlusOneInfo(BaseModel):
    """Plus-one as submitted by the guest."""

    name: str
    phone: str = ""


class SubmitRsvpRequest(BaseModel):
    """Submit RSVP request."""

    invite_id: str
    attending: bool
    plus_ones: list[PlusOneInfo] = []
    parking_required: bool = False


class SubmitRsvpResponse(BaseModel):
    """Submit RSVP response."""

    success: bool
    message: str
    rsvp_status: RsvpStatus
    guest_count: int


class SubmitRsvpUseCase(BaseUseCase[SubmitRsvpRequest, SubmitRsvpResponse]):
    """Use case for a guest answering their invite."""

    def __init__(self, rsvp_processor: RsvpProcessor) -> None:
        """Initialize use case.

        Args:
            rsvp_processor: RSVP domain service
        """
        self.rsvp_processor = rsvp_processor

    async def execute(self, request: SubmitRsvpRequest) -> SubmitRsvpResponse:
        """Record the RSVP.

        Raises:
            NotFoundError: If invite doesn't exist
            AlreadySubmittedError: If the invite already has a response
            CapacityExceededError: If too many plus-ones
            InvalidInputError: If a plus-one has no name
        """
        confirmation = await self.rsvp_processor.submit(
            invite_id=InviteId(request.invite_id),
            attending=request.attending,
            plus_ones=[
                PlusOne(name=plus_one.name, phone=plus_one.phone)
                for plus_one in request.plus_ones
            ],
            parking_required=request.parking_required,
        )

        return SubmitRsvpResponse(
            success=True,
            message=ACCEPTED_MESSAGE if request.attending else DECLINED_MESSAGE,
            rsvp_status=confirmation.rsvp_status,
            guest_count=confirmation.guest_count,
        )
