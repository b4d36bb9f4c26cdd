"""RSVP domain service."""

from collections.abc import Sequence
from datetime import datetime

import logfire

from invitelink.domain.error import (
    AlreadySubmittedError,
    CapacityExceededError,
    InvalidInputError,
)
from invitelink.domain.model.invite import Invite
from invitelink.domain.value import InviteId, PlusOne, RsvpStatus
from invitelink.domain.value.common import ValueObject

from .base import Service
from .invite_store import InviteStore


class RsvpConfirmation(ValueObject):
    """Outcome of a successful RSVP."""

    invite_id: InviteId
    rsvp_status: RsvpStatus
    guest_count: int


class RsvpProcessor(Service):
    """Validates and applies the one-time RSVP transition."""

    def __init__(self, invite_store: InviteStore) -> None:
        """Initialize RSVP processor.

        Args:
            invite_store: Invite store
        """
        self.invite_store = invite_store

    async def submit(
        self,
        invite_id: InviteId,
        attending: bool,
        plus_ones: Sequence[PlusOne],
        parking_required: bool,
    ) -> RsvpConfirmation:
        """Record a guest's response.

        A declining guest carries no plus-one or parking data; whatever was
        supplied is dropped.

        Args:
            invite_id: Invite being answered
            attending: Whether the guest accepts
            plus_ones: Additional guests (ignored when declining)
            parking_required: Parking request (ignored when declining)

        Returns:
            Confirmation with final status and guest count

        Raises:
            NotFoundError: If invite doesn't exist
            AlreadySubmittedError: If the invite is no longer pending
            CapacityExceededError: If more plus-ones than allowed
            InvalidInputError: If a plus-one has no name
        """
        with logfire.span(
            "rsvp_processor.submit",
            invite_id=invite_id,
            attending=attending,
            plus_one_count=len(plus_ones),
        ):

            def apply(invite: Invite) -> Invite:
                if invite.rsvp_status != RsvpStatus.PENDING:
                    raise AlreadySubmittedError(invite.id, invite.rsvp_status.value)

                if not attending:
                    return invite.evolve(
                        rsvp_status=RsvpStatus.DECLINED,
                        plus_ones=[],
                        plus_one_admitted_at=[],
                        parking_required=False,
                        responded_at=datetime.now(),
                    )

                if len(plus_ones) > invite.allowed_plus_ones:
                    raise CapacityExceededError(
                        invite.id, len(plus_ones), invite.allowed_plus_ones
                    )
                for index, plus_one in enumerate(plus_ones):
                    if not plus_one.name.strip():
                        raise InvalidInputError(f"Plus-one {index} has no name")

                return invite.evolve(
                    rsvp_status=RsvpStatus.ACCEPTED,
                    plus_ones=list(plus_ones),
                    plus_one_admitted_at=[None] * len(plus_ones),
                    parking_required=parking_required,
                    responded_at=datetime.now(),
                )

            try:
                invite = await self.invite_store.update(invite_id, apply)
            except (AlreadySubmittedError, CapacityExceededError, InvalidInputError) as e:
                logfire.warn(
                    "RSVP rejected",
                    invite_id=invite_id,
                    kind=e.kind.value,
                    error=str(e),
                )
                raise

            logfire.info(
                "RSVP recorded",
                invite_id=invite_id,
                rsvp_status=invite.rsvp_status.value,
                guest_count=invite.guest_count,
                parking_required=invite.parking_required,
            )
            return RsvpConfirmation(
                invite_id=invite.id,
                rsvp_status=invite.rsvp_status,
                guest_count=invite.guest_count,
            )
