"""Invite store domain service.

Single source of truth for invite records. All mutations go through
``update`` so that writes to one invite are serialized while different
invites proceed independently.
"""

from collections.abc import Callable
from datetime import datetime

import logfire

from invitelink.domain.error import InvalidInputError, NotFoundError
from invitelink.domain.model.invite import (
    EVENT_ID_MAX_LENGTH,
    GUEST_NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    Invite,
)
from invitelink.domain.repository import InviteRepository
from invitelink.domain.value import EventId, InviteId, RsvpStatus, new_invite_id
from invitelink.util.concurrency import KeyedLock

from .base import Service

Mutator = Callable[[Invite], Invite]

_MAX_ID_ATTEMPTS = 3


class InviteStore(Service):
    """Domain service owning invite records and their lifecycle state."""

    def __init__(self, invite_repository: InviteRepository, locks: KeyedLock) -> None:
        """Initialize invite store.

        Args:
            invite_repository: Invite repository
            locks: Process-wide per-invite locks
        """
        self.invite_repository = invite_repository
        self.locks = locks

    async def create(
        self,
        event_id: str,
        guest_name: str,
        phone: str,
        allowed_plus_ones: int,
    ) -> Invite:
        """Create a new pending invite.

        Args:
            event_id: Owning event reference
            guest_name: Principal guest name
            phone: Principal guest phone
            allowed_plus_ones: Plus-one ceiling, fixed for the invite's life

        Returns:
            Created invite

        Raises:
            InvalidInputError: If a required field is empty or too long, or the
                ceiling is negative
        """
        with logfire.span(
            "invite_store.create",
            event_id=event_id,
            allowed_plus_ones=allowed_plus_ones,
        ):
            guest_name = (guest_name or "").strip()
            phone = (phone or "").strip()
            event_id = (event_id or "").strip()

            if not guest_name:
                raise InvalidInputError("Guest name is required")
            if not phone:
                raise InvalidInputError("Phone is required")
            if not event_id:
                raise InvalidInputError("Event ID is required")
            if allowed_plus_ones < 0:
                raise InvalidInputError("Allowed plus-ones cannot be negative")
            for field, value, limit in (
                ("Event ID", event_id, EVENT_ID_MAX_LENGTH),
                ("Guest name", guest_name, GUEST_NAME_MAX_LENGTH),
                ("Phone", phone, PHONE_MAX_LENGTH),
            ):
                if len(value) > limit:
                    raise InvalidInputError(
                        f"{field} is too long ({len(value)} > {limit} characters)"
                    )

            invite_id = await self._allocate_id()
            invite = Invite(
                id=invite_id,
                event_id=EventId(event_id),
                guest_name=guest_name,
                phone=phone,
                allowed_plus_ones=allowed_plus_ones,
                rsvp_status=RsvpStatus.PENDING,
                created_at=datetime.now(),
            )

            saved = await self.invite_repository.save(invite)
            logfire.info(
                "Invite created",
                invite_id=saved.id,
                event_id=event_id,
                allowed_plus_ones=allowed_plus_ones,
            )
            return saved

    async def get(self, invite_id: InviteId) -> Invite:
        """Get invite by ID.

        Raises:
            NotFoundError: If invite doesn't exist
        """
        invite = await self.invite_repository.find_by_id(invite_id)
        if invite is None:
            logfire.warn("Invite not found", invite_id=invite_id)
            raise NotFoundError("Invite", invite_id)
        return invite

    async def update(self, invite_id: InviteId, mutator: Mutator) -> Invite:
        """Apply one atomic mutation to an invite.

        The mutator receives the latest snapshot and returns the new one. If
        it raises, nothing is written. Concurrent updates to the same invite
        run one after another.

        Args:
            invite_id: Invite to mutate
            mutator: Pure function from current snapshot to new snapshot

        Returns:
            The saved snapshot

        Raises:
            NotFoundError: If invite doesn't exist
            DomainError: Whatever the mutator raises
        """
        async with self.locks.hold(invite_id):
            invite = await self.invite_repository.find_by_id(
                invite_id, for_update=True
            )
            if invite is None:
                logfire.warn("Invite not found for update", invite_id=invite_id)
                raise NotFoundError("Invite", invite_id)

            updated = mutator(invite)
            return await self.invite_repository.save(updated)

    async def list_for_event(
        self,
        event_id: EventId,
        status: RsvpStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Invite], int]:
        """List invites of one event.

        Returns:
            Page of invites and the total matching count
        """
        with logfire.span(
            "invite_store.list_for_event",
            event_id=event_id,
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            invites = await self.invite_repository.find_by_event(
                event_id, status, limit, offset
            )
            total = await self.invite_repository.count_by_event(event_id, status)
            logfire.info(
                "Event invites listed",
                event_id=event_id,
                count=len(invites),
                total=total,
            )
            return invites, total

    async def _allocate_id(self) -> InviteId:
        """Draw an invite ID that has never been used."""
        for _ in range(_MAX_ID_ATTEMPTS):
            invite_id = new_invite_id()
            if not await self.invite_repository.exists(invite_id):
                return invite_id
            logfire.warn("Invite ID collision", invite_id=invite_id)
        raise RuntimeError("Could not allocate a unique invite ID")
