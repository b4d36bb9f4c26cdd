"""In-memory invite repository for testing and local runs."""

from typing import Optional

from invitelink.domain.model.invite import Invite
from invitelink.domain.repository.invite import InviteRepository
from invitelink.domain.value import EventId, InviteId, RsvpStatus


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository.

    Snapshots are immutable, so replacing the dict entry is an atomic save.
    ``for_update`` is a no-op: serialization comes from the store's locks.
    """

    def __init__(self) -> None:
        self._invites: dict[InviteId, Invite] = {}

    async def find_by_id(
        self, invite_id: InviteId, for_update: bool = False
    ) -> Optional[Invite]:
        """Find an invite by ID."""
        return self._invites.get(invite_id)

    async def exists(self, invite_id: InviteId) -> bool:
        """Check whether an invite ID is already taken."""
        return invite_id in self._invites

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update)."""
        self._invites[invite.id] = invite
        return invite

    async def find_by_event(
        self,
        event_id: EventId,
        status: Optional[RsvpStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites for an event with pagination."""
        matches = [
            invite
            for invite in self._invites.values()
            if invite.event_id == event_id
            and (status is None or invite.rsvp_status == status)
        ]

        # Oldest first, matching door-list order
        matches.sort(key=lambda inv: inv.created_at)

        return matches[offset : offset + limit]

    async def count_by_event(
        self, event_id: EventId, status: Optional[RsvpStatus] = None
    ) -> int:
        """Count invites for an event."""
        return sum(
            1
            for invite in self._invites.values()
            if invite.event_id == event_id
            and (status is None or invite.rsvp_status == status)
        )
