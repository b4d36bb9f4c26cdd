"""Invite repository interface."""

from abc import ABC, abstractmethod

from invitelink.domain.model.invite import Invite
from invitelink.domain.value import EventId, InviteId, RsvpStatus


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer and must make ``save``
    atomic per invite: either the whole snapshot is written or nothing is.
    """

    @abstractmethod
    async def find_by_id(
        self, invite_id: InviteId, for_update: bool = False
    ) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier
            for_update: Lock the record until the surrounding transaction ends
                (used by read-modify-write updates)

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, invite_id: InviteId) -> bool:
        """Check whether an invite ID is already taken."""
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Args:
            invite: The invite snapshot to save

        Returns:
            The saved invite
        """
        pass

    @abstractmethod
    async def find_by_event(
        self,
        event_id: EventId,
        status: RsvpStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites for one event with pagination, oldest first.

        Args:
            event_id: The owning event
            status: Optional RSVP status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def count_by_event(
        self, event_id: EventId, status: RsvpStatus | None = None
    ) -> int:
        """Count invites for one event.

        Args:
            event_id: The owning event
            status: Optional RSVP status filter

        Returns:
            Number of invites
        """
        pass
