"""PostgreSQL implementation of Invite repository."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from invitelink.domain.model import Invite
from invitelink.domain.repository import InviteRepository
from invitelink.domain.value import EventId, InviteId, RsvpStatus
from invitelink.persistence.mappers import invite_to_dict, row_to_invite
from invitelink.persistence.tables import invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, invite_id: InviteId, for_update: bool = False
    ) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up
            for_update: Take a row lock (SELECT ... FOR UPDATE) held until
                the request transaction commits or rolls back

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def exists(self, invite_id: InviteId) -> bool:
        """Check whether an invite ID is already taken.

        Args:
            invite_id: Invite ID to check

        Returns:
            True if a row exists
        """
        stmt = select(invites_table.c.id).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Args:
            invite: Invite to save

        Returns:
            Saved invite
        """
        invite_dict = invite_to_dict(invite)

        if await self.exists(invite.id):
            stmt = (
                update(invites_table)
                .where(invites_table.c.id == invite.id)
                .values(**invite_dict)
            )
        else:
            stmt = insert(invites_table).values(**invite_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invite

    async def find_by_event(
        self,
        event_id: EventId,
        status: Optional[RsvpStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites for an event with pagination.

        Args:
            event_id: Owning event
            status: Optional filter by RSVP status
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of matching invites, oldest first
        """
        stmt = (
            select(invites_table)
            .where(invites_table.c.event_id == event_id)
            .order_by(invites_table.c.created_at.asc())
            .limit(limit)
            .offset(offset)
        )

        if status:
            stmt = stmt.where(invites_table.c.rsvp_status == status.value)

        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invite(dict(row)) for row in rows]

    async def count_by_event(
        self, event_id: EventId, status: Optional[RsvpStatus] = None
    ) -> int:
        """Count invites for an event.

        Args:
            event_id: Owning event
            status: Optional filter by RSVP status

        Returns:
            Count of matching invites
        """
        stmt = (
            select(func.count())
            .select_from(invites_table)
            .where(invites_table.c.event_id == event_id)
        )

        if status:
            stmt = stmt.where(invites_table.c.rsvp_status == status.value)

        result = await self.session.execute(stmt)
        return result.scalar() or 0
