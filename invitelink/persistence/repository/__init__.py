"""PostgreSQL repository implementations."""

from invitelink.persistence.repository.invite import PostgresInviteRepository

__all__ = [
    "PostgresInviteRepository",
]
