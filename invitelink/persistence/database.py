"""PostgreSQL engine and transactions for the invite store.

Every request runs in one transaction. Row locks taken by
``PostgresInviteRepository.find_by_id(for_update=True)`` live until that
transaction ends, so ``session_scope`` is also what releases them.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from invitelink.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg engine from ``settings.database``."""
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions that keep loaded state after commit and flush only on demand."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """One request transaction: commit on success, roll back on any error.

    A rejected RSVP or scan raises before anything is written, so its
    rollback only drops the row lock.
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logfire.warn(
                "Invite transaction rolled back",
                error_type=type(e).__name__,
                error=str(e),
            )
            raise
        await session.commit()
