"""Invite storage providers.

``PersistenceProvider`` is the mockable "persistence" component: production
wires PostgreSQL here, tests swap in the in-memory repository
(``tests/di/persistence.py``).
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from invitelink.config import Settings
from invitelink.domain.repository import InviteRepository
from invitelink.persistence.database import (
    create_engine,
    create_session_factory,
    session_scope,
)
from invitelink.persistence.repository import PostgresInviteRepository
from invitelink.util.di.base import ProviderBase
from invitelink.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Where invites are stored."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Invites in PostgreSQL, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        async with session_scope(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        return PostgresInviteRepository(session)
