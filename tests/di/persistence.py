"""Mock persistence providers for testing."""

from dishka import Scope, provide

from invitelink.domain.repository import InviteRepository
from invitelink.persistence.repository.inmemory import InMemoryInviteRepository
from invitelink.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory repository.

    APP scope keeps one repository per container, so a multi-request E2E flow
    sees its own writes. Every test builds a fresh container, which keeps
    tests isolated from each other.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invite_repository(self) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository()
