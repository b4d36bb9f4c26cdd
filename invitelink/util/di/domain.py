"""Domain layer DI providers."""

from dishka import Scope, provide

from invitelink.config import QRSettings
from invitelink.domain.repository import InviteRepository
from invitelink.domain.service import (
    CheckInCoordinator,
    InviteStore,
    QRCodec,
    RsvpProcessor,
)
from invitelink.util.concurrency import KeyedLock
from invitelink.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The per-invite lock table is APP-scoped so that every request in the
    process serializes on the same locks.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_invite_locks(self) -> KeyedLock:
        """Provide the process-wide per-invite lock table."""
        return KeyedLock()

    @provide(scope=Scope.APP)
    def get_qr_codec(self, qr_settings: QRSettings) -> QRCodec:
        """Provide QR payload codec."""
        return QRCodec(qr_settings=qr_settings)

    @provide
    def get_invite_store(
        self, invite_repository: InviteRepository, locks: KeyedLock
    ) -> InviteStore:
        """Provide invite store."""
        return InviteStore(invite_repository=invite_repository, locks=locks)

    @provide
    def get_rsvp_processor(self, invite_store: InviteStore) -> RsvpProcessor:
        """Provide RSVP domain service."""
        return RsvpProcessor(invite_store=invite_store)

    @provide
    def get_checkin_coordinator(self, invite_store: InviteStore) -> CheckInCoordinator:
        """Provide check-in domain service."""
        return CheckInCoordinator(invite_store=invite_store)
