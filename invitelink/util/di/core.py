"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from invitelink.config import CheckInSettings, QRSettings, Settings
from invitelink.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_qr_settings(self, settings: Settings) -> QRSettings:
        """Provide QR settings."""
        return settings.qr

    @provide(scope=Scope.APP)
    def provide_checkin_settings(self, settings: Settings) -> CheckInSettings:
        """Provide door check-in settings."""
        return settings.checkin
