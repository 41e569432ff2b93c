"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from commentkit.config import (
    AuthSettings,
    EmailSettings,
    ModerationSettings,
    Settings,
    VerificationSettings,
)
from commentkit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Each settings section is also provided on its own so services depend
    only on the section they use.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email

    @provide
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        return settings.moderation

    @provide
    def provide_verification_settings(
        self, settings: Settings
    ) -> VerificationSettings:
        return settings.verification
