"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from liftout.config import (
    AuthSettings,
    EmailSettings,
    InvitationSettings,
    MatchingSettings,
    Settings,
)
from liftout.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Provides settings and their sections.

    Settings are read from the environment unless an instance is passed
    in, which tests use to pin configuration.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self._settings or Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_matching_settings(self, settings: Settings) -> MatchingSettings:
        return settings.matching

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email
