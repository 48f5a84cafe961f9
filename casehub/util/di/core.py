"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from casehub.config import DEFAULT_JWT_SECRET, ApiAccessSettings, AuthSettings, Settings
from casehub.util.di.base import ProviderBase
from casehub.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_api_access_settings(self, settings: Settings) -> ApiAccessSettings:
        """Provide the static API access configuration."""
        return settings.api_access
