"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from circle.config import AuthSettings, FeedSettings, Settings, ToggleSettings
from circle.util.clock import MonotonicClock
from circle.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    ``Settings`` comes from the container context, so the app and tests can
    build a container around settings they already hold.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Provide feed settings."""
        return settings.feed

    @provide(scope=Scope.APP)
    def provide_toggle_settings(self, settings: Settings) -> ToggleSettings:
        """Provide toggle settings."""
        return settings.toggles

    @provide(scope=Scope.APP)
    def provide_clock(self) -> MonotonicClock:
        """Provide the process-wide clock; one instance keeps timestamps strictly increasing."""
        return MonotonicClock()
