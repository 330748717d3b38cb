"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from circle.config import Settings
from circle.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Settings to serve; loaded from the environment if omitted

    Returns:
        Configured DI container with production providers
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *providers,
        FastapiProvider(),
        context={Settings: settings or Settings()},
    )


def setup_di(app, container: AsyncContainer) -> None:
    """Attach a container to a FastAPI app, replacing any previous one.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
