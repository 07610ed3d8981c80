"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from liftout.config import Settings
from liftout.util.di import PROVIDERS, ProdConfigProvider, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the application container.

    Production implementations are used throughout, except that
    ``data_source="memory"`` swaps persistence for the in-memory store.

    Args:
        settings: Settings to provide (read from the environment if omitted)

    Returns:
        Configured DI container
    """
    settings = settings or Settings()

    providers = []
    for base in PROVIDERS:
        use_mock = (
            getattr(base, "__mock_component__", None) == "persistence"
            and settings.data_source == "memory"
        )
        provider_class = get_provider(base, use_mock=use_mock)
        if provider_class is ProdConfigProvider:
            providers.append(ProdConfigProvider(settings))
        else:
            providers.append(provider_class())

    return make_async_container(*providers, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI app.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
