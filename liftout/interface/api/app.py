"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from liftout.config import Settings
from liftout.interface.api.errors import register_error_handlers
from liftout.interface.api.routes import (
    calendar,
    company_invitations,
    health,
    invites,
    matching,
    opportunities,
    teams,
    users,
)
from liftout.util.di.container import create_container, setup_di
from liftout.util.observability import instrument_fastapi, instrument_httpx


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this; start_app.py does so
    in production.

    Args:
        container: DI container to use (built from settings if omitted)
        settings: Application settings (read from the environment if omitted)

    Returns:
        Configured application
    """
    settings = settings or Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Liftout API",
        description="Backend API for Liftout - a marketplace where companies hire whole teams",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container(settings))
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(matching.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(company_invitations.router)
    app_instance.include_router(teams.router)
    app_instance.include_router(opportunities.router)
    app_instance.include_router(calendar.router)
    app_instance.include_router(users.router)

    return app_instance


# Logfire must be configured before this module is imported
app = create_app()
