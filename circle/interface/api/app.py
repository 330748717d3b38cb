"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from circle.config import Settings
from circle.interface.api.routes import comments, feed, health, toggles
from circle.util.di.container import create_container, setup_di
from circle.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the DI container on shutdown, disposing the database engine."""
    yield
    await app.state.dishka_container.close()
    logfire.info("DI container closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings to run with; loaded from the environment if omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Circle API",
        description="Community feed, group discussions and moderation",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,  # auth_token cookie
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, create_container(settings))

    app_instance.include_router(health.router)
    app_instance.include_router(feed.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(toggles.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
