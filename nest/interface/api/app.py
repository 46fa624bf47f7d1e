"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from nest.interface.api.routes import comments, health, posts
from nest.util.di.container import create_container, setup_di
from nest.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use; the production container when None
    """
    app_instance = FastAPI(
        title="Nest API",
        description="Blog posts with nested, materialized-path comment threads",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
