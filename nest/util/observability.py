"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Comment created", comment_id=comment.id, path=str(path))

    # Manual spans for critical operations
    with logfire.span("comment_service.create_comment", post_id=post_id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from nest.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs: dict[str, Any] = {
        "service_name": "nest-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Traces every request with its duration, errors and route metadata.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")
