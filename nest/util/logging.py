"""Logging configuration for the application."""

import logging
import sys

from nest.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up stdlib logging with a level based on environment. Structured
    application events go through logfire; this covers library loggers.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    logging.getLogger("nest").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
