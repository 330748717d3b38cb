"""Logging configuration for the application."""

import logging
import sys

from circle.config import Settings

# Libraries that log through stdlib logging, quieted outside debug
NOISY_LOGGERS = ("httpx", "httpcore", "asyncpg", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process.

    Domain events go through logfire; this only covers libraries that log
    through ``logging`` (uvicorn, SQLAlchemy, httpx).

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    quiet = logging.DEBUG if settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)
    # SQL echo is controlled by the engine; keep its logger in step
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
