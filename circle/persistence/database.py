"""Database engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from circle.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    ``pool_pre_ping`` drops dead connections before use, so a database
    restart shows up as one failed request rather than a poisoned pool.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=settings.database.pool_timeout_seconds,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Sessions flush explicitly in the repositories and are committed once per
    request by the DI provider.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
