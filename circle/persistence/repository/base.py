"""Shared helpers for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.exc import DBAPIError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from circle.domain.error import TransientError

# Driver failures and pool exhaustion both mean the store is unreachable
UNAVAILABLE_ERRORS = (DBAPIError, PoolTimeoutError)


class PostgresRepository:
    """Base for PostgreSQL repositories.

    Store failures surface as ``TransientError`` so callers can tell an
    unreachable store from an empty result.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Any):
        try:
            return await self.session.execute(stmt)
        except UNAVAILABLE_ERRORS as e:
            logfire.error(
                "Database call failed", error=str(getattr(e, "orig", None) or e)
            )
            raise TransientError("The database is unavailable, please retry") from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except UNAVAILABLE_ERRORS as e:
            logfire.error(
                "Database flush failed", error=str(getattr(e, "orig", None) or e)
            )
            raise TransientError("The database is unavailable, please retry") from e
