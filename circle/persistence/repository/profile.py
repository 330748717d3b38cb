"""PostgreSQL implementation of Profile repository."""

from typing import Dict, Iterable

from sqlalchemy import select

from circle.domain.repository import ProfileRepository
from circle.domain.value import AuthorInfo, UserId
from circle.persistence.mappers import row_to_author_info
from circle.persistence.repository.base import PostgresRepository
from circle.persistence.tables import profiles_table


class PostgresProfileRepository(PostgresRepository, ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    async def find_display_info(
        self, user_ids: Iterable[UserId]
    ) -> Dict[UserId, AuthorInfo]:
        """Batch lookup of display names and avatars."""
        ids = list(user_ids)
        if not ids:
            return {}
        stmt = select(profiles_table).where(profiles_table.c.user_id.in_(ids))
        result = await self._execute(stmt)
        return {
            UserId(row.user_id): row_to_author_info(row._asdict())
            for row in result.fetchall()
        }
