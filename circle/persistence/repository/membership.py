"""PostgreSQL implementation of GroupMembership repository."""

from sqlalchemy import select

from circle.domain.repository import GroupMembershipRepository
from circle.domain.value import GroupId, UserId
from circle.persistence.repository.base import PostgresRepository
from circle.persistence.tables import group_members_table


class PostgresGroupMembershipRepository(PostgresRepository, GroupMembershipRepository):
    """PostgreSQL implementation of GroupMembershipRepository."""

    async def is_member(self, group_id: GroupId, user_id: UserId) -> bool:
        """Check whether a user currently belongs to a group."""
        stmt = (
            select(group_members_table.c.user_id)
            .where(group_members_table.c.group_id == group_id)
            .where(group_members_table.c.user_id == user_id)
        )
        result = await self._execute(stmt)
        return result.fetchone() is not None
