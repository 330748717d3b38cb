"""In-memory group membership repository for testing."""

from circle.domain.repository.membership import GroupMembershipRepository
from circle.domain.value import GroupId, UserId


class InMemoryGroupMembershipRepository(GroupMembershipRepository):
    """In-memory implementation of GroupMembershipRepository for testing."""

    def __init__(self) -> None:
        self._members: set[tuple[GroupId, UserId]] = set()

    def add_member(self, group_id: GroupId, user_id: UserId) -> None:
        """Add a user to a group."""
        self._members.add((group_id, user_id))

    def remove_member(self, group_id: GroupId, user_id: UserId) -> None:
        """Remove a user from a group."""
        self._members.discard((group_id, user_id))

    async def is_member(self, group_id: GroupId, user_id: UserId) -> bool:
        """Check whether a user currently belongs to a group."""
        return (group_id, user_id) in self._members
