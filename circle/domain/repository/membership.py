"""Group membership repository interface."""

from abc import ABC, abstractmethod

from circle.domain.value import GroupId, UserId


class GroupMembershipRepository(ABC):
    """Read-only view over group membership, owned by the groups feature."""

    @abstractmethod
    async def is_member(self, group_id: GroupId, user_id: UserId) -> bool:
        """Check whether a user currently belongs to a group.

        Args:
            group_id: Group ID
            user_id: User ID

        Returns:
            True if the user is a current member
        """
        pass
