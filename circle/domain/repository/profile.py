"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable

from circle.domain.value import AuthorInfo, UserId


class ProfileRepository(ABC):
    """Read-only lookup of member display information."""

    @abstractmethod
    async def find_display_info(
        self, user_ids: Iterable[UserId]
    ) -> Dict[UserId, AuthorInfo]:
        """Batch lookup of display names and avatars.

        Users without a profile are simply absent from the result.

        Args:
            user_ids: Users to look up

        Returns:
            Mapping of user ID to display info
        """
        pass
