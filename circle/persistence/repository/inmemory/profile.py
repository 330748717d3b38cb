"""In-memory profile repository for testing."""

from typing import Iterable, Optional

from circle.domain.repository.profile import ProfileRepository
from circle.domain.value import AuthorInfo, UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, AuthorInfo] = {}

    def add_profile(
        self, user_id: UserId, display_name: str, avatar_ref: Optional[str] = None
    ) -> None:
        """Register display info for a user."""
        self._profiles[user_id] = AuthorInfo(
            display_name=display_name, avatar_ref=avatar_ref
        )

    async def find_display_info(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, AuthorInfo]:
        """Batch lookup of display names and avatars."""
        return {uid: self._profiles[uid] for uid in user_ids if uid in self._profiles}
