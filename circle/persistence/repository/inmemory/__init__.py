"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .membership import InMemoryGroupMembershipRepository
from .profile import InMemoryProfileRepository
from .toggle import InMemoryToggleRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryGroupMembershipRepository",
    "InMemoryProfileRepository",
    "InMemoryToggleRepository",
]
