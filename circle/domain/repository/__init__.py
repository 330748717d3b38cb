"""Repository interfaces for the Circle domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from circle.domain.repository.comment import CommentRepository
from circle.domain.repository.membership import GroupMembershipRepository
from circle.domain.repository.profile import ProfileRepository
from circle.domain.repository.toggle import ToggleRepository

__all__ = [
    "CommentRepository",
    "GroupMembershipRepository",
    "ProfileRepository",
    "ToggleRepository",
]
