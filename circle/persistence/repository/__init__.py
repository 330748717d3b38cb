"""PostgreSQL repository implementations."""

from circle.persistence.repository.comment import PostgresCommentRepository
from circle.persistence.repository.membership import PostgresGroupMembershipRepository
from circle.persistence.repository.profile import PostgresProfileRepository
from circle.persistence.repository.toggle import PostgresToggleRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresGroupMembershipRepository",
    "PostgresProfileRepository",
    "PostgresToggleRepository",
]
