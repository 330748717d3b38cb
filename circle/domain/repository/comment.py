"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional

from circle.domain.model.comment import Comment
from circle.domain.value import (
    AttachmentKind,
    CommentId,
    CommentStatus,
    ContextSelector,
    UserId,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer and raise
    ``TransientError`` when the store cannot be reached.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_posts(
        self,
        context: ContextSelector,
        statuses: Iterable[CommentStatus],
    ) -> List[Comment]:
        """Find top-level posts of a context, newest first.

        Args:
            context: Feed or group selector
            statuses: Only posts in these statuses are returned

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        post_ids: List[CommentId],
        statuses: Iterable[CommentStatus],
    ) -> List[Comment]:
        """Find replies to any of the given posts, oldest first.

        Args:
            post_ids: Parent post IDs
            statuses: Only replies in these statuses are returned

        Returns:
            Replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_with_attachments(
        self,
        context: ContextSelector,
        kinds: Iterable[AttachmentKind],
        statuses: Iterable[CommentStatus],
    ) -> List[Comment]:
        """Find posts of a context carrying an attachment of the given kinds.

        Args:
            context: Feed or group selector
            kinds: Attachment kinds to include
            statuses: Only posts in these statuses are returned

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Raises:
            ConflictError: If a comment with the same ID already exists
        """
        pass

    @abstractmethod
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def mark_reported(
        self,
        comment_id: CommentId,
        reported_by: UserId,
        reported_at: datetime,
        reason: str,
        details: Optional[str] = None,
    ) -> bool:
        """Move a comment from ``active`` to ``reported``.

        This is a conditional update keyed on the current status: it only
        applies while the row is still ``active``. Concurrent callers race on
        the same row and exactly one of them wins.

        Returns:
            True if this call performed the transition, False otherwise
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Hard delete a comment and, if it is a post, all its replies.

        Returns:
            Number of rows removed
        """
        pass
