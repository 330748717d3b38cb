"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Iterable, Optional

from circle.domain.error import ConflictError
from circle.domain.model.comment import Comment
from circle.domain.repository.comment import CommentRepository
from circle.domain.value import (
    AttachmentKind,
    CommentId,
    CommentStatus,
    ContextSelector,
    UserId,
)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Methods never suspend between reading and writing a row, so each call is
    atomic with respect to other tasks on the same event loop.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_posts(
        self,
        context: ContextSelector,
        statuses: Iterable[CommentStatus],
    ) -> list[Comment]:
        """Find top-level posts of a context, newest first."""
        statuses = set(statuses)
        posts = [
            c
            for c in self._comments.values()
            if c.is_post and c.context == context and c.status in statuses
        ]
        posts.sort(key=lambda c: c.created_at, reverse=True)
        return posts

    async def find_replies(
        self,
        post_ids: list[CommentId],
        statuses: Iterable[CommentStatus],
    ) -> list[Comment]:
        """Find replies to any of the given posts, oldest first."""
        statuses = set(statuses)
        parents = set(post_ids)
        replies = [
            c
            for c in self._comments.values()
            if c.parent_id in parents and c.status in statuses
        ]
        replies.sort(key=lambda c: c.created_at)
        return replies

    async def find_with_attachments(
        self,
        context: ContextSelector,
        kinds: Iterable[AttachmentKind],
        statuses: Iterable[CommentStatus],
    ) -> list[Comment]:
        """Find posts of a context carrying an attachment of the given kinds."""
        kinds = set(kinds)
        posts = [
            post
            for post in await self.find_posts(context, statuses)
            if post.attachment is not None and post.attachment.kind in kinds
        ]
        return posts

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        if comment.id in self._comments:
            raise ConflictError("Comment", str(comment.id))
        self._comments[comment.id] = comment
        return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.evolve(body=body)
        self._comments[comment_id] = updated
        return updated

    async def mark_reported(
        self,
        comment_id: CommentId,
        reported_by: UserId,
        reported_at: datetime,
        reason: str,
        details: Optional[str] = None,
    ) -> bool:
        """Conditionally move a comment from active to reported."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.status != CommentStatus.ACTIVE:
            return False
        self._comments[comment_id] = comment.evolve(
            status=CommentStatus.REPORTED,
            reported_by=reported_by,
            reported_at=reported_at,
            report_reason=reason,
            report_details=details,
        )
        return True

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and its replies (hard delete)."""
        doomed = [
            c.id
            for c in self._comments.values()
            if c.id == comment_id or c.parent_id == comment_id
        ]
        for cid in doomed:
            del self._comments[cid]
        return len(doomed)
