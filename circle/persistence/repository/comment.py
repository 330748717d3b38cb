"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import desc, or_, select, update
from sqlalchemy.exc import IntegrityError

from circle.domain.error import ConflictError, TransientError
from circle.domain.model import Comment
from circle.domain.repository import CommentRepository
from circle.domain.value import (
    AttachmentKind,
    CommentId,
    CommentStatus,
    ContextSelector,
    UserId,
)
from circle.persistence.mappers import comment_to_dict, row_to_comment
from circle.persistence.repository.base import (
    UNAVAILABLE_ERRORS,
    PostgresRepository,
)
from circle.persistence.tables import comments_table


class PostgresCommentRepository(PostgresRepository, CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def _in_context(self, stmt, context: ContextSelector):
        stmt = stmt.where(comments_table.c.context_type == context.context_type.value)
        if context.context_id is None:
            return stmt.where(comments_table.c.context_id.is_(None))
        return stmt.where(comments_table.c.context_id == context.context_id)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_posts(
        self,
        context: ContextSelector,
        statuses: Iterable[CommentStatus],
    ) -> List[Comment]:
        """Find top-level posts of a context, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.status.in_([s.value for s in statuses]))
        )
        stmt = self._in_context(stmt, context).order_by(
            desc(comments_table.c.created_at)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(
        self,
        post_ids: List[CommentId],
        statuses: Iterable[CommentStatus],
    ) -> List[Comment]:
        """Find replies to any of the given posts, oldest first."""
        if not post_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(post_ids))
            .where(comments_table.c.status.in_([s.value for s in statuses]))
            .order_by(comments_table.c.created_at)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_with_attachments(
        self,
        context: ContextSelector,
        kinds: Iterable[AttachmentKind],
        statuses: Iterable[CommentStatus],
    ) -> List[Comment]:
        """Find posts of a context carrying an attachment of the given kinds."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.attachment_kind.in_([k.value for k in kinds]))
            .where(comments_table.c.status.in_([s.value for s in statuses]))
        )
        stmt = self._in_context(stmt, context).order_by(
            desc(comments_table.c.created_at)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        try:
            await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError("Comment", str(comment.id)) from e
        except UNAVAILABLE_ERRORS as e:
            raise TransientError("The database is unavailable, please retry") from e
        await self._flush()
        return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(body=body)
            .returning(comments_table)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self._flush()
        return row_to_comment(row._asdict())

    async def mark_reported(
        self,
        comment_id: CommentId,
        reported_by: UserId,
        reported_at: datetime,
        reason: str,
        details: Optional[str] = None,
    ) -> bool:
        """Conditionally move a comment from active to reported.

        The status check and the write are one statement, so Postgres row
        locking decides the winner between concurrent reporters.
        """
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.status == CommentStatus.ACTIVE.value)
            .values(
                status=CommentStatus.REPORTED.value,
                reported_by=reported_by,
                reported_at=reported_at,
                report_reason=reason,
                report_details=details,
            )
            .returning(comments_table.c.id)
        )
        result = await self._execute(stmt)
        transitioned = result.fetchone() is not None
        await self._flush()
        return transitioned

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and its replies (hard delete)."""
        stmt = comments_table.delete().where(
            or_(
                comments_table.c.id == comment_id,
                comments_table.c.parent_id == comment_id,
            )
        )
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount or 0
