"""Unit tests for PostgreSQL repository error handling and row mapping."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from circle.domain.error import ConflictError, TransientError
from circle.domain.value import (
    Attachment,
    AttachmentKind,
    CommentId,
    CommentStatus,
    ContextSelector,
    GroupId,
)
from circle.persistence.mappers import comment_to_dict, row_to_comment
from circle.persistence.repository import PostgresCommentRepository
from tests.conftest import make_comment


class FailingSession:
    """AsyncSession stand-in whose every statement fails."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def execute(self, stmt):
        raise self.error

    async def flush(self):
        pass


def connection_refused() -> OperationalError:
    return OperationalError("SELECT", {}, Exception("connection refused"))


class TestPostgresCommentRepositoryErrors:
    """Store failures are reported, never turned into empty results."""

    @pytest.mark.asyncio
    async def test_unreachable_store_on_read(self):
        repo = PostgresCommentRepository(FailingSession(connection_refused()))

        with pytest.raises(TransientError):
            await repo.find_posts(ContextSelector.feed(), [CommentStatus.ACTIVE])

    @pytest.mark.asyncio
    async def test_unreachable_store_on_insert(self):
        repo = PostgresCommentRepository(FailingSession(connection_refused()))

        with pytest.raises(TransientError):
            await repo.insert(make_comment())

    @pytest.mark.asyncio
    async def test_exhausted_pool_is_transient(self):
        repo = PostgresCommentRepository(
            FailingSession(PoolTimeoutError("QueuePool limit reached"))
        )

        with pytest.raises(TransientError):
            await repo.find_by_id(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_duplicate_insert_is_conflict(self):
        comment = make_comment()
        repo = PostgresCommentRepository(
            FailingSession(IntegrityError("INSERT", {}, Exception("duplicate key")))
        )

        with pytest.raises(ConflictError) as exc_info:
            await repo.insert(comment)

        assert exc_info.value.existing_id == str(comment.id)

    @pytest.mark.asyncio
    async def test_no_replies_skips_query(self):
        """An empty post list never reaches the database."""
        repo = PostgresCommentRepository(FailingSession(connection_refused()))

        assert await repo.find_replies([], [CommentStatus.ACTIVE]) == []


class TestCommentMapping:
    """Tests for comment row mapping."""

    def test_group_reply_with_report_survives_mapping(self):
        post_id = CommentId(uuid4())
        comment = make_comment(
            parent_id=post_id,
            group_id=GroupId(uuid4()),
            status=CommentStatus.REPORTED,
            report_details="Off topic",
        )

        row = comment_to_dict(comment)

        assert row["attachment_kind"] is None
        assert row["status"] == "reported"
        assert row_to_comment(row) == comment

    def test_attachment_is_flattened(self):
        comment = make_comment(
            attachment=Attachment(
                kind=AttachmentKind.DOCUMENT, url="https://x.org/a.pdf", name="a.pdf"
            )
        )

        row = comment_to_dict(comment)

        assert row["attachment_kind"] == "document"
        assert row["attachment_name"] == "a.pdf"
        assert row_to_comment(row).attachment == comment.attachment

    def test_string_ids_from_driver(self):
        comment = make_comment()
        row = comment_to_dict(comment)
        row["id"] = str(row["id"])
        row["author_id"] = str(row["author_id"])

        assert row_to_comment(row).id == comment.id
