"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from circle.domain.error import NotFoundError, ValidationError
from circle.domain.repository import CommentRepository
from circle.domain.service import CommentService
from circle.domain.value import (
    AttachmentKind,
    CommentId,
    CommentStatus,
    ContextSelector,
    ContextType,
    GroupId,
    UserId,
)
from circle.domain.attachment import normalize_attachment
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_feed_post(self, unit_env):
        """A feed post is active, top-level and persisted."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())

        # Act
        post = await comment_service.create_post(
            author_id, ContextSelector.feed(), "  First post  "
        )

        # Assert
        assert post.body == "First post"
        assert post.status == CommentStatus.ACTIVE
        assert post.is_post
        assert post.context_type == ContextType.FEED
        assert post.context_id is None
        assert await comment_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_create_group_post_with_attachment(self, unit_env):
        """Group posts keep their context and attachment."""
        comment_service = await unit_env.get(CommentService)
        group_id = GroupId(uuid4())
        attachment = normalize_attachment(
            "https://vimeo.com/123", AttachmentKind.VIDEO
        )

        post = await comment_service.create_post(
            UserId(uuid4()), ContextSelector.group(group_id), "Watch this", attachment
        )

        assert post.context_id == group_id
        assert post.attachment.embed_url == "https://player.vimeo.com/video/123"

    @pytest.mark.asyncio
    async def test_blank_body_is_rejected(self, unit_env):
        """Whitespace-only bodies are a validation failure."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="Comment body is required"):
            await comment_service.create_post(
                UserId(uuid4()), ContextSelector.feed(), "   "
            )

    @pytest.mark.asyncio
    async def test_timestamps_are_strictly_increasing(self, unit_env):
        """Posts created back to back never share a created_at."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())

        posts = [
            await comment_service.create_post(author_id, ContextSelector.feed(), f"#{i}")
            for i in range(5)
        ]

        stamps = [p.created_at for p in posts]
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == len(stamps)


class TestCreateReply:
    """Tests for create_reply."""

    @pytest.mark.asyncio
    async def test_reply_inherits_post_context(self, unit_env):
        """Replies live in the same context as their post."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        group_id = GroupId(uuid4())
        post = await comment_repo.insert(make_comment(group_id=group_id))

        reply = await comment_service.create_reply(UserId(uuid4()), post.id, "Agreed")

        assert reply.parent_id == post.id
        assert reply.context_id == group_id
        assert reply.attachment is None

    @pytest.mark.asyncio
    async def test_reply_to_missing_post(self, unit_env):
        """Replying to a post that does not exist is NotFound."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_reply(
                UserId(uuid4()), CommentId(uuid4()), "Hello?"
            )

    @pytest.mark.asyncio
    async def test_reply_to_reported_post(self, unit_env):
        """Hidden posts cannot be replied to."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment(status=CommentStatus.REPORTED))

        with pytest.raises(NotFoundError):
            await comment_service.create_reply(UserId(uuid4()), post.id, "Hi")

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_rejected(self, unit_env):
        """Nesting stops at one level."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment())
        reply = await comment_repo.insert(make_comment(parent_id=post.id, minutes=1))

        with pytest.raises(ValidationError, match="top-level posts"):
            await comment_service.create_reply(UserId(uuid4()), reply.id, "Nested")


class TestEditAndDelete:
    """Tests for edit_body and delete."""

    @pytest.mark.asyncio
    async def test_edit_changes_only_the_body(self, unit_env):
        """Status, context and attachment survive an edit."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment(status=CommentStatus.APPROVED))

        edited = await comment_service.edit_body(post, " Edited ")

        assert edited.body == "Edited"
        assert edited.status == CommentStatus.APPROVED
        assert edited.created_at == post.created_at

    @pytest.mark.asyncio
    async def test_edit_to_blank_is_rejected(self, unit_env):
        """Blank edits fail and leave the stored body alone."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment(body="Original"))

        with pytest.raises(ValidationError):
            await comment_service.edit_body(post, "  ")

        assert (await comment_repo.find_by_id(post.id)).body == "Original"

    @pytest.mark.asyncio
    async def test_delete_post_removes_replies(self, unit_env):
        """Deleting a post deletes its replies with it."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment())
        reply = await comment_repo.insert(make_comment(parent_id=post.id, minutes=1))
        other = await comment_repo.insert(make_comment(minutes=2))

        await comment_service.delete(post)

        assert await comment_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(other.id) is not None

    @pytest.mark.asyncio
    async def test_get_missing_comment(self, unit_env):
        """get_comment raises NotFound for unknown ids."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.get_comment(CommentId(uuid4()))
