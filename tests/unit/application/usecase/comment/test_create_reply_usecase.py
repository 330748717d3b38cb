"""Unit tests for CreateReplyUseCase."""

import pytest

from circle.application.usecase.comment import CreateReplyRequest, CreateReplyUseCase
from circle.domain.error import NotAuthenticatedError, NotFoundError, ValidationError
from circle.domain.repository import CommentRepository
from circle.domain.value import CommentStatus
from tests.conftest import make_comment, make_principal
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateReplyUseCase:
    """Tests for CreateReplyUseCase."""

    @pytest.mark.asyncio
    async def test_reply_inherits_post_context(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateReplyUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment())
        principal = make_principal()

        # Act
        response = await use_case.execute(
            CreateReplyRequest(principal=principal, post_id=post.id, body="Agreed")
        )

        # Assert
        assert response.parent_id == str(post.id)
        assert response.context_type == post.context_type
        assert response.author_id == str(principal.id)

    @pytest.mark.asyncio
    async def test_anonymous_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateReplyUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment())

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(
                CreateReplyRequest(principal=None, post_id=post.id, body="Hi")
            )

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_rejected(self, unit_env):
        """Threads are one level deep."""
        use_case = await unit_env.get(CreateReplyUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment())
        reply = await comment_repo.insert(make_comment(parent_id=post.id, minutes=1))

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateReplyRequest(
                    principal=make_principal(), post_id=reply.id, body="Nested"
                )
            )

    @pytest.mark.asyncio
    async def test_reply_to_hidden_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(CreateReplyUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await comment_repo.insert(make_comment(status=CommentStatus.REPORTED))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateReplyRequest(principal=make_principal(), post_id=post.id, body="Hm")
            )
