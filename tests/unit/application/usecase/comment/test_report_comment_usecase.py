"""Unit tests for ReportCommentUseCase."""

from uuid import uuid4

import pytest

from circle.application.usecase.comment import (
    ReportCommentRequest,
    ReportCommentUseCase,
)
from circle.domain.error import NotAuthenticatedError, NotFoundError, ValidationError
from circle.domain.repository import CommentRepository
from circle.domain.value import CommentStatus
from tests.conftest import make_comment, make_principal
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReportCommentUseCase:
    """Tests for ReportCommentUseCase."""

    @pytest.mark.asyncio
    async def test_report_hides_comment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ReportCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())
        reporter = make_principal()

        # Act
        response = await use_case.execute(
            ReportCommentRequest(
                principal=reporter,
                comment_id=comment.id,
                reason="spam",
                details="  ",
            )
        )

        # Assert
        assert response.hidden is True
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.status == CommentStatus.REPORTED
        assert stored.reported_by == reporter.id
        assert stored.report_details is None

    @pytest.mark.asyncio
    async def test_duplicate_report_succeeds_without_change(self, unit_env):
        """The second reporter sees success; the first reporter is kept."""
        use_case = await unit_env.get(ReportCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())
        first, second = make_principal(), make_principal()

        await use_case.execute(
            ReportCommentRequest(principal=first, comment_id=comment.id, reason="spam")
        )
        response = await use_case.execute(
            ReportCommentRequest(principal=second, comment_id=comment.id, reason="rude")
        )

        assert response.hidden is False
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.reported_by == first.id
        assert stored.report_reason == "spam"

    @pytest.mark.asyncio
    async def test_author_may_report_own_comment(self, unit_env):
        use_case = await unit_env.get(ReportCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        principal = make_principal()
        comment = await comment_repo.insert(make_comment(author_id=principal.id))

        response = await use_case.execute(
            ReportCommentRequest(
                principal=principal, comment_id=comment.id, reason="posted by mistake"
            )
        )

        assert response.hidden is True

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(ReportCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ReportCommentRequest(
                    principal=make_principal(), comment_id=uuid4(), reason="spam"
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_is_rejected(self, unit_env):
        use_case = await unit_env.get(ReportCommentUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(
                ReportCommentRequest(principal=None, comment_id=uuid4(), reason="spam")
            )

    @pytest.mark.parametrize("reason", ["", "   ", "x" * 201])
    @pytest.mark.asyncio
    async def test_invalid_reason(self, unit_env, reason):
        use_case = await unit_env.get(ReportCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())

        with pytest.raises(ValidationError):
            await use_case.execute(
                ReportCommentRequest(
                    principal=make_principal(), comment_id=comment.id, reason=reason
                )
            )

        assert (await comment_repo.find_by_id(comment.id)).status == CommentStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_overlong_details(self, unit_env):
        """Details over the limit are a validation failure, not a crash."""
        use_case = await unit_env.get(ReportCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())

        with pytest.raises(ValidationError):
            await use_case.execute(
                ReportCommentRequest(
                    principal=make_principal(),
                    comment_id=comment.id,
                    reason="spam",
                    details="x" * 2001,
                )
            )

        assert (await comment_repo.find_by_id(comment.id)).status == CommentStatus.ACTIVE
