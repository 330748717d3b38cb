"""Unit tests for ModerationService."""

import asyncio
from uuid import uuid4

import pytest

from circle.domain.repository import CommentRepository
from circle.domain.service import FeedService, ModerationService
from circle.domain.value import (
    CommentStatus,
    ContextSelector,
    ReportReason,
    UserId,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReport:
    """Tests for report."""

    @pytest.mark.asyncio
    async def test_report_hides_active_comment(self, unit_env):
        """An active comment moves to reported with full metadata."""
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())
        reporter_id = UserId(uuid4())

        # Act
        hidden = await moderation_service.report(
            comment, reporter_id, ReportReason("spam"), details="  link farm "
        )

        # Assert
        assert hidden is True
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.status == CommentStatus.REPORTED
        assert stored.reported_by == reporter_id
        assert stored.reported_at is not None
        assert stored.report_reason == "spam"
        assert stored.report_details == "link farm"

    @pytest.mark.asyncio
    async def test_reported_comment_disappears_for_everyone(self, unit_env):
        """The reporter does not keep seeing what they reported."""
        moderation_service = await unit_env.get(ModerationService)
        feed_service = await unit_env.get(FeedService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())
        reporter_id = UserId(uuid4())

        await moderation_service.report(comment, reporter_id, ReportReason("rude"))

        for viewer in (reporter_id, comment.author_id, None):
            view = await feed_service.assemble(ContextSelector.feed(), viewer)
            assert view.posts == []

    @pytest.mark.asyncio
    async def test_second_report_is_a_noop(self, unit_env):
        """Reporting twice keeps the first reporter's metadata."""
        moderation_service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())
        first, second = UserId(uuid4()), UserId(uuid4())

        assert await moderation_service.report(comment, first, ReportReason("a"))
        assert not await moderation_service.report(comment, second, ReportReason("b"))

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.reported_by == first
        assert stored.report_reason == "a"

    @pytest.mark.asyncio
    async def test_approved_comment_is_not_reportable(self, unit_env):
        """Approved comments stay visible when reported."""
        moderation_service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment(status=CommentStatus.APPROVED))

        hidden = await moderation_service.report(
            comment, UserId(uuid4()), ReportReason("spam")
        )

        assert hidden is False
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.status == CommentStatus.APPROVED
        assert stored.reported_by is None

    @pytest.mark.asyncio
    async def test_concurrent_reports_record_one_reporter(self, unit_env):
        """Simultaneous reports: exactly one wins, the rest are no-ops."""
        moderation_service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())
        reporters = [UserId(uuid4()) for _ in range(10)]

        results = await asyncio.gather(
            *(
                moderation_service.report(comment, r, ReportReason(f"r{i}"))
                for i, r in enumerate(reporters)
            )
        )

        assert results.count(True) == 1
        stored = await comment_repo.find_by_id(comment.id)
        winner = reporters[results.index(True)]
        assert stored.reported_by == winner
        assert stored.report_reason == f"r{results.index(True)}"


class TestReportReason:
    """Tests for the ReportReason value object."""

    def test_reason_is_trimmed(self):
        assert ReportReason("  spam ").root == "spam"

    @pytest.mark.parametrize("reason", ["", "   ", "x" * 201])
    def test_reason_bounds(self, reason):
        with pytest.raises(ValueError):
            ReportReason(reason)
