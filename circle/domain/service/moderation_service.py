"""Moderation domain service."""

import logfire

from circle.domain.model.comment import Comment
from circle.domain.repository import CommentRepository
from circle.domain.value import ReportReason, UserId
from circle.util.clock import MonotonicClock

from .base import Service


class ModerationService(Service):
    """Status transitions driven by members.

    The only transition owned here is ``active -> reported``. ``approved``
    comments are left alone and ``reported`` comments stay reported; both
    are handled by the external moderation tooling.
    """

    def __init__(
        self, comment_repository: CommentRepository, clock: MonotonicClock
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            clock: Server clock assigning reported_at
        """
        self.comment_repository = comment_repository
        self.clock = clock

    async def report(
        self,
        comment: Comment,
        reporter_id: UserId,
        reason: ReportReason,
        details: str | None = None,
    ) -> bool:
        """Report a comment, hiding it from every feed.

        The update is conditional on the row still being ``active``, so
        concurrent reports of the same comment record exactly one reporter.
        Losing the race, or reporting a comment that is not ``active``, is a
        silent no-op.

        Args:
            comment: Comment being reported
            reporter_id: Reporting user
            reason: Short reason
            details: Optional free text

        Returns:
            True if this call hid the comment, False if it was a no-op
        """
        with logfire.span(
            "moderation_service.report",
            comment_id=str(comment.id),
            reporter_id=str(reporter_id),
            status=comment.status.value,
        ):
            if not comment.status.is_reportable:
                logfire.info(
                    "Report ignored - comment not active",
                    comment_id=str(comment.id),
                    status=comment.status.value,
                )
                return False

            details = details.strip() if details and details.strip() else None
            transitioned = await self.comment_repository.mark_reported(
                comment.id,
                reported_by=reporter_id,
                reported_at=self.clock.now(),
                reason=reason.root,
                details=details,
            )
            if transitioned:
                logfire.info(
                    "Comment reported",
                    comment_id=str(comment.id),
                    reporter_id=str(reporter_id),
                    reason=reason.root,
                )
            else:
                logfire.info(
                    "Report ignored - already transitioned",
                    comment_id=str(comment.id),
                )
            return transitioned
