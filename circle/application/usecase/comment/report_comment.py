"""Report comment use case."""

from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.error import ValidationError
from circle.domain.service import (
    AuthorizationService,
    CommentService,
    ModerationService,
)
from circle.domain.value import CommentId, Principal, ReportReason

MAX_REPORT_DETAILS_LENGTH = 2000


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    principal: Principal | None
    comment_id: UUID
    reason: str
    details: str | None = None


class ReportCommentResponse(BaseModel):
    """Report comment response.

    Reporting always succeeds for an existing comment; ``hidden`` tells
    whether this particular call moved it out of view.
    """

    comment_id: str
    hidden: bool


class ReportCommentUseCase(
    BaseUseCase[ReportCommentRequest, ReportCommentResponse]
):
    """Use case for reporting a post or reply."""

    def __init__(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize report comment use case.

        Args:
            comment_service: Comment domain service
            moderation_service: Moderation domain service
            authorization_service: Authorization domain service
        """
        self.comment_service = comment_service
        self.moderation_service = moderation_service
        self.authorization_service = authorization_service

    async def execute(self, request: ReportCommentRequest) -> ReportCommentResponse:
        """Execute report flow.

        A duplicate or late report is not an error: the caller sees success.

        Raises:
            NotAuthenticatedError: If anonymous
            ValidationError: If the reason is blank or too long, or the details
                are too long
            NotFoundError: If the comment does not exist
        """
        principal = self.authorization_service.ensure_can_report(request.principal)
        try:
            reason = ReportReason(request.reason)
        except ValueError as e:
            raise ValidationError("Report reason must be 1-200 characters") from e
        if request.details and len(request.details) > MAX_REPORT_DETAILS_LENGTH:
            raise ValidationError(
                f"Report details must be at most {MAX_REPORT_DETAILS_LENGTH} characters"
            )

        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        hidden = await self.moderation_service.report(
            comment,
            reporter_id=principal.id,
            reason=reason,
            details=request.details,
        )
        return ReportCommentResponse(comment_id=str(comment.id), hidden=hidden)
