"""Edit comment use case."""

from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import AuthorizationService, CommentService
from circle.domain.value import CommentId, Principal

from .response import CommentResponse


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    principal: Principal | None
    comment_id: UUID
    body: str  # New body (required, cannot be blank)


EditCommentResponse = CommentResponse


class EditCommentUseCase(BaseUseCase[EditCommentRequest, EditCommentResponse]):
    """Use case for editing the body of a post or reply."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
            authorization_service: Authorization domain service
        """
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    async def execute(self, request: EditCommentRequest) -> EditCommentResponse:
        """Execute edit comment flow.

        Editing is allowed in any status, including reported.

        Raises:
            NotAuthenticatedError: If anonymous
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
            ValidationError: If the new body is blank
        """
        self.authorization_service.require_principal(request.principal, "edit a comment")
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        self.authorization_service.ensure_author(request.principal, comment, "edit")

        updated = await self.comment_service.edit_body(comment, request.body)
        return CommentResponse.from_comment(updated)
