"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import AuthorizationService, CommentService
from circle.domain.value import CommentId, Principal


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    principal: Principal | None
    comment_id: UUID


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, None]):
    """Use case for hard deleting a post or reply."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            authorization_service: Authorization domain service
        """
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Deleting a post removes its replies as well.

        Raises:
            NotAuthenticatedError: If anonymous
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
        """
        self.authorization_service.require_principal(
            request.principal, "delete a comment"
        )
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        self.authorization_service.ensure_author(request.principal, comment, "delete")

        await self.comment_service.delete(comment)
