"""Create reply use case."""

from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import AuthorizationService, CommentService
from circle.domain.value import CommentId, Principal

from .response import CommentResponse


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    principal: Principal | None
    post_id: UUID
    body: str


CreateReplyResponse = CommentResponse


class CreateReplyUseCase(BaseUseCase[CreateReplyRequest, CreateReplyResponse]):
    """Use case for replying to a post."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
            authorization_service: Authorization domain service
        """
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        """Execute create reply flow.

        Raises:
            NotAuthenticatedError: If anonymous
            NotFoundError: If the post does not exist or is hidden
            ValidationError: If the target is itself a reply or the body is empty
        """
        principal = self.authorization_service.ensure_can_reply(request.principal)
        reply = await self.comment_service.create_reply(
            author_id=principal.id,
            post_id=CommentId(request.post_id),
            body=request.body,
        )
        return CommentResponse.from_comment(reply)
