"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.config import FeedSettings
from circle.domain.attachment import normalize_attachment
from circle.domain.error import ValidationError
from circle.domain.service import AuthorizationService, CommentService
from circle.domain.value import (
    AttachmentKind,
    ContextSelector,
    ContextType,
    GroupId,
    Principal,
)

from .response import CommentResponse


class AttachmentInput(BaseModel):
    """Raw attachment as submitted by the author."""

    kind: AttachmentKind
    url: str
    name: str | None = None  # Documents only


class CreatePostRequest(BaseModel):
    """Create post request."""

    principal: Principal | None
    context_type: ContextType = ContextType.FEED
    group_id: UUID | None = None
    body: str
    attachment: AttachmentInput | None = None


CreatePostResponse = CommentResponse


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a post in the global feed or a group."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize create post use case.

        Args:
            comment_service: Comment domain service
            authorization_service: Authorization domain service
            feed_settings: Feed settings (document fallback name)
        """
        self.comment_service = comment_service
        self.authorization_service = authorization_service
        self.feed_settings = feed_settings

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Check authentication and, for groups, membership
        2. Normalize the attachment, if any
        3. Create the post

        Raises:
            NotAuthenticatedError: If anonymous
            NotAuthorizedError: If not a member of the target group
            ValidationError: If body or attachment is invalid
        """
        try:
            context = ContextSelector(
                context_type=request.context_type,
                context_id=GroupId(request.group_id) if request.group_id else None,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        principal = await self.authorization_service.ensure_can_post(
            request.principal, context
        )

        attachment = None
        if request.attachment is not None:
            attachment = normalize_attachment(
                request.attachment.url,
                request.attachment.kind,
                name=request.attachment.name,
                fallback_name=self.feed_settings.document_fallback_name,
            )

        post = await self.comment_service.create_post(
            author_id=principal.id,
            context=context,
            body=request.body,
            attachment=attachment,
        )
        return CommentResponse.from_comment(post)
