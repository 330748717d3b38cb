"""List media use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from circle.application.usecase.base import BaseUseCase
from circle.domain.model import FeedPost
from circle.domain.service import FeedService
from circle.domain.value import AttachmentKind, Principal

from .assemble_feed import context_for


class ListMediaRequest(BaseModel):
    """List media request."""

    principal: Principal | None = None
    group_id: UUID | None = None
    kinds: list[AttachmentKind] = Field(default_factory=lambda: list(AttachmentKind))


class ListMediaResponse(BaseModel):
    """List media response."""

    items: list[FeedPost]
    total: int


class ListMediaUseCase(BaseUseCase[ListMediaRequest, ListMediaResponse]):
    """Use case for the library view: visible posts with attachments."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize list media use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: ListMediaRequest) -> ListMediaResponse:
        """Execute list media flow."""
        items = await self.feed_service.list_media(
            context_for(request.group_id),
            request.kinds or list(AttachmentKind),
            viewer_id=request.principal.id if request.principal else None,
        )
        return ListMediaResponse(items=items, total=len(items))
