"""Assemble feed use case."""

from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.model import FeedPost
from circle.domain.service import FeedService
from circle.domain.value import (
    ContextSelector,
    ContextType,
    GroupId,
    Principal,
)


class AssembleFeedRequest(BaseModel):
    """Assemble feed request."""

    principal: Principal | None = None  # Only used to flag the viewer's own items
    group_id: UUID | None = None  # None selects the global feed


class AssembleFeedResponse(BaseModel):
    """Assemble feed response."""

    context_type: ContextType
    context_id: str | None
    posts: list[FeedPost]
    total: int


def context_for(group_id: UUID | None) -> ContextSelector:
    """Context selector for an optional group id."""
    if group_id is None:
        return ContextSelector.feed()
    return ContextSelector.group(GroupId(group_id))


class AssembleFeedUseCase(
    BaseUseCase[AssembleFeedRequest, AssembleFeedResponse]
):
    """Use case for reading a feed: posts newest first, replies oldest first."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize assemble feed use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: AssembleFeedRequest) -> AssembleFeedResponse:
        """Execute assemble feed flow.

        Raises:
            TransientError: If the store is unreachable
        """
        context = context_for(request.group_id)
        view = await self.feed_service.assemble(
            context,
            viewer_id=request.principal.id if request.principal else None,
        )
        return AssembleFeedResponse(
            context_type=context.context_type,
            context_id=str(context.context_id) if context.context_id else None,
            posts=view.posts,
            total=len(view.posts),
        )
