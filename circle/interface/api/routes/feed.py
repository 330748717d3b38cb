"""Feed and group feed routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from circle.application.usecase.comment import (
    AttachmentInput,
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
)
from circle.application.usecase.feed import (
    AssembleFeedRequest,
    AssembleFeedResponse,
    AssembleFeedUseCase,
    ListMediaRequest,
    ListMediaResponse,
    ListMediaUseCase,
)
from circle.config import FeedSettings
from circle.domain.error import DomainError
from circle.domain.service import JWTService
from circle.domain.value import AttachmentKind, ContextType
from circle.interface.error import to_http_exception

router = APIRouter(tags=["feed"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    body: str
    attachment: AttachmentInput | None = None


class GuidelinesResponse(BaseModel):
    """Community guidelines shown next to the report dialog."""

    guidelines: str


async def _create_post(
    group_id: UUID | None,
    request: CreatePostAPIRequest,
    use_case: CreatePostUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> CreatePostResponse:
    try:
        return await use_case.execute(
            CreatePostRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                context_type=ContextType.GROUP if group_id else ContextType.FEED,
                group_id=group_id,
                body=request.body,
                attachment=request.attachment,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "create post")


@router.get("/feed", response_model=AssembleFeedResponse)
async def get_feed(
    assemble_feed_use_case: FromDishka[AssembleFeedUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AssembleFeedResponse:
    """Get the global feed.

    Posts are newest first; replies under each post are oldest first.
    Reported comments are never included. Authentication is optional and
    only drives the ``is_own`` flags.
    """
    try:
        return await assemble_feed_use_case.execute(
            AssembleFeedRequest(
                principal=jwt_service.get_principal_from_token(auth_token)
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "load feed")


@router.get("/groups/{group_id}/feed", response_model=AssembleFeedResponse)
async def get_group_feed(
    group_id: UUID,
    assemble_feed_use_case: FromDishka[AssembleFeedUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AssembleFeedResponse:
    """Get the feed of one group."""
    try:
        return await assemble_feed_use_case.execute(
            AssembleFeedRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                group_id=group_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "load group feed")


@router.post(
    "/feed/posts",
    response_model=CreatePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_feed_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a post in the global feed.

    Requires authentication.
    """
    return await _create_post(
        None, request, create_post_use_case, jwt_service, auth_token
    )


@router.post(
    "/groups/{group_id}/posts",
    response_model=CreatePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_group_post(
    group_id: UUID,
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a post in a group.

    Requires authentication and current membership of the group.
    """
    return await _create_post(
        group_id, request, create_post_use_case, jwt_service, auth_token
    )


@router.get("/feed/media", response_model=ListMediaResponse)
async def get_feed_media(
    list_media_use_case: FromDishka[ListMediaUseCase],
    jwt_service: FromDishka[JWTService],
    kind: list[AttachmentKind] = Query(default=[]),
    auth_token: str | None = Cookie(default=None),
) -> ListMediaResponse:
    """List global feed posts carrying attachments, optionally filtered by kind."""
    try:
        return await list_media_use_case.execute(
            ListMediaRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                kinds=kind,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "list media")


@router.get("/groups/{group_id}/media", response_model=ListMediaResponse)
async def get_group_media(
    group_id: UUID,
    list_media_use_case: FromDishka[ListMediaUseCase],
    jwt_service: FromDishka[JWTService],
    kind: list[AttachmentKind] = Query(default=[]),
    auth_token: str | None = Cookie(default=None),
) -> ListMediaResponse:
    """List a group's library: videos, or documents, images and links."""
    try:
        return await list_media_use_case.execute(
            ListMediaRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                group_id=group_id,
                kinds=kind,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "list group media")


@router.get("/feed/guidelines", response_model=GuidelinesResponse)
async def get_guidelines(feed_settings: FromDishka[FeedSettings]) -> GuidelinesResponse:
    """Community guidelines text."""
    return GuidelinesResponse(guidelines=feed_settings.guidelines)
