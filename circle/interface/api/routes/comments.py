"""Comment routes: replies, edits, deletes and reports."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from circle.application.usecase.comment import (
    CreateReplyRequest,
    CreateReplyResponse,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentResponse,
    EditCommentUseCase,
    ReportCommentRequest,
    ReportCommentResponse,
    ReportCommentUseCase,
)
from circle.domain.error import DomainError
from circle.domain.service import JWTService
from circle.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CommentBodyAPIRequest(BaseModel):
    """API request carrying a comment body."""

    body: str


class ReportCommentAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason: str
    details: str | None = None


@router.post(
    "/{post_id}/replies",
    response_model=CreateReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    post_id: UUID,
    request: CommentBodyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReplyResponse:
    """Reply to a post.

    Requires authentication. Replies to replies are rejected.
    """
    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                post_id=post_id,
                body=request.body,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "create reply")


@router.patch("/{comment_id}", response_model=EditCommentResponse)
async def edit_comment(
    comment_id: UUID,
    request: CommentBodyAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EditCommentResponse:
    """Edit the body of a post or reply.

    Only the author can edit.
    """
    try:
        return await edit_comment_use_case.execute(
            EditCommentRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                comment_id=comment_id,
                body=request.body,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "edit comment")


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a post (with its replies) or a reply.

    Only the author can delete.
    """
    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                comment_id=comment_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "delete comment")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{comment_id}/report", response_model=ReportCommentResponse)
async def report_comment(
    comment_id: UUID,
    request: ReportCommentAPIRequest,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportCommentResponse:
    """Report a post or reply, hiding it from every feed.

    Requires authentication. Reporting an already hidden comment succeeds
    without changing anything.
    """
    try:
        return await report_comment_use_case.execute(
            ReportCommentRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                comment_id=comment_id,
                reason=request.reason,
                details=request.details,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "report comment")
