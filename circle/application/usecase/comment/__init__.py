"""Comment use cases."""

from .create_post import (
    AttachmentInput,
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
)
from .create_reply import CreateReplyRequest, CreateReplyResponse, CreateReplyUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .edit_comment import EditCommentRequest, EditCommentResponse, EditCommentUseCase
from .report_comment import (
    ReportCommentRequest,
    ReportCommentResponse,
    ReportCommentUseCase,
)
from .response import CommentResponse

__all__ = [
    "AttachmentInput",
    "CommentResponse",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "CreateReplyRequest",
    "CreateReplyResponse",
    "CreateReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentResponse",
    "EditCommentUseCase",
    "ReportCommentRequest",
    "ReportCommentResponse",
    "ReportCommentUseCase",
]
