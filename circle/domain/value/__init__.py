"""Domain value objects for Circle."""

from circle.domain.value.attachment import Attachment
from circle.domain.value.identifiers import CommentId, GroupId, UserId
from circle.domain.value.types import (
    VISIBLE_STATUSES,
    AttachmentKind,
    AuthorInfo,
    CommentStatus,
    ContextSelector,
    ContextType,
    FieldRef,
    Principal,
    ReportReason,
    ToggleValue,
)

__all__ = [
    # Identifiers
    "CommentId",
    "GroupId",
    "UserId",
    # Types
    "Attachment",
    "AttachmentKind",
    "AuthorInfo",
    "CommentStatus",
    "ContextSelector",
    "ContextType",
    "FieldRef",
    "Principal",
    "ReportReason",
    "ToggleValue",
    "VISIBLE_STATUSES",
]
