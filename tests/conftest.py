"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from circle.domain.model import Comment
from circle.domain.value import (
    CommentId,
    CommentStatus,
    ContextType,
    GroupId,
    Principal,
    UserId,
)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_principal(display_name: str = "Ada", is_admin: bool = False) -> Principal:
    """Signed-in principal with a fresh user ID."""
    return Principal(
        id=UserId(uuid4()), display_name=display_name, is_admin=is_admin
    )


def make_comment(
    author_id: UserId | None = None,
    body: str = "Hello circle",
    parent_id: CommentId | None = None,
    group_id: GroupId | None = None,
    status: CommentStatus = CommentStatus.ACTIVE,
    minutes: int = 0,
    **fields,
) -> Comment:
    """Build a comment directly, bypassing the services.

    ``minutes`` offsets ``created_at`` from a fixed base time so tests control
    ordering. Reported comments get report metadata filled in.
    """
    if status == CommentStatus.REPORTED:
        fields.setdefault("reported_by", UserId(uuid4()))
        fields.setdefault("reported_at", BASE_TIME + timedelta(minutes=minutes + 1))
        fields.setdefault("report_reason", "spam")
    return Comment(
        id=CommentId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        body=body,
        parent_id=parent_id,
        context_type=ContextType.GROUP if group_id else ContextType.FEED,
        context_id=group_id,
        status=status,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        **fields,
    )
