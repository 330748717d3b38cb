"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from circle.domain.model import Comment, Toggle
from circle.domain.value import (
    Attachment,
    AttachmentKind,
    AuthorInfo,
    CommentId,
    CommentStatus,
    ContextType,
    FieldRef,
    GroupId,
    UserId,
)


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    attachment = None
    if row.get("attachment_kind"):
        attachment = Attachment(
            kind=AttachmentKind(row["attachment_kind"]),
            url=row["attachment_url"],
            name=row.get("attachment_name"),
            embed_url=row.get("attachment_embed_url"),
        )

    parent_id = _uuid(row.get("parent_id"))
    context_id = _uuid(row.get("context_id"))
    reported_by = _uuid(row.get("reported_by"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        parent_id=CommentId(parent_id) if parent_id else None,
        context_type=ContextType(row["context_type"]),
        context_id=GroupId(context_id) if context_id else None,
        attachment=attachment,
        status=CommentStatus(row["status"]),
        created_at=row["created_at"],
        reported_by=UserId(reported_by) if reported_by else None,
        reported_at=row.get("reported_at"),
        report_reason=row.get("report_reason"),
        report_details=row.get("report_details"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    attachment = comment.attachment
    return {
        "id": comment.id,
        "author_id": comment.author_id,
        "body": comment.body,
        "parent_id": comment.parent_id,
        "context_type": comment.context_type.value,
        "context_id": comment.context_id,
        "attachment_kind": attachment.kind.value if attachment else None,
        "attachment_url": attachment.url if attachment else None,
        "attachment_name": attachment.name if attachment else None,
        "attachment_embed_url": attachment.embed_url if attachment else None,
        "status": comment.status.value,
        "created_at": comment.created_at,
        "reported_by": comment.reported_by,
        "reported_at": comment.reported_at,
        "report_reason": comment.report_reason,
        "report_details": comment.report_details,
    }


def row_to_author_info(row: Dict[str, Any]) -> AuthorInfo:
    """Convert a profiles row to AuthorInfo.

    A missing display name is kept empty so the feed falls back to its
    unknown-author label.
    """
    return AuthorInfo(
        display_name=row.get("display_name") or "",
        avatar_ref=row.get("avatar_ref"),
    )


def row_to_toggle(row: Dict[str, Any]) -> Toggle:
    """Convert database row to Toggle domain model."""
    updated_by = _uuid(row.get("updated_by"))
    return Toggle(
        field_ref=FieldRef(
            resource=row["resource"],
            resource_id=row["resource_id"],
            field=row["field"],
        ),
        value=row.get("value"),
        updated_at=row["updated_at"],
        updated_by=UserId(updated_by) if updated_by else None,
    )


def toggle_to_dict(toggle: Toggle) -> Dict[str, Any]:
    """Convert Toggle domain model to database dict."""
    return {
        "resource": toggle.field_ref.resource,
        "resource_id": toggle.field_ref.resource_id,
        "field": toggle.field_ref.field,
        "value": toggle.value,
        "updated_at": toggle.updated_at,
        "updated_by": toggle.updated_by,
    }
