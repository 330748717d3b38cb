"""Comment response shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from circle.domain.model import Comment
from circle.domain.value import Attachment, CommentStatus, ContextType


class CommentResponse(BaseModel):
    """A comment as returned to its author after a mutation."""

    comment_id: str
    author_id: str
    body: str
    parent_id: str | None
    context_type: ContextType
    context_id: str | None
    attachment: Attachment | None
    status: CommentStatus
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            body=comment.body,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            context_type=comment.context_type,
            context_id=str(comment.context_id) if comment.context_id else None,
            attachment=comment.attachment,
            status=comment.status,
            created_at=comment.created_at,
        )
