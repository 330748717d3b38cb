"""Comment entity.

Posts and replies share one table. A post has no parent; a reply points at
a post and replies never nest further. Nesting depth is checked by the
comment service when a reply is created, since the entity alone cannot see
its parent.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from circle.domain.model.common import DomainModel
from circle.domain.value import (
    Attachment,
    CommentId,
    CommentStatus,
    ContextSelector,
    ContextType,
    GroupId,
    UserId,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comment(DomainModel):
    """Comment entity.

    Invariants:
    - body is non-empty after trimming and stored trimmed
    - context_id is set iff context_type is ``group``
    - report metadata is present iff status is ``reported``
    """

    id: CommentId
    author_id: UserId
    body: str = Field(max_length=10000)
    parent_id: Optional[CommentId] = None
    context_type: ContextType = ContextType.FEED
    context_id: Optional[GroupId] = None
    attachment: Optional[Attachment] = None
    status: CommentStatus = CommentStatus.ACTIVE
    created_at: datetime = Field(default_factory=_utcnow)
    reported_by: Optional[UserId] = None
    reported_at: Optional[datetime] = None
    report_reason: Optional[str] = None
    report_details: Optional[str] = None

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Body must contain something other than whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("Comment body is required")
        return v

    @model_validator(mode="after")
    def validate_invariants(self) -> "Comment":
        """Check context and report metadata invariants."""
        if self.context_type == ContextType.GROUP and self.context_id is None:
            raise ValueError("Group comments require a context_id")
        if self.context_type == ContextType.FEED and self.context_id is not None:
            raise ValueError("Feed comments must not have a context_id")

        has_report = self.reported_by is not None or self.reported_at is not None
        if self.status == CommentStatus.REPORTED:
            if self.reported_by is None or self.reported_at is None:
                raise ValueError("Reported comments require reporter and timestamp")
        elif has_report or self.report_reason or self.report_details:
            raise ValueError(
                f"Report metadata is only allowed on reported comments, "
                f"not {self.status.value}"
            )
        return self

    @property
    def is_post(self) -> bool:
        return self.parent_id is None

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def is_visible(self) -> bool:
        return self.status.is_visible

    @property
    def context(self) -> ContextSelector:
        return ContextSelector(
            context_type=self.context_type, context_id=self.context_id
        )
