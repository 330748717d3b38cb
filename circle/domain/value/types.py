"""Domain value objects for Circle.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import Optional, Union

from pydantic import field_validator, model_validator

from circle.domain.value.common import RootValueObject, ValueObject
from circle.domain.value.identifiers import GroupId, UserId


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    ``active`` is the initial state. ``approved`` is set by the external
    moderation tooling. ``reported`` hides the comment from everyone and has
    no way back within this service.
    """

    ACTIVE = "active"
    APPROVED = "approved"
    REPORTED = "reported"

    @property
    def is_visible(self) -> bool:
        """Whether comments in this status appear in any assembled feed."""
        return self in VISIBLE_STATUSES

    @property
    def is_reportable(self) -> bool:
        """Whether the report action may move this status to ``reported``."""
        return self is CommentStatus.ACTIVE


VISIBLE_STATUSES = frozenset({CommentStatus.ACTIVE, CommentStatus.APPROVED})


class ContextType(str, Enum):
    """Scope a comment belongs to."""

    FEED = "feed"
    GROUP = "group"


class AttachmentKind(str, Enum):
    """Kind of link attached to a post."""

    IMAGE = "image"
    DOCUMENT = "document"
    LINK = "link"
    VIDEO = "video"


class ContextSelector(ValueObject):
    """Selects the global feed or one group's feed.

    ``context_id`` is required for groups and forbidden for the global feed.
    """

    context_type: ContextType
    context_id: Optional[GroupId] = None

    @model_validator(mode="after")
    def validate_context_id(self) -> "ContextSelector":
        """Group contexts need an id, the global feed must not have one."""
        if self.context_type == ContextType.GROUP and self.context_id is None:
            raise ValueError("Group context requires a group id")
        if self.context_type == ContextType.FEED and self.context_id is not None:
            raise ValueError("Feed context must not carry a group id")
        return self

    @classmethod
    def feed(cls) -> "ContextSelector":
        return cls(context_type=ContextType.FEED)

    @classmethod
    def group(cls, group_id: GroupId) -> "ContextSelector":
        return cls(context_type=ContextType.GROUP, context_id=group_id)

    def __str__(self) -> str:
        if self.context_id is None:
            return self.context_type.value
        return f"{self.context_type.value}:{self.context_id}"


class Principal(ValueObject):
    """The signed-in caller, as reported by the identity provider."""

    id: UserId
    display_name: str
    avatar_ref: Optional[str] = None
    is_admin: bool = False


class AuthorInfo(ValueObject):
    """Display information used to decorate feed items."""

    display_name: str
    avatar_ref: Optional[str] = None


class ReportReason(RootValueObject[str]):
    """Short reason given when reporting a comment (1-200 characters)."""

    @field_validator("root")
    @classmethod
    def validate_reason(cls, v: str) -> str:
        """Trim and bound the reason."""
        v = v.strip()
        if len(v) < 1 or len(v) > 200:
            raise ValueError("Report reason must be 1-200 characters")
        return v


_FIELD_PART = re.compile(r"^[a-z0-9][a-z0-9_.:-]{0,99}$")

ToggleValue = Union[bool, int, None]


class FieldRef(ValueObject):
    """Reference to one toggle-style field of an administrative resource.

    Examples:
        FieldRef(resource="plan", resource_id="pro", field="active")
        FieldRef(resource="plan", resource_id="pro", field="permission:groups")
        FieldRef(resource="expert", resource_id="42", field="featured_slot")
    """

    resource: str
    resource_id: str
    field: str

    @field_validator("resource", "resource_id", "field")
    @classmethod
    def validate_part(cls, v: str) -> str:
        """Each part is a lowercase slug-like token."""
        if not _FIELD_PART.match(v):
            raise ValueError(
                "Field reference parts must be 1-100 lowercase characters "
                "from [a-z0-9_.:-]"
            )
        return v

    @property
    def key(self) -> str:
        """Stable string key used for locking and logging."""
        return f"{self.resource}/{self.resource_id}/{self.field}"

    def __str__(self) -> str:
        return self.key
