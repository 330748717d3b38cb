"""Attachment descriptor value object."""

from typing import Optional

from pydantic import Field, model_validator

from circle.domain.value.common import ValueObject
from circle.domain.value.types import AttachmentKind


class Attachment(ValueObject):
    """A renderable attachment carried by at most one post.

    - documents carry a display ``name``
    - videos carry an ``embed_url`` when the provider is supported, ``None``
      otherwise (render a plain link instead)
    """

    kind: AttachmentKind
    url: str = Field(min_length=1, max_length=2048)
    name: Optional[str] = None
    embed_url: Optional[str] = None

    @model_validator(mode="after")
    def validate_kind_fields(self) -> "Attachment":
        """Keep kind-specific fields on their own kind."""
        if self.name is not None and self.kind != AttachmentKind.DOCUMENT:
            raise ValueError(f"{self.kind.value} attachments do not carry a name")
        if self.embed_url is not None and self.kind != AttachmentKind.VIDEO:
            raise ValueError(f"{self.kind.value} attachments do not carry an embed URL")
        return self
