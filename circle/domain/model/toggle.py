"""Toggle entity.

Authoritative value of one toggle-style administrative field: plan
activation, plan permission flags, expert activation, featured slots.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from circle.domain.model.common import DomainModel
from circle.domain.value import FieldRef, ToggleValue, UserId


class Toggle(DomainModel):
    """Current value of a toggle-style field."""

    field_ref: FieldRef
    value: ToggleValue = None
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_by: Optional[UserId] = None
