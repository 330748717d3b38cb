"""In-memory toggle repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from circle.domain.model.toggle import Toggle
from circle.domain.repository.toggle import ToggleRepository
from circle.domain.value import FieldRef, ToggleValue, UserId


class InMemoryToggleRepository(ToggleRepository):
    """In-memory implementation of ToggleRepository for testing."""

    def __init__(self) -> None:
        self._toggles: dict[str, Toggle] = {}

    async def find(self, field_ref: FieldRef) -> Optional[Toggle]:
        """Find the current value of a field."""
        return self._toggles.get(field_ref.key)

    async def find_by_resource(self, resource: str, resource_id: str) -> list[Toggle]:
        """Find every toggle field of one resource, ordered by field name."""
        toggles = [
            t
            for t in self._toggles.values()
            if t.field_ref.resource == resource
            and t.field_ref.resource_id == resource_id
        ]
        toggles.sort(key=lambda t: t.field_ref.field)
        return toggles

    async def save(self, toggle: Toggle) -> Toggle:
        """Create or replace a toggle row."""
        self._toggles[toggle.field_ref.key] = toggle
        return toggle

    async def set_value(
        self, field_ref: FieldRef, value: ToggleValue, updated_by: UserId
    ) -> Optional[Toggle]:
        """Set the value of an existing field."""
        current = self._toggles.get(field_ref.key)
        if current is None:
            return None
        updated = current.evolve(
            value=value,
            updated_at=datetime.now(timezone.utc),
            updated_by=updated_by,
        )
        self._toggles[field_ref.key] = updated
        return updated
