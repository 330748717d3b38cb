"""Toggle repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from circle.domain.model.toggle import Toggle
from circle.domain.value import FieldRef, ToggleValue, UserId


class ToggleRepository(ABC):
    """Repository for authoritative toggle values."""

    @abstractmethod
    async def find(self, field_ref: FieldRef) -> Optional[Toggle]:
        """Find the current value of a field."""
        pass

    @abstractmethod
    async def find_by_resource(self, resource: str, resource_id: str) -> List[Toggle]:
        """Find every toggle field of one resource, ordered by field name."""
        pass

    @abstractmethod
    async def save(self, toggle: Toggle) -> Toggle:
        """Create or replace a toggle row."""
        pass

    @abstractmethod
    async def set_value(
        self, field_ref: FieldRef, value: ToggleValue, updated_by: UserId
    ) -> Optional[Toggle]:
        """Set the value of an existing field.

        Returns:
            The updated toggle, or None if the field is not registered
        """
        pass
