"""Toggle domain service."""

import logfire

from circle.domain.error import NotFoundError, ValidationError
from circle.domain.model.toggle import Toggle
from circle.domain.repository import ToggleRepository
from circle.domain.value import FieldRef, ToggleValue, UserId

from .base import Service


class ToggleService(Service):
    """Authoritative side of toggle-style administrative fields."""

    def __init__(self, toggle_repository: ToggleRepository) -> None:
        """Initialize toggle service.

        Args:
            toggle_repository: Toggle repository
        """
        self.toggle_repository = toggle_repository

    async def get(self, field_ref: FieldRef) -> Toggle:
        """Get the current value of a field.

        Raises:
            NotFoundError: If the field is not registered
        """
        with logfire.span("toggle_service.get", field=field_ref.key):
            toggle = await self.toggle_repository.find(field_ref)
            if toggle is None:
                logfire.warn("Toggle not found", field=field_ref.key)
                raise NotFoundError("Toggle", field_ref.key)
            return toggle

    async def list_for_resource(self, resource: str, resource_id: str) -> list[Toggle]:
        """List every toggle field of a resource."""
        with logfire.span(
            "toggle_service.list_for_resource",
            resource=resource,
            resource_id=resource_id,
        ):
            return await self.toggle_repository.find_by_resource(resource, resource_id)

    async def set_value(
        self, field_ref: FieldRef, value: ToggleValue, updated_by: UserId
    ) -> Toggle:
        """Set a field to a new value.

        Boolean fields only accept booleans; slot fields accept an integer or
        null. The kind of a field is fixed by its current value's type.

        Raises:
            NotFoundError: If the field is not registered
            ValidationError: If the value does not match the field's kind
        """
        with logfire.span(
            "toggle_service.set_value",
            field=field_ref.key,
            value=value,
            updated_by=str(updated_by),
        ):
            current = await self.get(field_ref)
            if isinstance(current.value, bool) != isinstance(value, bool):
                logfire.warn(
                    "Toggle value kind mismatch",
                    field=field_ref.key,
                    current=current.value,
                    value=value,
                )
                raise ValidationError(
                    f"{field_ref.key} expects "
                    f"{'a boolean' if isinstance(current.value, bool) else 'a slot number or null'}"
                )

            updated = await self.toggle_repository.set_value(
                field_ref, value, updated_by
            )
            if updated is None:
                raise NotFoundError("Toggle", field_ref.key)
            logfire.info(
                "Toggle updated",
                field=field_ref.key,
                previous=current.value,
                value=value,
            )
            return updated
