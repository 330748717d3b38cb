"""Set toggle use case."""

from datetime import datetime

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.model import Toggle
from circle.domain.service import AuthorizationService, ToggleService
from circle.domain.value import FieldRef, Principal, ToggleValue


class SetToggleRequest(BaseModel):
    """Set toggle request."""

    principal: Principal | None
    field_ref: FieldRef
    value: ToggleValue


class ToggleResponse(BaseModel):
    """A toggle field and its authoritative value."""

    resource: str
    resource_id: str
    field: str
    value: ToggleValue
    updated_at: datetime
    updated_by: str | None

    @classmethod
    def from_toggle(cls, toggle: Toggle) -> "ToggleResponse":
        return cls(
            resource=toggle.field_ref.resource,
            resource_id=toggle.field_ref.resource_id,
            field=toggle.field_ref.field,
            value=toggle.value,
            updated_at=toggle.updated_at,
            updated_by=str(toggle.updated_by) if toggle.updated_by else None,
        )


class SetToggleUseCase(BaseUseCase[SetToggleRequest, ToggleResponse]):
    """Authoritative mutation behind every optimistic toggle."""

    def __init__(
        self,
        toggle_service: ToggleService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize set toggle use case.

        Args:
            toggle_service: Toggle domain service
            authorization_service: Authorization domain service
        """
        self.toggle_service = toggle_service
        self.authorization_service = authorization_service

    async def execute(self, request: SetToggleRequest) -> ToggleResponse:
        """Execute set toggle flow.

        Raises:
            NotAuthenticatedError: If anonymous
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the field is not registered
            ValidationError: If the value does not fit the field
        """
        principal = self.authorization_service.ensure_admin(
            request.principal,
            request.field_ref.resource,
            request.field_ref.resource_id,
        )
        toggle = await self.toggle_service.set_value(
            request.field_ref, request.value, updated_by=principal.id
        )
        return ToggleResponse.from_toggle(toggle)
