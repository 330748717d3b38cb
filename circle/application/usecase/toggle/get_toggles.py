"""Get toggles use case."""

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import AuthorizationService, ToggleService
from circle.domain.value import Principal

from .set_toggle import ToggleResponse


class GetTogglesRequest(BaseModel):
    """Get toggles request."""

    principal: Principal | None
    resource: str
    resource_id: str


class GetTogglesResponse(BaseModel):
    """Every toggle field of one resource."""

    toggles: list[ToggleResponse]


class GetTogglesUseCase(BaseUseCase[GetTogglesRequest, GetTogglesResponse]):
    """Use case for loading the confirmed toggle values of a resource."""

    def __init__(
        self,
        toggle_service: ToggleService,
        authorization_service: AuthorizationService,
    ) -> None:
        self.toggle_service = toggle_service
        self.authorization_service = authorization_service

    async def execute(self, request: GetTogglesRequest) -> GetTogglesResponse:
        """Execute get toggles flow (admins only)."""
        self.authorization_service.ensure_admin(
            request.principal, request.resource, request.resource_id
        )
        toggles = await self.toggle_service.list_for_resource(
            request.resource, request.resource_id
        )
        return GetTogglesResponse(
            toggles=[ToggleResponse.from_toggle(toggle) for toggle in toggles]
        )
