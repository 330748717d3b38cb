"""Administrative toggle routes.

Authoritative side of the optimistic toggles in the admin surfaces.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from circle.application.usecase.toggle import (
    GetTogglesRequest,
    GetTogglesResponse,
    GetTogglesUseCase,
    SetToggleRequest,
    SetToggleUseCase,
    ToggleResponse,
)
from circle.domain.error import DomainError
from circle.domain.service import JWTService
from circle.domain.value import FieldRef, ToggleValue
from circle.interface.error import to_http_exception

router = APIRouter(prefix="/admin/toggles", tags=["admin"], route_class=DishkaRoute)


class SetToggleAPIRequest(BaseModel):
    """API request for setting a toggle."""

    value: ToggleValue


@router.get("/{resource}/{resource_id}", response_model=GetTogglesResponse)
async def get_toggles(
    resource: str,
    resource_id: str,
    get_toggles_use_case: FromDishka[GetTogglesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetTogglesResponse:
    """Get every toggle of a resource. Admins only."""
    try:
        return await get_toggles_use_case.execute(
            GetTogglesRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                resource=resource,
                resource_id=resource_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "load toggles")


@router.put("/{resource}/{resource_id}/{field}", response_model=ToggleResponse)
async def set_toggle(
    resource: str,
    resource_id: str,
    field: str,
    request: SetToggleAPIRequest,
    set_toggle_use_case: FromDishka[SetToggleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleResponse:
    """Set a toggle: activation and permission flags, or a feature slot.

    Admins only. Returns the value now stored, which clients treat as
    confirmed.
    """
    try:
        field_ref = FieldRef(resource=resource, resource_id=resource_id, field=field)
    except PydanticValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.errors()[0]["msg"],
        )

    try:
        return await set_toggle_use_case.execute(
            SetToggleRequest(
                principal=jwt_service.get_principal_from_token(auth_token),
                field_ref=field_ref,
                value=request.value,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "update toggle")
