"""Toggle use cases."""

from .get_toggles import GetTogglesRequest, GetTogglesResponse, GetTogglesUseCase
from .set_toggle import (
    SetToggleRequest,
    SetToggleUseCase,
    ToggleResponse,
)

__all__ = [
    "GetTogglesRequest",
    "GetTogglesResponse",
    "GetTogglesUseCase",
    "SetToggleRequest",
    "SetToggleUseCase",
    "ToggleResponse",
]
