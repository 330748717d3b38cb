"""HTTP client for the admin toggle API.

The coordinator in ``circle.application.optimistic`` uses ``set_toggle`` as
the authoritative mutation behind every optimistic toggle:

    async with ToggleApiClient(base_url, auth_token=token) as client:
        coordinator = OptimisticMutationCoordinator(
            await client.get_toggles("plan", "pro"), timeout=10
        )
        await coordinator.apply(field_ref, True, client.set_toggle)
"""

from typing import Any

import httpx
import logfire

from circle.domain.error import (
    ConflictError,
    DomainError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    TransientError,
    ValidationError,
)
from circle.domain.value import FieldRef, ToggleValue


class ToggleApiClient:
    """Async client for ``/admin/toggles``.

    Non-2xx responses are raised as domain errors so callers handle a
    remote rejection the same way as a local one. Transport failures and
    5xx responses become ``TransientError``.
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize toggle API client.

        Args:
            base_url: Base URL of the API server
            auth_token: Session token sent as the ``auth_token`` cookie
            timeout: Per-request timeout in seconds
            transport: Custom httpx transport
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            cookies={"auth_token": auth_token} if auth_token else None,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ToggleApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def get_toggles(
        self, resource: str, resource_id: str
    ) -> dict[FieldRef, ToggleValue]:
        """Load the confirmed values of every toggle of a resource.

        Returns:
            Mapping of field reference to its current value
        """
        with logfire.span(
            "toggle_client.get_toggles", resource=resource, resource_id=resource_id
        ):
            data = await self._request("GET", f"/admin/toggles/{resource}/{resource_id}")
            return {
                FieldRef(
                    resource=item["resource"],
                    resource_id=item["resource_id"],
                    field=item["field"],
                ): item["value"]
                for item in data["toggles"]
            }

    async def set_toggle(self, field_ref: FieldRef, value: ToggleValue) -> ToggleValue:
        """Set a toggle on the server.

        Returns:
            The value the server confirmed
        """
        with logfire.span("toggle_client.set_toggle", field=field_ref.key, value=value):
            data = await self._request(
                "PUT", f"/admin/toggles/{field_ref.key}", json={"value": value}
            )
            return data["value"]

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logfire.warn("Toggle API unreachable", path=path, error=str(e))
            raise TransientError(f"Toggle API unreachable: {e}") from e

        if response.is_success:
            return response.json()

        error = _to_domain_error(response, path)
        logfire.warn(
            "Toggle API rejected request",
            path=path,
            status_code=response.status_code,
            error=str(error),
        )
        raise error


def _to_domain_error(response: httpx.Response, path: str) -> DomainError:
    try:
        detail = response.json().get("detail", response.text)
    except ValueError:
        detail = response.text
    detail = str(detail) or response.reason_phrase

    code = response.status_code
    if code in (400, 422):
        return ValidationError(detail)
    if code == 401:
        return NotAuthenticatedError("change settings")
    if code == 403:
        return NotAuthorizedError("toggle", path, "current user", "update")
    if code == 404:
        return NotFoundError("Toggle", path)
    if code == 409:
        return ConflictError("Toggle", path)
    return TransientError(f"Toggle API failed with {code}: {detail}")
