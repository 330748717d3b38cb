"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires a signed-in principal."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"You must be logged in to {action}")


class NotAuthorizedError(DomainError):
    """Raised on ownership, membership or role failures."""

    def __init__(self, resource: str, resource_id: str, user_id: str, reason: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.reason = reason
        super().__init__(
            f"User {user_id} is not authorized to {reason} {resource} {resource_id}"
        )


class ValidationError(DomainError):
    """Domain validation error (empty body, malformed attachment, bad nesting)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with an existing resource.

    Carries the identifier of the existing resource so callers can redirect
    to it instead of failing.
    """

    def __init__(self, resource: str, existing_id: str):
        self.resource = resource
        self.existing_id = existing_id
        super().__init__(f"{resource} already exists: {existing_id}")


class TransientError(DomainError):
    """Raised when the store or a remote collaborator is unreachable."""

    pass
