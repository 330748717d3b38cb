"""Translation of domain errors to HTTP responses."""

import logfire
from fastapi import HTTPException, status

from circle.domain.error import (
    ConflictError,
    DomainError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    TransientError,
    ValidationError,
)

# Most specific first; TransientError must not be reported as a client error.
_STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (TransientError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an error raised by a use case to an HTTPException.

    Args:
        error: Raised error
        action: What the route was doing, for logs and the 500 message

    Returns:
        HTTPException to raise from the route
    """
    for error_type, status_code in _STATUS_CODES:
        if isinstance(error, error_type):
            if status_code >= 500:
                logfire.error(f"Failed to {action}", error=str(error))
                return HTTPException(
                    status_code=status_code,
                    detail="Service temporarily unavailable, please retry",
                )
            logfire.warn(
                f"Failed to {action}",
                error=str(error),
                error_type=type(error).__name__,
            )
            detail: str | dict = str(error)
            if isinstance(error, ConflictError):
                detail = {"message": str(error), "existing_id": error.existing_id}
            return HTTPException(status_code=status_code, detail=detail)

    logfire.error(
        f"Unexpected error trying to {action}",
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
