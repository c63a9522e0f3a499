"""
Error response models.

Standardized error responses for the API, plus the mapping from domain
errors to HTTP status codes.
"""

from typing import Any, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel

from shared.exceptions import (
    AuthenticationError,
    NotFoundError,
    PrismWorldsError,
)


class ErrorResponse(BaseModel):
    """Standard error response format (PrismWorldsError.to_dict())."""

    error: str
    message: str
    details: dict[str, Any] = {}


def status_for(error: PrismWorldsError) -> int:
    """HTTP status for a domain error."""
    if isinstance(error, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    # Validation failures and remote errors are both shown inline by the form
    return status.HTTP_400_BAD_REQUEST


def to_http_exception(error: PrismWorldsError, headers: Optional[dict[str, str]] = None) -> HTTPException:
    """Wrap a domain error for raising from a route handler."""
    return HTTPException(
        status_code=status_for(error),
        detail=error.to_dict(),
        headers=headers,
    )
