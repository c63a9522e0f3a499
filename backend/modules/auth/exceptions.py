"""
Authentication module exceptions.

These are usually carried inside a ServiceResult rather than raised, and
are rendered by the API layer for inline display.
"""

from typing import Any, Optional

from shared.exceptions import AuthenticationError, ExternalServiceError


class ServiceError(ExternalServiceError):
    """A remote (Supabase) or network failure."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            service="supabase",
            code=code or "SERVICE_ERROR",
            details=details,
        )


class NotAuthenticatedError(AuthenticationError):
    """Raised when a mutation is attempted with no signed-in user."""

    def __init__(self, message: str = "No user logged in"):
        super().__init__(message, code="NOT_AUTHENTICATED")
