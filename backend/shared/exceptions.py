"""
Base exception classes for the PrismWorlds session layer.

Each module should define its own exceptions that inherit from these bases.
Errors are also carried as values (see ServiceResult in modules.auth), so
every exception can render itself for inline display via to_dict().
"""

from typing import Optional, Any


class PrismWorldsError(Exception):
    """
    Base exception for all PrismWorlds errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(PrismWorldsError):
    """Resource not found."""

    pass


class ValidationError(PrismWorldsError):
    """
    Client-side input check failed.

    Raised (or returned) before any network call is made. The offending
    form field, when there is one, is reported in details["field"].
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        if field is not None:
            self.details["field"] = field
        self.field = field


class AuthenticationError(PrismWorldsError):
    """Authentication failed or no user is signed in."""

    pass


class ExternalServiceError(PrismWorldsError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
