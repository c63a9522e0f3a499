"""
Authentication module.

Wraps Supabase Auth and the profile tables behind IDataServiceClient, and
holds the sign-up/sign-in request models and their local form checks.

Public API:
- IDataServiceClient: Interface for the remote data service
- SupabaseDataClient: Supabase-backed implementation
- ServiceResult: Data-or-error value returned by every remote call
- SignUpRequest, SignInRequest: Form payloads
- validate_sign_up: Local sign-up checks
- Auth exceptions: ServiceError, NotAuthenticatedError
"""

from .interfaces import IDataServiceClient, SessionChangeHandler, Unsubscribe
from .client import SupabaseDataClient
from .models import ServiceResult, SignUpRequest, SignInRequest
from .validation import validate_sign_up, MIN_PASSWORD_LENGTH
from .exceptions import ServiceError, NotAuthenticatedError

__all__ = [
    # Interface
    "IDataServiceClient",
    "SessionChangeHandler",
    "Unsubscribe",
    # Implementation
    "SupabaseDataClient",
    # Models
    "ServiceResult",
    "SignUpRequest",
    "SignInRequest",
    # Validation
    "validate_sign_up",
    "MIN_PASSWORD_LENGTH",
    # Exceptions
    "ServiceError",
    "NotAuthenticatedError",
]
