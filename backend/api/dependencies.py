"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IDataServiceClient
    from modules.session.interfaces import ISessionStore


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. There is exactly one session store per process:
    it owns the session of the single signed-in user.

    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._data_client: "IDataServiceClient | None" = None
        self._session_store: "ISessionStore | None" = None

    @property
    def data_client(self) -> "IDataServiceClient":
        """Get the remote data service client."""
        if self._data_client is None:
            from modules.auth.client import SupabaseDataClient
            from shared.database import get_supabase_client
            self._data_client = SupabaseDataClient(get_supabase_client())
        return self._data_client

    @property
    def session_store(self) -> "ISessionStore":
        """Get the session store instance."""
        if self._session_store is None:
            from modules.session.store import SessionStore
            self._session_store = SessionStore(self.data_client)
        return self._session_store

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._data_client = None
        self._session_store = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() will create a fresh container with
    new service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_session_store() -> "ISessionStore":
    """FastAPI dependency for the session store."""
    return get_container().session_store
