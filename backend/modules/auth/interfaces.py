"""
Remote data service interface.

The session store depends on IDataServiceClient, not on Supabase directly.
This enables testing with an in-memory fake and keeps the Supabase SDK
confined to one module.
"""

from typing import Any, Awaitable, Callable, Optional, Protocol, runtime_checkable

from shared.models import Identity, Session
from modules.profiles.models import Table

from .models import ServiceResult

SessionChangeHandler = Callable[[Optional[Session]], Awaitable[None]]
Unsubscribe = Callable[[], None]


@runtime_checkable
class IDataServiceClient(Protocol):
    """
    Interface for authentication and record operations.

    No method raises for remote failures: errors come back inside the
    ServiceResult so callers decide whether they are fatal.
    """

    async def get_current_session(self) -> ServiceResult[Session]:
        """
        Get the live session, if any.

        Returns:
            ServiceResult with the Session, or data=None when signed out
        """
        ...

    def on_session_change(self, handler: SessionChangeHandler) -> Unsubscribe:
        """
        Register a handler for sign-in, sign-out and token refresh.

        Must be called from inside a running event loop. The handler is
        scheduled on that loop once per change, in the order the changes
        are emitted.

        Args:
            handler: Coroutine function receiving the new Session or None

        Returns:
            Callable that removes the handler; safe to call more than once
        """
        ...

    async def sign_up(
        self,
        email: str,
        password: str,
        metadata: dict[str, Any],
    ) -> ServiceResult[Identity]:
        """Create an account; metadata is stored as the user's metadata."""
        ...

    async def sign_in(self, email: str, password: str) -> ServiceResult[Session]:
        """Sign in with email and password."""
        ...

    async def sign_out(self) -> ServiceResult[None]:
        """Sign out the current user."""
        ...

    async def fetch_record(self, table: Table, record_id: str) -> ServiceResult[dict[str, Any]]:
        """
        Fetch a row by primary key.

        Returns:
            ServiceResult with the row, or data=None (and no error) if absent
        """
        ...

    async def insert_record(self, table: Table, record: dict[str, Any]) -> ServiceResult[None]:
        """Insert a row."""
        ...

    async def update_record(
        self,
        table: Table,
        record_id: str,
        partial: dict[str, Any],
    ) -> ServiceResult[None]:
        """Update the given columns of a row."""
        ...
