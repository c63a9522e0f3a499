"""
Supabase implementation of the remote data service.

Wraps the synchronous Supabase client: auth calls go through client.auth,
record calls through PostgREST tables. SDK exceptions are converted into
ServiceError values at this boundary.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AuthError, Client

from shared.models import Identity, Session
from shared.repository import BaseRepository
from modules.profiles.models import Table

from .exceptions import ServiceError
from .interfaces import IDataServiceClient, SessionChangeHandler, Unsubscribe
from .models import ServiceResult

logger = logging.getLogger(__name__)

# Everything the SDK raises for remote or transport failures
SUPABASE_ERRORS = (AuthError, APIError, httpx.HTTPError)


def to_service_error(error: Exception) -> ServiceError:
    """Convert an SDK exception into a displayable ServiceError."""
    code = getattr(error, "code", None)
    message = getattr(error, "message", None) or str(error) or error.__class__.__name__
    return ServiceError(message, code=str(code) if code else None)


def map_identity(user: Any) -> Identity:
    """Build an Identity from a Supabase Auth user object."""
    return Identity(
        id=user.id,
        email=getattr(user, "email", None),
        issued_at=getattr(user, "created_at", None),
        last_sign_in=getattr(user, "last_sign_in_at", None),
    )


def map_session(raw: Any) -> Optional[Session]:
    """Build a Session from a Supabase Auth session object (or None)."""
    if raw is None or getattr(raw, "user", None) is None:
        return None

    expires_at = getattr(raw, "expires_at", None)
    return Session(
        access_token=raw.access_token,
        refresh_token=getattr(raw, "refresh_token", None),
        expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc) if expires_at else None,
        identity=map_identity(raw.user),
    )


class SupabaseDataClient(BaseRepository[dict[str, Any]], IDataServiceClient):
    """
    IDataServiceClient backed by a Supabase client.

    The client is expected to be the anon-key client returned by
    shared.database.get_supabase_client(), so table access runs under the
    signed-in user's Row Level Security policies.
    """

    def __init__(self, db: Client) -> None:
        super().__init__(db)
        # Strong references to dispatched handler tasks until they finish
        self._tasks: set[asyncio.Task] = set()

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    async def get_current_session(self) -> ServiceResult[Session]:
        try:
            raw = self._db.auth.get_session()
        except SUPABASE_ERRORS as e:
            return ServiceResult.failure(to_service_error(e))
        return ServiceResult.success(map_session(raw))

    def on_session_change(self, handler: SessionChangeHandler) -> Unsubscribe:
        loop = asyncio.get_running_loop()
        active = True

        def dispatch(session: Optional[Session]) -> None:
            if not active:
                return
            task = loop.create_task(handler(session))
            self._tasks.add(task)
            task.add_done_callback(self._on_handler_done)

        def callback(event: Any, raw_session: Any) -> None:
            if not active:
                return
            logger.debug("Auth state change: %s", event)
            # The SDK may emit from its token-refresh thread
            loop.call_soon_threadsafe(dispatch, map_session(raw_session))

        subscription = self._db.auth.on_auth_state_change(callback)

        def unsubscribe() -> None:
            nonlocal active
            if not active:
                return
            active = False
            subscription.unsubscribe()

        return unsubscribe

    def _on_handler_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Session change handler failed", exc_info=error)

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    async def sign_up(
        self,
        email: str,
        password: str,
        metadata: dict[str, Any],
    ) -> ServiceResult[Identity]:
        try:
            response = self._db.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": metadata},
                }
            )
        except SUPABASE_ERRORS as e:
            return ServiceResult.failure(to_service_error(e))

        if response.user is None:
            return ServiceResult.success(None)
        return ServiceResult.success(map_identity(response.user))

    async def sign_in(self, email: str, password: str) -> ServiceResult[Session]:
        try:
            response = self._db.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except SUPABASE_ERRORS as e:
            return ServiceResult.failure(to_service_error(e))

        session = map_session(response.session)
        if session is None:
            return ServiceResult.failure(
                ServiceError("Sign-in did not return a session", code="NO_SESSION")
            )
        return ServiceResult.success(session)

    async def sign_out(self) -> ServiceResult[None]:
        try:
            self._db.auth.sign_out()
        except SUPABASE_ERRORS as e:
            return ServiceResult.failure(to_service_error(e))
        return ServiceResult.success()

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------

    async def fetch_record(self, table: Table, record_id: str) -> ServiceResult[dict[str, Any]]:
        try:
            row = self._select_by_id(table.value, record_id)
        except SUPABASE_ERRORS as e:
            return ServiceResult.failure(to_service_error(e))
        return ServiceResult.success(row)

    async def insert_record(self, table: Table, record: dict[str, Any]) -> ServiceResult[None]:
        try:
            self._db.table(table.value).insert(record).execute()
        except SUPABASE_ERRORS as e:
            return ServiceResult.failure(to_service_error(e))
        return ServiceResult.success()

    async def update_record(
        self,
        table: Table,
        record_id: str,
        partial: dict[str, Any],
    ) -> ServiceResult[None]:
        try:
            self._db.table(table.value).update(partial).eq("id", record_id).execute()
        except SUPABASE_ERRORS as e:
            return ServiceResult.failure(to_service_error(e))
        return ServiceResult.success()
