"""
Session/profile store.

Owns the single SessionState of the process. Every transition goes through
_publish(), which replaces the snapshot and notifies listeners.

Lifecycle:
    bootstrapping --start()--> unauthenticated
                          +--> authenticated(loading) --> authenticated(loaded)

Session changes reported by the remote service (sign-in, sign-out, token
refresh, another tab) re-run the same sequence. Each profile load is tagged
with a generation number; a load whose generation is no longer current when
it resumes drops its results instead of overwriting newer state.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from pydantic import ValidationError as ModelValidationError

from shared.exceptions import ValidationError
from shared.models import Identity, Session
from modules.auth.exceptions import NotAuthenticatedError
from modules.auth.interfaces import IDataServiceClient, Unsubscribe
from modules.auth.models import ServiceResult, SignUpRequest
from modules.auth.validation import validate_sign_up
from modules.profiles.models import (
    Role,
    StudentProfile,
    StudentProfileUpdate,
    Table,
    TeacherProfile,
    UserProfile,
    UserProfileUpdate,
    parse_role_profile,
    role_profile_table,
)

from .interfaces import ISessionStore, StateListener
from .models import SessionState

logger = logging.getLogger(__name__)

ProfileT = TypeVar("ProfileT", UserProfile, StudentProfile)


class SessionStore(ISessionStore):
    """
    Implementation of the session store.

    All remote access goes through the injected IDataServiceClient, so the
    store itself never sees an SDK exception.
    """

    def __init__(self, client: IDataServiceClient):
        self._client = client
        self._state = SessionState.bootstrapping()
        self._listeners: list[StateListener] = []
        self._unsubscribe: Optional[Unsubscribe] = None
        self._generation = 0

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: SessionState) -> None:
        if state == self._state:
            return
        logger.debug(
            "Session state: %s (loading=%s)", state.status.value, state.loading
        )
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def start(self) -> None:
        if self._unsubscribe is not None:
            return

        self._unsubscribe = self._client.on_session_change(self._handle_session_change)

        result = await self._client.get_current_session()
        if not result.ok:
            logger.warning("Could not retrieve current session: %s", result.error.message)
            await self._apply_session(None)
            return

        await self._apply_session(result.data)

    async def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        # Any load still in flight is now stale
        self._generation += 1

    async def _handle_session_change(self, session: Optional[Session]) -> None:
        await self._apply_session(session)

    async def _apply_session(self, session: Optional[Session]) -> None:
        self._generation += 1
        generation = self._generation

        if session is None:
            self._publish(SessionState.unauthenticated())
            return

        self._publish(SessionState.loading_profile(session))
        await self._load_profiles(session, generation)

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _load_profiles(self, session: Session, generation: int) -> None:
        user_id = session.user_id

        user_profile = await self._load_user_profile(user_id)
        if not self._is_current(generation):
            logger.debug("Discarding stale profile load for %s", user_id)
            return

        role_profile = None
        if user_profile is not None:
            role_profile = await self._load_role_profile(user_profile)
            if not self._is_current(generation):
                logger.debug("Discarding stale profile load for %s", user_id)
                return

        self._publish(SessionState.loaded(session, user_profile, role_profile))

    async def _load_user_profile(self, user_id: str) -> Optional[UserProfile]:
        result = await self._client.fetch_record(Table.USER_PROFILES, user_id)
        if not result.ok:
            logger.error("Error loading user profile: %s", result.error.message)
            return None
        if result.data is None:
            logger.error("User profile not found for %s", user_id)
            return None

        try:
            return UserProfile.model_validate(result.data)
        except ModelValidationError as e:
            logger.error("Invalid user profile row for %s: %s", user_id, e)
            return None

    async def _load_role_profile(
        self,
        user_profile: UserProfile,
    ) -> Optional[StudentProfile | TeacherProfile]:
        table = role_profile_table(user_profile.role)
        if table is None:
            return None

        result = await self._client.fetch_record(table, user_profile.id)
        if not result.ok:
            logger.error(
                "Error loading %s profile: %s", user_profile.role.value, result.error.message
            )
            return None
        if result.data is None:
            # The row may not exist yet (e.g. sign-up insert failed)
            logger.info("No %s profile found for %s", user_profile.role.value, user_profile.id)
            return None

        try:
            return parse_role_profile(user_profile.role, result.data)
        except ModelValidationError as e:
            logger.error(
                "Invalid %s profile row for %s: %s", user_profile.role.value, user_profile.id, e
            )
            return None

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    async def sign_up(self, request: SignUpRequest) -> ServiceResult[Identity]:
        error = validate_sign_up(request)
        if error is not None:
            return ServiceResult.failure(error)

        result = await self._client.sign_up(request.email, request.password, request.metadata())
        if not result.ok or result.data is None:
            return result

        identity = result.data
        record = self._role_record(identity.id, request)
        table = role_profile_table(request.role)
        if table is not None:
            insert = await self._client.insert_record(table, record)
            if not insert.ok:
                # The account exists; sign-up still succeeds without the profile row
                logger.error(
                    "Error creating %s profile: %s", request.role.value, insert.error.message
                )

        return result

    @staticmethod
    def _role_record(user_id: str, request: SignUpRequest) -> dict[str, Any]:
        if request.role == Role.STUDENT:
            return {
                "id": user_id,
                "grade": request.grade,
                "school": request.school,
                "state": request.state,
            }
        return {
            "id": user_id,
            "school": request.school,
            "subject": request.subject,
            "experience_years": request.experience_years or 0,
        }

    async def sign_in(self, email: str, password: str) -> ServiceResult[Session]:
        return await self._client.sign_in(email, password)

    async def sign_out(self) -> ServiceResult[None]:
        return await self._client.sign_out()

    # -------------------------------------------------------------------------
    # Profile edits
    # -------------------------------------------------------------------------

    async def update_profile(self, updates: UserProfileUpdate) -> ServiceResult[UserProfile]:
        identity = self._state.identity
        if identity is None:
            return ServiceResult.failure(NotAuthenticatedError())

        changes = updates.model_dump(exclude_unset=True)
        if self._state.user_profile is not None:
            check = _merge(self._state.user_profile, changes)
            if not check.ok:
                return check

        partial = updates.model_dump(mode="json", exclude_unset=True)
        result = await self._client.update_record(Table.USER_PROFILES, identity.id, partial)
        if not result.ok:
            return ServiceResult.failure(result.error)

        current = self._state.user_profile if self._state.identity == identity else None
        if current is None:
            return ServiceResult.success(None)

        merged = _merge(current, changes)
        if merged.ok:
            self._publish(self._state.model_copy(update={"user_profile": merged.data}))
        return merged

    async def update_student_profile(
        self,
        updates: StudentProfileUpdate,
    ) -> ServiceResult[StudentProfile]:
        identity = self._state.identity
        if identity is None:
            return ServiceResult.failure(NotAuthenticatedError())

        changes = updates.model_dump(exclude_unset=True)
        if self._state.student_profile is not None:
            check = _merge(self._state.student_profile, changes)
            if not check.ok:
                return check

        partial = updates.model_dump(mode="json", exclude_unset=True)
        result = await self._client.update_record(Table.STUDENTS, identity.id, partial)
        if not result.ok:
            return ServiceResult.failure(result.error)

        current = self._state.student_profile if self._state.identity == identity else None
        if current is None:
            return ServiceResult.success(None)

        # Local echo only: a concurrent writer's changes are not re-fetched
        merged = _merge(current, changes)
        if merged.ok:
            self._publish(self._state.model_copy(update={"role_profile": merged.data}))
        return merged


def _merge(profile: ProfileT, changes: dict[str, Any]) -> ServiceResult[ProfileT]:
    """Apply changes to a profile, re-validating the result."""
    try:
        merged = type(profile).model_validate({**profile.model_dump(), **changes})
    except ModelValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        return ServiceResult.failure(
            ValidationError(first["msg"], field=field, code="INVALID_UPDATE")
        )
    return ServiceResult.success(merged)
