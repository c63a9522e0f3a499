"""
Session store interface.

The API layer depends on ISessionStore for reading the session snapshot
and for every auth/profile mutation.
"""

from typing import Callable, Optional, Protocol, runtime_checkable

from shared.models import Identity, Session
from modules.auth.models import ServiceResult, SignUpRequest
from modules.profiles.models import (
    StudentProfile,
    StudentProfileUpdate,
    UserProfile,
    UserProfileUpdate,
)

from .models import SessionState

StateListener = Callable[[SessionState], None]


@runtime_checkable
class ISessionStore(Protocol):
    """
    Interface for the process-wide session.

    The store is the only writer of SessionState. Readers either take the
    current snapshot or subscribe for new ones.
    """

    @property
    def state(self) -> SessionState:
        """The current snapshot."""
        ...

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener for new snapshots.

        Returns:
            Callable that removes the listener
        """
        ...

    async def start(self) -> None:
        """Subscribe to session changes and load the existing session."""
        ...

    async def stop(self) -> None:
        """Unsubscribe from session changes and drop in-flight loads."""
        ...

    async def sign_up(self, request: SignUpRequest) -> ServiceResult[Identity]:
        """
        Create an account and its role-specific profile.

        Returns:
            ServiceResult with the new Identity, or a ValidationError /
            ServiceError. Session state is never changed by a failure.
        """
        ...

    async def sign_in(self, email: str, password: str) -> ServiceResult[Session]:
        """Sign in; profiles load via the session-change subscription."""
        ...

    async def sign_out(self) -> ServiceResult[None]:
        """Sign out; state clears via the session-change subscription."""
        ...

    async def update_profile(self, updates: UserProfileUpdate) -> ServiceResult[UserProfile]:
        """
        Update account fields and echo them into the snapshot.

        Returns:
            ServiceResult with the merged profile (None if none was loaded),
            or NotAuthenticatedError / ServiceError
        """
        ...

    async def update_student_profile(
        self,
        updates: StudentProfileUpdate,
    ) -> ServiceResult[StudentProfile]:
        """Update student fields and echo them into the snapshot."""
        ...
