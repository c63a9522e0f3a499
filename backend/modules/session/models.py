"""
Session state models.

SessionState is an immutable snapshot. The store replaces it wholesale on
every transition, so readers can hold on to a snapshot without locking.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator

from shared.models import Identity, Session
from modules.profiles.models import (
    Role,
    RoleProfile,
    StudentProfile,
    TeacherProfile,
    UserProfile,
)


class SessionStatus(str, Enum):
    """Where the store is in the session lifecycle."""

    BOOTSTRAPPING = "bootstrapping"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class SessionState(BaseModel):
    """
    Current identity and its profiles.

    Invariants (checked at construction):
    - bootstrapping: loading, no session
    - unauthenticated: no session, no profiles, not loading
    - authenticated: a session is present
    - role_profile is absent while loading or without a user profile, and
      its kind always equals user_profile.role
    """

    status: SessionStatus
    session: Optional[Session] = None
    user_profile: Optional[UserProfile] = None
    role_profile: Optional[RoleProfile] = None
    loading: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_invariants(self) -> "SessionState":
        if self.status == SessionStatus.BOOTSTRAPPING:
            if not self.loading or self.session is not None:
                raise ValueError("bootstrapping state must be loading with no session")
        elif self.status == SessionStatus.UNAUTHENTICATED:
            if self.loading or self.session is not None or self.user_profile is not None:
                raise ValueError("unauthenticated state cannot carry a session or profile")
        elif self.session is None:
            raise ValueError("authenticated state requires a session")

        if self.role_profile is not None:
            if self.loading or self.user_profile is None:
                raise ValueError("role profile requires a loaded user profile")
            if self.role_profile.kind != self.user_profile.role.value:
                raise ValueError(
                    f"{self.role_profile.kind} profile does not match role "
                    f"{self.user_profile.role.value}"
                )
        return self

    # -------------------------------------------------------------------------
    # Constructors for each state
    # -------------------------------------------------------------------------

    @classmethod
    def bootstrapping(cls) -> "SessionState":
        return cls(status=SessionStatus.BOOTSTRAPPING, loading=True)

    @classmethod
    def unauthenticated(cls) -> "SessionState":
        return cls(status=SessionStatus.UNAUTHENTICATED)

    @classmethod
    def loading_profile(cls, session: Session) -> "SessionState":
        return cls(status=SessionStatus.AUTHENTICATED, session=session, loading=True)

    @classmethod
    def loaded(
        cls,
        session: Session,
        user_profile: Optional[UserProfile] = None,
        role_profile: Optional[StudentProfile | TeacherProfile] = None,
    ) -> "SessionState":
        return cls(
            status=SessionStatus.AUTHENTICATED,
            session=session,
            user_profile=user_profile,
            role_profile=role_profile,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def identity(self) -> Optional[Identity]:
        return self.session.identity if self.session else None

    @property
    def role(self) -> Optional[Role]:
        return self.user_profile.role if self.user_profile else None

    @property
    def student_profile(self) -> Optional[StudentProfile]:
        if isinstance(self.role_profile, StudentProfile):
            return self.role_profile
        return None

    @property
    def teacher_profile(self) -> Optional[TeacherProfile]:
        if isinstance(self.role_profile, TeacherProfile):
            return self.role_profile
        return None
