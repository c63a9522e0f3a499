"""
Shared data models used across modules.

Identity and Session mirror what Supabase Auth issues. They are owned by the
remote service; the session layer only holds a read reference to them for
the lifetime of the session.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Identity(BaseModel):
    """
    The authenticated principal behind a session.

    The id doubles as the primary key of the user's rows in
    user_profiles, students and teachers.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: Optional[str] = Field(None, description="User's email address")
    issued_at: Optional[datetime] = Field(None, description="When the account was issued")
    last_sign_in: Optional[datetime] = Field(None, description="Last sign-in time")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class Session(BaseModel):
    """A time-bounded credential referencing an Identity."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: Optional[str] = Field(None, description="Refresh token")
    expires_at: Optional[datetime] = Field(None, description="Access token expiry")
    identity: Identity

    model_config = {"frozen": True}

    @property
    def user_id(self) -> str:
        """Convenience accessor for the identity id."""
        return self.identity.id
