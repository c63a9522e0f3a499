"""
Authentication module data models.

Request payloads for the sign-up/sign-in forms, and ServiceResult, the
value every remote call returns in place of raising.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from shared.exceptions import PrismWorldsError
from modules.profiles.models import Role


T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Outcome of a remote call: either data or an error, never an exception.

    A successful lookup that found nothing is ok with data=None.
    """

    data: Optional[T] = None
    error: Optional[PrismWorldsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Optional[T] = None) -> "ServiceResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: PrismWorldsError) -> "ServiceResult[T]":
        return cls(error=error)


class SignUpRequest(BaseModel):
    """
    Sign-up form contents.

    Required fields default to empty strings so that omissions are reported
    by the local form checks rather than by request parsing.
    """

    email: str = ""
    password: str = ""
    confirm_password: str = ""
    full_name: str = ""
    role: Role = Role.STUDENT
    school: str = ""
    state: str = ""

    # Student specific
    grade: Optional[str] = None

    # Teacher specific
    subject: Optional[str] = None
    experience_years: Optional[int] = Field(None, ge=0)

    def metadata(self) -> dict[str, str]:
        """User metadata stored with the auth account."""
        return {"full_name": self.full_name, "role": self.role.value}


class SignInRequest(BaseModel):
    """Sign-in form contents."""

    email: str
    password: str
