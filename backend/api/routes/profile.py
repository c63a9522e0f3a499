"""
Profile edit endpoints.

Edits are written remotely, then echoed into the session snapshot without
a re-fetch.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from modules.profiles.models import (
    StudentProfile,
    StudentProfileUpdate,
    UserProfile,
    UserProfileUpdate,
)
from modules.session.interfaces import ISessionStore
from ..dependencies import get_session_store
from ..models.errors import to_http_exception

router = APIRouter()


@router.patch("", response_model=Optional[UserProfile])
async def update_profile(
    updates: UserProfileUpdate,
    store: ISessionStore = Depends(get_session_store),
) -> Optional[UserProfile]:
    """Update the signed-in user's account fields."""
    result = await store.update_profile(updates)
    if not result.ok:
        raise to_http_exception(result.error)
    return result.data


@router.patch("/student", response_model=Optional[StudentProfile])
async def update_student_profile(
    updates: StudentProfileUpdate,
    store: ISessionStore = Depends(get_session_store),
) -> Optional[StudentProfile]:
    """Update the signed-in student's profile."""
    result = await store.update_student_profile(updates)
    if not result.ok:
        raise to_http_exception(result.error)
    return result.data
