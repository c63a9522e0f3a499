"""
Page response models.

What each page endpoint returns once the gate allows it: the view to mount
and the profile data the view consumes.
"""

from typing import Optional

from pydantic import BaseModel

from modules.access.gate import GateOutcome
from modules.profiles.models import PointsSummary, StudentProfile, TeacherProfile, UserProfile


class PageView(BaseModel):
    """An allowed page render."""

    view: str
    path: str
    params: dict[str, str] = {}
    user_profile: Optional[UserProfile] = None
    student_profile: Optional[StudentProfile] = None
    teacher_profile: Optional[TeacherProfile] = None
    points: Optional[PointsSummary] = None


class PendingView(BaseModel):
    """Neutral waiting indicator while the session loads."""

    status: str = "pending"


class NavigationResponse(BaseModel):
    """Where a client-side navigation to a path ends up."""

    path: str
    view: str
    params: dict[str, str] = {}
    outcome: GateOutcome
    target: Optional[str] = None
