"""
Profile data models.

These models mirror the rows of the user_profiles, students and teachers
tables. Rows come back from Supabase as dicts and are validated here, so a
malformed row is rejected at the boundary instead of leaking into the
session state.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined


class Role(str, Enum):
    """Discriminator deciding which profile variant and pages apply."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


class Table(str, Enum):
    """Remote tables, all keyed by the identity id."""

    USER_PROFILES = "user_profiles"
    STUDENTS = "students"
    TEACHERS = "teachers"


def _dedupe(ids: list[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def _has_default(field: Optional[FieldInfo]) -> bool:
    if field is None:
        return False
    if field.default_factory is not None:
        return True
    return field.default is not None and field.default is not PydanticUndefined


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("Field cannot be null")
    return value


class _Row(BaseModel):
    """
    Base for table rows.

    A NULL column comes back as None; for fields with a non-null default it
    falls back to that default instead of failing the whole row.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def null_columns_use_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {
            key: value
            for key, value in data.items()
            if value is not None or not _has_default(cls.model_fields.get(key))
        }


class UserProfile(_Row):
    """
    Account-level profile, one-to-one with the identity.

    Created by the remote service at sign-up from the auth metadata.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address")
    full_name: str = Field("", description="Display name")
    role: Role = Field(..., description="Account role")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class StudentProfile(_Row):
    """
    Student row: school details plus the gamification state.

    eco_points, level and streak are derived by the platform from lesson and
    challenge history and can never go below their floors.
    """

    kind: Literal["student"] = "student"

    id: str
    grade: str = ""
    school: str = ""
    state: str = ""
    eco_points: int = Field(0, ge=0)
    level: int = Field(1, ge=1)
    streak: int = Field(0, ge=0)
    completed_lessons: list[str] = Field(default_factory=list)
    completed_challenges: list[str] = Field(default_factory=list)
    earned_badges: list[dict[str, Any]] = Field(default_factory=list)
    total_impact_score: float = 0
    weekly_goal: int = 0
    monthly_goal: int = 0
    join_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("completed_lessons", "completed_challenges")
    @classmethod
    def unique_ids(cls, value: list[str]) -> list[str]:
        return _dedupe(value)


class TeacherProfile(_Row):
    """Teacher row."""

    kind: Literal["teacher"] = "teacher"

    id: str
    school: str = ""
    subject: Optional[str] = None
    experience_years: int = Field(0, ge=0)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


RoleProfile = Annotated[
    Union[StudentProfile, TeacherProfile],
    Field(discriminator="kind"),
]


class UserProfileUpdate(BaseModel):
    """
    Editable account fields.

    Role is deliberately absent: changing it would orphan the role row.
    """

    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def full_name_not_null(cls, value: Optional[str]) -> str:
        return _reject_null(value)


class StudentProfileUpdate(BaseModel):
    """Partial student update. Only fields explicitly set are sent."""

    grade: Optional[str] = None
    school: Optional[str] = None
    state: Optional[str] = None
    eco_points: Optional[int] = Field(None, ge=0)
    level: Optional[int] = Field(None, ge=1)
    streak: Optional[int] = Field(None, ge=0)
    completed_lessons: Optional[list[str]] = None
    completed_challenges: Optional[list[str]] = None
    earned_badges: Optional[list[dict[str, Any]]] = None
    total_impact_score: Optional[float] = None
    weekly_goal: Optional[int] = None
    monthly_goal: Optional[int] = None

    @field_validator("*")
    @classmethod
    def not_null(cls, value: Any) -> Any:
        return _reject_null(value)


class PointsSummary(BaseModel):
    """What the student layout header shows."""

    eco_points: int
    level: int
    streak: int

    @classmethod
    def from_profile(cls, profile: StudentProfile) -> "PointsSummary":
        return cls(
            eco_points=profile.eco_points,
            level=profile.level,
            streak=profile.streak,
        )


_ROLE_TABLES: dict[Role, Table] = {
    Role.STUDENT: Table.STUDENTS,
    Role.TEACHER: Table.TEACHERS,
}


def role_profile_table(role: Role) -> Optional[Table]:
    """Table holding the role-specific row, or None for roles without one."""
    return _ROLE_TABLES.get(role)


def parse_role_profile(role: Role, row: dict[str, Any]) -> Union[StudentProfile, TeacherProfile]:
    """
    Build the role-specific profile from a raw row.

    Raises:
        ValueError: If the role has no role-specific profile
        pydantic.ValidationError: If the row does not match the model
    """
    if role == Role.STUDENT:
        return StudentProfile.model_validate(row)
    if role == Role.TEACHER:
        return TeacherProfile.model_validate(row)
    raise ValueError(f"Role {role.value!r} has no role-specific profile")
