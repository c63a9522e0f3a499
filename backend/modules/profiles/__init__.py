"""
Profiles module.

Data contracts for the three profile tables: user_profiles (one row per
identity), students and teachers (one row per identity, discriminated by
UserProfile.role).

Public API:
- Role, Table: enums naming roles and tables
- UserProfile, StudentProfile, TeacherProfile, RoleProfile: row models
- UserProfileUpdate, StudentProfileUpdate: partial update payloads
- PointsSummary: the student's points/level/streak at a glance
"""

from .models import (
    Role,
    Table,
    UserProfile,
    StudentProfile,
    TeacherProfile,
    RoleProfile,
    UserProfileUpdate,
    StudentProfileUpdate,
    PointsSummary,
    role_profile_table,
    parse_role_profile,
)

__all__ = [
    "Role",
    "Table",
    "UserProfile",
    "StudentProfile",
    "TeacherProfile",
    "RoleProfile",
    "UserProfileUpdate",
    "StudentProfileUpdate",
    "PointsSummary",
    "role_profile_table",
    "parse_role_profile",
]
