"""
Local sign-up form checks.

Run before any network call; the first failing check wins, in the order
the sign-up form reports them.
"""

from typing import Optional

from shared.exceptions import ValidationError
from modules.profiles.models import Role

from .models import SignUpRequest

MIN_PASSWORD_LENGTH = 6

_REQUIRED_FIELDS = (
    ("email", "Email is required"),
    ("full_name", "Full name is required"),
    ("school", "School name is required"),
    ("state", "Please select your state"),
)


def validate_sign_up(request: SignUpRequest) -> Optional[ValidationError]:
    """
    Check a sign-up request.

    Returns:
        The first ValidationError found, or None if the request may be sent
    """
    for field, message in _REQUIRED_FIELDS:
        if not getattr(request, field).strip():
            return ValidationError(message, field=field, code="REQUIRED_FIELD")

    if request.password != request.confirm_password:
        return ValidationError(
            "Passwords do not match",
            field="confirm_password",
            code="PASSWORD_MISMATCH",
        )

    if len(request.password) < MIN_PASSWORD_LENGTH:
        return ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            field="password",
            code="PASSWORD_TOO_SHORT",
        )

    if request.role == Role.STUDENT and not (request.grade or "").strip():
        return ValidationError("Please select your grade", field="grade", code="REQUIRED_FIELD")

    if request.role not in (Role.STUDENT, Role.TEACHER):
        return ValidationError(
            "Only students and teachers can sign up",
            field="role",
            code="INVALID_ROLE",
        )

    return None
