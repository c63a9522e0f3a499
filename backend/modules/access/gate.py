"""
Access control gate.

A pure function of the session snapshot: it never performs I/O and never
mutates the store.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from modules.profiles.models import Role
from modules.session.models import SessionState, SessionStatus

LANDING_PATH = "/"

HOME_PATHS: dict[Role, str] = {
    Role.STUDENT: "/dashboard",
    Role.TEACHER: "/teacher",
}


class GateOutcome(str, Enum):
    ALLOW = "allow"
    REDIRECT = "redirect"
    PENDING = "pending"


class GateDecision(BaseModel):
    """What to do with a page request."""

    outcome: GateOutcome
    target: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def allow(cls) -> "GateDecision":
        return cls(outcome=GateOutcome.ALLOW)

    @classmethod
    def pending(cls) -> "GateDecision":
        return cls(outcome=GateOutcome.PENDING)

    @classmethod
    def redirect(cls, target: str) -> "GateDecision":
        return cls(outcome=GateOutcome.REDIRECT, target=target)


def default_route(state: SessionState) -> str:
    """Home page for the signed-in role; the landing page otherwise."""
    if state.identity is None or state.user_profile is None:
        return LANDING_PATH
    return HOME_PATHS.get(state.user_profile.role, LANDING_PATH)


def decide(state: SessionState, required_role: Optional[Role] = None) -> GateDecision:
    """
    Decide whether a protected page may render.

    Args:
        state: Current session snapshot
        required_role: Role the page is restricted to, if any

    Returns:
        Pending while the session is still loading, a redirect to the
        default route when signed out or on the wrong role, allow otherwise
    """
    if state.status == SessionStatus.BOOTSTRAPPING or state.loading:
        return GateDecision.pending()

    if state.identity is None or state.user_profile is None:
        return GateDecision.redirect(default_route(state))

    if required_role is not None and state.user_profile.role != required_role:
        return GateDecision.redirect(default_route(state))

    return GateDecision.allow()
