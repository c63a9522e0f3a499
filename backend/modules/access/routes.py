"""
Route composition.

The page surface as a static table. Every entry with a required role is
rendered through the gate; the rest are public.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from modules.profiles.models import Role
from modules.session.models import SessionState

from .exceptions import RouteNotFoundError
from .gate import GateDecision, decide

_PARAM = re.compile(r":(\w+)")


@dataclass(frozen=True)
class RouteSpec:
    """
    A page path and its access requirement.

    Attributes:
        path: Path pattern, with ":name" segments for parameters
        view: Name of the view rendered at this path
        required_role: Role the page is restricted to; None for public pages
    """

    path: str
    view: str
    required_role: Optional[Role] = None
    _pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        regex = _PARAM.sub(r"(?P<\1>[^/]+)", self.path)
        object.__setattr__(self, "_pattern", re.compile(f"^{regex}$"))

    @property
    def is_public(self) -> bool:
        return self.required_role is None

    @property
    def api_path(self) -> str:
        """The path in FastAPI's "{name}" parameter syntax."""
        return _PARAM.sub(r"{\1}", self.path)

    def match(self, path: str) -> Optional[dict[str, str]]:
        """Parameters extracted from path, or None if it does not match."""
        found = self._pattern.match(path)
        if found is None:
            return None
        return found.groupdict()


ROUTES: tuple[RouteSpec, ...] = (
    # Public
    RouteSpec("/", "landing"),
    RouteSpec("/demo", "demo"),
    RouteSpec("/contact", "contact"),
    # Student area
    RouteSpec("/dashboard", "dashboard", Role.STUDENT),
    RouteSpec("/lessons", "lessons", Role.STUDENT),
    RouteSpec("/lessons/:id", "lesson_detail", Role.STUDENT),
    RouteSpec("/challenges", "challenges", Role.STUDENT),
    RouteSpec("/leaderboards", "leaderboards", Role.STUDENT),
    RouteSpec("/badges", "badges", Role.STUDENT),
    RouteSpec("/shop", "points_shop", Role.STUDENT),
    RouteSpec("/analytics", "analytics", Role.STUDENT),
    RouteSpec("/profile", "profile", Role.STUDENT),
    RouteSpec("/profile/edit", "profile_edit", Role.STUDENT),
    # Teacher area
    RouteSpec("/teacher", "teacher_portal", Role.TEACHER),
)


def resolve_route(path: str) -> tuple[RouteSpec, dict[str, str]]:
    """
    Find the table entry for a concrete path.

    Raises:
        RouteNotFoundError: If no entry matches
    """
    normalized = path.rstrip("/") or "/"
    for spec in ROUTES:
        params = spec.match(normalized)
        if params is not None:
            return spec, params
    raise RouteNotFoundError(path)


def guard(spec: RouteSpec, state: SessionState) -> GateDecision:
    """Gate decision for a table entry; public pages are always allowed."""
    if spec.is_public:
        return GateDecision.allow()
    return decide(state, spec.required_role)


def guard_route(
    path: str,
    state: SessionState,
) -> tuple[RouteSpec, dict[str, str], GateDecision]:
    """Resolve a path and run it through the gate."""
    spec, params = resolve_route(path)
    return spec, params, guard(spec, state)
