"""
Access module.

The access control gate and the route table it guards.

Public API:
- decide, default_route: Gate decision for a session snapshot
- GateDecision, GateOutcome: Allow / Redirect(target) / Pending
- RouteSpec, ROUTES: The page table
- resolve_route, guard, guard_route: Path lookup and guarded lookup
- RouteNotFoundError: Raised for paths outside the table
"""

from .gate import GateDecision, GateOutcome, decide, default_route, HOME_PATHS, LANDING_PATH
from .routes import RouteSpec, ROUTES, resolve_route, guard, guard_route
from .exceptions import RouteNotFoundError

__all__ = [
    "GateDecision",
    "GateOutcome",
    "decide",
    "default_route",
    "HOME_PATHS",
    "LANDING_PATH",
    "RouteSpec",
    "ROUTES",
    "resolve_route",
    "guard",
    "guard_route",
    "RouteNotFoundError",
]
