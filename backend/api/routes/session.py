"""
Session endpoints.

Read-only views of the session snapshot and of where a navigation would
land under the current session.
"""

from fastapi import APIRouter, Depends, Query

from modules.access.exceptions import RouteNotFoundError
from modules.access.routes import guard_route
from modules.session.interfaces import ISessionStore
from modules.session.models import SessionState
from ..dependencies import get_session_store
from ..models.errors import to_http_exception
from ..models.pages import NavigationResponse

router = APIRouter()


@router.get("/session", response_model=SessionState)
async def get_session(
    store: ISessionStore = Depends(get_session_store),
) -> SessionState:
    """Current session snapshot."""
    return store.state


@router.get("/navigate", response_model=NavigationResponse)
async def navigate(
    path: str = Query(..., description="Page path, e.g. /lessons/42"),
    store: ISessionStore = Depends(get_session_store),
) -> NavigationResponse:
    """
    Resolve a page path and run it through the gate.

    Lets a client-side router decide before requesting the page itself.
    """
    try:
        spec, params, decision = guard_route(path, store.state)
    except RouteNotFoundError as e:
        raise to_http_exception(e)

    return NavigationResponse(
        path=path,
        view=spec.view,
        params=params,
        outcome=decision.outcome,
        target=decision.target,
    )
