"""
Page endpoints.

One GET route per entry of the route table. Protected pages go through the
access gate on every request:
- pending: 202 with a neutral waiting body
- redirect: 307 to the default route for the session
- allow: the page view with the profile data it consumes
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from modules.access.gate import GateOutcome
from modules.access.routes import ROUTES, RouteSpec, guard
from modules.profiles.models import PointsSummary
from modules.session.interfaces import ISessionStore
from ..dependencies import get_session_store
from ..models.pages import PageView, PendingView

router = APIRouter()


def _page_endpoint(spec: RouteSpec):
    async def render(
        request: Request,
        store: ISessionStore = Depends(get_session_store),
    ):
        state = store.state
        decision = guard(spec, state)

        if decision.outcome == GateOutcome.PENDING:
            return JSONResponse(
                status_code=status.HTTP_202_ACCEPTED,
                content=PendingView().model_dump(),
            )
        if decision.outcome == GateOutcome.REDIRECT:
            return RedirectResponse(
                decision.target,
                status_code=status.HTTP_307_TEMPORARY_REDIRECT,
            )

        student = state.student_profile
        return PageView(
            view=spec.view,
            path=request.url.path,
            params=dict(request.path_params),
            user_profile=state.user_profile,
            student_profile=student,
            teacher_profile=state.teacher_profile,
            points=PointsSummary.from_profile(student) if student else None,
        )

    render.__name__ = f"page_{spec.view}"
    render.__doc__ = f"Render the {spec.view} page."
    return render


for _spec in ROUTES:
    router.add_api_route(
        _spec.api_path,
        _page_endpoint(_spec),
        methods=["GET"],
        name=_spec.view,
        response_model=PageView,
    )
