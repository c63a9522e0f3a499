"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import get_settings
from modules.session.interfaces import ISessionStore
from modules.session.models import SessionStatus
from ..dependencies import get_session_store

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    session: SessionStatus
    loading: bool


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    store: ISessionStore = Depends(get_session_store),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Ready once the session store has finished bootstrapping.
    """
    state = store.state
    return ReadinessResponse(
        status="starting" if state.status == SessionStatus.BOOTSTRAPPING else "ready",
        session=state.status,
        loading=state.loading,
    )
