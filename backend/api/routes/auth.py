"""
Authentication endpoints.

Sign up, sign in and sign out. None of these change the session snapshot
directly: profile loading and clearing follow from the session-change
subscription of the store.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from shared.models import Identity
from modules.auth.models import SignInRequest, SignUpRequest
from modules.session.interfaces import ISessionStore
from ..dependencies import get_session_store
from ..models.errors import to_http_exception

router = APIRouter()


class SignUpResponse(BaseModel):
    """Sign-up result; identity is absent when the service withholds it."""

    identity: Optional[Identity] = None


@router.post("/sign-up", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: SignUpRequest,
    store: ISessionStore = Depends(get_session_store),
) -> SignUpResponse:
    """
    Create a student or teacher account.

    Form checks run before anything is sent; a failure is returned as a
    400 with the offending field in details.
    """
    result = await store.sign_up(request)
    if not result.ok:
        raise to_http_exception(result.error)
    return SignUpResponse(identity=result.data)


@router.post("/sign-in", response_model=Identity)
async def sign_in(
    request: SignInRequest,
    store: ISessionStore = Depends(get_session_store),
) -> Identity:
    """Sign in with email and password."""
    result = await store.sign_in(request.email, request.password)
    if not result.ok:
        raise to_http_exception(result.error)
    return result.data.identity


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    store: ISessionStore = Depends(get_session_store),
) -> Response:
    """Sign out the current user. Signing out twice is harmless."""
    result = await store.sign_out()
    if not result.ok:
        raise to_http_exception(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
