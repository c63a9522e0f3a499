"""API models package."""

from .errors import ErrorResponse, status_for, to_http_exception
from .pages import PageView, PendingView, NavigationResponse

__all__ = [
    "ErrorResponse",
    "status_for",
    "to_http_exception",
    "PageView",
    "PendingView",
    "NavigationResponse",
]
