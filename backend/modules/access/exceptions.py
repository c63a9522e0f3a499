"""Access module exceptions."""

from shared.exceptions import NotFoundError


class RouteNotFoundError(NotFoundError):
    """Raised when a path matches no entry of the route table."""

    def __init__(self, path: str):
        super().__init__(
            f"No page at {path}",
            code="ROUTE_NOT_FOUND",
            details={"path": path},
        )
