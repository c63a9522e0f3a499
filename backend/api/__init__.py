"""
PrismWorlds API package.

Provides the FastAPI application fronting the PrismWorlds session layer.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
