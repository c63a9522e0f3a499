"""
Session module.

Holds the process-wide session state and the store that owns it.

Public API:
- ISessionStore: Interface for reading and mutating the session
- SessionStore: Implementation over IDataServiceClient
- SessionState, SessionStatus: Immutable snapshot and its lifecycle status
"""

from .interfaces import ISessionStore, StateListener
from .models import SessionState, SessionStatus
from .store import SessionStore

__all__ = [
    "ISessionStore",
    "StateListener",
    "SessionState",
    "SessionStatus",
    "SessionStore",
]
