"""
Base repository class for database access.

Provides a common abstraction layer for Supabase-backed data access,
encapsulating client access and the "single row by primary key" idiom that
every PrismWorlds table shares.
"""

from typing import Any, Generic, Optional, TypeVar
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Primary-key lookups that distinguish "no row" from errors

    Example:
        class ProfileRepository(BaseRepository[dict]):
            def get_profile(self, user_id: str) -> Optional[dict]:
                return self._select_by_id("user_profiles", user_id)
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _select_by_id(self, table: str, record_id: str) -> Optional[dict[str, Any]]:
        """
        Fetch a single row by its id column.

        Returns:
            The row as a dict, or None when no row matches.
        """
        result = self._db.table(table).select("*").eq("id", record_id).execute()
        if not result.data:
            return None
        return result.data[0]
