"""Remote store interface: rows keyed by user ID."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

PROFILES = "profiles"
SEMESTERS = "semesters"
COURSES = "courses"

Row = Dict[str, Any]


class RemoteStore(ABC):
    """Persistence the sync reconciler reads from and writes to.

    The store holds three tables. ``profiles`` has one row per user
    (``user_id``, ``notes``, ``degree_name``, ``degree_total_credits``);
    ``semesters`` and ``courses`` rows carry an ``id`` and the owning
    ``user_id``. Implementations raise any exception on failure; the
    reconciler wraps it into a SyncError.
    """

    @abstractmethod
    async def fetch_profile(self, user_id: str) -> Optional[Row]:
        """Get the user's profile row, or None if there is none."""

    @abstractmethod
    async def fetch_rows(self, table: str, user_id: str) -> List[Row]:
        """Get all rows of ``table`` owned by the user, in creation order."""

    async def fetch_ids(self, table: str, user_id: str) -> List[str]:
        """Get the IDs of all rows of ``table`` owned by the user."""
        return [row["id"] for row in await self.fetch_rows(table, user_id)]

    @abstractmethod
    async def delete_rows(self, table: str, user_id: str, ids: List[str]) -> None:
        """Delete the user's rows of ``table`` with the given IDs."""

    @abstractmethod
    async def upsert_rows(self, table: str, rows: List[Row]) -> None:
        """Insert rows, replacing rows with the same ID."""

    @abstractmethod
    async def upsert_profile(self, row: Row) -> None:
        """Insert the profile row, replacing the one with the same user ID."""
