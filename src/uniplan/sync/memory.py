"""In-process remote store for offline sessions."""

from __future__ import annotations

import asyncio
import copy
from typing import Dict, List, Optional

from uniplan.sync.remote import COURSES, PROFILES, SEMESTERS, RemoteStore, Row


class InMemoryRemoteStore(RemoteStore):
    """Remote store backed by dictionaries.

    Rows live only as long as the store object. Rows are copied on the way
    in and out, so callers never share state with the tables.

    Example:
        >>> store = InMemoryRemoteStore()
        >>> planner = Planner(sync=SyncReconciler(store, lambda: "local"))
    """

    def __init__(self, delay: float = 0.0):
        """Initialize an empty store.

        Args:
            delay: Seconds every call sleeps before answering
        """
        self.delay = delay
        self.tables: Dict[str, Dict[str, Row]] = {PROFILES: {}, SEMESTERS: {}, COURSES: {}}

    def seed(self, table: str, rows: List[Row]) -> None:
        """Put rows into a table directly."""
        key = "user_id" if table == PROFILES else "id"
        for row in rows:
            self.tables[table][row[key]] = copy.deepcopy(row)

    async def _call(self, method: str, table: str) -> None:
        """Hook run before every store method."""
        if self.delay:
            await asyncio.sleep(self.delay)

    async def fetch_profile(self, user_id: str) -> Optional[Row]:
        await self._call("fetch_profile", PROFILES)
        row = self.tables[PROFILES].get(user_id)
        return copy.deepcopy(row) if row is not None else None

    async def fetch_rows(self, table: str, user_id: str) -> List[Row]:
        await self._call("fetch_rows", table)
        return [copy.deepcopy(row) for row in self.tables[table].values() if row.get("user_id") == user_id]

    async def delete_rows(self, table: str, user_id: str, ids: List[str]) -> None:
        await self._call("delete_rows", table)
        for row_id in ids:
            row = self.tables[table].get(row_id)
            if row is not None and row.get("user_id") == user_id:
                del self.tables[table][row_id]

    async def upsert_rows(self, table: str, rows: List[Row]) -> None:
        await self._call("upsert_rows", table)
        for row in rows:
            self.tables[table][row["id"]] = copy.deepcopy(row)

    async def upsert_profile(self, row: Row) -> None:
        await self._call("upsert_profile", PROFILES)
        self.tables[PROFILES][row["user_id"]] = copy.deepcopy(row)
