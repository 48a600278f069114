"""Remote store speaking PostgREST over HTTP."""

from __future__ import annotations

from typing import List, Optional

from uniplan.clients import HTTPClient
from uniplan.config import RemoteSettings
from uniplan.logging import get_logger
from uniplan.sync.remote import PROFILES, RemoteStore, Row

logger = get_logger(__name__)


class RestRemoteStore(RemoteStore):
    """Remote store for a PostgREST-style endpoint.

    Rows are selected with ``user_id=eq.<id>`` filters, deleted with
    ``id=in.(...)`` filters and upserted with
    ``Prefer: resolution=merge-duplicates``.

    Example:
        >>> async with RestRemoteStore(RemoteSettings.from_env()) as store:
        ...     reconciler = SyncReconciler(store, lambda: session.user_id)
        ...     await reconciler.pull(planner)
    """

    UPSERT_HEADERS = {"Prefer": "resolution=merge-duplicates"}

    def __init__(
        self,
        settings: Optional[RemoteSettings] = None,
        http_client: Optional[HTTPClient] = None,
    ):
        """Initialize the store.

        Args:
            settings: Connection settings used to create an own client
            http_client: Optional HTTP client. If None, creates own client.
        """
        if settings is None and http_client is None:
            raise ValueError("Either settings or http_client is required")

        self.settings = settings
        self._external_client = http_client
        self._internal_client: Optional[HTTPClient] = None
        self.http_client: HTTPClient = http_client
        logger.debug("RestRemoteStore initialized")

    async def __aenter__(self):
        """Enter async context manager."""
        if self._external_client is None:
            self._internal_client = HTTPClient(
                base_url=self.settings.base_url,
                api_key=self.settings.api_key,
                timeout=self.settings.timeout,
            )
            await self._internal_client.__aenter__()
            self.http_client = self._internal_client
            logger.debug("Created internal HTTP client")
        else:
            self.http_client = self._external_client
            logger.debug("Using external HTTP client")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager."""
        if self._internal_client is not None:
            await self._internal_client.__aexit__(exc_type, exc_val, exc_tb)
            self._internal_client = None
            logger.debug("Closed internal HTTP client")
        return False

    async def fetch_profile(self, user_id: str) -> Optional[Row]:
        rows = await self.http_client.get_json(PROFILES, params={"user_id": f"eq.{user_id}", "select": "*"})
        return rows[0] if rows else None

    async def fetch_rows(self, table: str, user_id: str) -> List[Row]:
        params = {"user_id": f"eq.{user_id}", "select": "*", "order": "created_at.asc"}
        rows = await self.http_client.get_json(table, params=params)
        logger.debug("Rows fetched", table=table, count=len(rows))
        return rows

    async def fetch_ids(self, table: str, user_id: str) -> List[str]:
        rows = await self.http_client.get_json(table, params={"user_id": f"eq.{user_id}", "select": "id"})
        return [row["id"] for row in rows]

    async def delete_rows(self, table: str, user_id: str, ids: List[str]) -> None:
        if not ids:
            return
        params = {"user_id": f"eq.{user_id}", "id": f"in.({','.join(ids)})"}
        await self.http_client.delete(table, params=params)
        logger.debug("Rows deleted", table=table, count=len(ids))

    async def upsert_rows(self, table: str, rows: List[Row]) -> None:
        if not rows:
            return
        await self.http_client.post_json(table, json=rows, headers=self.UPSERT_HEADERS)
        logger.debug("Rows upserted", table=table, count=len(rows))

    async def upsert_profile(self, row: Row) -> None:
        await self.http_client.post_json(
            PROFILES,
            json=[row],
            params={"on_conflict": "user_id"},
            headers=self.UPSERT_HEADERS,
        )
