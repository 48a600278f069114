"""HTTP client for the remote plan store's REST endpoint."""

from typing import Any, Dict, List, Optional

import aiohttp


class HTTPClient:
    """Async JSON client for a PostgREST-style endpoint.

    Handles session lifetime, timeouts and the authentication headers the
    remote store expects.
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: int = 30,
        headers: Optional[Dict[str, str]] = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Endpoint root; table names are appended to it
            api_key: Key sent as ``apikey`` header and bearer token
            timeout: Request timeout in seconds
            headers: Optional custom headers to merge with defaults
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)

        auth = {}
        if api_key:
            auth = {"apikey": api_key, "Authorization": f"Bearer {api_key}"}
        self.headers = {**self.DEFAULT_HEADERS, **auth, **(headers or {})}
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        self._session = aiohttp.ClientSession(
            timeout=self.timeout,
            headers=self.headers,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._session:
            await self._session.close()
            self._session = None

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _require_session(self) -> aiohttp.ClientSession:
        if not self._session:
            raise RuntimeError("HTTPClient must be used as async context manager")
        return self._session

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Perform GET request and return the decoded JSON body.

        Args:
            path: Table or resource path relative to the base URL
            params: Query parameters
            **kwargs: Additional arguments for aiohttp request

        Returns:
            Decoded JSON content

        Raises:
            aiohttp.ClientError: On network or HTTP errors
        """
        session = self._require_session()
        async with session.get(self._url(path), params=params, **kwargs) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

    async def post_json(
        self,
        path: str,
        json: List[Dict[str, Any]] | Dict[str, Any],
        params: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> str:
        """Perform POST request with a JSON payload and return response text.

        Args:
            path: Table or resource path relative to the base URL
            json: JSON payload
            params: Query parameters
            **kwargs: Additional arguments for aiohttp request

        Returns:
            Response text content

        Raises:
            aiohttp.ClientError: On network or HTTP errors
        """
        session = self._require_session()
        async with session.post(self._url(path), json=json, params=params, **kwargs) as response:
            response.raise_for_status()
            return await response.text()

    async def delete(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> None:
        """Perform DELETE request.

        Args:
            path: Table or resource path relative to the base URL
            params: Query parameters selecting the rows to delete
            **kwargs: Additional arguments for aiohttp request

        Raises:
            aiohttp.ClientError: On network or HTTP errors
        """
        session = self._require_session()
        async with session.delete(self._url(path), params=params, **kwargs) as response:
            response.raise_for_status()
