"""Tests for the PostgREST remote store and its HTTP client."""

import typing as t

import pytest

from uniplan import HTTPClient, RemoteSettings, RestRemoteStore
from uniplan.sync import COURSES, PROFILES, SEMESTERS


class RecordingClient:
    """Stand-in for HTTPClient that records requests instead of sending them."""

    def __init__(self, responses: t.Optional[dict] = None) -> None:
        self.responses = responses or {}
        self.requests: list = []

    async def get_json(self, path: str, params: t.Optional[dict] = None, **kwargs: t.Any) -> t.Any:
        self.requests.append(("GET", path, params, kwargs))
        return self.responses.get(path, [])

    async def post_json(self, path: str, json: t.Any, params: t.Optional[dict] = None, **kwargs: t.Any) -> str:
        self.requests.append(("POST", path, params, {"json": json, **kwargs}))
        return ""

    async def delete(self, path: str, params: t.Optional[dict] = None, **kwargs: t.Any) -> None:
        self.requests.append(("DELETE", path, params, kwargs))


@pytest.mark.asyncio
async def test_fetch_rows_filters_by_user() -> None:
    client = RecordingClient({SEMESTERS: [{"id": "s1"}]})

    async with RestRemoteStore(http_client=client) as store:
        rows = await store.fetch_rows(SEMESTERS, "user-1")

    assert rows == [{"id": "s1"}]
    assert client.requests == [
        ("GET", SEMESTERS, {"user_id": "eq.user-1", "select": "*", "order": "created_at.asc"}, {}),
    ]


@pytest.mark.asyncio
async def test_fetch_profile_and_ids() -> None:
    client = RecordingClient({PROFILES: [{"user_id": "user-1", "notes": "hi"}], COURSES: [{"id": "c1"}, {"id": "c2"}]})
    store = RestRemoteStore(http_client=client)

    async with store:
        assert (await store.fetch_profile("user-1"))["notes"] == "hi"
        assert await store.fetch_ids(COURSES, "user-1") == ["c1", "c2"]

    assert client.requests[1][2] == {"user_id": "eq.user-1", "select": "id"}


@pytest.mark.asyncio
async def test_missing_profile_is_none() -> None:
    async with RestRemoteStore(http_client=RecordingClient()) as store:
        assert await store.fetch_profile("user-1") is None


@pytest.mark.asyncio
async def test_delete_uses_in_filter() -> None:
    client = RecordingClient()

    async with RestRemoteStore(http_client=client) as store:
        await store.delete_rows(COURSES, "user-1", ["a", "b"])
        await store.delete_rows(COURSES, "user-1", [])

    assert client.requests == [("DELETE", COURSES, {"user_id": "eq.user-1", "id": "in.(a,b)"}, {})]


@pytest.mark.asyncio
async def test_upserts_merge_duplicates() -> None:
    client = RecordingClient()

    async with RestRemoteStore(http_client=client) as store:
        await store.upsert_rows(SEMESTERS, [{"id": "s1"}])
        await store.upsert_rows(SEMESTERS, [])
        await store.upsert_profile({"user_id": "user-1"})

    semesters, profile = client.requests
    assert semesters == ("POST", SEMESTERS, None, {"json": [{"id": "s1"}], "headers": RestRemoteStore.UPSERT_HEADERS})
    assert profile[2] == {"on_conflict": "user_id"}
    assert profile[3]["json"] == [{"user_id": "user-1"}]
    assert profile[3]["headers"] == {"Prefer": "resolution=merge-duplicates"}


def test_store_needs_settings_or_client() -> None:
    with pytest.raises(ValueError):
        RestRemoteStore()


def test_http_client_headers() -> None:
    client = HTTPClient("https://example.test/rest/v1/", api_key="secret", timeout=5)

    assert client.base_url == "https://example.test/rest/v1"
    assert client.headers["apikey"] == "secret"
    assert client.headers["Authorization"] == "Bearer secret"
    assert client.timeout.total == 5


def test_http_client_without_key_sends_no_auth() -> None:
    client = HTTPClient("https://example.test/rest/v1")

    assert "Authorization" not in client.headers


@pytest.mark.asyncio
async def test_http_client_requires_context_manager() -> None:
    client = HTTPClient("https://example.test/rest/v1")

    with pytest.raises(RuntimeError):
        await client.get_json(SEMESTERS)


def test_remote_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNIPLAN_REMOTE_URL", "https://example.test/rest/v1")
    monkeypatch.setenv("UNIPLAN_REMOTE_KEY", "secret")
    monkeypatch.setenv("UNIPLAN_HTTP_TIMEOUT", "12")

    settings = RemoteSettings.from_env()

    assert settings.base_url == "https://example.test/rest/v1"
    assert settings.api_key == "secret"
    assert settings.timeout == 12


def test_remote_settings_require_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("UNIPLAN_REMOTE_URL", raising=False)

    with pytest.raises(RuntimeError):
        RemoteSettings.from_env()
