"""Unit tests for the Sitecore REST clients.

Requests are served by ``httpx.MockTransport`` so the tests check the exact
method, path, headers and body that reach the wire.
"""

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from sitecore_search_mcp.client.base_client import BaseClient
from sitecore_search_mcp.client.events_client import EventsClient
from sitecore_search_mcp.client.ingestion_client import IngestionClient, entity_path
from sitecore_search_mcp.client.search_client import SearchClient
from sitecore_search_mcp.errors import SitecoreApiError

BASE_URL = "https://api.example.com"


class _Recorder:
    """Record requests and answer with a fixed response."""

    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._response = response or httpx.Response(200, json={"ok": True})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def _auth_manager(header: dict[str, str]) -> MagicMock:
    manager = MagicMock()
    manager.get_auth_header = AsyncMock(return_value=header)
    return manager


@pytest.mark.asyncio
async def test_request_merges_auth_header() -> None:
    """The auth manager is asked for a header before every request."""
    recorder = _Recorder()
    manager = _auth_manager({"Authorization": "Bearer tok"})
    client = BaseClient(f"{BASE_URL}/", auth_manager=manager, transport=httpx.MockTransport(recorder))

    result = await client.get("/things", params={"q": "x"})

    assert result == {"ok": True}
    assert str(recorder.last.url) == f"{BASE_URL}/things?q=x"
    assert recorder.last.headers["Authorization"] == "Bearer tok"
    assert recorder.last.headers["Content-Type"] == "application/json"
    manager.get_auth_header.assert_awaited_once()


@pytest.mark.asyncio
async def test_request_without_auth_manager_sends_no_authorization() -> None:
    """Clients for unauthenticated domains send no Authorization header."""
    recorder = _Recorder()
    client = BaseClient(BASE_URL, transport=httpx.MockTransport(recorder))

    await client.post("/things", {"a": 1})

    assert "Authorization" not in recorder.last.headers
    assert recorder.last_json() == {"a": 1}


@pytest.mark.asyncio
async def test_empty_body_returns_empty_dict() -> None:
    """A 204 or otherwise empty response yields an empty object."""
    client = BaseClient(BASE_URL, transport=httpx.MockTransport(_Recorder(httpx.Response(204))))
    assert await client.delete("/things/1") == {}


@pytest.mark.asyncio
async def test_non_object_body_is_wrapped() -> None:
    """A JSON list is returned under a ``result`` key."""
    client = BaseClient(BASE_URL, transport=httpx.MockTransport(_Recorder(httpx.Response(200, json=[1, 2]))))
    assert await client.get("/things") == {"result": [1, 2]}


@pytest.mark.asyncio
async def test_invalid_json_raises() -> None:
    """A body that is not JSON is reported as an API error."""
    client = BaseClient(BASE_URL, transport=httpx.MockTransport(_Recorder(httpx.Response(200, text="<html>"))))
    with pytest.raises(SitecoreApiError, match="Invalid JSON response from GET /things"):
        await client.get("/things")


@pytest.mark.asyncio
async def test_error_status_uses_response_message() -> None:
    """HTTP errors carry the status code and the message from the body."""
    response = httpx.Response(403, json={"message": "Forbidden domain"})
    client = BaseClient(BASE_URL, transport=httpx.MockTransport(_Recorder(response)))

    with pytest.raises(SitecoreApiError, match="Forbidden domain") as exc_info:
        await client.post("/things", {})

    assert exc_info.value.status_code == 403
    assert exc_info.value.response == {"message": "Forbidden domain"}


@pytest.mark.asyncio
async def test_network_error_is_wrapped() -> None:
    """Transport failures become SitecoreApiError without a status code."""

    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = BaseClient(BASE_URL, transport=httpx.MockTransport(_fail))

    with pytest.raises(SitecoreApiError, match="Network error during GET /things") as exc_info:
        await client.get("/things")
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_search_posts_widget_request() -> None:
    """Search requests go to the domain's discover endpoint."""
    recorder = _Recorder()
    client = SearchClient(BASE_URL, transport=httpx.MockTransport(recorder))

    await client.search("12345", {"widget": {"items": []}})

    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/discover/v2/12345"
    assert recorder.last_json() == {"widget": {"items": []}}


def test_entity_path() -> None:
    """Ingestion routes are scoped by domain, source and entity."""
    assert entity_path("d", "s", "content") == "/ingestion/v1/domains/d/sources/s/entities/content"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method_name", "args", "expected_method", "expected_suffix", "expected_body"),
    [
        ("create_document", ({"id": "1"},), "POST", "/documents", {"id": "1"}),
        ("update_document", ("doc1", {"id": "1"}), "PUT", "/documents/doc1", {"id": "1"}),
        ("patch_document", ("doc1", {"title": "t"}), "PATCH", "/documents/doc1", {"title": "t"}),
        ("delete_document", ("doc1",), "DELETE", "/documents/doc1", None),
        (
            "create_document_from_file",
            ("doc1", "https://files.example.com/a.pdf"),
            "POST",
            "/file/doc1",
            {"file_url": "https://files.example.com/a.pdf"},
        ),
        (
            "create_document_from_url",
            ("doc1", "https://www.example.com/page", {"css": [{"name": "t", "selector": "h1"}]}),
            "POST",
            "/url/doc1",
            {"url": "https://www.example.com/page", "extractors": {"css": [{"name": "t", "selector": "h1"}]}},
        ),
        ("get_status", ("upd-1",), "GET", "/status/upd-1", None),
    ],
)
async def test_ingestion_routes(
    method_name: str,
    args: tuple[Any, ...],
    expected_method: str,
    expected_suffix: str,
    expected_body: dict[str, Any] | None,
) -> None:
    """Each ingestion method maps to its REST route and body."""
    recorder = _Recorder()
    client = IngestionClient(BASE_URL, transport=httpx.MockTransport(recorder))

    await getattr(client, method_name)("d", "s", "content", *args)

    assert recorder.last.method == expected_method
    assert recorder.last.url.path == entity_path("d", "s", "content") + expected_suffix
    if expected_body is None:
        assert recorder.last.content in (b"", b"null")
    else:
        assert recorder.last_json() == expected_body


@pytest.mark.asyncio
async def test_events_routes() -> None:
    """Events use v4 publish, v3 content publish and v4 validate."""
    recorder = _Recorder()
    client = EventsClient(BASE_URL, transport=httpx.MockTransport(recorder))

    await client.track_event("ckey", {"event": "view"})
    assert recorder.last.url.path == "/event/v4/publish/ckey"

    await client.track_content_event("ckey", {"event": "view"})
    assert recorder.last.url.path == "/event/v3/publish/ckey"

    await client.validate_event({"event": "click"})
    assert recorder.last.url.path == "/event/v4/validate"
    assert recorder.last_json() == {"event": "click"}
