"""Base HTTP client shared by the Search, Ingestion and Events clients.

Every request asks the domain's ``AuthManager`` for an authentication header
immediately before it is sent and merges it into the request headers. HTTP
and network failures are converted into ``SitecoreApiError``.
"""

import logging
from typing import Any, TypeAlias

import httpx

from ..errors import SitecoreApiError, handle_api_error
from .auth_manager import AuthManager
from .http_client import create_http_client

logger = logging.getLogger("sitecore_search_mcp.base_client")

JsonObject: TypeAlias = dict[str, Any]

DEFAULT_TIMEOUT_MS = 30000


class BaseClient:
    """Send JSON requests to one Sitecore API base URL."""

    def __init__(
        self,
        base_url: str,
        *,
        auth_manager: AuthManager | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.auth_manager = auth_manager
        self._timeout_ms = timeout_ms
        self._verify_ssl = verify_ssl
        self._transport = transport

    async def _auth_headers(self) -> dict[str, str]:
        if self.auth_manager is None:
            return {}
        return await self.auth_manager.get_auth_header()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> JsonObject:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the client's base URL.
            json: Optional JSON request body.
            params: Optional query parameters.

        Returns:
            The decoded response object. An empty body yields ``{}`` and a
            non-object body is wrapped as ``{"result": value}``.

        Raises:
            SitecoreApiError: On HTTP error status, network failure or invalid JSON.

        """
        headers = await self._auth_headers()
        logger.debug("API request %s %s%s", method, self.base_url, path)
        try:
            async with create_http_client(
                base_url=self.base_url,
                timeout_ms=self._timeout_ms,
                verify_ssl=self._verify_ssl,
                transport=self._transport,
            ) as http_client:
                resp = await http_client.request(method, path, json=json, params=params, headers=headers)
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            status = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
            logger.error("API request %s %s failed (status=%s): %s", method, path, status, exc)  # noqa: TRY400
            handle_api_error(exc, context=f"{method} {path}")

        logger.debug("API response %s for %s %s", resp.status_code, method, path)
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError as exc:
            msg = f"Invalid JSON response from {method} {path}: {exc}"
            raise SitecoreApiError(msg, status_code=resp.status_code) from exc
        if isinstance(data, dict):
            return data
        return {"result": data}

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> JsonObject:
        """Send a GET request."""
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> JsonObject:
        """Send a POST request."""
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> JsonObject:
        """Send a PUT request."""
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> JsonObject:
        """Send a PATCH request."""
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> JsonObject:
        """Send a DELETE request."""
        return await self.request("DELETE", path)


__all__ = ["DEFAULT_TIMEOUT_MS", "BaseClient", "JsonObject"]
