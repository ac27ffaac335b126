"""Shared ``httpx`` client setup for the Sitecore APIs.

Provides the async context manager that creates an ``httpx.AsyncClient`` with
the timeout, TLS verification and connection-retry settings used by every
REST client and by the authentication manager.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

# Connection failures are retried by the transport; HTTP error responses are not.
CONNECT_RETRIES = 2


@asynccontextmanager
async def create_http_client(
    *,
    base_url: str = "",
    timeout_ms: int,
    verify_ssl: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Create a configured async HTTP client.

    Args:
        base_url: Base URL prepended to relative request paths.
        timeout_ms: Request timeout in milliseconds.
        verify_ssl: Whether to verify TLS certificates.
        transport: Optional transport override (used by tests).

    Yields:
        Configured ``httpx.AsyncClient`` instance.

    """
    timeout = httpx.Timeout(timeout_ms / 1000)
    if transport is None:
        transport = httpx.AsyncHTTPTransport(retries=CONNECT_RETRIES, verify=verify_ssl)
    async with httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        transport=transport,
        headers={"Content-Type": "application/json"},
    ) as client:
        yield client


__all__ = ["CONNECT_RETRIES", "create_http_client"]
