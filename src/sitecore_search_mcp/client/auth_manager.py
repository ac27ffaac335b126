"""Session token management for the Sitecore Search APIs.

``AuthManager`` turns a long-lived API key into short-lived bearer tokens. It
generates an access/refresh token pair on first use, reuses the access token
while it is valid, refreshes it with the refresh token once it nears expiry and
falls back to full generation once the refresh token has expired as well.

Concurrent callers on the same event loop share a single in-flight token
request: the pending ``asyncio.Task`` is stored on the manager and every caller
awaits that same task. Any failure while acquiring tokens makes
``get_auth_header`` fall back to the raw API key instead of raising; the
downstream API is the place where a bad credential is reported.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..config import (
    ALL_SCOPES,
    DEFAULT_ACCESS_TOKEN_EXPIRY_MS,
    DEFAULT_AUTH_URL,
    DEFAULT_REFRESH_TOKEN_EXPIRY_MS,
    AuthScope,
)
from ..errors import AuthenticationError
from .http_client import create_http_client

logger = logging.getLogger("sitecore_search_mcp.auth_manager")

ModelT = TypeVar("ModelT", bound=BaseModel)

# Access tokens are treated as expired this long before their real expiry.
EXPIRY_BUFFER_MS = 60_000
AUTH_TIMEOUT_MS = 10_000


class TokenResponse(BaseModel):
    """Body returned by the token generation endpoint (lifetimes in ms)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    access_token: str
    refresh_token: str
    access_token_expiry: int
    refresh_token_expiry: int


class RefreshTokenResponse(BaseModel):
    """Body returned by the token refresh endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    access_token: str


@dataclass(slots=True)
class TokenPair:
    """Stored tokens with absolute expiry instants in epoch milliseconds."""

    access_token: str
    refresh_token: str
    access_token_expires_at: int
    refresh_token_expires_at: int


@dataclass(frozen=True, slots=True)
class TokenStatus:
    """Diagnostic snapshot of the stored tokens."""

    has_tokens: bool
    access_token_valid: bool
    refresh_token_valid: bool


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


def _consume_outcome(task: asyncio.Task[str]) -> None:
    if not task.cancelled():
        task.exception()


class AuthManager:
    """Produce authentication headers for one Sitecore domain."""

    def __init__(  # noqa: PLR0913
        self,
        api_key: str | None = None,
        scopes: Iterable[AuthScope | str] | None = None,
        access_token_expiry_ms: int = DEFAULT_ACCESS_TOKEN_EXPIRY_MS,
        refresh_token_expiry_ms: int = DEFAULT_REFRESH_TOKEN_EXPIRY_MS,
        *,
        auth_url: str = DEFAULT_AUTH_URL,
        timeout_ms: int = AUTH_TIMEOUT_MS,
        verify_ssl: bool = True,
        expiry_buffer_ms: int = EXPIRY_BUFFER_MS,
        clock: Callable[[], int] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            api_key: Long-lived Sitecore API key. ``None`` disables authentication.
            scopes: Capabilities the key is used for; defaults to all of them.
            access_token_expiry_ms: Requested access token lifetime.
            refresh_token_expiry_ms: Requested refresh token lifetime.
            auth_url: Token generation and refresh endpoint.
            timeout_ms: Timeout for token requests.
            verify_ssl: Whether to verify TLS certificates on token requests.
            expiry_buffer_ms: Margin before access token expiry that forces a refresh.
            clock: Returns the current time in epoch milliseconds.
            transport: Optional ``httpx`` transport for token requests.

        Raises:
            ValueError: If ``scopes`` is given but empty.

        """
        resolved_scopes = tuple(dict.fromkeys(AuthScope(scope) for scope in scopes)) if scopes is not None else ALL_SCOPES
        if not resolved_scopes:
            msg = "At least one authentication scope is required."
            raise ValueError(msg)

        self._api_key = api_key or None
        self._scopes = resolved_scopes
        self._access_token_expiry_ms = access_token_expiry_ms
        self._refresh_token_expiry_ms = refresh_token_expiry_ms
        self._auth_url = auth_url
        self._timeout_ms = timeout_ms
        self._verify_ssl = verify_ssl
        self._expiry_buffer_ms = expiry_buffer_ms
        self._clock = clock or _wall_clock_ms
        self._transport = transport
        self._tokens: TokenPair | None = None
        self._pending: asyncio.Task[str] | None = None

    @property
    def scopes(self) -> tuple[AuthScope, ...]:
        """Return the configured scopes in declaration order."""
        return self._scopes

    @property
    def uses_api_key_only(self) -> bool:
        """Return True when the Ingestion-only scope requires the raw API key."""
        return set(self._scopes) == {AuthScope.INGESTION}

    @property
    def is_refreshing(self) -> bool:
        """Return True while a token request is in flight."""
        return self._pending is not None and not self._pending.done()

    async def get_auth_header(self) -> dict[str, str]:
        """Return the ``Authorization`` header for the next API request.

        Never raises: if tokens cannot be obtained the raw API key is returned.
        """
        if not self._api_key:
            # No key: rely on subdomain / network-level trust
            return {}

        if self.uses_api_key_only:
            return {"Authorization": self._api_key}

        try:
            access_token = await self._get_access_token()
        except Exception:  # noqa: BLE001 - fall back to the API key; the API reports bad credentials
            logger.warning("Could not obtain an access token; falling back to the API key.", exc_info=True)
            return {"Authorization": self._api_key}

        if access_token:
            return {"Authorization": f"Bearer {access_token}"}
        return {"Authorization": self._api_key}

    async def _get_access_token(self) -> str:
        """Return a valid access token, generating or refreshing it when needed."""
        pending = self._current_pending()
        if pending is not None:
            return await asyncio.shield(pending)

        if self._tokens is not None and self._is_access_token_valid():
            return self._tokens.access_token

        if self._tokens is not None and self._is_refresh_token_valid():
            return await self._start_acquisition(self._refresh_access_token)

        return await self._start_acquisition(self._generate_tokens)

    def _current_pending(self) -> asyncio.Task[str] | None:
        """Return the in-flight task if it belongs to the running event loop."""
        pending = self._pending
        if pending is None:
            return None
        if pending.get_loop() is not asyncio.get_running_loop():
            # Left behind by a loop that is gone; it can never complete here
            self._pending = None
            return None
        return pending

    async def _start_acquisition(self, acquire: Callable[[], Awaitable[str]]) -> str:
        """Run ``acquire`` as the single in-flight task and await its result."""

        async def _run() -> str:
            try:
                return await acquire()
            finally:
                self._pending = None

        task = asyncio.get_running_loop().create_task(_run())
        # Retrieve the outcome even when every waiter has been cancelled
        task.add_done_callback(_consume_outcome)
        self._pending = task
        return await asyncio.shield(task)

    async def _generate_tokens(self) -> str:
        """Exchange the API key for a new access/refresh token pair."""
        if not self._api_key:
            msg = "An API key is required to generate tokens."
            raise AuthenticationError(msg)

        logger.debug("Generating new access token from API key.")
        try:
            response = await self._request_tokens()
        except Exception as exc:
            self._tokens = None
            logger.exception("Failed to generate access token from API key")
            msg = f"Token generation failed: {exc}"
            raise AuthenticationError(msg) from exc

        now = self._clock()
        self._tokens = TokenPair(
            access_token=response.access_token,
            refresh_token=response.refresh_token,
            access_token_expires_at=now + response.access_token_expiry,
            refresh_token_expires_at=now + response.refresh_token_expiry,
        )
        logger.info("Successfully generated new access token.")
        return response.access_token

    async def _refresh_access_token(self) -> str:
        """Exchange the stored refresh token for a new access token."""
        tokens = self._tokens
        if tokens is None:
            msg = "No stored tokens available for refresh."
            raise AuthenticationError(msg)

        logger.debug("Refreshing access token using refresh token.")
        try:
            response = await self._request_refresh(tokens.refresh_token)
        except Exception as exc:
            # Force full re-generation on the next attempt
            self._tokens = None
            logger.exception("Failed to refresh access token")
            msg = f"Token refresh failed: {exc}"
            raise AuthenticationError(msg) from exc

        tokens.access_token = response.access_token
        tokens.access_token_expires_at = self._clock() + self._access_token_expiry_ms
        logger.info("Successfully refreshed access token.")
        return tokens.access_token

    async def _request_tokens(self) -> TokenResponse:
        """POST the scopes and lifetimes to the auth endpoint using the API key."""
        payload = {
            "scope": [scope.value for scope in self._scopes],
            "accessExpiry": self._access_token_expiry_ms,
            "refreshExpiry": self._refresh_token_expiry_ms,
        }
        async with create_http_client(
            timeout_ms=self._timeout_ms,
            verify_ssl=self._verify_ssl,
            transport=self._transport,
        ) as http_client:
            resp = await http_client.post(
                self._auth_url,
                json=payload,
                headers={"x-api-key": self._api_key or ""},
            )
            resp.raise_for_status()
        return self._parse(TokenResponse, resp)

    async def _request_refresh(self, refresh_token: str) -> RefreshTokenResponse:
        """PUT an empty body to the auth endpoint using the refresh token."""
        async with create_http_client(
            timeout_ms=self._timeout_ms,
            verify_ssl=self._verify_ssl,
            transport=self._transport,
        ) as http_client:
            resp = await http_client.put(
                self._auth_url,
                json={},
                headers={"Authorization": f"Bearer {refresh_token}"},
            )
            resp.raise_for_status()
        return self._parse(RefreshTokenResponse, resp)

    @staticmethod
    def _parse(model: type[ModelT], resp: httpx.Response) -> ModelT:
        try:
            return model.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            msg = f"Unexpected response from authentication endpoint: {exc}"
            raise AuthenticationError(msg, status_code=resp.status_code) from exc

    def _is_access_token_valid(self) -> bool:
        if self._tokens is None:
            return False
        return self._clock() < self._tokens.access_token_expires_at - self._expiry_buffer_ms

    def _is_refresh_token_valid(self) -> bool:
        if self._tokens is None:
            return False
        return self._clock() < self._tokens.refresh_token_expires_at

    def clear_tokens(self) -> None:
        """Discard stored tokens so the next request generates new ones."""
        self._tokens = None
        logger.info("Cleared stored tokens.")

    def get_token_status(self) -> TokenStatus:
        """Return the current token status for diagnostics."""
        return TokenStatus(
            has_tokens=self._tokens is not None,
            access_token_valid=self._is_access_token_valid(),
            refresh_token_valid=self._is_refresh_token_valid(),
        )


__all__ = [
    "AUTH_TIMEOUT_MS",
    "EXPIRY_BUFFER_MS",
    "AuthManager",
    "RefreshTokenResponse",
    "TokenPair",
    "TokenResponse",
    "TokenStatus",
]
