"""Configuration management for the Sitecore Search MCP server.

This module defines the per-domain ``DomainConfig`` model, the multi-domain
``SearchConfig`` container and helpers to load both from environment
variables. A single domain is configured with ``SITECORE_DOMAIN_ID`` and the
``SITECORE_*`` variables; additional domains can be supplied as a JSON object
in ``SITECORE_DOMAINS_JSON``.
"""

import json
import os
from enum import StrEnum
from functools import lru_cache
from typing import Any, Self

from dotenv import load_dotenv
from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

# Load variables from a local .env file for development convenience
load_dotenv()

DEFAULT_BASE_URL = "https://discover.sitecorecloud.io"
DEFAULT_AUTH_URL = "https://api.rfksrv.com/account/1/access-token"
DEFAULT_ACCESS_TOKEN_EXPIRY_MS = 86_400_000  # 1 day
DEFAULT_REFRESH_TOKEN_EXPIRY_MS = 604_800_000  # 7 days


class AuthScope(StrEnum):
    """Capabilities a Sitecore API key can be scoped to."""

    DISCOVER = "discover"
    EVENT = "event"
    INGESTION = "ingestion"


ALL_SCOPES: tuple[AuthScope, ...] = (AuthScope.DISCOVER, AuthScope.EVENT, AuthScope.INGESTION)


class DomainConfig(BaseModel):
    """Configuration values for one Sitecore Search domain (tenant)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    search_base_url: AnyHttpUrl = AnyHttpUrl(DEFAULT_BASE_URL)
    ingestion_base_url: AnyHttpUrl = AnyHttpUrl(DEFAULT_BASE_URL)
    events_base_url: AnyHttpUrl = AnyHttpUrl(DEFAULT_BASE_URL)
    api_key: str | None = None
    client_key: str | None = None
    access_token_expiry: int = Field(default=DEFAULT_ACCESS_TOKEN_EXPIRY_MS, gt=0)
    refresh_token_expiry: int = Field(default=DEFAULT_REFRESH_TOKEN_EXPIRY_MS, gt=0)
    auth_scopes: tuple[AuthScope, ...] = Field(default=ALL_SCOPES, min_length=1)
    auth_url: AnyHttpUrl = AnyHttpUrl(DEFAULT_AUTH_URL)
    timeout_ms: int = Field(default=30000, ge=1000, le=600000)
    verify_ssl: bool = True

    @field_validator("api_key", "client_key", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("auth_scopes", mode="before")
    @classmethod
    def _split_scopes(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @staticmethod
    def _url_str(url: AnyHttpUrl) -> str:
        return str(url).rstrip("/")

    @property
    def search_url_str(self) -> str:
        """Return the Search API base URL as a plain string."""
        return self._url_str(self.search_base_url)

    @property
    def ingestion_url_str(self) -> str:
        """Return the Ingestion API base URL as a plain string."""
        return self._url_str(self.ingestion_base_url)

    @property
    def events_url_str(self) -> str:
        """Return the Events API base URL as a plain string."""
        return self._url_str(self.events_base_url)

    @property
    def auth_url_str(self) -> str:
        """Return the authentication endpoint as a plain string."""
        return str(self.auth_url)


class SearchConfig(BaseModel):
    """All configured domains plus the default domain identifier."""

    domains: dict[str, DomainConfig]
    default_domain: str | None = None

    def resolve(self, domain_id: str | None = None) -> tuple[str, DomainConfig]:
        """Return the domain key and configuration for ``domain_id``.

        Falls back to the default domain when ``domain_id`` is empty.

        Raises:
            RuntimeError: If no domain can be determined or it is not configured.

        """
        target = domain_id or self.default_domain
        if not target:
            msg = "No domain ID provided and no default domain configured."
            raise RuntimeError(msg)
        domain_config = self.domains.get(target)
        if domain_config is None:
            msg = f"Domain configuration not found for: {target}"
            raise RuntimeError(msg)
        return target, domain_config

    @classmethod
    def from_env(cls) -> Self:
        """Build a configuration object from environment variables."""
        domains: dict[str, Any] = {}

        domain_id = os.getenv("SITECORE_DOMAIN_ID")
        if domain_id:
            raw_domain: dict[str, Any] = {
                "search_base_url": os.getenv("SITECORE_SEARCH_BASE_URL"),
                "ingestion_base_url": os.getenv("SITECORE_INGESTION_BASE_URL"),
                "events_base_url": os.getenv("SITECORE_EVENTS_BASE_URL"),
                "api_key": os.getenv("SITECORE_API_KEY"),
                "client_key": os.getenv("SITECORE_CLIENT_KEY"),
                "access_token_expiry": os.getenv("SITECORE_ACCESS_TOKEN_EXPIRY"),
                "refresh_token_expiry": os.getenv("SITECORE_REFRESH_TOKEN_EXPIRY"),
                "auth_scopes": os.getenv("SITECORE_AUTH_SCOPES"),
                "auth_url": os.getenv("SITECORE_AUTH_URL"),
                "timeout_ms": os.getenv("SITECORE_TIMEOUT_MS"),
                "verify_ssl": os.getenv("SITECORE_VERIFY_SSL"),
            }
            # Unset variables fall back to model defaults
            domains[domain_id] = {key: value for key, value in raw_domain.items() if value is not None}

        domains_json = os.getenv("SITECORE_DOMAINS_JSON")
        if domains_json:
            try:
                parsed = json.loads(domains_json)
            except json.JSONDecodeError as exc:
                msg = f"SITECORE_DOMAINS_JSON is not valid JSON: {exc}"
                raise RuntimeError(msg) from exc
            if not isinstance(parsed, dict):
                msg = "SITECORE_DOMAINS_JSON must be a JSON object keyed by domain ID."
                raise RuntimeError(msg)
            domains.update(parsed)

        if not domains:
            msg = "No Sitecore domains configured. Set SITECORE_DOMAIN_ID or SITECORE_DOMAINS_JSON."
            raise RuntimeError(msg)

        try:
            return cls(
                domains=domains,
                default_domain=os.getenv("SITECORE_DEFAULT_DOMAIN") or domain_id,
            )
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            msg = f"Invalid Sitecore configuration: {messages}"
            raise RuntimeError(msg) from exc


@lru_cache(maxsize=1)
def load_config() -> SearchConfig:
    """Load and cache the configuration from the environment."""
    return SearchConfig.from_env()


def clear_config_cache() -> None:
    """Forget the cached configuration so the next load re-reads the environment."""
    load_config.cache_clear()


__all__ = [
    "ALL_SCOPES",
    "DEFAULT_ACCESS_TOKEN_EXPIRY_MS",
    "DEFAULT_AUTH_URL",
    "DEFAULT_BASE_URL",
    "DEFAULT_REFRESH_TOKEN_EXPIRY_MS",
    "AuthScope",
    "DomainConfig",
    "SearchConfig",
    "clear_config_cache",
    "load_config",
]
