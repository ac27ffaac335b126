"""Per-domain registry of authentication managers and API clients.

Each configured domain gets its own ``AuthManager`` so tokens are never shared
between tenants. Managers and clients are created lazily on first use and
reused for the lifetime of the registry.
"""

import logging
from typing import TypeVar

import httpx

from ..config import DomainConfig, SearchConfig
from .auth_manager import AuthManager
from .base_client import BaseClient
from .events_client import EventsClient
from .ingestion_client import IngestionClient
from .search_client import SearchClient

logger = logging.getLogger("sitecore_search_mcp.registry")

ClientT = TypeVar("ClientT", bound=BaseClient)


class DomainRegistry:
    """Resolve domains to their authentication manager and API clients."""

    def __init__(self, config: SearchConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize the registry.

        Args:
            config: Resolved multi-domain configuration.
            transport: Optional ``httpx`` transport shared by every client (tests).

        """
        self.config = config
        self._transport = transport
        self._auth_managers: dict[str, AuthManager] = {}
        self._search_clients: dict[str, SearchClient] = {}
        self._ingestion_clients: dict[str, IngestionClient] = {}
        self._events_clients: dict[str, EventsClient] = {}

    def get_auth_manager(self, domain_id: str | None = None) -> AuthManager | None:
        """Return the domain's manager, or None when no API key is configured."""
        domain, domain_config = self.config.resolve(domain_id)
        if not domain_config.api_key:
            return None
        manager = self._auth_managers.get(domain)
        if manager is None:
            manager = AuthManager(
                domain_config.api_key,
                domain_config.auth_scopes,
                domain_config.access_token_expiry,
                domain_config.refresh_token_expiry,
                auth_url=domain_config.auth_url_str,
                verify_ssl=domain_config.verify_ssl,
                transport=self._transport,
            )
            self._auth_managers[domain] = manager
            logger.debug("Created auth manager for domain %s", domain)
        return manager

    def _build_client(
        self,
        client_cls: type[ClientT],
        base_url: str,
        domain: str,
        domain_config: DomainConfig,
    ) -> ClientT:
        return client_cls(
            base_url,
            auth_manager=self.get_auth_manager(domain),
            timeout_ms=domain_config.timeout_ms,
            verify_ssl=domain_config.verify_ssl,
            transport=self._transport,
        )

    def get_search_client(self, domain_id: str | None = None) -> SearchClient:
        """Return the Search API client for a domain."""
        domain, domain_config = self.config.resolve(domain_id)
        if domain not in self._search_clients:
            self._search_clients[domain] = self._build_client(SearchClient, domain_config.search_url_str, domain, domain_config)
        return self._search_clients[domain]

    def get_ingestion_client(self, domain_id: str | None = None) -> IngestionClient:
        """Return the Ingestion API client for a domain."""
        domain, domain_config = self.config.resolve(domain_id)
        if domain not in self._ingestion_clients:
            self._ingestion_clients[domain] = self._build_client(IngestionClient, domain_config.ingestion_url_str, domain, domain_config)
        return self._ingestion_clients[domain]

    def get_events_client(self, domain_id: str | None = None) -> EventsClient:
        """Return the Events API client for a domain."""
        domain, domain_config = self.config.resolve(domain_id)
        if domain not in self._events_clients:
            self._events_clients[domain] = self._build_client(EventsClient, domain_config.events_url_str, domain, domain_config)
        return self._events_clients[domain]

    def get_client_key(self, domain_id: str | None = None) -> str | None:
        """Return the configured Events client key (``ckey``) for a domain, if any."""
        _, domain_config = self.config.resolve(domain_id)
        return domain_config.client_key

    def active_managers(self) -> dict[str, AuthManager]:
        """Return a snapshot of the managers created so far, keyed by domain."""
        return dict(self._auth_managers)


__all__ = ["DomainRegistry"]
