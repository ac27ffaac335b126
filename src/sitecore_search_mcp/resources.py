"""MCP resources for the Sitecore Search server.

Exposes the configured domains and the state of their authentication managers
as read-only resources. Neither resource ever includes API keys or tokens.
"""

# pyright: reportUnusedFunction=false

from dataclasses import asdict
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

from fastmcp import FastMCP


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register resources on the provided app instance.

    Args:
        app: The FastMCP application instance to add resources to.
        deps: Dependencies namespace providing ``get_registry``.

    """

    def _build_response(section: str, data: Any) -> dict[str, Any]:
        return {
            "retrieved_at": datetime.now(UTC).isoformat(),
            section: data,
        }

    @app.resource(
        uri="sitecore://domains",
        name="Sitecore Domains",
        description="Return the configured Sitecore domains and their API endpoints.",
        mime_type="application/json",
        tags={"domains", "config"},
    )
    async def get_domains() -> dict[str, Any]:
        config = deps.get_registry().config
        domains = {
            name: {
                "search_base_url": domain.search_url_str,
                "ingestion_base_url": domain.ingestion_url_str,
                "events_base_url": domain.events_url_str,
                "auth_url": domain.auth_url_str,
                "auth_scopes": [scope.value for scope in domain.auth_scopes],
                "has_api_key": bool(domain.api_key),
                "has_client_key": bool(domain.client_key),
            }
            for name, domain in config.domains.items()
        }
        response = _build_response("domains", domains)
        response["default_domain"] = config.default_domain
        return response

    @app.resource(
        uri="sitecore://auth/status",
        name="Sitecore Auth Status",
        description="Return the token status of every domain that has authenticated so far.",
        mime_type="application/json",
        tags={"auth", "diagnostics"},
    )
    async def get_auth_status() -> dict[str, Any]:
        statuses = {
            domain: {
                **asdict(manager.get_token_status()),
                "is_refreshing": manager.is_refreshing,
                "uses_api_key_only": manager.uses_api_key_only,
            }
            for domain, manager in deps.get_registry().active_managers().items()
        }
        return _build_response("auth", statuses)


__all__ = ["register"]
