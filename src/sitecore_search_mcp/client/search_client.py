"""Client for the Sitecore Search & Recommendation API."""

from typing import Any

from .base_client import BaseClient, JsonObject


class SearchClient(BaseClient):
    """Run search, recommendation and AI questions requests."""

    async def search(self, domain_id: str, request: dict[str, Any]) -> JsonObject:
        """Execute a widget request.

        ``POST /discover/v2/{domain_id}``
        """
        return await self.post(f"/discover/v2/{domain_id}", request)


__all__ = ["SearchClient"]
