"""Client for the Sitecore Events API.

Events feed analytics, personalization and metrics. The v4 publish endpoint
is the recommended one; v3 is kept for content events.
"""

from typing import Any

from .base_client import BaseClient, JsonObject


class EventsClient(BaseClient):
    """Publish and validate visitor events."""

    async def track_event(self, customer_key: str, event: dict[str, Any]) -> JsonObject:
        """Publish an event (``POST /event/v4/publish/{ckey}``)."""
        return await self.post(f"/event/v4/publish/{customer_key}", event)

    async def track_content_event(self, customer_key: str, event: dict[str, Any]) -> JsonObject:
        """Publish a content event (``POST /event/v3/publish/{ckey}``)."""
        return await self.post(f"/event/v3/publish/{customer_key}", event)

    async def validate_event(self, event: dict[str, Any]) -> JsonObject:
        """Validate an event payload without publishing it (``POST /event/v4/validate``)."""
        return await self.post("/event/v4/validate", event)


__all__ = ["EventsClient"]
