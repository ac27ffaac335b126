"""Client for the Sitecore Ingestion API.

Handles document create/update/delete, ingestion from files and web pages,
and status checks for incremental updates. All routes live under
``/ingestion/v1/domains/{domain}/sources/{source}/entities/{entity}``.
"""

from typing import Any

from .base_client import BaseClient, JsonObject


def entity_path(domain: str, source: str, entity: str) -> str:
    """Return the entity-scoped path prefix for ingestion routes."""
    return f"/ingestion/v1/domains/{domain}/sources/{source}/entities/{entity}"


class IngestionClient(BaseClient):
    """Manage documents in a Sitecore Search source."""

    async def create_document(self, domain: str, source: str, entity: str, document: dict[str, Any]) -> JsonObject:
        """Create a new document."""
        return await self.post(f"{entity_path(domain, source, entity)}/documents", document)

    async def update_document(
        self,
        domain: str,
        source: str,
        entity: str,
        document_id: str,
        document: dict[str, Any],
    ) -> JsonObject:
        """Replace a document completely (PUT)."""
        return await self.put(f"{entity_path(domain, source, entity)}/documents/{document_id}", document)

    async def patch_document(
        self,
        domain: str,
        source: str,
        entity: str,
        document_id: str,
        patch: dict[str, Any],
    ) -> JsonObject:
        """Update selected document fields (PATCH)."""
        return await self.patch(f"{entity_path(domain, source, entity)}/documents/{document_id}", patch)

    async def delete_document(self, domain: str, source: str, entity: str, document_id: str) -> JsonObject:
        """Delete a document."""
        return await self.delete(f"{entity_path(domain, source, entity)}/documents/{document_id}")

    async def create_document_from_file(  # noqa: PLR0913
        self,
        domain: str,
        source: str,
        entity: str,
        document_id: str,
        file_url: str,
        extractors: dict[str, Any] | None = None,
    ) -> JsonObject:
        """Create a document from a remote file."""
        body: dict[str, Any] = {"file_url": file_url}
        if extractors is not None:
            body["extractors"] = extractors
        return await self.post(f"{entity_path(domain, source, entity)}/file/{document_id}", body)

    async def create_document_from_url(  # noqa: PLR0913
        self,
        domain: str,
        source: str,
        entity: str,
        document_id: str,
        url: str,
        extractors: dict[str, Any] | None = None,
    ) -> JsonObject:
        """Create a document by crawling a web page."""
        body: dict[str, Any] = {"url": url}
        if extractors is not None:
            body["extractors"] = extractors
        return await self.post(f"{entity_path(domain, source, entity)}/url/{document_id}", body)

    async def get_status(self, domain: str, source: str, entity: str, incremental_update_id: str) -> JsonObject:
        """Return the status of an incremental update."""
        return await self.get(f"{entity_path(domain, source, entity)}/status/{incremental_update_id}")


__all__ = ["IngestionClient", "entity_path"]
