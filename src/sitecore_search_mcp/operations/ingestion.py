"""Calls for the Ingestion API tools."""

from ..client.base_client import JsonObject
from ..client.ingestion_client import IngestionClient
from ..models.ingestion import (
    CheckStatusInput,
    CreateDocumentInput,
    DeleteDocumentInput,
    IngestFromSourceInput,
    UpdateDocumentInput,
)
from .common import serialize_model


async def create_document(client: IngestionClient, params: CreateDocumentInput) -> JsonObject:
    """Create a new document in the index."""
    return await client.create_document(params.domain, params.source, params.entity, params.document)


async def update_document(client: IngestionClient, params: UpdateDocumentInput) -> JsonObject:
    """Update a document: PATCH when ``partial`` is set, PUT (full replacement) otherwise."""
    if params.partial:
        return await client.patch_document(
            params.domain,
            params.source,
            params.entity,
            params.document_id,
            params.document,
        )
    return await client.update_document(
        params.domain,
        params.source,
        params.entity,
        params.document_id,
        params.document,
    )


async def delete_document(client: IngestionClient, params: DeleteDocumentInput) -> JsonObject:
    """Delete a document from the index."""
    return await client.delete_document(params.domain, params.source, params.entity, params.document_id)


async def ingest_from_source(client: IngestionClient, params: IngestFromSourceInput) -> JsonObject:
    """Ingest a document from a remote file or web page."""
    extractors = serialize_model(params.extractors)
    source_url = str(params.source_url)
    if params.source_type == "file":
        return await client.create_document_from_file(
            params.domain,
            params.source,
            params.entity,
            params.document_id,
            source_url,
            extractors,
        )
    return await client.create_document_from_url(
        params.domain,
        params.source,
        params.entity,
        params.document_id,
        source_url,
        extractors,
    )


async def check_ingestion_status(client: IngestionClient, params: CheckStatusInput) -> JsonObject:
    """Return the status of an asynchronous ingestion operation."""
    return await client.get_status(params.domain, params.source, params.entity, params.incremental_update_id)


__all__ = [
    "check_ingestion_status",
    "create_document",
    "delete_document",
    "ingest_from_source",
    "update_document",
]
