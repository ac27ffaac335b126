"""MCP tools for the Sitecore Ingestion API.

Registers ``sitecore_create_document``, ``sitecore_update_document``,
``sitecore_delete_document``, ``sitecore_ingest_from_source`` and
``sitecore_check_ingestion_status``. The ``domain`` argument selects both the
configured tenant and the domain segment of the ingestion URL.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Annotated, Any, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from ..models.ingestion import (
    CheckStatusInput,
    CreateDocumentInput,
    DeleteDocumentInput,
    Extractors,
    IngestFromSourceInput,
    UpdateDocumentInput,
)
from ..operations.ingestion import (
    check_ingestion_status,
    create_document,
    delete_document,
    ingest_from_source,
    update_document,
)
from .common import ToolResult, run_tool, validate_input

Domain = Annotated[str, Field(description="Domain ID")]
Source = Annotated[str, Field(description="Source identifier")]
EntityType = Annotated[str, Field(description="Entity type (e.g. content, product)")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:  # noqa: C901 (one nested definition per tool)
    """Register the Ingestion API tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace providing ``get_registry``.

    """

    @app.tool(
        name="sitecore_create_document",
        description=(
            "Create a new document in the Sitecore Search index. "
            "Provide domain, source, entity type, and document data."
        ),
        annotations={"title": "Create document", "readOnlyHint": False},
    )
    async def sitecore_create_document(
        ctx: Context,
        domain: Domain,
        source: Source,
        entity: EntityType,
        document: Annotated[dict[str, Any], Field(description="Document data as key-value pairs")],
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                CreateDocumentInput,
                {"domain": domain, "source": source, "entity": entity, "document": document},
            )
            client = deps.get_registry().get_ingestion_client(params.domain)
            return await create_document(client, params)

        return await run_tool(ctx, tool_name="sitecore_create_document", call=_call)

    @app.tool(
        name="sitecore_update_document",
        description=(
            "Update an existing document in the Sitecore Search index. "
            "Use partial=true for partial updates or partial=false for full replacement."
        ),
        annotations={"title": "Update document", "readOnlyHint": False},
    )
    async def sitecore_update_document(  # noqa: PLR0913
        ctx: Context,
        domain: Domain,
        source: Source,
        entity: EntityType,
        document_id: Annotated[str, Field(description="Document ID to update")],
        document: Annotated[dict[str, Any], Field(description="Document data (complete unless partial=true)")],
        partial: Annotated[
            bool,
            Field(description="If true, performs partial update (PATCH); if false, full replacement (PUT)"),
        ] = False,
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                UpdateDocumentInput,
                {
                    "domain": domain,
                    "source": source,
                    "entity": entity,
                    "document_id": document_id,
                    "document": document,
                    "partial": partial,
                },
            )
            client = deps.get_registry().get_ingestion_client(params.domain)
            return await update_document(client, params)

        return await run_tool(ctx, tool_name="sitecore_update_document", call=_call)

    @app.tool(
        name="sitecore_delete_document",
        description="Delete a document from the Sitecore Search index by its ID.",
        annotations={"title": "Delete document", "readOnlyHint": False, "destructiveHint": True},
    )
    async def sitecore_delete_document(
        ctx: Context,
        domain: Domain,
        source: Source,
        entity: EntityType,
        document_id: Annotated[str, Field(description="Document ID to delete")],
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                DeleteDocumentInput,
                {"domain": domain, "source": source, "entity": entity, "document_id": document_id},
            )
            client = deps.get_registry().get_ingestion_client(params.domain)
            return await delete_document(client, params)

        return await run_tool(ctx, tool_name="sitecore_delete_document", call=_call)

    @app.tool(
        name="sitecore_ingest_from_source",
        description=(
            "Ingest a document from an external file or URL. "
            "Supports XPath, JavaScript, and CSS extractors for parsing content."
        ),
        annotations={"title": "Ingest from source", "readOnlyHint": False},
    )
    async def sitecore_ingest_from_source(  # noqa: PLR0913
        ctx: Context,
        domain: Domain,
        source: Source,
        entity: EntityType,
        document_id: Annotated[str, Field(description="Document ID for the ingested content")],
        source_type: Annotated[Literal["file", "url"], Field(description="Type of source: file or url")],
        source_url: Annotated[str, Field(description="URL to the file or web page to ingest")],
        extractors: Annotated[
            Extractors | None,
            Field(description="Content extractors for parsing the source"),
        ] = None,
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                IngestFromSourceInput,
                {
                    "domain": domain,
                    "source": source,
                    "entity": entity,
                    "document_id": document_id,
                    "source_type": source_type,
                    "source_url": source_url,
                    "extractors": extractors,
                },
            )
            client = deps.get_registry().get_ingestion_client(params.domain)
            return await ingest_from_source(client, params)

        return await run_tool(ctx, tool_name="sitecore_ingest_from_source", call=_call)

    @app.tool(
        name="sitecore_check_ingestion_status",
        description="Check the status of an asynchronous ingestion operation using the incremental update ID.",
        annotations={"title": "Check ingestion status", "readOnlyHint": True},
    )
    async def sitecore_check_ingestion_status(
        ctx: Context,
        domain: Domain,
        source: Source,
        entity: EntityType,
        incremental_update_id: Annotated[
            str,
            Field(description="Incremental update ID returned from an ingestion operation"),
        ],
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                CheckStatusInput,
                {
                    "domain": domain,
                    "source": source,
                    "entity": entity,
                    "incremental_update_id": incremental_update_id,
                },
            )
            client = deps.get_registry().get_ingestion_client(params.domain)
            return await check_ingestion_status(client, params)

        return await run_tool(ctx, tool_name="sitecore_check_ingestion_status", call=_call)


__all__ = ["register"]
