"""Input models for the Ingestion API tools."""

from typing import Any, Literal

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field


class _EntityInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    domain: str = Field(min_length=1, description="Domain ID")
    source: str = Field(min_length=1, description="Source identifier")
    entity: str = Field(min_length=1, description="Entity type (e.g. content, product)")


class XPathExtractor(BaseModel):
    name: str
    expression: str


class JavaScriptExtractor(BaseModel):
    name: str
    expression: str


class CssExtractor(BaseModel):
    name: str
    selector: str


class Extractors(BaseModel):
    """Content extractors applied to an ingested file or page."""

    xpath: list[XPathExtractor] | None = None
    javascript: list[JavaScriptExtractor] | None = None
    css: list[CssExtractor] | None = None


class CreateDocumentInput(_EntityInput):
    """Arguments of ``sitecore_create_document``."""

    document: dict[str, Any]


class UpdateDocumentInput(_EntityInput):
    """Arguments of ``sitecore_update_document``."""

    document_id: str = Field(min_length=1)
    document: dict[str, Any]
    partial: bool = False


class DeleteDocumentInput(_EntityInput):
    """Arguments of ``sitecore_delete_document``."""

    document_id: str = Field(min_length=1)


class IngestFromSourceInput(_EntityInput):
    """Arguments of ``sitecore_ingest_from_source``."""

    document_id: str = Field(min_length=1)
    source_type: Literal["file", "url"]
    source_url: AnyHttpUrl
    extractors: Extractors | None = None


class CheckStatusInput(_EntityInput):
    """Arguments of ``sitecore_check_ingestion_status``."""

    incremental_update_id: str = Field(min_length=1)


__all__ = [
    "CheckStatusInput",
    "CreateDocumentInput",
    "CssExtractor",
    "DeleteDocumentInput",
    "Extractors",
    "IngestFromSourceInput",
    "JavaScriptExtractor",
    "UpdateDocumentInput",
    "XPathExtractor",
]
