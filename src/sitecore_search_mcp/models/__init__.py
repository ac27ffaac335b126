"""Pydantic models validating MCP tool arguments.

One module per Sitecore API: ``search``, ``ingestion`` and ``events``.
"""

from .events import EventContext, EventType, EventValue, TrackEventInput, ValidateEventInput
from .ingestion import (
    CheckStatusInput,
    CreateDocumentInput,
    DeleteDocumentInput,
    Extractors,
    IngestFromSourceInput,
    UpdateDocumentInput,
)
from .search import (
    AiSearchInput,
    BasicSearchInput,
    ExactAnswer,
    Facet,
    FacetedSearchInput,
    Locale,
    RecommendationsInput,
    RelatedQuestions,
)

__all__ = [
    "AiSearchInput",
    "BasicSearchInput",
    "CheckStatusInput",
    "CreateDocumentInput",
    "DeleteDocumentInput",
    "EventContext",
    "EventType",
    "EventValue",
    "ExactAnswer",
    "Extractors",
    "Facet",
    "FacetedSearchInput",
    "IngestFromSourceInput",
    "Locale",
    "RecommendationsInput",
    "RelatedQuestions",
    "TrackEventInput",
    "UpdateDocumentInput",
    "ValidateEventInput",
]
