"""Request builders and calls for the Search API tools.

Every search tool sends a single widget item to ``/discover/v2/{domain_id}``;
the tools differ only in which parts of the widget request they fill in.
"""

import logging
from typing import Any

from ..client.base_client import JsonObject
from ..client.search_client import SearchClient
from ..models.search import AiSearchInput, BasicSearchInput, FacetedSearchInput, RecommendationsInput
from .common import drop_none, page_offset, serialize_model

logger = logging.getLogger("sitecore_search_mcp.operations.search")


def _query(keyphrase: str | None) -> dict[str, str] | None:
    return {"keyphrase": keyphrase} if keyphrase else None


def _widget_request(item: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return drop_none({"widget": {"items": [drop_none(item)]}, **extra})


def build_basic_search_request(params: BasicSearchInput) -> dict[str, Any]:
    """Build the widget request for a keyword search with pagination."""
    search = drop_none(
        {
            "query": _query(params.keyphrase),
            "offset": page_offset(params.page, params.limit),
            "limit": params.limit,
        },
    )
    locale = serialize_model(params.locale)
    return _widget_request(
        {"rfk_id": params.rfk_id, "entity": params.entity, "search": search},
        context={"locale": locale} if locale else None,
    )


def build_faceted_search_request(params: FacetedSearchInput) -> dict[str, Any]:
    """Build the widget request for a search with facets and sorting."""
    facets = [serialize_model(facet) for facet in params.facets] if params.facets is not None else None
    search = drop_none(
        {
            "query": _query(params.keyphrase),
            "facet": facets,
            "sort": params.sort,
            "offset": page_offset(params.page, params.limit),
            "limit": params.limit,
        },
    )
    return _widget_request({"rfk_id": params.rfk_id, "entity": params.entity, "search": search})


def build_recommendations_request(params: RecommendationsInput) -> dict[str, Any]:
    """Build the widget request for recipe-based recommendations."""
    recommendation = drop_none({"id": params.recommendation_id})
    return _widget_request(
        {
            "rfk_id": params.rfk_id,
            "entity": params.entity,
            "recommendation": recommendation,
            "search": {"limit": params.limit},
        },
        context={"user": {"uuid": params.user_id}} if params.user_id else None,
    )


def build_ai_search_request(params: AiSearchInput) -> dict[str, Any]:
    """Build the widget request for AI answers and related questions."""
    questions = drop_none(
        {
            "keyphrase": params.keyphrase,
            "exact_answer": serialize_model(params.exact_answer),
            "related_questions": serialize_model(params.related_questions),
        },
    )
    return _widget_request({"rfk_id": params.rfk_id, "entity": params.entity}, questions=questions)


async def execute_basic_search(client: SearchClient, params: BasicSearchInput) -> JsonObject:
    """Run a basic search query."""
    return await client.search(params.domain_id, build_basic_search_request(params))


async def execute_faceted_search(client: SearchClient, params: FacetedSearchInput) -> JsonObject:
    """Run a faceted search query."""
    return await client.search(params.domain_id, build_faceted_search_request(params))


async def get_recommendations(client: SearchClient, params: RecommendationsInput) -> JsonObject:
    """Fetch recommendations, personalised when a user ID is given."""
    return await client.search(params.domain_id, build_recommendations_request(params))


async def get_ai_search_results(client: SearchClient, params: AiSearchInput) -> JsonObject:
    """Fetch AI answers and/or related questions."""
    logger.debug("AI search for widget %s in domain %s", params.rfk_id, params.domain_id)
    return await client.search(params.domain_id, build_ai_search_request(params))


__all__ = [
    "build_ai_search_request",
    "build_basic_search_request",
    "build_faceted_search_request",
    "build_recommendations_request",
    "execute_basic_search",
    "execute_faceted_search",
    "get_ai_search_results",
    "get_recommendations",
]
