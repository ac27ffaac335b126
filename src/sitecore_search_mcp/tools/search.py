"""MCP tools for the Sitecore Search & Recommendation API.

Registers ``sitecore_search_query``, ``sitecore_search_with_facets``,
``sitecore_get_recommendations`` and ``sitecore_ai_search``.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Annotated, Any, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from ..models.search import (
    AiSearchInput,
    BasicSearchInput,
    ExactAnswer,
    Facet,
    FacetedSearchInput,
    Locale,
    RecommendationsInput,
    RelatedQuestions,
)
from ..operations.search import (
    execute_basic_search,
    execute_faceted_search,
    get_ai_search_results,
    get_recommendations,
)
from .common import ToolResult, run_tool, validate_input

DomainId = Annotated[str, Field(description="Sitecore domain ID")]
RfkId = Annotated[str, Field(description="RFK widget ID")]
Entity = Annotated[str | None, Field(description="Entity type to search (e.g. content, product)")]
Keyphrase = Annotated[str | None, Field(description="Search query text")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:  # noqa: C901 (one nested definition per tool)
    """Register the Search API tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace providing ``get_registry``.

    """

    @app.tool(
        name="sitecore_search_query",
        description=(
            "Execute a search query against Sitecore Search API. "
            "Returns search results with content items matching the query."
        ),
        annotations={"title": "Search query", "readOnlyHint": True},
    )
    async def sitecore_search_query(  # noqa: PLR0913
        ctx: Context,
        domain_id: DomainId,
        rfk_id: RfkId,
        keyphrase: Keyphrase = None,
        entity: Entity = None,
        page: Annotated[int, Field(description="Page number for pagination")] = 1,
        limit: Annotated[int, Field(description="Number of results per page")] = 24,
        locale: Annotated[Locale | None, Field(description="Locale settings for the search")] = None,
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                BasicSearchInput,
                {
                    "domain_id": domain_id,
                    "rfk_id": rfk_id,
                    "keyphrase": keyphrase,
                    "entity": entity,
                    "page": page,
                    "limit": limit,
                    "locale": locale,
                },
            )
            client = deps.get_registry().get_search_client(params.domain_id)
            return await execute_basic_search(client, params)

        return await run_tool(ctx, tool_name="sitecore_search_query", call=_call)

    @app.tool(
        name="sitecore_search_with_facets",
        description=(
            "Execute a faceted search query with filtering and sorting. "
            "Returns search results with facet aggregations for filtering UI."
        ),
        annotations={"title": "Faceted search", "readOnlyHint": True},
    )
    async def sitecore_search_with_facets(  # noqa: PLR0913
        ctx: Context,
        domain_id: DomainId,
        rfk_id: RfkId,
        keyphrase: Keyphrase = None,
        entity: Entity = None,
        facets: Annotated[list[Facet] | None, Field(description="Facet configuration and filters")] = None,
        sort: Annotated[dict[str, Literal["asc", "desc"]] | None, Field(description="Sort criteria")] = None,
        page: int = 1,
        limit: int = 24,
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                FacetedSearchInput,
                {
                    "domain_id": domain_id,
                    "rfk_id": rfk_id,
                    "keyphrase": keyphrase,
                    "entity": entity,
                    "facets": facets,
                    "sort": sort,
                    "page": page,
                    "limit": limit,
                },
            )
            client = deps.get_registry().get_search_client(params.domain_id)
            return await execute_faceted_search(client, params)

        return await run_tool(ctx, tool_name="sitecore_search_with_facets", call=_call)

    @app.tool(
        name="sitecore_get_recommendations",
        description=(
            "Get personalized content or product recommendations based on user behavior and configured recipes."
        ),
        annotations={"title": "Get recommendations", "readOnlyHint": True},
    )
    async def sitecore_get_recommendations(  # noqa: PLR0913
        ctx: Context,
        domain_id: DomainId,
        rfk_id: RfkId,
        recommendation_id: Annotated[str | None, Field(description="Recipe-based recommendation ID")] = None,
        entity: Entity = None,
        user_id: Annotated[str | None, Field(description="User UUID for personalized recommendations")] = None,
        limit: Annotated[int, Field(description="Number of recommendations")] = 10,
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                RecommendationsInput,
                {
                    "domain_id": domain_id,
                    "rfk_id": rfk_id,
                    "recommendation_id": recommendation_id,
                    "entity": entity,
                    "user_id": user_id,
                    "limit": limit,
                },
            )
            client = deps.get_registry().get_search_client(params.domain_id)
            return await get_recommendations(client, params)

        return await run_tool(ctx, tool_name="sitecore_get_recommendations", call=_call)

    @app.tool(
        name="sitecore_ai_search",
        description=(
            "Get AI-powered exact answers or related questions for a search query. You must pass at least one of "
            "exact_answer or related_questions. Use a questions widget type in rfk_id."
        ),
        annotations={"title": "AI search", "readOnlyHint": True},
    )
    async def sitecore_ai_search(  # noqa: PLR0913
        ctx: Context,
        domain_id: DomainId,
        rfk_id: Annotated[str, Field(description="RFK widget ID (must be a questions widget type)")],
        keyphrase: Annotated[str, Field(description="Search query for AI processing")],
        entity: Entity = None,
        exact_answer: Annotated[
            ExactAnswer | None,
            Field(description="Settings to get a single answer to the visitor query"),
        ] = None,
        related_questions: Annotated[
            RelatedQuestions | None,
            Field(description="Settings to get AI-generated question-and-answer pairs"),
        ] = None,
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                AiSearchInput,
                {
                    "domain_id": domain_id,
                    "rfk_id": rfk_id,
                    "keyphrase": keyphrase,
                    "entity": entity,
                    "exact_answer": exact_answer,
                    "related_questions": related_questions,
                },
            )
            client = deps.get_registry().get_search_client(params.domain_id)
            return await get_ai_search_results(client, params)

        return await run_tool(ctx, tool_name="sitecore_ai_search", call=_call)


__all__ = ["register"]
