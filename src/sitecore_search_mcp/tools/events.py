"""MCP tools for the Sitecore Events API.

Registers ``sitecore_track_event`` and ``sitecore_validate_event``.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..models.events import EventContext, EventType, EventValue, TrackEventInput, ValidateEventInput
from ..operations.events import track_event, validate_event
from .common import ToolResult, run_tool, validate_input

DomainId = Annotated[str | None, Field(description="Domain ID (will use default if not provided)")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the Events API tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace providing ``get_registry``.

    """

    @app.tool(
        name="sitecore_track_event",
        description=(
            "Track visitor events for analytics, personalization, and metrics. "
            "Supports various event types like view, click, add, order, etc."
        ),
        annotations={"title": "Track event", "readOnlyHint": False},
    )
    async def sitecore_track_event(
        ctx: Context,
        event_type: Annotated[EventType, Field(description="Type of event to track")],
        domain_id: DomainId = None,
        customer_key: Annotated[
            str | None,
            Field(description="Customer key (ckey); the configured client key is used if not provided"),
        ] = None,
        value: Annotated[EventValue | None, Field(description="Event value data")] = None,
        context: Annotated[EventContext | None, Field(description="Event context information")] = None,
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                TrackEventInput,
                {
                    "domain_id": domain_id,
                    "customer_key": customer_key,
                    "event_type": event_type,
                    "value": value,
                    "context": context,
                },
            )
            registry = deps.get_registry()
            configured_key = None if params.customer_key else registry.get_client_key(params.domain_id)
            client = registry.get_events_client(params.domain_id)
            return await track_event(client, configured_key, params)

        return await run_tool(ctx, tool_name="sitecore_track_event", call=_call)

    @app.tool(
        name="sitecore_validate_event",
        description="Validate an event payload before sending to ensure it meets API requirements.",
        annotations={"title": "Validate event", "readOnlyHint": True},
    )
    async def sitecore_validate_event(
        ctx: Context,
        event_type: Annotated[EventType, Field(description="Type of event to validate")],
        domain_id: DomainId = None,
        value: Annotated[dict[str, Any] | None, Field(description="Event value data")] = None,
        context: Annotated[
            dict[str, dict[str, Any]] | None,
            Field(description="Event context information (user, page, browser, geo)"),
        ] = None,
    ) -> dict[str, Any]:
        async def _call() -> ToolResult:
            params = validate_input(
                ValidateEventInput,
                {"domain_id": domain_id, "event_type": event_type, "value": value, "context": context},
            )
            client = deps.get_registry().get_events_client(params.domain_id)
            return await validate_event(client, params)

        return await run_tool(ctx, tool_name="sitecore_validate_event", call=_call)


__all__ = ["register"]
