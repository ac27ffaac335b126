"""Common utilities for MCP tool registration.

Tool handlers validate their arguments into a pydantic input model, call one
operation and return the API response. Validation, configuration and API
failures are re-raised as ``ToolError`` so the MCP client receives an error
result with a readable message.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias, TypeVar

from fastmcp import Context
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, ValidationError

from ..errors import SitecoreApiError, format_validation_errors

logger = logging.getLogger("sitecore_search_mcp.tools")

ToolResult: TypeAlias = dict[str, Any]

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_input(model: type[ModelT], arguments: dict[str, Any]) -> ModelT:
    """Validate raw tool arguments, raising ``ToolError`` with a readable message."""
    try:
        return model.model_validate(arguments)
    except ValidationError as exc:
        raise ToolError(format_validation_errors(exc)) from exc


async def run_tool(
    ctx: Context,
    *,
    tool_name: str,
    call: Callable[[], Awaitable[ToolResult]],
) -> ToolResult:
    """Run a tool body and translate failures into ``ToolError``.

    Args:
        ctx: FastMCP context for client-visible logging.
        tool_name: Name of the tool, used in log messages.
        call: Zero-argument coroutine factory performing the API call.

    Returns:
        The API response.

    """
    await ctx.info(f"Running {tool_name}.")
    try:
        return await call()
    except SitecoreApiError as exc:
        logger.error("Tool %s failed (status=%s): %s", tool_name, exc.status_code, exc)  # noqa: TRY400
        raise ToolError(str(exc)) from exc
    except RuntimeError as exc:
        logger.error("Tool %s failed: %s", tool_name, exc)  # noqa: TRY400
        raise ToolError(str(exc)) from exc


__all__ = ["ToolResult", "run_tool", "validate_input"]
