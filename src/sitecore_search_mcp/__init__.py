"""Sitecore Search MCP Server package.

This package contains the FastMCP server, tools and API clients for the
Sitecore Search, Ingestion and Events REST APIs.
"""

# Intentionally do not re-export symbols from submodules to avoid importing
# heavy dependencies and triggering environment validation at package import
# time. Individual modules (e.g., ``server``) should be imported directly by
# consumers as needed.

__all__: list[str] = []
