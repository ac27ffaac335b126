"""Tools package for MCP server.

Contains MCP tool registration modules:
- ``search``: search query, faceted search, recommendations, AI search
- ``ingestion``: create/update/delete documents, ingest from source, status
- ``events``: track and validate visitor events
- ``common``: Shared utilities for tool registration
"""
