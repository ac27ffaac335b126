"""Operational helpers for MCP tools.

Turns validated tool input into Sitecore API calls:
- ``common``: Shared serialization and pagination helpers
- ``search``: Search, faceted search, recommendations and AI search requests
- ``ingestion``: Document create/update/delete, source ingestion and status
- ``events``: Event tracking and validation payloads
"""
