"""Client package for the Sitecore Search MCP server.

Provides HTTP clients and credential management for the Sitecore APIs:
- ``auth_manager``: API key to bearer token exchange, caching and refresh
- ``http_client``: Async context manager factory for configured httpx clients
- ``base_client``: Shared request plumbing with auth header injection
- ``search_client`` / ``ingestion_client`` / ``events_client``: one method per endpoint
- ``registry``: Per-domain managers and clients
"""
