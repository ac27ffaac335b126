"""Entry point for the Sitecore Search MCP server.

This module wires together the FastMCP app and registers tools and resources.
Implementation logic lives in focused modules under ``sitecore_search_mcp/``.

Registered tools:
- ``sitecore_search_query``: keyword search with paging and locale
- ``sitecore_search_with_facets``: search with facet filters and sorting
- ``sitecore_get_recommendations``: personalized recommendations
- ``sitecore_ai_search``: exact answers and related questions
- ``sitecore_create_document`` / ``sitecore_update_document`` / ``sitecore_delete_document``:
  manage indexed documents
- ``sitecore_ingest_from_source``: ingest a document from a file or URL
- ``sitecore_check_ingestion_status``: poll an incremental update
- ``sitecore_track_event`` / ``sitecore_validate_event``: visitor events
"""

import logging
import os
import signal
import sys
from functools import lru_cache
from types import SimpleNamespace

from fastmcp import FastMCP

from . import resources
from .client.registry import DomainRegistry
from .config import load_config
from .tools.events import register as register_events
from .tools.ingestion import register as register_ingestion
from .tools.search import register as register_search

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("sitecore_search_mcp.server")

app = FastMCP(
    name="sitecore-search-mcp",
    instructions=(
        "Expose tools that search, ingest into and send events to Sitecore Search domains. "
        "Domain arguments may be omitted to use the configured default domain."
    ),
)


@lru_cache(maxsize=1)
def get_registry() -> DomainRegistry:
    """Return the process-wide domain registry, loading configuration on first use."""
    config = load_config()
    logger.info("Loaded configuration for %d Sitecore domain(s).", len(config.domains))
    return DomainRegistry(config)


# Explicit re-exports for public API stability (and to satisfy linters)
__all__ = [
    "DomainRegistry",
    "app",
    "get_registry",
    "handle_interrupt",
    "main",
]


def _register_capabilities() -> None:
    """Register tool and resource modules with the app instance."""
    deps = SimpleNamespace(get_registry=get_registry)
    register_search(app, deps=deps)
    register_ingestion(app, deps=deps)
    register_events(app, deps=deps)
    resources.register(app, deps=deps)


# Register all capabilities with the app instance (after function is defined)
_register_capabilities()


def handle_interrupt(signum: int, frame: object) -> None:  # noqa: ARG001
    """Handle keyboard interrupt gracefully."""
    logger.info("Received interrupt signal, shutting down...")
    sys.exit(0)


def main() -> None:
    """Entry point for the sitecore-search-mcp console script."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    app.run()


if __name__ == "__main__":
    main()
