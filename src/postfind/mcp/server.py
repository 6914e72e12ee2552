"""postfind MCP server entrypoint using FastMCP.

Exposes article search tools over a document collection loaded from a JSON
file. Run with:
  - postfind-mcp
  - or: python -m postfind.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastmcp import FastMCP

from postfind.config import Settings, load_settings
from postfind.exceptions import ConfigError
from postfind.mcp.tools import register_search_tools
from postfind.search.engine import SearchEngine
from postfind.sources import CachedSource, ContentSource, JsonFileSource

logger = logging.getLogger(__name__)


def build_source(settings: Settings) -> Optional[ContentSource]:
    """Create the configured document source, or None when none is configured."""
    cfg = settings.source
    if not cfg.documents_path:
        return None
    path = Path(cfg.documents_path)
    if not path.is_file():
        raise ConfigError(f"Documents file not found: {path}")
    source: ContentSource = JsonFileSource(path)
    if cfg.cache_ttl_seconds > 0:
        source = CachedSource(source, ttl=cfg.cache_ttl_seconds)
    return source


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.engine: Optional[SearchEngine] = None

    def init_engine(self) -> None:
        """Initialize the search engine from configuration."""
        source = build_source(self.settings)
        if source is None:
            logger.warning("No documents path configured; search tools are disabled")
            self.engine = None
        else:
            self.engine = SearchEngine(source, self.settings)


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("postfind MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    logging.basicConfig(
        level=settings.app.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _state = AppState(settings)
    _state.init_engine()
    register_search_tools(mcp, get_state=lambda: _state)
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    if transport in ("http", "sse"):
        mcp.run(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
