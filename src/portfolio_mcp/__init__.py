"""Portfolio Decision MCP Server."""

import os


def get_server_version() -> str:
    """Get version with fallback for dev mode."""
    if version := os.environ.get("SERVER_VERSION"):
        return version
    try:
        from importlib.metadata import version as pkg_version

        return pkg_version("portfolio-mcp")
    except Exception:
        return "dev"


SERVER_VERSION = get_server_version()
# Bump when output schema changes materially (new fields, renamed fields, structure changes)
# v1: Position metrics, portfolio summary, buy/sell zone queries
# v2: Added position valuation (current_value, weight, unrealized_pnl) and report resource
SCHEMA_VERSION = "2"
