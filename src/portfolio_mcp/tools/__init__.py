"""Portfolio decision tools."""

from portfolio_mcp.tools.portfolio import portfolio_metrics
from portfolio_mcp.tools.position import analyze_position
from portfolio_mcp.tools.refresh import refresh_positions
from portfolio_mcp.tools.zones import buy_zone, sell_zone

__all__ = [
    "analyze_position",
    "buy_zone",
    "portfolio_metrics",
    "refresh_positions",
    "sell_zone",
]
