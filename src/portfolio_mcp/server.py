"""Portfolio Decision MCP Server using FastMCP."""

import json
import logging
import os
from typing import Any

from fastmcp import FastMCP

from portfolio_mcp import SCHEMA_VERSION, SERVER_VERSION
from portfolio_mcp.data.cache import report_uri
from portfolio_mcp.resources.report_resource import ResourceNotFoundError, read_report_resource
from portfolio_mcp.tools import (
    analyze_position,
    buy_zone,
    portfolio_metrics,
    refresh_positions,
    sell_zone,
)
from portfolio_mcp.utils.sanitize import sanitize_numbers

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="portfolio-decisions",
)


def _dumps(result: dict[str, Any]) -> str:
    return json.dumps(sanitize_numbers(result), indent=2, default=str)


# ============================================================================
# TOOLS
# ============================================================================


@mcp.tool
async def calculate_position(position: dict[str, Any]) -> str:
    """
    Calculate expected value, Kelly sizing, assessment, and buy/sell zones for a stock.

    Args:
        position: Position fields. Required: ticker. Inputs: current_price,
                  fair_value, beta, probability_positive (0-1), downside_risk
                  (negative percent; omit to calibrate from beta), sector,
                  currency, shares_owned, avg_price_local, volatility.

    Returns:
        JSON with the enriched position (upside_potential, b_ratio,
        expected_value, kelly_fraction, half_kelly_suggested, assessment,
        buy_zone_min/max, sell_zone bounds and status)
    """
    result = await analyze_position(position=position)
    return _dumps(result)


@mcp.tool
async def calculate_portfolio(
    positions: list[dict[str, Any]],
    fx_rates: dict[str, float],
    base_currency: str | None = None,
) -> str:
    """
    Calculate all positions and aggregate value-weighted portfolio metrics.

    Args:
        positions: List of position dicts (see calculate_position)
        fx_rates: Currency code -> local units per 1 base-currency unit.
                  Example: {"USD": 1.08, "GBP": 0.85}
        base_currency: Currency of the totals (default: server BASE_CURRENCY)

    Returns:
        JSON with total value, weighted EV and volatility, Sharpe-like ratio,
        sector weights, Kelly utilization, valued positions, and a resource
        URI for the CSV report
    """
    result = await portfolio_metrics(
        positions=positions,
        fx_rates=fx_rates,
        base_currency=base_currency,
    )
    return _dumps(result)


@mcp.tool
async def get_buy_zone(
    ticker: str,
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
    current_price: float = 0.0,
) -> str:
    """
    Price range where expected value sits between 7% and 15%.

    Args:
        ticker: Stock ticker symbol
        fair_value: Fair value estimate (positive)
        probability_positive: Probability of a positive outcome (0-1)
        downside_risk: Downside percentage (negative, e.g. -20)
        current_price: Current price to classify (optional)

    Returns:
        JSON with buy zone bounds, current EV, and zone status
    """
    result = await buy_zone(
        ticker=ticker,
        fair_value=fair_value,
        probability_positive=probability_positive,
        downside_risk=downside_risk,
        current_price=current_price,
    )
    return _dumps(result)


@mcp.tool
async def get_sell_zone(
    ticker: str,
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
    current_price: float = 0.0,
) -> str:
    """
    Price range where expected value falls from 3% (trim) to 0% (sell).

    Args:
        ticker: Stock ticker symbol
        fair_value: Fair value estimate (positive)
        probability_positive: Probability of a positive outcome (0-1)
        downside_risk: Downside percentage (negative, e.g. -20)
        current_price: Current price to classify (optional)

    Returns:
        JSON with sell zone bounds, current EV, and trim/sell status
    """
    result = await sell_zone(
        ticker=ticker,
        fair_value=fair_value,
        probability_positive=probability_positive,
        downside_risk=downside_risk,
        current_price=current_price,
    )
    return _dumps(result)


@mcp.tool
async def refresh_portfolio_positions(
    positions: list[dict[str, Any]],
    ev_alert_threshold: float | None = None,
) -> str:
    """
    Recalculate a batch of positions and report EV-change and buy-zone alerts.

    Args:
        positions: List of position dicts; an 'expected_value' on input is
                   treated as the previous EV
        ev_alert_threshold: EV change (percent points) that raises an alert

    Returns:
        JSON with refreshed positions, alerts, and per-position failures
    """
    result = await refresh_positions(
        positions=positions,
        ev_alert_threshold=ev_alert_threshold,
    )
    return _dumps(result)


# ============================================================================
# RESOURCES
# ============================================================================


@mcp.resource("portfolio://{report_id}")
def get_portfolio_report(report_id: str) -> str:
    """
    Get a cached portfolio report as CSV.

    Must call calculate_portfolio first to populate the cache.

    Args:
        report_id: Report id from the resource_uri of calculate_portfolio

    Returns:
        CSV data with one row per position
    """
    try:
        csv_text, _mime = read_report_resource(report_uri(report_id))
    except ResourceNotFoundError as e:
        return str(e)
    return csv_text


# ============================================================================
# ENTRY POINT
# ============================================================================


def main() -> None:
    """Run the MCP server."""
    logger.info(
        f"Starting Portfolio Decision MCP Server v{SERVER_VERSION} (schema v{SCHEMA_VERSION})"
    )
    mcp.run()


if __name__ == "__main__":
    main()
