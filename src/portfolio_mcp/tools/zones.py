"""Buy and sell zone query tools."""

from time import perf_counter
from typing import Any

from portfolio_mcp.engine.zones import calculate_buy_zone, calculate_sell_zone
from portfolio_mcp.utils.provenance import build_error_response, build_meta


async def buy_zone(
    ticker: str,
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
    current_price: float = 0.0,
) -> dict[str, Any]:
    """
    Price range where EV sits between 7% and 15%.

    Args:
        ticker: Stock ticker symbol
        fair_value: Fair value estimate (must be positive)
        probability_positive: Probability of a positive outcome, 0-1
        downside_risk: Downside percentage (must be negative)
        current_price: Price to classify against the zone (optional)

    Returns:
        Dict with buy_zone bounds, current EV, and zone status
    """
    start_time = perf_counter()
    try:
        result = calculate_buy_zone(
            ticker, fair_value, probability_positive, downside_risk, current_price
        )
    except ValueError as e:
        return build_error_response(
            error_type="invalid_parameters",
            message=str(e),
            ticker=ticker,
        )

    duration_ms = (perf_counter() - start_time) * 1000
    return {"meta": build_meta("buy_zone", duration_ms), **result.to_dict()}


async def sell_zone(
    ticker: str,
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
    current_price: float = 0.0,
) -> dict[str, Any]:
    """
    Price range where EV falls from 3% (trim) to 0% (sell).

    Args:
        ticker: Stock ticker symbol
        fair_value: Fair value estimate (must be positive)
        probability_positive: Probability of a positive outcome, 0-1
        downside_risk: Downside percentage (must be negative)
        current_price: Price to classify against the zone (optional)

    Returns:
        Dict with sell_zone bounds, current EV, and trim/sell status
    """
    start_time = perf_counter()
    try:
        result = calculate_sell_zone(
            ticker, fair_value, probability_positive, downside_risk, current_price
        )
    except ValueError as e:
        return build_error_response(
            error_type="invalid_parameters",
            message=str(e),
            ticker=ticker,
        )

    duration_ms = (perf_counter() - start_time) * 1000
    return {"meta": build_meta("sell_zone", duration_ms), **result.to_dict()}
