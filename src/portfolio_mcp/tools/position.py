"""Position metrics tool."""

from time import perf_counter
from typing import Any

from portfolio_mcp.engine.metrics import calculate_metrics
from portfolio_mcp.utils.provenance import build_error_response, build_meta
from portfolio_mcp.utils.validators import parse_position


async def analyze_position(position: dict[str, Any]) -> dict[str, Any]:
    """
    Calculate EV, Kelly sizing, assessment, and zones for one position.

    Args:
        position: Position dict with 'ticker' plus any of current_price,
            fair_value, beta, probability_positive, downside_risk, ...

    Returns:
        Dict with the enriched position, or an error response for a
        malformed payload
    """
    start_time = perf_counter()

    try:
        parsed = parse_position(position)
    except ValueError as e:
        return build_error_response(
            error_type="invalid_parameters",
            message=str(e),
            ticker=position.get("ticker") if isinstance(position, dict) else None,
        )

    calculate_metrics(parsed)

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("analyze_position", duration_ms),
        "ticker": parsed.ticker,
        "position": parsed.to_dict(),
    }
