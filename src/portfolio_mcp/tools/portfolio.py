"""Portfolio metrics tool."""

from time import perf_counter
from typing import Any

from portfolio_mcp import config
from portfolio_mcp.data.cache import ReportCache, report_cache
from portfolio_mcp.engine.fx import FxRates
from portfolio_mcp.engine.metrics import calculate_metrics
from portfolio_mcp.engine.portfolio import apply_position_valuation, calculate_portfolio_metrics
from portfolio_mcp.utils.provenance import build_error_response, build_meta
from portfolio_mcp.utils.report import positions_frame
from portfolio_mcp.utils.validators import parse_fx_rates, parse_position


async def portfolio_metrics(
    positions: list[dict[str, Any]],
    fx_rates: dict[str, float],
    base_currency: str | None = None,
    cache: ReportCache | None = None,
) -> dict[str, Any]:
    """
    Calculate every position, then aggregate into portfolio statistics.

    Args:
        positions: List of position dicts (see analyze_position)
        fx_rates: Currency code -> local units per 1 base-currency unit
        base_currency: Currency of the totals (default: BASE_CURRENCY)
        cache: Report cache (default: the global report cache)

    Returns:
        Dict with summary, valued positions, and a resource URI for the CSV
        report
    """
    start_time = perf_counter()
    base = (base_currency or config.BASE_CURRENCY).upper().strip()

    try:
        parsed = [parse_position(p) for p in positions]
        rates = FxRates(parse_fx_rates(fx_rates), base_currency=base).rates_map()
    except ValueError as e:
        return build_error_response(error_type="invalid_parameters", message=str(e))

    for position in parsed:
        calculate_metrics(position)

    summary = calculate_portfolio_metrics(parsed, rates, base_currency=base)
    apply_position_valuation(parsed, rates, summary)

    report = positions_frame(parsed)
    cache = cache if cache is not None else report_cache
    resource_uri = cache.store(report)

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("portfolio_metrics", duration_ms),
        "summary": summary.to_dict(),
        "positions": [p.to_dict() for p in parsed],
        "resource_uri": resource_uri,
        "resource_rows": len(report),
    }
