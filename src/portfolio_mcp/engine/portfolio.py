"""Portfolio-level aggregation of enriched positions."""

import logging
import math
from collections.abc import Mapping, Sequence

from portfolio_mcp import config
from portfolio_mcp.engine.models import PortfolioSummary, Position

logger = logging.getLogger(__name__)


def normalize_rates(fx_rates: Mapping[str, float]) -> dict[str, float]:
    """Rate map keyed by upper-case currency code, matching Position.currency."""
    return {code.upper().strip(): rate for code, rate in fx_rates.items()}


def position_value(position: Position, fx_rates: Mapping[str, float]) -> float | None:
    """
    Value of a position in the base currency.

    Rates are local currency units per 1 base unit, so dividing converts
    local -> base. Currency codes are matched case-insensitively.

    Returns:
        The base-currency value, or None if the position is not owned, its
        currency has no positive rate, or the value is not a positive finite
        number
    """
    if not position.shares_owned or position.shares_owned <= 0:
        return None
    rate = _rate_for(position, fx_rates)
    if rate is None:
        return None
    value = position.shares_owned * position.current_price / rate
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _rate_for(position: Position, fx_rates: Mapping[str, float]) -> float | None:
    rate = fx_rates.get(position.currency)
    if rate is None:
        rate = normalize_rates(fx_rates).get(position.currency)
    if rate is None or not math.isfinite(rate) or rate <= 0:
        return None
    return rate


def calculate_portfolio_metrics(
    positions: Sequence[Position],
    fx_rates: Mapping[str, float],
    base_currency: str = config.BASE_CURRENCY,
) -> PortfolioSummary:
    """
    Value-weighted portfolio statistics.

    Two passes: the total value must be known before any weight is computed.
    Positions with no shares, no positive rate for their currency, or a
    value that is not positive and finite are left out of every aggregate,
    the total included.

    Args:
        positions: Positions already enriched by calculate_metrics
        fx_rates: Currency code -> local units per 1 base unit
        base_currency: Label for the currency of total_value

    Returns:
        PortfolioSummary (all zeros for an empty or fully excluded portfolio)
    """
    summary = PortfolioSummary(base_currency=base_currency)

    # First pass: total value
    values: list[float | None] = []
    for position in positions:
        value = position_value(position, fx_rates)
        if value is None and position.shares_owned and position.shares_owned > 0:
            logger.debug(
                f"{position.ticker}: no usable FX rate for {position.currency!r} "
                "or non-positive value, skipping"
            )
        values.append(value)
        if value is not None:
            summary.total_value += value

    # Second pass: weights against the full total
    if summary.total_value > 0:
        for position, value in zip(positions, values):
            if value is None:
                continue
            weight = value / summary.total_value
            summary.overall_ev += position.expected_value * weight
            summary.weighted_volatility += position.volatility * weight

            sector = position.sector or "Unknown"
            summary.sector_weights[sector] = summary.sector_weights.get(sector, 0.0) + weight * 100

            summary.kelly_utilization += weight * 100
            summary.positions_included += 1

    # Sharpe-like ratio with weighted EV as the return proxy
    if summary.weighted_volatility > 0:
        summary.sharpe_ratio = (
            summary.overall_ev - config.RISK_FREE_RATE_PERCENT
        ) / summary.weighted_volatility

    return summary


def apply_position_valuation(
    positions: Sequence[Position],
    fx_rates: Mapping[str, float],
    summary: PortfolioSummary,
) -> None:
    """
    Set current_value, weight (percent), and unrealized_pnl on each position.

    Values are in the base currency. Positions excluded from the summary get
    zeros.
    """
    for position in positions:
        position.current_value = 0.0
        position.weight = 0.0
        position.unrealized_pnl = 0.0

        value = position_value(position, fx_rates)
        if value is None:
            continue

        rate = _rate_for(position, fx_rates)
        cost = position.shares_owned * position.avg_price_local / rate

        position.current_value = value
        position.unrealized_pnl = value - cost
        if summary.total_value > 0:
            position.weight = value / summary.total_value * 100
