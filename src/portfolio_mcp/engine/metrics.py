"""Per-position decision metrics: EV, Kelly sizing, assessment, and zones."""

import logging
import math

from portfolio_mcp import config
from portfolio_mcp.engine.models import Position
from portfolio_mcp.engine.zones import sell_zone_status, solve_price_for_ev_threshold

logger = logging.getLogger(__name__)


def calibrate_downside_risk(beta: float | None) -> float:
    """
    Map beta to a downside percentage.

    beta < 0.5 -> -15, [0.5, 1.0) -> -20, [1.0, 1.5) -> -25, >= 1.5 -> -30.
    Missing or non-positive beta falls back to -20.
    """
    if not _is_positive(beta):
        return config.FALLBACK_DOWNSIDE_RISK
    for upper_bound, downside in config.DOWNSIDE_RISK_BY_BETA:
        if beta < upper_bound:
            return downside
    return config.HIGH_BETA_DOWNSIDE_RISK


def classify_assessment(expected_value: float) -> str:
    """Add (EV > 7), Hold (3 <= EV <= 7), Trim (0 <= EV < 3), Sell (EV < 0)."""
    if expected_value > config.ADD_EV_THRESHOLD:
        return config.ASSESSMENT_ADD
    if expected_value >= config.TRIM_EV_THRESHOLD:
        return config.ASSESSMENT_HOLD
    if expected_value >= config.SELL_EV_THRESHOLD:
        return config.ASSESSMENT_TRIM
    return config.ASSESSMENT_SELL


def calculate_metrics(position: Position) -> Position:
    """
    Recompute every derived field of a position from its inputs.

    Never raises: zero, missing, or non-finite inputs leave the affected
    fields at their zero defaults so a freshly created position still yields
    a displayable result.

    Args:
        position: Position to enrich (mutated in place)

    Returns:
        The same position, for chaining
    """
    _reset_derived(position)

    # 1. Downside risk, unless explicitly provided
    if position.downside_risk is None or not math.isfinite(position.downside_risk):
        position.downside_risk = calibrate_downside_risk(position.beta)
    downside = position.downside_risk

    # 2. Upside potential
    price = position.current_price
    fair_value = position.fair_value
    if _is_positive(price) and _is_positive(fair_value):
        position.upside_potential = (fair_value - price) / price * 100
    upside = position.upside_potential

    # 3. Conservative default probability
    p = position.probability_positive
    if p is None or not 0 < p <= 1:
        logger.debug(
            f"{position.ticker}: probability_positive={p} invalid, "
            f"using {config.DEFAULT_PROBABILITY_POSITIVE}"
        )
        p = config.DEFAULT_PROBABILITY_POSITIVE
        position.probability_positive = p

    # 4. b-ratio with a floor on the downside magnitude
    downside_magnitude = max(abs(downside), config.MIN_DOWNSIDE_MAGNITUDE)
    position.b_ratio = upside / downside_magnitude
    b = position.b_ratio

    # 5. Expected value
    position.expected_value = p * upside + (1 - p) * downside
    ev = position.expected_value

    # 6. Kelly fraction in percent, never negative. (b*p - q) / b as p - q / b,
    # which stays finite when b overflows
    if b > 0:
        position.kelly_fraction = max((p - (1 - p) / b) * 100, 0.0)

    # 7. Half-Kelly, capped
    position.half_kelly_suggested = min(position.kelly_fraction / 2, config.MAX_HALF_KELLY)

    # 8. Assessment
    position.assessment = classify_assessment(ev)

    # 9. Buy zone from the EV = 7% price
    if _is_positive(fair_value):
        buy_max, ok = solve_price_for_ev_threshold(fair_value, p, downside, config.ADD_EV_THRESHOLD)
        if ok:
            position.buy_zone_max = buy_max
            position.buy_zone_min = buy_max * config.BUY_ZONE_RANGE
        elif _is_positive(price):
            logger.debug(f"{position.ticker}: buy zone unsolvable, using price band")
            position.buy_zone_min = price * config.FALLBACK_BUY_ZONE_MIN
            position.buy_zone_max = price * config.FALLBACK_BUY_ZONE_MAX

    # 10. Sell zone between the EV = 3% and EV = 0% prices
    trim_price, ok_trim = solve_price_for_ev_threshold(
        fair_value, p, downside, config.TRIM_EV_THRESHOLD
    )
    sell_price, ok_sell = solve_price_for_ev_threshold(
        fair_value, p, downside, config.SELL_EV_THRESHOLD
    )
    if ok_trim and ok_sell and trim_price < sell_price:
        position.sell_zone_lower_bound = trim_price
        position.sell_zone_upper_bound = sell_price
        position.sell_zone_status = sell_zone_status(ev)
    else:
        position.sell_zone_status = config.SELL_STATUS_NONE

    return position


def _reset_derived(position: Position) -> None:
    position.upside_potential = 0.0
    position.b_ratio = 0.0
    position.expected_value = 0.0
    position.kelly_fraction = 0.0
    position.half_kelly_suggested = 0.0
    position.assessment = ""
    position.buy_zone_min = 0.0
    position.buy_zone_max = 0.0
    position.sell_zone_lower_bound = 0.0
    position.sell_zone_upper_bound = 0.0
    position.sell_zone_status = ""


def _is_positive(value: float | None) -> bool:
    """True for finite values > 0."""
    return value is not None and math.isfinite(value) and value > 0
