"""EV threshold solver and buy/sell zone queries."""

import math

from portfolio_mcp import config
from portfolio_mcp.engine.models import BuyZoneResult, SellZoneResult


def solve_price_for_ev_threshold(
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
    ev_threshold: float,
) -> tuple[float, bool]:
    """
    Solve for the price at which expected value equals a target.

    Inverts EV = p * ((FV - P) / P * 100) + (1 - p) * D for P:

        P = 100 * p * FV / (EV + 100 * p + (1 - p) * |D|)

    Args:
        fair_value: Fair value estimate
        probability_positive: Probability of a positive outcome
        downside_risk: Downside percentage (negative)
        ev_threshold: Target expected value, in percent

    Returns:
        Tuple of (price, ok). ok is False when the denominator is not positive
        or the price is not a positive finite number; price is 0.0 then.
    """
    downside_magnitude = abs(downside_risk)
    denominator = (
        ev_threshold
        + 100 * probability_positive
        + (1 - probability_positive) * downside_magnitude
    )
    if not denominator > 0:
        return 0.0, False

    price = (100 * probability_positive * fair_value) / denominator
    if not math.isfinite(price) or price <= 0:
        return 0.0, False
    return price, True


def expected_value_at_price(
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
    current_price: float,
) -> float:
    """EV (percent) if the stock traded at current_price. 0.0 for non-positive prices."""
    if not current_price > 0:
        return 0.0
    upside_percent = (fair_value - current_price) / current_price * 100
    return probability_positive * upside_percent + (1 - probability_positive) * downside_risk


def _validate_zone_inputs(
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
) -> None:
    if not 0 <= probability_positive <= 1:
        raise ValueError(
            f"probability_positive must be between 0 and 1, got {probability_positive}"
        )
    if not downside_risk < 0:
        raise ValueError(f"downside_risk must be negative, got {downside_risk}")
    if not fair_value > 0:
        raise ValueError(f"fair_value must be positive, got {fair_value}")


def calculate_buy_zone(
    ticker: str,
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
    current_price: float,
) -> BuyZoneResult:
    """
    Buy zone bounds plus current EV and zone status for a price.

    The lower bound is the price where EV = 15%, the upper bound the price
    where EV = 7%.

    Raises:
        ValueError: If probability is outside [0, 1], downside is not negative,
            or fair value is not positive
    """
    _validate_zone_inputs(fair_value, probability_positive, downside_risk)

    result = BuyZoneResult(
        ticker=ticker.upper().strip(),
        fair_value=fair_value,
        probability_positive=probability_positive,
        downside_risk=downside_risk,
    )

    lower, ok_lower = solve_price_for_ev_threshold(
        fair_value, probability_positive, downside_risk, config.STRONG_BUY_EV_THRESHOLD
    )
    upper, ok_upper = solve_price_for_ev_threshold(
        fair_value, probability_positive, downside_risk, config.ADD_EV_THRESHOLD
    )
    if not ok_lower or not ok_upper or lower > upper:
        result.zone_status = config.BUY_STATUS_NONE
        return result

    result.lower_bound = lower
    result.upper_bound = upper

    if current_price > 0:
        result.current_expected_value = expected_value_at_price(
            fair_value, probability_positive, downside_risk, current_price
        )
        if current_price < lower:
            result.zone_status = config.BUY_STATUS_STRONG
        elif current_price <= upper:
            result.zone_status = config.BUY_STATUS_WITHIN
        else:
            result.zone_status = config.BUY_STATUS_OUTSIDE

    return result


def calculate_sell_zone(
    ticker: str,
    fair_value: float,
    probability_positive: float,
    downside_risk: float,
    current_price: float,
) -> SellZoneResult:
    """
    Sell zone bounds plus current EV and trim/sell status for a price.

    The lower bound is the price where EV = 3% (trim starts), the upper bound
    the price where EV = 0% (sell starts).

    Raises:
        ValueError: If probability is outside [0, 1], downside is not negative,
            or fair value is not positive
    """
    _validate_zone_inputs(fair_value, probability_positive, downside_risk)

    result = SellZoneResult(
        ticker=ticker.upper().strip(),
        fair_value=fair_value,
        probability_positive=probability_positive,
        downside_risk=downside_risk,
    )

    trim_price, ok_trim = solve_price_for_ev_threshold(
        fair_value, probability_positive, downside_risk, config.TRIM_EV_THRESHOLD
    )
    sell_price, ok_sell = solve_price_for_ev_threshold(
        fair_value, probability_positive, downside_risk, config.SELL_EV_THRESHOLD
    )
    if not ok_trim or not ok_sell or trim_price >= sell_price:
        result.sell_zone_status = config.SELL_STATUS_NONE
        return result

    result.lower_bound = trim_price
    result.upper_bound = sell_price

    if current_price > 0:
        result.current_expected_value = expected_value_at_price(
            fair_value, probability_positive, downside_risk, current_price
        )
        result.sell_zone_status = sell_zone_status(result.current_expected_value)

    return result


def sell_zone_status(expected_value: float) -> str:
    """Classify an EV against the trim (3%) and sell (0%) thresholds."""
    if expected_value > config.TRIM_EV_THRESHOLD:
        return config.SELL_STATUS_BELOW
    if expected_value > config.SELL_EV_THRESHOLD:
        return config.SELL_STATUS_TRIM
    return config.SELL_STATUS_SELL
