"""Alert rules evaluated after a position is recalculated."""

from typing import Any

from portfolio_mcp import config
from portfolio_mcp.engine.models import Position


def detect_alerts(
    position: Position,
    previous_ev: float | None,
    threshold: float = config.EV_ALERT_THRESHOLD,
) -> list[dict[str, Any]]:
    """
    Alerts for a freshly calculated position.

    Args:
        position: Position after calculate_metrics
        previous_ev: Expected value before the recalculation (None if unknown)
        threshold: Absolute EV change, in percent points, that raises an alert

    Returns:
        List of alert dicts with 'ticker', 'alert_type', and 'message'
    """
    alerts: list[dict[str, Any]] = []

    if previous_ev is not None:
        ev_change = position.expected_value - previous_ev
        if abs(ev_change) > threshold:
            alerts.append(
                {
                    "ticker": position.ticker,
                    "alert_type": "ev_change",
                    "message": (
                        f"EV changed from {previous_ev:.2f}% to {position.expected_value:.2f}%"
                    ),
                }
            )

    price = position.current_price
    if position.buy_zone_max > 0 and price > 0:
        if position.buy_zone_min <= price <= position.buy_zone_max:
            alerts.append(
                {
                    "ticker": position.ticker,
                    "alert_type": "buy_zone",
                    "message": f"{position.ticker} is in buy zone at {price:.2f}",
                }
            )

    return alerts
