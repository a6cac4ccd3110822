"""Investment-decision calculation engine."""

from portfolio_mcp.engine.alerts import detect_alerts
from portfolio_mcp.engine.fx import FxRates
from portfolio_mcp.engine.metrics import (
    calculate_metrics,
    calibrate_downside_risk,
    classify_assessment,
)
from portfolio_mcp.engine.models import (
    BuyZoneResult,
    PortfolioSummary,
    Position,
    SellZoneResult,
)
from portfolio_mcp.engine.portfolio import (
    apply_position_valuation,
    calculate_portfolio_metrics,
    normalize_rates,
    position_value,
)
from portfolio_mcp.engine.zones import (
    calculate_buy_zone,
    calculate_sell_zone,
    expected_value_at_price,
    sell_zone_status,
    solve_price_for_ev_threshold,
)

__all__ = [
    # Models
    "BuyZoneResult",
    "PortfolioSummary",
    "Position",
    "SellZoneResult",
    # Position metrics
    "calculate_metrics",
    "calibrate_downside_risk",
    "classify_assessment",
    # Portfolio
    "apply_position_valuation",
    "calculate_portfolio_metrics",
    "normalize_rates",
    "position_value",
    # Zones
    "calculate_buy_zone",
    "calculate_sell_zone",
    "expected_value_at_price",
    "sell_zone_status",
    "solve_price_for_ev_threshold",
    # FX and alerts
    "FxRates",
    "detect_alerts",
]
