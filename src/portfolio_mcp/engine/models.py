"""Data classes for positions, portfolio summaries, and zone results."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class Position:
    """
    One tracked holding.

    Inputs are supplied by the caller; derived fields are overwritten on every
    call to calculate_metrics. downside_risk=None means "calibrate from beta",
    while 0.0 is kept as a real input.
    """

    ticker: str
    sector: str = ""
    currency: str = ""

    # Market inputs
    current_price: float = 0.0
    fair_value: float = 0.0
    beta: float | None = None
    volatility: float = 0.0

    # Probabilistic inputs
    probability_positive: float | None = None
    downside_risk: float | None = None

    # Sizing
    shares_owned: float = 0.0
    avg_price_local: float = 0.0

    # Derived
    upside_potential: float = 0.0
    b_ratio: float = 0.0
    expected_value: float = 0.0
    kelly_fraction: float = 0.0
    half_kelly_suggested: float = 0.0
    assessment: str = ""
    buy_zone_min: float = 0.0
    buy_zone_max: float = 0.0
    sell_zone_lower_bound: float = 0.0
    sell_zone_upper_bound: float = 0.0
    sell_zone_status: str = ""

    # Valuation in base currency (set by apply_position_valuation)
    current_value: float = 0.0
    weight: float = 0.0
    unrealized_pnl: float = 0.0

    def __post_init__(self) -> None:
        self.ticker = self.ticker.upper().strip()
        self.currency = self.currency.upper().strip()

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict of all fields."""
        return asdict(self)


@dataclass
class PortfolioSummary:
    """Value-weighted portfolio statistics in the base currency."""

    total_value: float = 0.0
    overall_ev: float = 0.0
    weighted_volatility: float = 0.0
    sharpe_ratio: float = 0.0
    kelly_utilization: float = 0.0
    sector_weights: dict[str, float] = field(default_factory=dict)
    base_currency: str = ""
    positions_included: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class BuyZoneResult:
    """Buy zone bounded by the EV=15% (lower) and EV=7% (upper) prices."""

    ticker: str
    fair_value: float
    probability_positive: float
    downside_risk: float
    lower_bound: float = 0.0
    upper_bound: float = 0.0
    current_expected_value: float = 0.0
    zone_status: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticker": self.ticker,
            "fair_value": self.fair_value,
            "probability_positive": self.probability_positive,
            "downside_risk": self.downside_risk,
            "buy_zone": {
                "lower_bound": self.lower_bound,
                "upper_bound": self.upper_bound,
            },
            "current_expected_value": self.current_expected_value,
            "zone_status": self.zone_status,
        }


@dataclass
class SellZoneResult:
    """Sell zone bounded by the EV=3% (lower) and EV=0% (upper) prices."""

    ticker: str
    fair_value: float
    probability_positive: float
    downside_risk: float
    lower_bound: float = 0.0
    upper_bound: float = 0.0
    current_expected_value: float = 0.0
    sell_zone_status: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticker": self.ticker,
            "fair_value": self.fair_value,
            "probability_positive": self.probability_positive,
            "downside_risk": self.downside_risk,
            "sell_zone": {
                "sell_zone_lower_bound": self.lower_bound,
                "sell_zone_upper_bound": self.upper_bound,
            },
            "current_expected_value": self.current_expected_value,
            "sell_zone_status": self.sell_zone_status,
        }
