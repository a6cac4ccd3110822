"""Policy constants and environment settings for the decision engine."""

import os

# Probability of a positive outcome used when the estimate is missing or outside (0, 1]
DEFAULT_PROBABILITY_POSITIVE = 0.65

# Risk-free rate, in the same percent units as expected value
RISK_FREE_RATE_PERCENT = 4.0

# Floor on |downside| when computing the b-ratio
MIN_DOWNSIDE_MAGNITUDE = 0.1

# Downside calibration: (exclusive upper beta bound, downside %), checked in order
DOWNSIDE_RISK_BY_BETA: tuple[tuple[float, float], ...] = (
    (0.5, -15.0),
    (1.0, -20.0),
    (1.5, -25.0),
)
HIGH_BETA_DOWNSIDE_RISK = -30.0
FALLBACK_DOWNSIDE_RISK = -20.0

# EV thresholds (percent)
STRONG_BUY_EV_THRESHOLD = 15.0
ADD_EV_THRESHOLD = 7.0
TRIM_EV_THRESHOLD = 3.0
SELL_EV_THRESHOLD = 0.0

# Position sizing
MAX_HALF_KELLY = 15.0

# Buy zone spans 10% below the EV=7% price
BUY_ZONE_RANGE = 0.90
# Used when the buy-zone price cannot be solved
FALLBACK_BUY_ZONE_MIN = 0.85
FALLBACK_BUY_ZONE_MAX = 0.95

# Assessment labels
ASSESSMENT_ADD = "Add"
ASSESSMENT_HOLD = "Hold"
ASSESSMENT_TRIM = "Trim"
ASSESSMENT_SELL = "Sell"

# Sell zone status labels
SELL_STATUS_BELOW = "Below sell zone"
SELL_STATUS_TRIM = "In trim zone"
SELL_STATUS_SELL = "In sell zone"
SELL_STATUS_NONE = "no sell zone"

# Buy zone status labels
BUY_STATUS_STRONG = "EV >> 15%"
BUY_STATUS_WITHIN = "within buy zone"
BUY_STATUS_OUTSIDE = "outside buy zone"
BUY_STATUS_NONE = "no buy zone available"

# Environment settings
BASE_CURRENCY = os.environ.get("BASE_CURRENCY", "EUR").upper().strip()
EV_ALERT_THRESHOLD = float(os.environ.get("EV_ALERT_THRESHOLD", "10.0"))
REPORT_CACHE_DIR = os.environ.get("REPORT_CACHE_DIR", ".cache/reports")
REPORT_CACHE_TTL = int(os.environ.get("REPORT_CACHE_TTL", "3600"))  # 1 hour
