"""Tabular position reports."""

from collections.abc import Sequence

import pandas as pd

from portfolio_mcp.engine.models import Position

# Column order is part of the report schema
REPORT_COLUMNS = [
    "ticker",
    "sector",
    "currency",
    "shares_owned",
    "current_price",
    "fair_value",
    "current_value",
    "weight",
    "unrealized_pnl",
    "upside_potential",
    "downside_risk",
    "probability_positive",
    "expected_value",
    "b_ratio",
    "kelly_fraction",
    "half_kelly_suggested",
    "assessment",
    "buy_zone_min",
    "buy_zone_max",
    "sell_zone_lower_bound",
    "sell_zone_upper_bound",
    "sell_zone_status",
]


def positions_frame(positions: Sequence[Position]) -> pd.DataFrame:
    """
    Build the report table for a set of positions.

    Output columns are always REPORT_COLUMNS, in order. Rows are sorted by
    weight descending, ties broken by ticker so the CSV is stable.

    Args:
        positions: Calculated (and usually valued) positions

    Returns:
        DataFrame with one row per position
    """
    df = pd.DataFrame([p.to_dict() for p in positions], columns=REPORT_COLUMNS)
    if df.empty:
        return df

    df = df.sort_values(["weight", "ticker"], ascending=[False, True], kind="mergesort")
    return df.reset_index(drop=True)


def df_to_rows(df: pd.DataFrame) -> list[dict]:
    """Convert to list of dicts for inline preview."""
    return df.to_dict("records")


def df_to_csv(df: pd.DataFrame) -> str:
    """Convert to CSV string for cache/resource."""
    return df.to_csv(index=False)
