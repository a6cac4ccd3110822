"""Utility modules."""

from portfolio_mcp.utils.provenance import build_error_response, build_meta
from portfolio_mcp.utils.report import df_to_csv, df_to_rows, positions_frame
from portfolio_mcp.utils.sanitize import sanitize_numbers, sanitize_text
from portfolio_mcp.utils.validators import parse_fx_rates, parse_position

__all__ = [
    "build_error_response",
    "build_meta",
    "df_to_csv",
    "df_to_rows",
    "positions_frame",
    "sanitize_numbers",
    "sanitize_text",
    "parse_fx_rates",
    "parse_position",
]
