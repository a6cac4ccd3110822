"""Data layer for caching generated reports."""

from portfolio_mcp.data.cache import ReportCache, report_cache, report_uri

__all__ = [
    "ReportCache",
    "report_cache",
    "report_uri",
]
