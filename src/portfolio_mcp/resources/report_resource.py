"""Portfolio report resource handler."""

from portfolio_mcp.data.cache import ReportCache, report_cache


class ResourceNotFoundError(Exception):
    """Resource not found in cache."""

    pass


def read_report_resource(uri: str, cache: ReportCache | None = None) -> tuple[str, str]:
    """
    Serve cached report data only. O(1), no transformation.

    Args:
        uri: Resource URI (e.g., portfolio://3f2a9c0d1e4b5a6f)
        cache: Cache to read from (default: the global report cache)

    Returns:
        Tuple of (csv_text, mime_type)

    Raises:
        ResourceNotFoundError: If resource not in cache
    """
    cache = cache if cache is not None else report_cache
    csv_text = cache.get_csv(uri)

    if csv_text is None:
        raise ResourceNotFoundError(f"Report not cached. Call calculate_portfolio first: {uri}")

    return csv_text, "text/csv"
