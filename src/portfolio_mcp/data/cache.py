"""Resource caching for portfolio reports."""

import gzip
import hashlib
from datetime import datetime, timezone
from typing import Any

import diskcache
import pandas as pd

from portfolio_mcp import config
from portfolio_mcp.utils.report import df_to_csv

URI_PREFIX = "portfolio://"


def report_uri(report_id: str) -> str:
    """Canonical URI for a report id."""
    return f"{URI_PREFIX}{report_id}"


class ReportCache:
    """
    Cache stores exact CSV text for O(1) deterministic serving.

    Report ids are content hashes, so identical tables share one entry.
    """

    def __init__(self, cache_dir: str | None = None):
        if cache_dir is None:
            cache_dir = config.REPORT_CACHE_DIR
        self.cache: diskcache.Cache = diskcache.Cache(cache_dir)
        self._default_ttl = config.REPORT_CACHE_TTL

    def store(self, df: pd.DataFrame, ttl: int | None = None) -> str:
        """
        Store gzipped CSV + metadata, return canonical URI.

        Args:
            df: Report DataFrame (from positions_frame)
            ttl: Cache TTL in seconds (default: REPORT_CACHE_TTL)

        Returns:
            Canonical URI for the cached report
        """
        csv_text = df_to_csv(df)
        csv_bytes = csv_text.encode("utf-8")
        csv_gz = gzip.compress(csv_bytes)
        digest = hashlib.sha256(csv_bytes).hexdigest()[:16]
        uri = report_uri(digest)

        entry: dict[str, Any] = {
            "csv_gz": csv_gz,
            "encoding": "gzip",
            "size_bytes": len(csv_bytes),
            "compressed_bytes": len(csv_gz),
            "rows": len(df),
            "columns": list(df.columns),
            "hash": digest,
            "stored_at": datetime.now(timezone.utc).isoformat(),
        }

        expire = ttl if ttl is not None else self._default_ttl
        self.cache.set(uri, entry, expire=expire)

        return uri

    def get(self, uri: str) -> dict[str, Any] | None:
        """Get cache entry by URI, or None if not found."""
        return self.cache.get(uri)

    def get_csv(self, uri: str) -> str | None:
        """
        Get decompressed CSV text by URI.

        Args:
            uri: Canonical URI

        Returns:
            CSV text or None if not found
        """
        entry = self.get(uri)
        if not entry:
            return None
        return gzip.decompress(entry["csv_gz"]).decode("utf-8")

    def get_metadata(self, uri: str) -> dict[str, Any] | None:
        """Get cache metadata without decompressing data."""
        entry = self.get(uri)
        if not entry:
            return None
        return {
            "rows": entry["rows"],
            "columns": entry["columns"],
            "size_bytes": entry["size_bytes"],
            "hash": entry["hash"],
            "stored_at": entry["stored_at"],
        }

    def exists(self, uri: str) -> bool:
        """Check if URI exists in cache."""
        return uri in self.cache

    def clear(self) -> None:
        """Clear all cached data."""
        self.cache.clear()


# Global instance
report_cache = ReportCache()
