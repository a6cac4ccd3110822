"""Sanitization for untrusted text and non-JSON numbers."""

import math
import re
from typing import Any


def sanitize_text(text: str | None, max_length: int = 100) -> str | None:
    """
    Sanitize untrusted text fields.

    Removes control characters and truncates to max_length.
    Apply to: ticker, sector, currency, any free-text field.

    Args:
        text: Text to sanitize (may be None)
        max_length: Maximum length before truncation

    Returns:
        Sanitized text or None if input was None
    """
    if text is None:
        return None

    # Remove control characters (including \r, \x00-\x1f, \x7f-\x9f)
    text = re.sub(r"[\x00-\x1f\x7f-\x9f]", "", text)

    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text.strip()


def sanitize_numbers(obj: Any) -> Any:
    """
    Recursively replace NaN/inf floats with None.

    JSON has no NaN/inf; engine outputs stay finite for sane inputs, but
    callers may pass NaN prices straight through to a response.
    """
    if isinstance(obj, dict):
        return {k: sanitize_numbers(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [sanitize_numbers(item) for item in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    return obj
