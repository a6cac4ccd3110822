"""Parsing and validation of caller-supplied payloads."""

from collections.abc import Mapping
from typing import Any

from portfolio_mcp.engine.models import Position
from portfolio_mcp.utils.sanitize import sanitize_text

# Input fields read from a position payload; derived fields are never read
NUMERIC_INPUT_FIELDS = (
    "current_price",
    "fair_value",
    "volatility",
    "shares_owned",
    "avg_price_local",
)
OPTIONAL_INPUT_FIELDS = ("beta", "probability_positive", "downside_risk")


def parse_number(value: Any, name: str) -> float:
    """
    Coerce a JSON value to float.

    Raises:
        ValueError: If the value is a bool, not numeric, or not parseable
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def parse_optional_number(value: Any, name: str) -> float | None:
    """Like parse_number, but None passes through."""
    if value is None:
        return None
    return parse_number(value, name)


def parse_position(payload: Mapping[str, Any]) -> Position:
    """
    Build a Position from a JSON object.

    Missing numeric inputs default to 0; beta, probability_positive, and
    downside_risk stay None when absent (the calculator defaults them).

    Raises:
        ValueError: If ticker is missing or a numeric field is not a number
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"position must be an object, got {type(payload).__name__}")

    ticker = _text_field(payload.get("ticker") or payload.get("symbol"))
    if not ticker:
        raise ValueError("position is missing 'ticker'")

    kwargs: dict[str, Any] = {
        "ticker": ticker,
        "sector": _text_field(payload.get("sector")),
        "currency": _text_field(payload.get("currency")),
    }
    for name in NUMERIC_INPUT_FIELDS:
        if payload.get(name) is not None:
            kwargs[name] = parse_number(payload[name], name)
    for name in OPTIONAL_INPUT_FIELDS:
        kwargs[name] = parse_optional_number(payload.get(name), name)

    return Position(**kwargs)


def parse_fx_rates(payload: Mapping[str, Any]) -> dict[str, float]:
    """
    Parse a currency -> rate object.

    Raises:
        ValueError: If a rate is not a number
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"fx_rates must be an object, got {type(payload).__name__}")
    return {str(code): parse_number(rate, f"fx_rates[{code}]") for code, rate in payload.items()}


def _text_field(value: Any) -> str:
    if value is None:
        return ""
    return sanitize_text(str(value)) or ""
