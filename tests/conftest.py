"""Pytest configuration and fixtures."""

import pytest

from portfolio_mcp.data.cache import ReportCache
from portfolio_mcp.engine.models import Position


@pytest.fixture
def sample_position() -> Position:
    """Position from the reference data: beta 1.2, price 100, fair value 120."""
    return Position(ticker="abc", beta=1.2, current_price=100.0, fair_value=120.0)


@pytest.fixture
def sample_portfolio() -> list[Position]:
    """Two owned positions in USD and EUR plus one closed position."""
    return [
        Position(
            ticker="AAA",
            sector="Tech",
            currency="USD",
            shares_owned=10,
            current_price=100.0,
            expected_value=5.0,
            volatility=10.0,
        ),
        Position(
            ticker="BBB",
            sector="Health",
            currency="EUR",
            shares_owned=5,
            current_price=200.0,
            expected_value=1.0,
            volatility=20.0,
        ),
        Position(
            ticker="CCC",
            sector="Ignored",
            currency="USD",
            shares_owned=0,
            current_price=999.0,
        ),
    ]


@pytest.fixture
def sample_fx_rates() -> dict[str, float]:
    """Rates as local units per 1 base unit."""
    return {"USD": 1.0, "EUR": 2.0}


@pytest.fixture
def report_cache(tmp_path) -> ReportCache:
    """Isolated report cache in a temporary directory."""
    return ReportCache(cache_dir=str(tmp_path / "reports"))
