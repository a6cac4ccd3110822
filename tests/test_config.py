"""Tests for policy constants and version info."""

import pytest

from portfolio_mcp import config, get_server_version


class TestPolicyConstants:
    """Sanity checks on the decision policy."""

    def test_ev_thresholds_descend(self) -> None:
        """Test the assessment bands are ordered."""
        assert (
            config.STRONG_BUY_EV_THRESHOLD
            > config.ADD_EV_THRESHOLD
            > config.TRIM_EV_THRESHOLD
            > config.SELL_EV_THRESHOLD
        )

    def test_downside_calibration_table(self) -> None:
        """Test beta bounds ascend and downside gets more severe."""
        bounds = [bound for bound, _ in config.DOWNSIDE_RISK_BY_BETA]
        risks = [risk for _, risk in config.DOWNSIDE_RISK_BY_BETA]

        assert bounds == sorted(bounds)
        assert risks == sorted(risks, reverse=True)
        assert config.HIGH_BETA_DOWNSIDE_RISK < risks[-1]

    def test_fallback_buy_band(self) -> None:
        """Test the fallback band sits below the current price."""
        assert config.FALLBACK_BUY_ZONE_MIN < config.FALLBACK_BUY_ZONE_MAX < 1.0

    def test_default_probability(self) -> None:
        """Test the default probability is a valid probability."""
        assert 0 < config.DEFAULT_PROBABILITY_POSITIVE <= 1


class TestServerVersion:
    """Tests for get_server_version."""

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test SERVER_VERSION env wins."""
        monkeypatch.setenv("SERVER_VERSION", "9.9.9")
        assert get_server_version() == "9.9.9"

    def test_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a version string is always returned."""
        monkeypatch.delenv("SERVER_VERSION", raising=False)
        assert get_server_version()
