"""Tests for the EV threshold solver and zone queries."""

import pytest

from portfolio_mcp.engine.zones import (
    calculate_buy_zone,
    calculate_sell_zone,
    expected_value_at_price,
    sell_zone_status,
    solve_price_for_ev_threshold,
)


class TestSolvePriceForEvThreshold:
    """Tests for solve_price_for_ev_threshold."""

    def test_known_value(self) -> None:
        """Test the closed-form price for a known input."""
        price, ok = solve_price_for_ev_threshold(380.0, 0.65, -15.0, 7.0)
        assert ok is True
        assert price == pytest.approx(24700 / 77.25)

    @pytest.mark.parametrize("target", [15.0, 7.0, 3.0, 0.0, -5.0])
    def test_solution_reproduces_target(self, target: float) -> None:
        """Test the forward EV at the solved price equals the target."""
        price, ok = solve_price_for_ev_threshold(120.0, 0.6, -25.0, target)
        assert ok is True
        assert expected_value_at_price(120.0, 0.6, -25.0, price) == pytest.approx(target, abs=1e-9)

    def test_uses_downside_magnitude(self) -> None:
        """Test the sign of downside does not change the solved price."""
        negative, _ = solve_price_for_ev_threshold(100.0, 0.5, -20.0, 7.0)
        positive, _ = solve_price_for_ev_threshold(100.0, 0.5, 20.0, 7.0)
        assert negative == positive

    def test_non_positive_denominator_infeasible(self) -> None:
        """Test a non-positive denominator is reported, not raised."""
        assert solve_price_for_ev_threshold(100.0, 0.5, -20.0, -200.0) == (0.0, False)

    def test_zero_probability_infeasible(self) -> None:
        """Test p = 0 gives a zero price, which is infeasible."""
        assert solve_price_for_ev_threshold(100.0, 0.0, -20.0, 7.0) == (0.0, False)

    def test_zero_fair_value_infeasible(self) -> None:
        """Test a zero fair value cannot be solved."""
        assert solve_price_for_ev_threshold(0.0, 0.65, -20.0, 7.0) == (0.0, False)

    def test_nan_input_infeasible(self) -> None:
        """Test NaN never leaks out as a price."""
        price, ok = solve_price_for_ev_threshold(float("nan"), 0.65, -20.0, 7.0)
        assert ok is False
        assert price == 0.0


class TestExpectedValueAtPrice:
    """Tests for expected_value_at_price."""

    def test_known_value(self) -> None:
        """Test forward formula for a known input."""
        ev = expected_value_at_price(120.0, 0.65, -25.0, 100.0)
        assert ev == pytest.approx(4.25)

    @pytest.mark.parametrize("price", [0.0, -10.0])
    def test_non_positive_price_is_zero(self, price: float) -> None:
        """Test non-positive prices return zero instead of dividing."""
        assert expected_value_at_price(120.0, 0.65, -25.0, price) == 0.0


class TestCalculateBuyZone:
    """Tests for calculate_buy_zone."""

    def test_reference_scenario(self) -> None:
        """Test bounds, current EV, and status for the reference input."""
        result = calculate_buy_zone("unh", 380.0, 0.65, -15.0, 284.37)

        assert result.ticker == "UNH"
        assert result.lower_bound == pytest.approx(289.7361, abs=0.02)
        assert result.upper_bound == pytest.approx(319.7411, abs=0.02)
        assert result.current_expected_value == pytest.approx(16.6087, abs=0.02)
        assert result.zone_status == "EV >> 15%"

    @pytest.mark.parametrize(
        ("price", "status"),
        [
            (80.0, "EV >> 15%"),
            (90.0, "within buy zone"),
            (96.5, "within buy zone"),
            (100.0, "outside buy zone"),
        ],
    )
    def test_status_classifications(self, price: float, status: str) -> None:
        """Test status for prices below, inside, and above the zone."""
        result = calculate_buy_zone("ABC", 120.0, 0.65, -25.0, price)
        assert result.zone_status == status

    def test_no_current_price(self) -> None:
        """Test bounds are returned without a status when price is unknown."""
        result = calculate_buy_zone("ABC", 120.0, 0.65, -25.0, 0.0)

        assert result.upper_bound == pytest.approx(96.5944, abs=0.02)
        assert result.current_expected_value == 0.0
        assert result.zone_status is None

    def test_zero_probability_has_no_zone(self) -> None:
        """Test an unsolvable zone reports 'no buy zone available'."""
        result = calculate_buy_zone("ABC", 120.0, 0.0, -25.0, 100.0)

        assert result.zone_status == "no buy zone available"
        assert result.lower_bound == 0.0
        assert result.upper_bound == 0.0

    @pytest.mark.parametrize(
        ("fair_value", "probability", "downside", "match"),
        [
            (100.0, 1.2, -20.0, "probability_positive"),
            (100.0, -0.1, -20.0, "probability_positive"),
            (100.0, float("nan"), -20.0, "probability_positive"),
            (100.0, 0.65, 20.0, "downside_risk"),
            (100.0, 0.65, 0.0, "downside_risk"),
            (0.0, 0.65, -20.0, "fair_value"),
            (-5.0, 0.65, -20.0, "fair_value"),
        ],
    )
    def test_validation_errors(
        self, fair_value: float, probability: float, downside: float, match: str
    ) -> None:
        """Test invalid inputs raise ValueError naming the field."""
        with pytest.raises(ValueError, match=match):
            calculate_buy_zone("X", fair_value, probability, downside, 90.0)

    def test_to_dict_shape(self) -> None:
        """Test serialized result nests the bounds."""
        data = calculate_buy_zone("ABC", 120.0, 0.65, -25.0, 90.0).to_dict()

        assert set(data) == {
            "ticker",
            "fair_value",
            "probability_positive",
            "downside_risk",
            "buy_zone",
            "current_expected_value",
            "zone_status",
        }
        assert set(data["buy_zone"]) == {"lower_bound", "upper_bound"}


class TestCalculateSellZone:
    """Tests for calculate_sell_zone."""

    def test_bounds(self) -> None:
        """Test EV=3% price is below the EV=0% price."""
        result = calculate_sell_zone("UNH", 380.0, 0.65, -15.0, 284.37)

        assert result.lower_bound == pytest.approx(24700 / 73.25)
        assert result.upper_bound == pytest.approx(24700 / 70.25)
        assert result.lower_bound < result.upper_bound
        assert result.sell_zone_status == "Below sell zone"

    @pytest.mark.parametrize(
        ("price", "status"),
        [
            (300.0, "Below sell zone"),
            (345.0, "In trim zone"),
            (360.0, "In sell zone"),
        ],
    )
    def test_status_classifications(self, price: float, status: str) -> None:
        """Test status for prices before, inside, and past the trim band."""
        result = calculate_sell_zone("UNH", 380.0, 0.65, -15.0, price)
        assert result.sell_zone_status == status

    def test_bounds_reproduce_thresholds(self) -> None:
        """Test the bounds price in EV 3% and 0%."""
        result = calculate_sell_zone("UNH", 380.0, 0.65, -15.0, 0.0)

        trim_ev = expected_value_at_price(380.0, 0.65, -15.0, result.lower_bound)
        sell_ev = expected_value_at_price(380.0, 0.65, -15.0, result.upper_bound)

        assert trim_ev == pytest.approx(3.0)
        assert sell_ev == pytest.approx(0.0, abs=1e-9)
        assert result.sell_zone_status is None

    def test_zero_probability_has_no_zone(self) -> None:
        """Test an unsolvable zone reports 'no sell zone'."""
        result = calculate_sell_zone("UNH", 380.0, 0.0, -15.0, 300.0)

        assert result.sell_zone_status == "no sell zone"
        assert result.lower_bound == 0.0
        assert result.upper_bound == 0.0

    def test_validation_errors(self) -> None:
        """Test the same validation as the buy zone."""
        with pytest.raises(ValueError, match="probability_positive"):
            calculate_sell_zone("X", 100.0, 2.0, -20.0, 90.0)
        with pytest.raises(ValueError, match="downside_risk"):
            calculate_sell_zone("X", 100.0, 0.5, 5.0, 90.0)
        with pytest.raises(ValueError, match="fair_value"):
            calculate_sell_zone("X", 0.0, 0.5, -5.0, 90.0)


class TestSellZoneStatus:
    """Tests for sell_zone_status edges."""

    def test_edges(self) -> None:
        """Test EV = 3 is trim and EV = 0 is sell."""
        assert sell_zone_status(3.0001) == "Below sell zone"
        assert sell_zone_status(3.0) == "In trim zone"
        assert sell_zone_status(0.0001) == "In trim zone"
        assert sell_zone_status(0.0) == "In sell zone"
