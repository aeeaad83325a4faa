"""
Tests for the Estimator.

Tests the linear price/time model and its display helpers.
"""

import pytest

from frighet.core.estimator import (
    DEFAULT_RATE_PROFILE,
    Estimate,
    ProductType,
    estimate,
    format_hours,
    format_price,
    parse_weight,
    rate_profile_for,
)


class TestEstimate:
    """Tests for the estimate function."""

    def test_prepared_meals_example(self):
        """5 kg of prepared meals: 150 + 5*10*0.9 and 10 + 5*0.32*0.8."""
        result = estimate("Prepared Meals", "5")

        assert result.price == pytest.approx(195.0)
        assert result.time == pytest.approx(11.28)

    def test_pharmaceutical_example(self):
        """10 kg of pharmaceutical product: 330 RON and 13.84 hours."""
        result = estimate("Pharmaceutical/Biological", "10")

        assert result.price == pytest.approx(330.0)
        assert result.time == pytest.approx(13.84)

    def test_plants_use_price_multiplier_only(self):
        result = estimate("Plants/Flowers", "2")

        assert result.price == pytest.approx(172.0)
        assert result.time == pytest.approx(10.64)

    def test_fractional_weight(self):
        result = estimate("Meat/Dairy", "0.5")

        assert result.price == pytest.approx(155.0)
        assert result.time == pytest.approx(10.16)

    def test_unknown_product_type_falls_back_to_other(self):
        """Unrecognised categories use the (1.0, 1.0) default."""
        assert estimate("Seafood", "4") == estimate("Other", "4")
        assert estimate("Seafood", "4").price == pytest.approx(190.0)

    @pytest.mark.parametrize(
        "weight_text",
        ["", "   ", "abc", "0", "-3", "nan", "inf", "-inf", None],
    )
    def test_invalid_weight_gives_no_estimate(self, weight_text):
        """Anything that is not a positive finite number yields (None, None)."""
        result = estimate("Fruits/Vegetables", weight_text)

        assert result.price is None
        assert result.time is None
        assert result.is_available is False

    @pytest.mark.parametrize("product_type", ["", None])
    def test_missing_product_type_gives_no_estimate(self, product_type):
        assert estimate(product_type, "5") == Estimate(None, None)

    @pytest.mark.parametrize("product_type", ProductType.choices() + ["Unknown"])
    @pytest.mark.parametrize("weight_text", ["0.001", "1", "37.5", "1000"])
    def test_baselines_are_lower_bounds(self, product_type, weight_text):
        result = estimate(product_type, weight_text)

        assert result.price >= 150
        assert result.time >= 10

    def test_is_idempotent(self):
        first = estimate("Plants/Flowers", "12.3")
        second = estimate("Plants/Flowers", "12.3")

        assert first == second

    def test_accepts_numeric_weight(self):
        assert estimate("Other", 3) == estimate("Other", "3")

    def test_estimate_values_are_set_together(self):
        result = estimate("Meat/Dairy", "8")

        assert result.is_available is True
        assert result.price is not None and result.time is not None


class TestParseWeight:
    """Tests for parse_weight."""

    def test_trims_whitespace(self):
        assert parse_weight(" 2.5 ") == 2.5

    def test_rejects_booleans(self):
        assert parse_weight(True) is None


class TestRateProfiles:
    """Tests for the multiplier table."""

    def test_every_category_has_a_profile(self):
        for product_type in ProductType:
            profile = rate_profile_for(product_type.value)
            assert profile.price_multiplier > 0
            assert profile.time_multiplier > 0

    def test_pharmaceutical_profile(self):
        profile = rate_profile_for("Pharmaceutical/Biological")

        assert profile.price_multiplier == 1.8
        assert profile.time_multiplier == 1.2

    def test_unknown_category_uses_default(self):
        assert rate_profile_for("Spices") is DEFAULT_RATE_PROFILE

    def test_choices_in_display_order(self):
        assert ProductType.choices() == [
            "Fruits/Vegetables",
            "Meat/Dairy",
            "Prepared Meals",
            "Pharmaceutical/Biological",
            "Plants/Flowers",
            "Other",
        ]


class TestFormatting:
    """Tests for display helpers."""

    def test_price_has_two_decimals(self):
        assert format_price(195.0) == "195.00 RON"

    def test_hours_are_whole(self):
        assert format_hours(11.28) == "11 hours"

    def test_half_rounds_up(self):
        assert format_hours(12.5) == "13 hours"
        assert format_price(150.125) == "150.13 RON"

    def test_rounds_the_binary_value(self):
        """150.005 is stored just below the half, as toFixed sees it."""
        assert format_price(150.005) == "150.00 RON"

    def test_missing_values_render_placeholder(self):
        assert format_price(None) == "N/A"
        assert format_hours(None) == "N/A"
