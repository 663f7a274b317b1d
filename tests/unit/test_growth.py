"""Unit tests for the growth solver"""

import math
import pytest
from implied_growth.domain.exceptions import ComputationError, InvalidGrowthError
from implied_growth.domain.growth import (
    calculate_gordon_price,
    is_valid_growth,
    solve,
    solve_closed_form,
    solve_direct_d1,
)
from implied_growth.domain.models import ModelVariant


def test_closed_form_default_scenario():
    """Test 100 price, 5 dividend, 7% return → (7 - 5) / 105 = 1.90%"""
    result = solve_closed_form(100, 5, 7)

    assert result.implied_growth_decimal == pytest.approx(2 / 105)
    assert result.implied_growth == pytest.approx(1.90476, abs=1e-4)
    assert result.expected_d1 == pytest.approx(5 * (1 + 2 / 105))
    assert result.dividend_yield == pytest.approx(result.expected_d1 / 100 * 100)
    assert result.is_valid is True
    assert result.d1_consistent is None


def test_closed_form_matches_formula_exactly():
    """Test 54.56 price, 3.60 dividend, 7.40% return against the closed form"""
    result = solve_closed_form(54.56, 3.60, 7.40)

    expected = (0.074 * 54.56 - 3.60) / (54.56 + 3.60)
    assert result.implied_growth_decimal == pytest.approx(expected, rel=1e-12)
    assert result.implied_growth == pytest.approx(expected * 100, rel=1e-12)


@pytest.mark.parametrize(
    "price, dividend, required_return, expected_percent",
    [
        (50, 2, 10, 5.77),  # 3 / 52
        (100, 3, 12, 8.74),  # 9 / 103
    ],
)
def test_closed_form_other_scenarios(price, dividend, required_return, expected_percent):
    result = solve_closed_form(price, dividend, required_return)
    assert result.implied_growth == pytest.approx(expected_percent, abs=0.01)
    assert result.is_valid is True


def test_closed_form_zero_dividend_is_invalid():
    """Test g == r when no dividend is paid (boundary: minimum price)"""
    result = solve_closed_form(1, 0, 7)

    assert math.isfinite(result.implied_growth_decimal)
    assert result.implied_growth_decimal == pytest.approx(0.07)
    assert result.is_valid is False  # g must be strictly below r


def test_closed_form_negative_growth_is_invalid():
    """Test dividend above r * P gives negative growth"""
    result = solve_closed_form(100, 10, 5)

    assert result.implied_growth_decimal < 0
    assert result.is_valid is False


def test_closed_form_zero_denominator():
    with pytest.raises(ComputationError):
        solve_closed_form(0, 0, 7)


def test_direct_d1_scenario():
    """Test 50 price, D1 2.5, 10% return → 10 - 5 = 5.0%"""
    result = solve_direct_d1(50, 2, 10, expected_dividend=2.5)

    assert result.implied_growth == pytest.approx(5.0)
    assert result.expected_d1 == pytest.approx(2.1)  # D0 * 1.05
    assert result.dividend_yield == pytest.approx(5.0)
    assert result.is_valid is True
    assert result.d1_consistent is False  # 2.5 vs 2.1


def test_direct_d1_consistent_within_tolerance():
    """Test supplied D1 within one cent of D0 * (1 + g)"""
    result = solve_direct_d1(100, 5, 7, expected_dividend=5.1)

    # g = 0.07 - 0.051 = 0.019, D0 * 1.019 = 5.095
    assert result.implied_growth_decimal == pytest.approx(0.019)
    assert result.expected_d1 == pytest.approx(5.095)
    assert result.d1_consistent is True


def test_direct_d1_zero_price():
    with pytest.raises(ComputationError):
        solve_direct_d1(0, 5, 7, expected_dividend=5)


def test_solve_dispatches_on_variant():
    closed = solve(100, 5, 7)
    direct = solve(100, 5, 7, variant=ModelVariant.DIRECT_D1, expected_dividend=5.1)

    assert closed.implied_growth_decimal == pytest.approx(2 / 105)
    assert direct.implied_growth_decimal == pytest.approx(0.019)


def test_solve_direct_requires_expected_dividend():
    with pytest.raises(ValueError):
        solve(100, 5, 7, variant=ModelVariant.DIRECT_D1)


def test_closed_form_round_trip_through_direct_formula():
    """Test D1 = D0 * (1 + g) plugged into r - D1/P reproduces g"""
    closed = solve_closed_form(54.56, 3.60, 7.40)
    d1 = 3.60 * (1 + closed.implied_growth_decimal)

    direct = solve_direct_d1(54.56, 3.60, 7.40, expected_dividend=d1)

    assert direct.implied_growth_decimal == pytest.approx(closed.implied_growth_decimal, rel=1e-9)
    assert direct.d1_consistent is True


def test_is_valid_growth_boundaries():
    assert is_valid_growth(0.0, 0.07) is True
    assert is_valid_growth(0.0699, 0.07) is True
    assert is_valid_growth(0.07, 0.07) is False
    assert is_valid_growth(-0.001, 0.07) is False


def test_gordon_price_recovers_market_price():
    """Test P0 = D1 / (r - g) returns the price the growth was solved from"""
    result = solve_closed_form(100, 5, 7)
    price = calculate_gordon_price(result.expected_d1, 0.07, result.implied_growth_decimal)
    assert price == pytest.approx(100)


def test_gordon_price_rejects_growth_at_or_above_return():
    with pytest.raises(InvalidGrowthError):
        calculate_gordon_price(5, 0.07, 0.07)
    with pytest.raises(InvalidGrowthError):
        calculate_gordon_price(5, 0.07, 0.08)
