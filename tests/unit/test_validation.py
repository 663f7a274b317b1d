"""Unit tests for input validation"""

import math
import pytest
from implied_growth.domain.exceptions import FinancialLogicError, InputValidationError
from implied_growth.domain.growth import solve
from implied_growth.domain.models import ModelInputs, ModelVariant
from implied_growth.domain.validation import (
    ensure_valid,
    has_errors,
    validate_all_inputs,
    validate_field,
    validate_financial_logic,
)


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("market_price", 0.5, "Market price must be between $1 and $500"),
        ("market_price", 501, "Market price must be between $1 and $500"),
        ("current_dividend", -1, "Current dividend must be between $0 and $50"),
        ("required_return", 0, "Required return must be between 0.01% and 25%"),
        ("required_return", 30, "Required return must be between 0.01% and 25%"),
        ("expected_dividend", 60, "Expected next dividend must be between $0 and $50"),
    ],
)
def test_validate_field_out_of_range(field, value, message):
    assert validate_field(field, value) == message


@pytest.mark.parametrize("value", [None, math.nan, "100", True])
def test_validate_field_missing_or_non_numeric(value):
    assert validate_field("market_price", value) == "Market price is required"


def test_validate_field_bounds_are_inclusive():
    assert validate_field("market_price", 1) is None
    assert validate_field("market_price", 500) is None
    assert validate_field("current_dividend", 0) is None
    assert validate_field("required_return", 0.01) is None


def test_validate_field_unknown_field():
    assert validate_field("volatility", -5) is None


def test_validate_financial_logic():
    assert validate_financial_logic(0.02, 0.07) is None
    assert "must be less than required return" in validate_financial_logic(0.07, 0.07)
    assert "cannot be negative" in validate_financial_logic(-0.01, 0.07)


def test_validate_all_inputs_valid(default_inputs):
    errors = validate_all_inputs(default_inputs)
    assert errors == {}
    assert has_errors(errors) is False


def test_validate_all_inputs_field_errors_skip_financial_check():
    inputs = ModelInputs(market_price=0, current_dividend=0, required_return=7)
    errors = validate_all_inputs(inputs)

    assert set(errors) == {"market_price"}
    assert has_errors(errors) is True


def test_validate_all_inputs_financial_error():
    """Test zero dividend: every field in range but g == r"""
    inputs = ModelInputs(market_price=100, current_dividend=0, required_return=7)
    errors = validate_all_inputs(inputs)

    assert set(errors) == {"financial"}


def test_validate_all_inputs_direct_variant_requires_expected_dividend(default_inputs):
    errors = validate_all_inputs(default_inputs, ModelVariant.DIRECT_D1)
    assert errors == {"expected_dividend": "Expected next dividend is required"}


def test_validate_all_inputs_closed_form_ignores_expected_dividend(default_inputs):
    assert validate_all_inputs(default_inputs, ModelVariant.CLOSED_FORM) == {}


def test_validate_all_inputs_direct_variant_uses_direct_formula():
    """Test D1 above r * P makes direct-variant growth negative"""
    inputs = ModelInputs(market_price=50, current_dividend=2, required_return=10, expected_dividend=6)
    errors = validate_all_inputs(inputs, ModelVariant.DIRECT_D1)
    assert "cannot be negative" in errors["financial"]


@pytest.mark.parametrize(
    "inputs",
    [
        ModelInputs(100, 5, 7),
        ModelInputs(100, 0, 7),
        ModelInputs(100, 10, 5),
        ModelInputs(1, 0, 0.01),
        ModelInputs(500, 50, 25),
    ],
)
def test_financial_check_agrees_with_engine(inputs):
    """Test the validation collaborator and GrowthResult.is_valid never disagree"""
    result = solve(inputs.market_price, inputs.current_dividend, inputs.required_return)
    errors = validate_all_inputs(inputs)
    assert ("financial" not in errors) == result.is_valid


def test_ensure_valid_raises_typed_errors(default_inputs):
    ensure_valid(default_inputs)

    with pytest.raises(FinancialLogicError) as exc_info:
        ensure_valid(ModelInputs(100, 0, 7))
    assert "financial" in exc_info.value.errors

    with pytest.raises(InputValidationError) as exc_info:
        ensure_valid(ModelInputs(0, 5, 7))
    assert not isinstance(exc_info.value, FinancialLogicError)
    assert "market_price" in exc_info.value.errors


def test_validate_all_inputs_solves_with_given_tolerance(direct_inputs, monkeypatch):
    from implied_growth.domain import validation

    seen = {}

    def recording_solve(*args, **kwargs):
        seen.update(kwargs)
        return solve(*args, **kwargs)

    monkeypatch.setattr(validation, "solve", recording_solve)

    assert validate_all_inputs(direct_inputs, ModelVariant.DIRECT_D1, tolerance=0.5) == {}
    assert seen["tolerance"] == 0.5


def test_configured_tolerance_defaults_to_engine_tolerance(monkeypatch):
    monkeypatch.delenv("IMPLIED_GROWTH_D1_TOLERANCE", raising=False)
    from implied_growth.config import Settings
    from implied_growth.domain.growth import D1_TOLERANCE

    assert Settings().d1_tolerance == D1_TOLERANCE
