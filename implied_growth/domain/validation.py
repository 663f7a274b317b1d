"""Input validation - per-field ranges plus the g < r financial-logic check"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Dict, Optional

from implied_growth.domain.exceptions import FinancialLogicError, InputValidationError
from implied_growth.domain.growth import D1_TOLERANCE, is_valid_growth, solve
from implied_growth.domain.metrics import required_fields
from implied_growth.domain.models import ModelInputs, ModelVariant

FINANCIAL_ERROR_KEY = "financial"


@dataclass(frozen=True)
class FieldRule:
    """Allowed range and display metadata for one input"""

    label: str
    min: float
    max: float
    prefix: str = ""
    unit: str = ""

    def display(self, value: float) -> str:
        return f"{self.prefix}{value:g}{self.unit}"


VALIDATION_RULES: Dict[str, FieldRule] = {
    "market_price": FieldRule("Market price", 1, 500, prefix="$"),
    "current_dividend": FieldRule("Current dividend", 0, 50, prefix="$"),
    "required_return": FieldRule("Required return", 0.01, 25, unit="%"),
    "expected_dividend": FieldRule("Expected next dividend", 0, 50, prefix="$"),
}


def validate_field(field: str, value) -> Optional[str]:
    """Return an error message for the field, or None when it is acceptable"""
    rule = VALIDATION_RULES.get(field)
    if rule is None:
        return None

    if value is None or isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        return f"{rule.label} is required"

    if value < rule.min or value > rule.max:
        return f"{rule.label} must be between {rule.display(rule.min)} and {rule.display(rule.max)}"

    return None


def validate_financial_logic(growth_decimal: float, required_return_decimal: float) -> Optional[str]:
    """Check g < r and g >= 0 (same predicate as GrowthResult.is_valid)"""
    if is_valid_growth(growth_decimal, required_return_decimal):
        return None

    if growth_decimal >= required_return_decimal:
        return "Invalid inputs: implied growth rate must be less than required return"
    return "Invalid inputs: implied growth rate cannot be negative"


def validate_all_inputs(
    inputs: ModelInputs,
    variant: ModelVariant = ModelVariant.CLOSED_FORM,
    tolerance: float = D1_TOLERANCE,
) -> Dict[str, str]:
    """
    Validate every field the variant needs, then the financial logic.

    The financial-logic check solves with the same variant the engine will
    use and runs only when every field passes its range check.

    Returns:
        Mapping of field name (or "financial") to error message; empty if valid
    """
    errors: Dict[str, str] = {}

    for field in required_fields(variant):
        error = validate_field(field, getattr(inputs, field))
        if error:
            errors[field] = error

    if errors:
        return errors

    growth = solve(
        inputs.market_price,
        inputs.current_dividend,
        inputs.required_return,
        variant=variant,
        expected_dividend=inputs.expected_dividend,
        tolerance=tolerance,
    )
    logic_error = validate_financial_logic(growth.implied_growth_decimal, inputs.required_return_decimal)
    if logic_error:
        errors[FINANCIAL_ERROR_KEY] = logic_error

    return errors


def has_errors(errors: Dict[str, str]) -> bool:
    return len(errors) > 0


def ensure_valid(
    inputs: ModelInputs,
    variant: ModelVariant = ModelVariant.CLOSED_FORM,
    tolerance: float = D1_TOLERANCE,
) -> None:
    """
    Raise if the inputs must not reach the engine.

    Raises:
        InputValidationError: A field is missing or out of range
        FinancialLogicError: Fields are in range but imply g >= r or g < 0
    """
    errors = validate_all_inputs(inputs, variant, tolerance)
    if not errors:
        return
    if FINANCIAL_ERROR_KEY in errors:
        raise FinancialLogicError(errors)
    raise InputValidationError(errors)
