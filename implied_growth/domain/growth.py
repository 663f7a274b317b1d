"""Growth solver - inverts the constant-growth model P0 = D1 / (r - g) for g"""

import math
from typing import Optional

from implied_growth.domain.exceptions import ComputationError, InvalidGrowthError
from implied_growth.domain.models import GrowthResult, ModelVariant

# Absolute tolerance (currency units) for comparing supplied and implied D1
D1_TOLERANCE = 0.01


def is_valid_growth(growth_decimal: float, required_return_decimal: float) -> bool:
    """Growth must be non-negative and strictly below the required return"""
    return 0 <= growth_decimal < required_return_decimal


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ComputationError(f"Computation produced a non-finite {name}: {value}")


def solve_closed_form(
    market_price: float,
    current_dividend: float,
    required_return: float,
) -> GrowthResult:
    """
    Solve for g with D1 expressed through D0.

    Substituting D1 = D0(1+g) into g = r - D1/P0 and solving:
        g(P0 + D0) = r*P0 - D0
        g = (r*P0 - D0) / (P0 + D0)

    Raises:
        ComputationError: P0 + D0 or P0 is zero, or a result is not finite
    """
    r = required_return / 100

    denominator = market_price + current_dividend
    if denominator == 0 or market_price == 0:
        raise ComputationError(
            f"Cannot solve growth: market price {market_price} and dividend "
            f"{current_dividend} give a zero denominator"
        )

    growth = (r * market_price - current_dividend) / denominator
    expected_d1 = current_dividend * (1 + growth)
    dividend_yield = expected_d1 / market_price * 100

    _check_finite(growth=growth, expected_d1=expected_d1, dividend_yield=dividend_yield)

    return GrowthResult(
        implied_growth=growth * 100,
        implied_growth_decimal=growth,
        expected_d1=expected_d1,
        dividend_yield=dividend_yield,
        is_valid=is_valid_growth(growth, r),
    )


def solve_direct_d1(
    market_price: float,
    current_dividend: float,
    required_return: float,
    expected_dividend: float,
    tolerance: float = D1_TOLERANCE,
) -> GrowthResult:
    """
    Solve g = r - D1/P0 with D1 supplied by the caller.

    The D1 implied by D0 and the solved g is reported alongside, with
    d1_consistent telling whether it matches the supplied D1 within tolerance.
    """
    r = required_return / 100

    if market_price == 0:
        raise ComputationError("Cannot solve growth: market price is zero")

    growth = r - expected_dividend / market_price
    calculated_d1 = current_dividend * (1 + growth)
    dividend_yield = expected_dividend / market_price * 100

    _check_finite(growth=growth, calculated_d1=calculated_d1, dividend_yield=dividend_yield)

    return GrowthResult(
        implied_growth=growth * 100,
        implied_growth_decimal=growth,
        expected_d1=calculated_d1,
        dividend_yield=dividend_yield,
        is_valid=is_valid_growth(growth, r),
        d1_consistent=abs(expected_dividend - calculated_d1) < tolerance,
    )


def solve(
    market_price: float,
    current_dividend: float,
    required_return: float,
    *,
    variant: ModelVariant = ModelVariant.CLOSED_FORM,
    expected_dividend: Optional[float] = None,
    tolerance: float = D1_TOLERANCE,
) -> GrowthResult:
    """Dispatch to the solver for the configured model variant"""
    if variant is ModelVariant.DIRECT_D1:
        if expected_dividend is None:
            raise ValueError("expected_dividend is required for the direct_d1 variant")
        return solve_direct_d1(
            market_price, current_dividend, required_return, expected_dividend, tolerance
        )
    return solve_closed_form(market_price, current_dividend, required_return)


def calculate_gordon_price(d1: float, r: float, g: float) -> float:
    """
    Theoretical price P0 = D1 / (r - g), with r and g as decimals.

    Reference helper, not used by the main calculation flow.

    Raises:
        InvalidGrowthError: g is not below r
    """
    if g >= r:
        raise InvalidGrowthError("Growth rate must be less than required return")
    return d1 / (r - g)
