"""Metrics orchestrator - solve for growth, then project the cash flows"""

import math
from numbers import Real

from implied_growth.domain.exceptions import MissingInputError
from implied_growth.domain.growth import D1_TOLERANCE, solve
from implied_growth.domain.models import GrowthMetrics, ModelInputs, ModelVariant
from implied_growth.domain.projection import DEFAULT_HORIZON_YEARS, project_cash_flows


def required_fields(variant: ModelVariant) -> tuple[str, ...]:
    """Input fields the given model variant needs"""
    fields = ("market_price", "current_dividend", "required_return")
    if variant is ModelVariant.DIRECT_D1:
        return fields + ("expected_dividend",)
    return fields


def _is_number(value) -> bool:
    # bool is an int subclass but never a valid amount
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)


def calculate_growth_metrics(
    inputs: ModelInputs,
    variant: ModelVariant = ModelVariant.CLOSED_FORM,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
    tolerance: float = D1_TOLERANCE,
) -> GrowthMetrics:
    """
    Main entry point: solve for implied growth and project the cash flows.

    Range checks belong to the validation layer, which must run first. This
    only refuses inputs that are missing or not numbers.

    Raises:
        MissingInputError: A required field is missing or non-numeric
        ComputationError: The solve hit a degenerate denominator
    """
    errors = {
        field: f"{field} is required"
        for field in required_fields(variant)
        if not _is_number(getattr(inputs, field))
    }
    if errors:
        raise MissingInputError(errors)

    growth = solve(
        inputs.market_price,
        inputs.current_dividend,
        inputs.required_return,
        variant=variant,
        expected_dividend=inputs.expected_dividend,
        tolerance=tolerance,
    )

    cash_flows = project_cash_flows(
        initial_investment=inputs.market_price,
        current_dividend=inputs.current_dividend,
        implied_growth_decimal=growth.implied_growth_decimal,
        horizon_years=horizon_years,
    )

    return GrowthMetrics(
        inputs=inputs,
        variant=variant,
        growth=growth,
        cash_flows=tuple(cash_flows),
    )
