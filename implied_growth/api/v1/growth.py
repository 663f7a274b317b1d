"""POST /v1/growth - implied growth calculation and its renderings"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from implied_growth.api.v1.schemas import (
    ChartResponse,
    GrowthMetricsResponse,
    GrowthRequest,
    SummaryResponse,
    TableResponse,
)
from implied_growth.api.dependencies import get_horizon_years, get_model_variant, get_request_id
from implied_growth.config import settings
from implied_growth.domain.exceptions import ComputationError, MissingInputError
from implied_growth.domain.metrics import calculate_growth_metrics
from implied_growth.domain.models import GrowthMetrics, ModelVariant
from implied_growth.domain.validation import (
    FINANCIAL_ERROR_KEY,
    validate_all_inputs,
    validate_financial_logic,
)
from implied_growth.infrastructure.observability.logging import log_calculation, log_rejection
from implied_growth.infrastructure.observability.metrics import record_calculation, record_rejection
from implied_growth.presentation.chart import build_chart_data
from implied_growth.presentation.equation import render_equation
from implied_growth.presentation.results import build_results_summary
from implied_growth.presentation.table import build_cash_flow_table

router = APIRouter()


def _reject(request_id: str, errors: dict) -> HTTPException:
    record_rejection()
    log_rejection(request_id, errors)
    return HTTPException(status_code=422, detail={"errors": errors})


def run_calculation(
    request_body: GrowthRequest,
    request_id: str,
    variant: ModelVariant,
    horizon_years: int,
) -> GrowthMetrics:
    """
    Validate, calculate, and block results the model considers invalid.

    Flow:
    1. Field validation for the variant (e.g. direct_d1 needs expected_dividend)
    2. Engine run
    3. Financial-logic gate on GrowthResult.is_valid

    Raises:
        HTTPException(422): Any validation, financial-logic or computation error
    """
    start_time = time.time()
    inputs = request_body.to_inputs()

    # 1. Field checks; the financial check is re-derived from the engine below
    errors = validate_all_inputs(inputs, variant, tolerance=settings.d1_tolerance)
    field_errors = {k: v for k, v in errors.items() if k != FINANCIAL_ERROR_KEY}
    if field_errors:
        raise _reject(request_id, field_errors)

    # 2. Engine
    try:
        metrics = calculate_growth_metrics(
            inputs,
            variant=variant,
            horizon_years=horizon_years,
            tolerance=settings.d1_tolerance,
        )
    except MissingInputError as e:
        raise _reject(request_id, e.errors)
    except ComputationError as e:
        logging.error(f"Computation error: {e}", extra={"request_id": request_id})
        raise _reject(request_id, {"computation": str(e)})

    growth = metrics.growth
    duration_ms = (time.time() - start_time) * 1000
    record_calculation(growth.is_valid, growth.implied_growth)
    log_calculation(request_id, variant.value, growth.is_valid, growth.implied_growth, duration_ms)

    # 3. Financial logic
    if not growth.is_valid:
        message = validate_financial_logic(growth.implied_growth_decimal, inputs.required_return_decimal)
        raise HTTPException(status_code=422, detail={"errors": {FINANCIAL_ERROR_KEY: message}})

    return metrics


def calculated_metrics(
    request_body: GrowthRequest,
    request: Request,
    variant: ModelVariant = Depends(get_model_variant),
    horizon_years: int = Depends(get_horizon_years),
) -> GrowthMetrics:
    """Dependency shared by every endpoint in this router"""
    return run_calculation(request_body, get_request_id(request), variant, horizon_years)


@router.post("/growth", response_model=GrowthMetricsResponse)
def calculate_growth(metrics: GrowthMetrics = Depends(calculated_metrics)):
    """
    Solve for the implied growth rate and project the cash flows.

    Returns:
        Growth result plus the year 0..N cash-flow schedule
    """
    return GrowthMetricsResponse.from_metrics(metrics)


@router.post("/growth/table", response_model=TableResponse)
def growth_table(metrics: GrowthMetrics = Depends(calculated_metrics)):
    """Cash-flow schedule formatted as an accessible table"""
    return TableResponse(**asdict(build_cash_flow_table(metrics)))


@router.post("/growth/chart", response_model=ChartResponse)
def growth_chart(metrics: GrowthMetrics = Depends(calculated_metrics)):
    """Chart datasets for the bar + growth-line visualization"""
    return ChartResponse(**asdict(build_chart_data(metrics)))


@router.post("/growth/summary", response_model=SummaryResponse)
def growth_summary(metrics: GrowthMetrics = Depends(calculated_metrics)):
    """Results summary and the solved equation with values substituted"""
    summary = build_results_summary(metrics)
    equation = render_equation(metrics)
    return SummaryResponse(**asdict(summary), equation=asdict(equation))
