"""Cash-flow projection for a dividend stream growing at a constant rate"""

from typing import List, Optional, Sequence
from implied_growth.domain.models import CashFlowPoint

DEFAULT_HORIZON_YEARS = 10


def project_cash_flows(
    initial_investment: float,
    current_dividend: float,
    implied_growth_decimal: float,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> List[CashFlowPoint]:
    """
    Unroll the dividend stream into a year-by-year schedule.

    Requirements:
    - Year 0 carries the investment as a negative cash flow and no dividend
    - Year t pays D0 * (1 + g)^t
    - Always horizon_years + 1 points, whatever the sign of the cumulative total

    Args:
        initial_investment: Price paid at year 0 (positive number)
        current_dividend: Most recent dividend D0
        implied_growth_decimal: Growth rate g as a decimal
        horizon_years: Number of dividend years after year 0 (default 10)

    Returns:
        List of CashFlowPoint ordered by year

    Example:
        100, 5, 0.02, 2 years →
        year 0: -100.00 (cumulative -100.00)
        year 1:    5.10 (cumulative  -94.90)
        year 2:    5.202 (cumulative -89.698)
    """
    if horizon_years < 0:
        raise ValueError(f"horizon_years must be non-negative, got {horizon_years}")

    cumulative = -initial_investment
    cash_flows = [
        CashFlowPoint(
            year=0,
            dividend=0.0,
            investment=-initial_investment,
            total_cash_flow=-initial_investment,
            cumulative_cash_flow=cumulative,
        )
    ]

    for year in range(1, horizon_years + 1):
        dividend = current_dividend * (1 + implied_growth_decimal) ** year
        cumulative += dividend

        cash_flows.append(
            CashFlowPoint(
                year=year,
                dividend=dividend,
                investment=0.0,
                total_cash_flow=dividend,
                cumulative_cash_flow=cumulative,
            )
        )

    return cash_flows


def find_payback_year(cash_flows: Sequence[CashFlowPoint]) -> Optional[int]:
    """First year whose cumulative cash flow is non-negative, or None within the horizon"""
    for point in cash_flows:
        if point.cumulative_cash_flow >= 0:
            return point.year
    return None
