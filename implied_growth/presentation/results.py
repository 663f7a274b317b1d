"""Results summary - headline growth rate and model details"""

from dataclasses import dataclass
from typing import List, Optional

from implied_growth.domain.models import GrowthMetrics, ModelVariant
from implied_growth.domain.projection import find_payback_year
from implied_growth.presentation.formatting import format_currency, format_percentage


@dataclass(frozen=True)
class SummaryItem:
    label: str
    value: str


@dataclass(frozen=True)
class ResultsSummary:
    title: str
    implied_growth: str
    items: List[SummaryItem]
    payback_year: Optional[int]
    d1_consistent: Optional[bool] = None


def build_results_summary(metrics: GrowthMetrics) -> ResultsSummary:
    growth = metrics.growth

    if metrics.variant is ModelVariant.DIRECT_D1:
        d1_label = "Implied next dividend from D0 (Div t+1)"
    else:
        d1_label = "Expected next dividend (Div t+1)"

    items = [
        SummaryItem("Required return (r)", format_percentage(metrics.inputs.required_return)),
        SummaryItem("Implied growth (g)", format_percentage(growth.implied_growth)),
        SummaryItem(d1_label, format_currency(growth.expected_d1)),
        SummaryItem("Dividend yield", format_percentage(growth.dividend_yield)),
    ]

    return ResultsSummary(
        title="Constant Dividend Growth Model",
        implied_growth=format_percentage(growth.implied_growth),
        items=items,
        payback_year=find_payback_year(metrics.cash_flows),
        d1_consistent=growth.d1_consistent,
    )
