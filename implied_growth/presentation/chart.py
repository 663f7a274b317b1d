"""Chart series for the bar + line cash-flow visualization"""

from dataclasses import dataclass, field
from typing import List

from implied_growth.domain.models import CashFlowPoint, GrowthMetrics
from implied_growth.presentation.formatting import format_currency, format_percentage

CHART_DESCRIPTION = (
    "Interactive dividend growth chart showing initial investment and projected "
    "dividend payments over {years} years."
)


@dataclass(frozen=True)
class ChartDataset:
    label: str
    data: List[float]
    type: str = "bar"
    axis: str = "y"


@dataclass(frozen=True)
class ChartData:
    """Everything a chart renderer needs: labels, datasets, spoken descriptions"""

    description: str
    labels: List[str]
    datasets: List[ChartDataset]
    totals: List[float]
    point_descriptions: List[str] = field(default_factory=list)


def describe_point(point: CashFlowPoint, growth_rate: float) -> str:
    """Screen-reader text for one year of the chart"""
    investment_label = "Initial investment (P0)" if point.year == 0 else "No investment"
    return (
        f"Year {point.year}. "
        f"Growth rate (g): {format_percentage(growth_rate)}. "
        f"{investment_label}: {format_currency(point.investment)}. "
        f"Dividend (D): {format_currency(point.dividend)}. "
        f"Total: {format_currency(point.total_cash_flow)}."
    )


def build_chart_data(metrics: GrowthMetrics) -> ChartData:
    cash_flows = metrics.cash_flows
    growth_rate = metrics.growth.implied_growth
    labels = [str(point.year) for point in cash_flows]

    datasets = [
        ChartDataset(label="Initial investment", data=[p.investment for p in cash_flows]),
        ChartDataset(label="Dividend cash flow", data=[p.dividend for p in cash_flows]),
        # Flat line on a secondary axis
        ChartDataset(
            label="Growth rate (g)",
            data=[growth_rate for _ in cash_flows],
            type="line",
            axis="y2",
        ),
    ]

    return ChartData(
        description=CHART_DESCRIPTION.format(years=metrics.horizon_years),
        labels=labels,
        datasets=datasets,
        totals=[p.total_cash_flow for p in cash_flows],
        point_descriptions=[describe_point(p, growth_rate) for p in cash_flows],
    )
