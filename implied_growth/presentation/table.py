"""Accessible data table of the projected cash flows"""

from dataclasses import dataclass
from typing import List

from implied_growth.domain.models import GrowthMetrics
from implied_growth.presentation.formatting import format_currency, format_percentage

TABLE_CAPTION = (
    "Dividend growth projection schedule showing year, growth rate, dividend payment, "
    "investment, and total cash flows."
)

TABLE_COLUMNS = [
    "Year",
    "Dividend growth rate (g)",
    "Dividend (Div)",
    "Initial investment / Market price (PVt)",
    "Total Cash Flow",
    "Cumulative",
]


@dataclass(frozen=True)
class CashFlowRow:
    """One formatted table row"""

    year: int
    growth_rate: str
    dividend: str
    investment: str
    total_cash_flow: str
    cumulative_cash_flow: str


@dataclass(frozen=True)
class CashFlowTable:
    caption: str
    columns: List[str]
    rows: List[CashFlowRow]
    announcement: str = "Table view loaded with dividend projections."


def build_cash_flow_table(metrics: GrowthMetrics) -> CashFlowTable:
    """Format every cash-flow point; the growth column repeats the solved rate"""
    growth_rate = format_percentage(metrics.growth.implied_growth)

    rows = [
        CashFlowRow(
            year=point.year,
            growth_rate=growth_rate,
            dividend=format_currency(point.dividend),
            investment=format_currency(point.investment),
            total_cash_flow=format_currency(point.total_cash_flow),
            cumulative_cash_flow=format_currency(point.cumulative_cash_flow),
        )
        for point in metrics.cash_flows
    ]

    return CashFlowTable(caption=TABLE_CAPTION, columns=list(TABLE_COLUMNS), rows=rows)
