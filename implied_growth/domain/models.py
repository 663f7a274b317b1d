"""Domain models - immutable dataclasses for calculator inputs and results"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ModelVariant(str, Enum):
    """Which form of the constant-growth model a deployment solves"""

    CLOSED_FORM = "closed_form"  # D1 derived as D0 * (1 + g)
    DIRECT_D1 = "direct_d1"  # D1 supplied by the caller


@dataclass(frozen=True)
class ModelInputs:
    """Market inputs for one calculation"""

    market_price: float
    current_dividend: float
    required_return: float  # percentage, 7.4 means 7.4%
    expected_dividend: Optional[float] = None  # direct-D1 variant only

    @property
    def required_return_decimal(self) -> float:
        return self.required_return / 100


@dataclass(frozen=True)
class GrowthResult:
    """Solved growth rate and the quantities derived from it"""

    implied_growth: float  # percentage
    implied_growth_decimal: float
    expected_d1: float
    dividend_yield: float  # percentage
    is_valid: bool
    d1_consistent: Optional[bool] = None  # set only by the direct-D1 variant


@dataclass(frozen=True)
class CashFlowPoint:
    """One year of the projected cash-flow schedule"""

    year: int
    dividend: float
    investment: float
    total_cash_flow: float
    cumulative_cash_flow: float


@dataclass(frozen=True)
class GrowthMetrics:
    """Complete output of one calculation request"""

    inputs: ModelInputs
    variant: ModelVariant
    growth: GrowthResult
    cash_flows: Tuple[CashFlowPoint, ...]

    @property
    def horizon_years(self) -> int:
        return len(self.cash_flows) - 1
