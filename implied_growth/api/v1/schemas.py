"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional

from implied_growth.domain.models import GrowthMetrics, ModelInputs


class GrowthRequest(BaseModel):
    """
    Request body for POST /v1/growth and its renderings.

    Types only: presence and ranges are checked by domain validation so every
    input error comes back in the same {"errors": {field: message}} shape.
    """

    market_price: Optional[float] = Field(None, description="Current market price P0, $1 to $500")
    current_dividend: Optional[float] = Field(None, description="Most recent dividend D0, $0 to $50")
    required_return: Optional[float] = Field(None, description="Required return r, 0.01% to 25%")
    expected_dividend: Optional[float] = Field(
        None, description="Next dividend D1, $0 to $50 (direct_d1 deployments only)"
    )

    def to_inputs(self) -> ModelInputs:
        return ModelInputs(
            market_price=self.market_price,
            current_dividend=self.current_dividend,
            required_return=self.required_return,
            expected_dividend=self.expected_dividend,
        )


class GrowthResultSchema(BaseModel):
    implied_growth: float
    implied_growth_decimal: float
    expected_d1: float
    dividend_yield: float
    is_valid: bool
    d1_consistent: Optional[bool] = None


class CashFlowPointSchema(BaseModel):
    year: int
    dividend: float
    investment: float
    total_cash_flow: float
    cumulative_cash_flow: float


class GrowthMetricsResponse(BaseModel):
    """Response for POST /v1/growth"""

    variant: str
    growth: GrowthResultSchema
    cash_flows: List[CashFlowPointSchema]

    @classmethod
    def from_metrics(cls, metrics: GrowthMetrics) -> "GrowthMetricsResponse":
        growth = metrics.growth
        return cls(
            variant=metrics.variant.value,
            growth=GrowthResultSchema(
                implied_growth=growth.implied_growth,
                implied_growth_decimal=growth.implied_growth_decimal,
                expected_d1=growth.expected_d1,
                dividend_yield=growth.dividend_yield,
                is_valid=growth.is_valid,
                d1_consistent=growth.d1_consistent,
            ),
            cash_flows=[
                CashFlowPointSchema(
                    year=p.year,
                    dividend=p.dividend,
                    investment=p.investment,
                    total_cash_flow=p.total_cash_flow,
                    cumulative_cash_flow=p.cumulative_cash_flow,
                )
                for p in metrics.cash_flows
            ],
        )


class CashFlowRowSchema(BaseModel):
    year: int
    growth_rate: str
    dividend: str
    investment: str
    total_cash_flow: str
    cumulative_cash_flow: str


class TableResponse(BaseModel):
    """Response for POST /v1/growth/table"""

    caption: str
    columns: List[str]
    rows: List[CashFlowRowSchema]
    announcement: str


class ChartDatasetSchema(BaseModel):
    label: str
    data: List[float]
    type: str
    axis: str


class ChartResponse(BaseModel):
    """Response for POST /v1/growth/chart"""

    description: str
    labels: List[str]
    datasets: List[ChartDatasetSchema]
    totals: List[float]
    point_descriptions: List[str]


class SummaryItemSchema(BaseModel):
    label: str
    value: str


class EquationSchema(BaseModel):
    latex: str
    announcement: str


class SummaryResponse(BaseModel):
    """Response for POST /v1/growth/summary"""

    title: str
    implied_growth: str
    items: List[SummaryItemSchema]
    payback_year: Optional[int] = None
    d1_consistent: Optional[bool] = None
    equation: EquationSchema


class GordonPriceResponse(BaseModel):
    """Response for GET /v1/gordon-price"""

    d1: float
    required_return: float
    growth: float
    price: float
