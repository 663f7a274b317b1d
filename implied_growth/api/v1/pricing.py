"""GET /v1/gordon-price - theoretical price from D1, r and g"""

from fastapi import APIRouter, HTTPException, Query

from implied_growth.api.v1.schemas import GordonPriceResponse
from implied_growth.domain.exceptions import InvalidGrowthError
from implied_growth.domain.growth import calculate_gordon_price

router = APIRouter()


@router.get("/gordon-price", response_model=GordonPriceResponse)
def gordon_price(
    d1: float = Query(..., ge=0, description="Next dividend D1"),
    required_return: float = Query(..., description="Required return r, in percent"),
    growth: float = Query(..., description="Growth rate g, in percent"),
):
    """
    Recover the price the constant-growth model implies.

    Returns:
        P0 = D1 / (r - g); 422 when g >= r
    """
    try:
        price = calculate_gordon_price(d1, required_return / 100, growth / 100)
    except InvalidGrowthError as e:
        raise HTTPException(status_code=422, detail={"errors": {"growth": str(e)}})

    return GordonPriceResponse(d1=d1, required_return=required_return, growth=growth, price=price)
