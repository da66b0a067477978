from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, Query

from price_api.core.config import settings
from price_api.schemas.price import ErrorResponse, PriceResponse, SymbolListResponse
from price_api.services.price.price_service import PriceService
from price_api.services.price.sources import PriceSource, build_price_source

router = APIRouter(prefix="/data", tags=["price"])


@lru_cache()
def get_price_source() -> PriceSource:
    """Price source selected by configuration, created once per process."""
    return build_price_source(settings)


def get_price_service(source: PriceSource = Depends(get_price_source)) -> PriceService:
    return PriceService(source)


@router.get(
    "/price",
    response_model=PriceResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def get_price(
    symbol: Optional[str] = Query(None, description="Ticker symbol, e.g. BTC"),
    price_service: PriceService = Depends(get_price_service),
):
    """Get the current USD price for a symbol."""
    quote = await price_service.get_price(symbol)
    return quote.to_dict()


@router.get("/symbols", response_model=SymbolListResponse)
def get_symbols(price_service: PriceService = Depends(get_price_service)):
    """List the symbols supported by the configured price source."""
    return price_service.list_symbols()
