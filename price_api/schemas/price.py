from pydantic import BaseModel, Field
from typing import List


class PriceResponse(BaseModel):
    symbol: str = Field(..., description="Ticker symbol as echoed back to the caller")
    price: float = Field(..., ge=0, description="Price in USD")
    currency: str = Field("USD", description="Quote currency")
    timestamp: str = Field(..., description="ISO-8601 instant the price refers to")


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str


class SymbolListResponse(BaseModel):
    source: str
    symbols: List[str]
