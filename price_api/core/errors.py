"""Error taxonomy for price lookups.

Every failure a request can hit is raised as a :class:`PriceLookupError`
subclass. The application registers a single exception handler that turns
these into ``{"error": message}`` bodies, so the message carried here is what
the client sees and must stay short.
"""
from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class PriceLookupError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MissingParameter(PriceLookupError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = 'Missing "symbol" query parameter'


class UnknownSymbol(PriceLookupError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Symbol not found"


class UnsupportedSymbol(PriceLookupError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Unsupported symbol"


class UpstreamDataError(PriceLookupError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Failed to retrieve price data from CoinGecko"


class UpstreamHttpError(PriceLookupError):
    """The provider answered with a non-2xx status; the status is passed through."""

    status_code = status.HTTP_502_BAD_GATEWAY
    message = "External API error"


class UpstreamUnreachable(PriceLookupError):
    status_code = status.HTTP_502_BAD_GATEWAY
    message = "Bad Gateway: No response from external API (CoinGecko)"


class RequestSetupError(PriceLookupError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal Server Error while fetching data from CoinGecko"


class InternalError(PriceLookupError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal Server Error"


async def price_lookup_error_handler(request: Request, exc: PriceLookupError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
