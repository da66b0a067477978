"""Pluggable price sources behind the ``/data/price`` endpoint.

Two implementations share one contract: :class:`MockPriceSource` answers from a
static table and :class:`CoinGeckoPriceSource` proxies each lookup to the
CoinGecko simple price API. The mock source echoes the caller's symbol
unchanged and answers 404 for unknown tickers; the live source upper-cases the
symbol and answers 400 with the list of supported tickers.
"""
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import List, Mapping, Optional

import httpx

from price_api.core.errors import (
    InternalError, PriceLookupError, RequestSetupError, UnknownSymbol,
    UnsupportedSymbol, UpstreamDataError, UpstreamHttpError, UpstreamUnreachable,
)
from price_api.services.price.symbols import CURRENCY, COINGECKO_IDS, MOCK_PRICES
from price_api.services.price.timeutils import from_unix_seconds, to_iso8601

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceQuote:
    symbol: str
    price: float
    currency: str
    timestamp: str

    def to_dict(self) -> dict:
        return asdict(self)


class PriceSource(ABC):
    name: str = ""
    banner: str = ""
    missing_symbol_message: str = 'Missing "symbol" query parameter'
    # Raised in place of any exception the source did not classify itself
    unexpected_error: type = InternalError

    @abstractmethod
    def supported_symbols(self) -> List[str]:
        """Tickers this source can price, in display order."""

    @abstractmethod
    async def get_quote(self, symbol: str) -> PriceQuote:
        """Return the current quote for ``symbol`` or raise a PriceLookupError."""


class MockPriceSource(PriceSource):
    name = "mock"
    banner = "Simple Financial Data API is running!"

    def __init__(self, prices: Mapping[str, float] = MOCK_PRICES):
        self.prices = prices

    def supported_symbols(self) -> List[str]:
        return list(self.prices)

    async def get_quote(self, symbol: str) -> PriceQuote:
        price = self.prices.get(symbol.upper())
        if price is None:
            raise UnknownSymbol()
        return PriceQuote(
            symbol=symbol,
            price=price,
            currency=CURRENCY,
            timestamp=to_iso8601(),
        )


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CoinGeckoPriceSource(PriceSource):
    name = "live"
    banner = (
        "Enhanced Simple Financial Data API is running! "
        "Now fetching live crypto prices from CoinGecko."
    )
    missing_symbol_message = "Missing required query parameter: symbol (e.g., BTC, ETH)"
    unexpected_error = RequestSetupError

    # Transport failures where no HTTP response was received
    UNREACHABLE_ERRORS = (
        httpx.TimeoutException,
        httpx.NetworkError,
        httpx.ProtocolError,
        httpx.ProxyError,
    )

    def __init__(
        self,
        base_url: str = "https://api.coingecko.com/api/v3",
        timeout: float = 5.0,
        symbol_ids: Mapping[str, str] = COINGECKO_IDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.symbol_ids = symbol_ids
        self.transport = transport

    def supported_symbols(self) -> List[str]:
        return list(self.symbol_ids)

    def resolve(self, symbol: str) -> str:
        """Map a ticker to its CoinGecko id, case-insensitively."""
        coin_id = self.symbol_ids.get(symbol.upper())
        if not coin_id:
            raise UnsupportedSymbol(
                f"Unsupported symbol: {symbol.upper()}. "
                f"Supported symbols: {', '.join(self.supported_symbols())}"
            )
        return coin_id

    async def fetch(self, coin_id: str):
        """GET the simple price payload for one coin id and decode it."""
        params = {
            "ids": coin_id,
            "vs_currencies": "usd",
            "include_last_updated_at": "true",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(f"{self.base_url}/simple/price", params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            upstream = e.response
            logger.error(
                "CoinGecko API Error Response: %s %s",
                upstream.status_code,
                upstream.text,
            )
            raise UpstreamHttpError(
                f"External API error: {upstream.reason_phrase}",
                status_code=upstream.status_code,
            ) from e
        except self.UNREACHABLE_ERRORS as e:
            logger.error(f"No response received from CoinGecko API: {e!r}")
            raise UpstreamUnreachable() from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Non-JSON body from CoinGecko: {response.text[:500]!r}")
            raise UpstreamDataError() from e

    def parse(self, payload, coin_id: str):
        """Pull ``(price, timestamp)`` for ``coin_id`` out of a CoinGecko payload."""
        entry = payload.get(coin_id) if isinstance(payload, dict) else None
        price = entry.get("usd") if isinstance(entry, dict) else None
        if not _is_number(price) or not math.isfinite(price) or price < 0:
            logger.error("Unexpected data structure from CoinGecko: %r", payload)
            raise UpstreamDataError()

        last_updated_at = entry.get("last_updated_at")
        timestamp = None
        if _is_number(last_updated_at) and last_updated_at:
            try:
                timestamp = from_unix_seconds(last_updated_at)
            except (OverflowError, OSError, ValueError):
                logger.warning(f"Ignoring out of range last_updated_at {last_updated_at!r}")
        elif last_updated_at:
            logger.warning(f"Ignoring non-numeric last_updated_at {last_updated_at!r}")
        return price, timestamp or to_iso8601()

    async def get_quote(self, symbol: str) -> PriceQuote:
        coin_id = self.resolve(symbol)
        payload = await self.fetch(coin_id)
        price, timestamp = self.parse(payload, coin_id)
        return PriceQuote(
            symbol=symbol.upper(),
            price=price,
            currency=CURRENCY,
            timestamp=timestamp,
        )


def build_price_source(settings) -> PriceSource:
    """Create the price source selected by ``settings.PRICE_SOURCE``."""
    if settings.PRICE_SOURCE == "mock":
        return MockPriceSource()
    if settings.PRICE_SOURCE == "live":
        return CoinGeckoPriceSource(
            base_url=settings.COINGECKO_BASE_URL,
            timeout=settings.COINGECKO_TIMEOUT,
        )
    raise ValueError(f"Unknown price source: {settings.PRICE_SOURCE}")
