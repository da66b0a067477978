import logging
from typing import Optional

from price_api.core.errors import MissingParameter, PriceLookupError
from price_api.services.price.sources import PriceQuote, PriceSource

logger = logging.getLogger(__name__)


class PriceService:
    def __init__(self, source: PriceSource):
        self.source = source

    async def get_price(self, symbol: Optional[str]) -> PriceQuote:
        """Look up ``symbol`` and classify every failure as a PriceLookupError."""
        if not symbol:
            raise MissingParameter(self.source.missing_symbol_message)

        try:
            return await self.source.get_quote(symbol)
        except PriceLookupError as e:
            if e.status_code < 500:
                logger.info(f"Rejected price lookup for {symbol!r}: {e.message}")
            raise
        except Exception as e:
            logger.exception(f"Error in /data/price endpoint for {symbol!r}")
            raise self.source.unexpected_error() from e

    def list_symbols(self) -> dict:
        return {"source": self.source.name, "symbols": self.source.supported_symbols()}
