"""
Application service: decides how each market data request reaches the upstream provider.

Business decisions owned here:
  - An empty symbol list never produces an upstream call.
  - A non-empty symbol list is forwarded as one batched call.
  - Historical lookups go to the date-specific variant only when the range is
    the "date" sentinel; for every other range the date is dropped.

The provider (IMarketDataProvider) is injected; upstream failures propagate
unchanged, nothing is retried or translated here.
"""

from typing import Optional, Sequence

import structlog

from src.domain.entities.market_data import HistoricalPrice, LastTradedPrice, Symbol
from src.domain.ports.market_data_port import IMarketDataProvider

logger = structlog.get_logger()


class MarketDataService:
    SPECIFIC_DATE_RANGE: str = "date"

    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    def get_all_symbols(self) -> list[Symbol]:
        return self._provider.get_all_symbols()

    def get_last_traded_price_for_symbols(
        self, symbols: Optional[Sequence[str]]
    ) -> list[LastTradedPrice]:
        """Get the last traded price for each of *symbols*.

        Returns an empty list without calling the provider when *symbols* is
        empty or None. Symbols unknown to the provider are simply absent from
        the result.
        """
        if not symbols:
            return []
        logger.info("Making api request", symbols=list(symbols))
        return self._provider.get_last_traded_prices(list(symbols))

    def get_historical_prices_for_symbol(
        self,
        symbol: str,
        range: str,
        date: Optional[str] = None,
    ) -> list[HistoricalPrice]:
        """Get historical prices for *symbol* over *range*.

        Args:
            symbol: Ticker symbol, forwarded as given.
            range:  Provider range token (e.g. '1m', '5y') or the literal 'date'.
            date:   Specific day (YYYYMMDD). Only forwarded when *range* is 'date';
                    ignored for every other range.
        """
        if range == self.SPECIFIC_DATE_RANGE:
            logger.info(
                "Making api request",
                symbol=symbol,
                range=range,
                date=date,
            )
            return self._provider.get_historical_prices_for_date(symbol, range, date)

        logger.info("Making api request", symbol=symbol, range=range)
        return self._provider.get_historical_prices(symbol, range)
