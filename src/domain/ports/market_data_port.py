"""
Port (interface) for market data providers.
Infrastructure adapters (e.g. IexCloudMarketDataProvider) must implement this interface.

Historical prices come in two distinct variants: a range-only lookup and a
lookup pinned to a specific date. They are separate methods so callers pick
the endpoint explicitly.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.market_data import HistoricalPrice, LastTradedPrice, Symbol


class IMarketDataProvider(ABC):
    @abstractmethod
    def get_all_symbols(self) -> list[Symbol]: ...

    @abstractmethod
    def get_last_traded_prices(self, symbols: list[str]) -> list[LastTradedPrice]:
        """Fetch last traded prices for all *symbols* in a single upstream call."""
        ...

    @abstractmethod
    def get_historical_prices(self, symbol: str, range: str) -> list[HistoricalPrice]: ...

    @abstractmethod
    def get_historical_prices_for_date(
        self, symbol: str, range: str, date: Optional[str]
    ) -> list[HistoricalPrice]: ...
