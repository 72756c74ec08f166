"""
Shared fixtures: a mocked market data provider and sample provider payloads.
"""

from unittest.mock import Mock

import pytest

from src.domain.entities.market_data import HistoricalPrice, LastTradedPrice, Symbol
from src.domain.ports.market_data_port import IMarketDataProvider


@pytest.fixture
def mock_provider():
    """Mock IMarketDataProvider with empty results by default."""
    provider = Mock(spec=IMarketDataProvider)
    provider.get_all_symbols.return_value = []
    provider.get_last_traded_prices.return_value = []
    provider.get_historical_prices.return_value = []
    provider.get_historical_prices_for_date.return_value = []
    return provider


@pytest.fixture
def symbol_payloads():
    return [
        {
            "symbol": "AAPL",
            "name": "Apple Inc.",
            "exchange": "NAS",
            "date": "2020-01-02",
            "isEnabled": True,
            "type": "cs",
            "iexId": "IEX_4D48333344362D52",
        },
        {
            "symbol": "MSFT",
            "name": "Microsoft Corporation",
            "exchange": "NAS",
            "date": "2020-01-02",
            "isEnabled": True,
            "type": "cs",
            "iexId": "IEX_5A38514E5A57382D52",
        },
    ]


@pytest.fixture
def last_traded_payloads():
    return [
        {"symbol": "AAPL", "price": 300.35, "size": 100, "time": 1577998800000},
        {"symbol": "MSFT", "price": 160.62, "size": 50, "time": 1577998800123},
    ]


@pytest.fixture
def historical_payloads():
    return [
        {
            "date": "2020-01-02",
            "open": 296.24,
            "high": 300.6,
            "low": 295.19,
            "close": 300.35,
            "volume": 33911864,
            "label": "Jan 2",
        },
        {
            "date": "2020-01-03",
            "open": 297.15,
            "high": 300.58,
            "low": 296.5,
            "close": 297.43,
            "volume": 36633878,
            "label": "Jan 3",
        },
    ]


@pytest.fixture
def symbols(symbol_payloads):
    return [Symbol.from_payload(p) for p in symbol_payloads]


@pytest.fixture
def last_traded_prices(last_traded_payloads):
    return [LastTradedPrice.from_payload(p) for p in last_traded_payloads]


@pytest.fixture
def historical_prices(historical_payloads):
    return [HistoricalPrice.from_payload(p, symbol="AAPL") for p in historical_payloads]
