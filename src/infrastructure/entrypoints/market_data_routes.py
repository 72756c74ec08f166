"""
HTTP routes for market data, the request-handling boundary.

Routes only extract parameters, log them, and delegate to MarketDataService;
results are returned as the provider's JSON objects, unmodified. Paths come
from Settings so deployments can mount the API wherever they need.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, Request

from src.application.services.market_data_service import MarketDataService
from src.infrastructure.config.settings import Settings

logger = structlog.get_logger()


def get_market_data_service(request: Request) -> MarketDataService:
    """FastAPI dependency: the service wired by the composition root."""
    return request.app.state.market_data_service


def split_symbols(raw: list[str]) -> list[str]:
    """Flatten repeated and comma-separated ``symbols`` values, dropping blanks."""
    return [
        token.strip()
        for value in raw
        for token in value.split(",")
        if token.strip()
    ]


def build_market_data_router(settings: Settings) -> APIRouter:
    router = APIRouter(tags=["market-data"])

    @router.get(settings.symbols_path)
    def get_all_symbols(
        service: MarketDataService = Depends(get_market_data_service),
    ) -> list[dict]:
        """List every symbol the provider knows, in provider order."""
        logger.info("Received endpoint request", endpoint="get_all_symbols")
        return [symbol.to_dict() for symbol in service.get_all_symbols()]

    @router.get(settings.last_traded_price_path)
    def get_last_traded_price(
        symbols: list[str] = Query(...),
        service: MarketDataService = Depends(get_market_data_service),
    ) -> list[dict]:
        """Last traded price for each requested symbol the provider recognises."""
        requested = split_symbols(symbols)
        logger.info(
            "Received endpoint request",
            endpoint="get_last_traded_price",
            symbols=requested,
        )
        prices = service.get_last_traded_price_for_symbols(requested)
        return [price.to_dict() for price in prices]

    @router.get(settings.historical_prices_path + "/{symbol}/{range}")
    def get_historical_prices_for_symbol(
        symbol: str,
        range: str,
        date: Optional[str] = None,
        service: MarketDataService = Depends(get_market_data_service),
    ) -> list[dict]:
        """Historical prices for one symbol; *date* only applies when range is 'date'."""
        logger.info(
            "Received endpoint request",
            endpoint="get_historical_prices",
            symbol=symbol,
            range=range,
            date=date,
        )
        prices = service.get_historical_prices_for_symbol(symbol, range, date)
        return [price.to_dict() for price in prices]

    return router
