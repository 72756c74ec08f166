"""
Infrastructure adapter: IEX Cloud REST API → IMarketDataProvider.

All IEX-specific details (endpoint paths, token query parameter, payload
shapes) are confined here; the rest of the codebase depends only on
IMarketDataProvider. httpx failures are translated into domain exceptions so
the entrypoint can map them to HTTP statuses without knowing about httpx.

A single httpx.Client is shared by every request; it holds only read-only
configuration and a connection pool, and is safe to use from the worker
threads FastAPI runs sync endpoints on.
"""

from typing import Any, Optional
from urllib.parse import quote

import httpx
import structlog

from src.domain.entities.market_data import HistoricalPrice, LastTradedPrice, Symbol
from src.domain.exceptions import (
    MalformedUpstreamResponseError,
    UpstreamServiceError,
    UpstreamUnavailableError,
)
from src.domain.ports.market_data_port import IMarketDataProvider
from src.infrastructure.config.settings import DEFAULT_BASE_URL

logger = structlog.get_logger()


class IexCloudMarketDataProvider(IMarketDataProvider):
    """Fetches symbols and prices from the IEX Cloud API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_token: str = "",
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_token = api_token
        self._client = client or httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

        if not api_token:
            logger.warning("IEX Cloud API token not configured")

    def close(self) -> None:
        self._client.close()

    def get_all_symbols(self) -> list[Symbol]:
        rows = self._get_list("/ref-data/symbols")
        return [Symbol.from_payload(row) for row in rows]

    def get_last_traded_prices(self, symbols: list[str]) -> list[LastTradedPrice]:
        rows = self._get_list("/tops/last", params={"symbols": ",".join(symbols)})
        return [LastTradedPrice.from_payload(row) for row in rows]

    def get_historical_prices(self, symbol: str, range: str) -> list[HistoricalPrice]:
        rows = self._get_list(_chart_path(symbol, range))
        return [HistoricalPrice.from_payload(row, symbol=symbol) for row in rows]

    def get_historical_prices_for_date(
        self, symbol: str, range: str, date: Optional[str]
    ) -> list[HistoricalPrice]:
        rows = self._get_list(_chart_path(symbol, range, date))
        return [HistoricalPrice.from_payload(row, symbol=symbol) for row in rows]

    def _get_list(self, path: str, params: Optional[dict[str, str]] = None) -> list[Any]:
        query = dict(params or {})
        if self._api_token:
            query["token"] = self._api_token

        try:
            response = self._client.get(path, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("IEX Cloud request failed", path=path, status_code=status)
            raise UpstreamServiceError(
                f"IEX Cloud returned HTTP {status} for {path}",
                upstream_path=path,
                upstream_status=status,
            ) from exc
        except httpx.RequestError as exc:
            logger.error(
                "IEX Cloud unreachable", path=path, error_type=type(exc).__name__
            )
            raise UpstreamUnavailableError(
                f"IEX Cloud request to {path} failed: {type(exc).__name__}",
                upstream_path=path,
            ) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedUpstreamResponseError(
                f"IEX Cloud returned a non-JSON body for {path}", upstream_path=path
            ) from exc

        if not isinstance(body, list):
            raise MalformedUpstreamResponseError(
                f"Expected a JSON array from {path}, got {type(body).__name__}",
                upstream_path=path,
            )
        return body


def _chart_path(symbol: str, range: str, date: Optional[str] = None) -> str:
    segments = [symbol, "chart", range]
    if date:
        segments.append(date)
    return "/stock/" + "/".join(quote(segment, safe="") for segment in segments)
