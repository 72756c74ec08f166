"""
FastAPI entry point.

This module is the Composition Root: it loads configuration, wires the IEX
Cloud adapter into MarketDataService, and mounts the market data routes.
When IEX_SECRET_ARN is set, the secret's key-value pairs (e.g. IEX_API_TOKEN)
are copied into the environment before settings are read.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import os
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.application.services.market_data_service import MarketDataService
from src.domain.exceptions import MarketDataError
from src.domain.ports.market_data_port import IMarketDataProvider
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.market_data_routes import build_market_data_router
from src.infrastructure.market_data.iex_cloud_adapter import IexCloudMarketDataProvider
from src.infrastructure.observability.logging_config import configure_logging

load_dotenv()

logger = structlog.get_logger()


class ErrorResponse(BaseModel):
    detail: str
    error_type: str


def bootstrap_secrets() -> None:
    """Load the managed secret named by IEX_SECRET_ARN into the environment, if any."""
    secret_arn = os.environ.get("IEX_SECRET_ARN")
    if secret_arn:
        from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
        SecretsManagerAdapter().load_into_env(secret_arn)


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[IMarketDataProvider] = None,
) -> FastAPI:
    """Build the FastAPI app.

    Args:
        settings: Defaults to Settings.from_env().
        provider: Used as-is and left open; the caller owns it. When omitted,
                  every startup builds a fresh IexCloudMarketDataProvider from
                  *settings* and closes it on shutdown.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level, settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting market data gateway", upstream=settings.iex_base_url)
        owned = None
        if provider is None:
            owned = IexCloudMarketDataProvider(
                base_url=settings.iex_base_url,
                api_token=settings.iex_api_token,
                timeout=settings.iex_timeout_seconds,
            )
            app.state.market_data_service = MarketDataService(owned)
        try:
            yield
        finally:
            if owned is not None:
                owned.close()
            logger.info("Market data gateway stopped")

    app = FastAPI(title="Market Data Gateway", lifespan=lifespan)
    if provider is not None:
        app.state.market_data_service = MarketDataService(provider)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    @app.exception_handler(MarketDataError)
    async def market_data_error_handler(
        request: Request, exc: MarketDataError
    ) -> JSONResponse:
        logger.error(
            "Market data request failed",
            path=request.url.path,
            method=request.method,
            **exc.to_dict(),
        )
        body = ErrorResponse(detail=exc.message, error_type=exc.error_type)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    app.include_router(
        build_market_data_router(settings),
        responses={502: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


bootstrap_secrets()
app = create_app()
