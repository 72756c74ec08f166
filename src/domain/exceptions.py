"""
Domain exceptions for market data failures.

Each class carries the HTTP status it maps to so the entrypoint can translate
any of them with a single exception handler:
- 502: the upstream answered, but with an error status or an unusable body
- 503: the upstream could not be reached (network error, timeout)
"""

from typing import Any


class MarketDataError(Exception):
    """Base error for anything that goes wrong while fetching market data."""

    status_code: int = 500
    error_type: str = "market_data_error"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for structured logging."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "status_code": self.status_code,
            **self.context,
        }


class UpstreamServiceError(MarketDataError):
    """Upstream provider answered with a non-success status."""

    status_code = 502
    error_type = "upstream_service_error"


class UpstreamUnavailableError(MarketDataError):
    """Upstream provider could not be reached or timed out."""

    status_code = 503
    error_type = "upstream_unavailable"


class MalformedUpstreamResponseError(MarketDataError):
    """Upstream body was not the JSON shape the provider documents."""

    status_code = 502
    error_type = "malformed_upstream_response"
