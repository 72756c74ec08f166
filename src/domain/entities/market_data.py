"""
Domain entities for market data relayed from the upstream provider.
Zero external dependencies: pure Python dataclasses only.

Each entity exposes the handful of attributes the service reasons about and
keeps the provider's object untouched in ``payload``; ``to_dict()`` hands that
object back verbatim so responses carry exactly what the provider sent.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from src.domain.exceptions import MalformedUpstreamResponseError


def _require_object(payload: Any, entity: str) -> dict:
    if not isinstance(payload, dict):
        raise MalformedUpstreamResponseError(
            f"Expected a JSON object for {entity}, got {type(payload).__name__}",
            entity=entity,
        )
    return payload


@dataclass(frozen=True)
class Symbol:
    symbol: Optional[str]
    name: Optional[str]
    exchange: Optional[str]
    payload: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: Any) -> "Symbol":
        data = _require_object(payload, "Symbol")
        return cls(
            symbol=data.get("symbol"),
            name=data.get("name"),
            exchange=data.get("exchange"),
            payload=dict(data),
        )

    def to_dict(self) -> dict:
        return dict(self.payload)


@dataclass(frozen=True)
class LastTradedPrice:
    symbol: Optional[str]
    price: Optional[float]
    size: Optional[int]
    time: Optional[int]
    payload: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: Any) -> "LastTradedPrice":
        data = _require_object(payload, "LastTradedPrice")
        return cls(
            symbol=data.get("symbol"),
            price=data.get("price"),
            size=data.get("size"),
            time=data.get("time"),
            payload=dict(data),
        )

    def to_dict(self) -> dict:
        return dict(self.payload)


@dataclass(frozen=True)
class HistoricalPrice:
    symbol: Optional[str]
    date: Optional[str]
    open: Optional[float]
    high: Optional[float]
    low: Optional[float]
    close: Optional[float]
    volume: Optional[int]
    payload: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(
        cls, payload: Any, symbol: Optional[str] = None
    ) -> "HistoricalPrice":
        """Build a price observation from one chart row.

        Chart rows do not always repeat the symbol; *symbol* fills it in
        (in both the attribute and the payload) when the row lacks one.
        """
        data = dict(_require_object(payload, "HistoricalPrice"))
        if symbol is not None and not data.get("symbol"):
            data["symbol"] = symbol
        return cls(
            symbol=data.get("symbol"),
            date=data.get("date"),
            open=data.get("open"),
            high=data.get("high"),
            low=data.get("low"),
            close=data.get("close"),
            volume=data.get("volume"),
            payload=data,
        )

    def to_dict(self) -> dict:
        return dict(self.payload)
