"""Pydantic schema for the tradable market catalog."""

from pydantic import Field

from backend.schemas.base import CamelModel
from backend.schemas.trade import MarketType


class TradableAsset(CamelModel):
    symbol: str
    name: str
    market_type: MarketType
    price: float
    change_24h: float = Field(alias="change24h")
    volume_24h: float = Field(alias="volume24h")
    logo_uri: str | None = None
