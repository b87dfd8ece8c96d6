"""Pydantic schemas for synthesized trades."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from backend.schemas.base import CamelModel

MarketType = Literal["spot", "perp", "options"]
OrderType = Literal["market", "limit"]
Direction = Literal["long", "short"]
StrategyTag = Literal["scalp", "swing", "hedge", "dca", "breakout"]
TradingSession = Literal["asia", "london", "new-york"]
FeeType = Literal["taker", "maker", "funding"]


class FeeItem(CamelModel):
    type: FeeType
    amount: float  # funding may be negative (received)


class Trade(CamelModel):
    """One closed position."""

    id: str
    wallet_address: str
    symbol: str
    market_type: MarketType
    order_type: OrderType
    direction: Direction
    entry_price: float
    exit_price: float
    size: float
    leverage: int = Field(default=1, ge=1)
    pnl: float
    pnl_percent: float
    fees: float = Field(ge=0)
    fee_breakdown: list[FeeItem] = []
    entry_time: datetime
    exit_time: datetime
    duration: int  # minutes
    session: TradingSession
    strategy: StrategyTag | None = None
    notes: str | None = None
    tx_hash: str

    @property
    def notional(self) -> float:
        return self.size * self.entry_price

    @property
    def is_win(self) -> bool:
        return self.pnl > 0

    @property
    def is_loss(self) -> bool:
        return self.pnl < 0


class TradeNoteUpdate(CamelModel):
    address: str = Field(min_length=1)
    notes: str = Field(default="", max_length=2000)

    @field_validator("notes")
    @classmethod
    def _trim_notes(cls, value: str) -> str:
        # one CSV row per trade: line breaks fold into spaces
        return " ".join(value.splitlines()).strip()
