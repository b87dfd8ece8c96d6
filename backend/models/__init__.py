"""Database models."""

from backend.models.trade_note import TradeNote

__all__ = [
    "TradeNote",
]
