"""TradeNote model — user notes attached to a (regenerated) trade id."""

from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class TradeNote(SQLModel, table=True):
    __tablename__ = "trade_note"
    __table_args__ = (UniqueConstraint("wallet_address", "trade_id", name="uq_trade_note_wallet_trade"),)

    id: int | None = Field(default=None, primary_key=True)
    wallet_address: str = Field(index=True)
    trade_id: str = Field(index=True)
    notes: str = ""  # empty string means the user cleared the note
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
