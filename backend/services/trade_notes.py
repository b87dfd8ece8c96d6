"""User-edited trade notes, persisted so they survive regeneration."""

import logging
from datetime import datetime, timezone

from sqlmodel import Session, select

from backend.models.trade_note import TradeNote

logger = logging.getLogger(__name__)


def load_note_overrides(session: Session, address: str) -> dict[str, str | None]:
    """Trade id -> notes for one wallet. Cleared notes map to None."""
    rows = session.exec(select(TradeNote).where(TradeNote.wallet_address == address)).all()
    return {row.trade_id: row.notes or None for row in rows}


def save_note(session: Session, address: str, trade_id: str, notes: str) -> TradeNote:
    """Create or replace the note for a trade. Empty text clears it."""
    row = session.exec(
        select(TradeNote).where(
            TradeNote.wallet_address == address,
            TradeNote.trade_id == trade_id,
        )
    ).first()
    if row is None:
        row = TradeNote(wallet_address=address, trade_id=trade_id, notes=notes)
    else:
        row.notes = notes
        row.updated_at = datetime.now(timezone.utc)
    session.add(row)
    session.commit()
    session.refresh(row)
    logger.info(f"Saved note for trade {trade_id} ({'cleared' if not notes else f'{len(notes)} chars'})")
    return row
