"""Trade history API — analytics bundle, CSV export and journal notes."""

import re

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlmodel import Session

from backend.api.deps import get_wallet_address, to_http_error
from backend.config import settings
from backend.database import get_session
from backend.schemas.analytics import AnalyticsBundle
from backend.schemas.trade import TradeNoteUpdate
from backend.services import trade_notes
from backend.services.csv_export import export_trades_csv
from backend.services.solana import InvalidAddressError, WalletDataError, is_valid_solana_address
from backend.services.wallet_data import fetch_trade_history, fetch_trades

TRADE_ID_PATTERN = re.compile(r"(.+)-trade-([1-9][0-9]*)", re.ASCII)

router = APIRouter(prefix="/api/trades", tags=["trades"])


@router.get("", response_model=AnalyticsBundle)
def get_trades(
    address: str = Depends(get_wallet_address),
    symbol: str | None = None,
    count: int = Query(default=settings.default_trade_count, ge=1, le=settings.max_trade_count),
    session: Session = Depends(get_session),
):
    """Trades plus every derived metric and breakdown for one wallet."""
    overrides = trade_notes.load_note_overrides(session, address)
    try:
        return fetch_trades(address, symbol, count, note_overrides=overrides)
    except WalletDataError as e:
        raise to_http_error(e)


@router.get("/export")
def export_trades(
    address: str = Depends(get_wallet_address),
    symbol: str | None = None,
    count: int = Query(default=settings.default_trade_count, ge=1, le=settings.max_trade_count),
    quoted: bool = False,
    session: Session = Depends(get_session),
):
    """Download the trade journal as CSV."""
    overrides = trade_notes.load_note_overrides(session, address)
    try:
        trades = fetch_trade_history(address, symbol, count, note_overrides=overrides)
    except WalletDataError as e:
        raise to_http_error(e)

    filename = f"trades-{address[:8]}.csv"
    return Response(
        content=export_trades_csv(trades, quoted=quoted),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _is_generated_trade_id(trade_id: str, address: str) -> bool:
    """True if the id is one the synthesizer can emit for this wallet."""
    match = TRADE_ID_PATTERN.fullmatch(trade_id)
    if match is None or match.group(1) != address[:8]:
        return False
    return int(match.group(2)) <= settings.max_trade_count


@router.put("/{trade_id}/notes")
def update_trade_note(
    trade_id: str,
    body: TradeNoteUpdate,
    session: Session = Depends(get_session),
):
    """Attach (or clear, with empty text) a journal note on one trade."""
    if not is_valid_solana_address(body.address):
        raise HTTPException(status_code=400, detail=InvalidAddressError.default_message)
    if not _is_generated_trade_id(trade_id, body.address):
        raise HTTPException(status_code=404, detail="Trade not found")

    row = trade_notes.save_note(session, body.address, trade_id, body.notes)
    return {"tradeId": row.trade_id, "notes": row.notes or None}
