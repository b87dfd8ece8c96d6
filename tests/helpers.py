"""Trade builders and fixed identities shared across the test modules."""

from datetime import datetime, timedelta, timezone
from itertools import count

from backend.schemas.trade import FeeItem, Trade

WALLET = "So11111111111111111111111111111111111111112"
OTHER_WALLET = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
AS_OF = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)

_ids = count(1)


def make_trade(
    pnl: float = 0.0,
    *,
    direction: str = "long",
    order_type: str = "market",
    market_type: str = "perp",
    symbol: str = "SOL-PERP",
    entry_price: float = 100.0,
    size: float = 10.0,
    fees: float = 1.0,
    fee_breakdown: list[FeeItem] | None = None,
    entry_time: datetime | None = None,
    duration: int = 60,
    session: str = "london",
    strategy: str | None = None,
    notes: str | None = None,
) -> Trade:
    """Hand-built trade; only the fields a test cares about need passing."""
    entry_time = entry_time or AS_OF
    return Trade(
        id=f"test-trade-{next(_ids)}",
        wallet_address=WALLET,
        symbol=symbol,
        market_type=market_type,
        order_type=order_type,
        direction=direction,
        entry_price=entry_price,
        exit_price=entry_price,
        size=size,
        leverage=1,
        pnl=pnl,
        pnl_percent=pnl / (size * entry_price) * 100,
        fees=fees,
        fee_breakdown=fee_breakdown if fee_breakdown is not None else [FeeItem(type="taker", amount=fees)],
        entry_time=entry_time,
        exit_time=entry_time + timedelta(minutes=duration),
        duration=duration,
        session=session,
        strategy=strategy,
        notes=notes,
        tx_hash="1" * 88,
    )
