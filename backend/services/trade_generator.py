"""Deterministic synthetic trade history per wallet.

Stands in for a trade indexer: the same address, symbol filter and count
always produce the same trades for a given ``as_of`` anchor.
"""

import logging
from datetime import datetime, timedelta, timezone

from backend.schemas.trade import FeeItem, Trade
from backend.services.catalog import DEFAULT_TRADE_CATALOG, TradeCatalog
from backend.services.prng import SeededRandom
from backend.utils.constants import (
    BASE58_ALPHABET,
    FUNDING_FEE_RATE,
    MAKER_FEE_RATE,
    TAKER_FEE_RATE,
    TX_HASH_LENGTH,
)

logger = logging.getLogger(__name__)

DEFAULT_TRADE_COUNT = 250
NOTE_PLACEHOLDER = "Strategy execution note"
MS_PER_DAY = 24 * 60 * 60 * 1000


def session_for_hour(hour: int) -> str:
    """Trading session for a UTC hour."""
    if 0 <= hour < 8:
        return "asia"
    if 8 <= hour < 16:
        return "london"
    return "new-york"


def symbol_root(symbol: str) -> str:
    """Strip the market suffix: 'SOL-PERP' / 'SOL/USDC' -> 'SOL'."""
    return symbol.replace("-PERP", "").replace("/USDC", "")


def default_as_of() -> datetime:
    """Current UTC time floored to the hour, so repeat requests match."""
    return datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)


def generate_tx_hash(rng: SeededRandom) -> str:
    return "".join(rng.choice(BASE58_ALPHABET) for _ in range(TX_HASH_LENGTH))


def generate_trades(
    address: str,
    symbol_filter: str | None = None,
    count: int = DEFAULT_TRADE_COUNT,
    *,
    as_of: datetime | None = None,
    catalog: TradeCatalog = DEFAULT_TRADE_CATALOG,
) -> list[Trade]:
    """Build ``count`` draws of synthetic trades for ``address``, newest exit first.

    A draw whose symbol does not match ``symbol_filter`` is discarded, not
    replaced, so a filtered history can be shorter than ``count``.
    """
    rng = SeededRandom(address + "trades")
    now = as_of or default_as_of()
    wanted = symbol_root(symbol_filter) if symbol_filter else None
    trades: list[Trade] = []

    for i in range(count):
        is_perp = rng.random() > 0.3
        is_options = not is_perp and rng.random() > 0.7
        market_type = "perp" if is_perp else "options" if is_options else "spot"
        symbol = rng.choice(catalog.perp_symbols if is_perp else catalog.spot_symbols)

        if wanted is not None and wanted not in symbol:
            continue

        direction = "long" if rng.random() > 0.45 else "short"
        order_type = "limit" if rng.random() > 0.4 else "market"
        leverage = rng.randrange(2, 21) if market_type == "perp" else 1

        base_price = catalog.base_price(symbol)
        entry_price = base_price * (1 + (rng.random() - 0.5) * 0.1)
        price_move = (rng.random() - 0.45) * 0.08 * base_price
        if direction == "long":
            exit_price = entry_price + price_move
        else:
            exit_price = entry_price - price_move

        size = rng.randrange(100, 10100)
        notional = size * entry_price

        if direction == "long":
            pnl_base = (exit_price - entry_price) * size
        else:
            pnl_base = (entry_price - exit_price) * size
        pnl = pnl_base * leverage
        pnl_percent = pnl / notional * 100

        taker_fee = notional * TAKER_FEE_RATE
        maker_fee = notional * MAKER_FEE_RATE
        funding_fee = 0.0
        if market_type == "perp":
            funding_fee = notional * FUNDING_FEE_RATE * (1 if rng.random() > 0.5 else -1)

        if order_type == "market":
            fees = taker_fee
            fee_breakdown = [FeeItem(type="taker", amount=taker_fee)]
        else:
            fees = maker_fee + abs(funding_fee)
            fee_breakdown = [FeeItem(type="maker", amount=maker_fee)]
        if funding_fee != 0:
            fee_breakdown.append(FeeItem(type="funding", amount=funding_fee))

        days_ago = rng.randrange(0, 90)
        offset_ms = days_ago * MS_PER_DAY + int(rng.random() * MS_PER_DAY)
        entry_time = now - timedelta(milliseconds=offset_ms)
        duration = rng.randrange(5, 485)
        exit_time = entry_time + timedelta(minutes=duration)

        strategy = rng.choice(catalog.strategies) if rng.random() > 0.3 else None
        notes = NOTE_PLACEHOLDER if rng.random() > 0.7 else None

        trades.append(Trade(
            id=f"{address[:8]}-trade-{i + 1}",
            wallet_address=address,
            symbol=symbol,
            market_type=market_type,
            order_type=order_type,
            direction=direction,
            entry_price=entry_price,
            exit_price=exit_price,
            size=size,
            leverage=leverage,
            pnl=pnl,
            pnl_percent=pnl_percent,
            fees=fees,
            fee_breakdown=fee_breakdown,
            entry_time=entry_time,
            exit_time=exit_time,
            duration=duration,
            session=session_for_hour(entry_time.hour),
            strategy=strategy,
            notes=notes,
            tx_hash=generate_tx_hash(rng),
        ))

    trades.sort(key=lambda t: t.exit_time, reverse=True)
    logger.debug(f"Generated {len(trades)} trades for {address[:8]} (filter={symbol_filter!r}, draws={count})")
    return trades
