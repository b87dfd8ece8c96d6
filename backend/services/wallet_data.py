"""Boundary operations: load a wallet's portfolio, trade history and analytics.

These validate the address, pick the configured data source and translate
data-source failures into WalletDataError subclasses. The analytics
engine behind them never raises for well-formed input.
"""

import logging

from backend.config import settings
from backend.schemas.analytics import AnalyticsBundle
from backend.schemas.portfolio import WalletPortfolio
from backend.schemas.trade import Trade
from backend.services import portfolio, trade_generator
from backend.services.analytics import build_analytics
from backend.services.solana import classify_upstream_error, require_valid_address

logger = logging.getLogger(__name__)

PORTFOLIO_FAILURE = "Failed to fetch portfolio from blockchain"
TRADES_FAILURE = "Failed to fetch trades data"


def fetch_portfolio(address: str) -> WalletPortfolio:
    require_valid_address(address)
    try:
        return portfolio.generate_portfolio(address)
    except Exception as e:
        logger.error(f"Portfolio fetch failed for {address}: {e}")
        raise classify_upstream_error(e, PORTFOLIO_FAILURE) from e


def fetch_trade_history(
    address: str,
    symbol_filter: str | None = None,
    count: int | None = None,
    note_overrides: dict[str, str | None] | None = None,
) -> list[Trade]:
    """Trades for ``address`` from the configured source, newest first.

    ``note_overrides`` maps trade id to user-edited notes (None clears).
    """
    require_valid_address(address)
    if settings.trade_source == "empty":
        return []

    try:
        trades = trade_generator.generate_trades(
            address,
            symbol_filter or None,
            count or settings.default_trade_count,
        )
    except Exception as e:
        logger.error(f"Trade fetch failed for {address}: {e}")
        raise classify_upstream_error(e, TRADES_FAILURE) from e

    if note_overrides:
        trades = [
            t.model_copy(update={"notes": note_overrides[t.id]}) if t.id in note_overrides else t
            for t in trades
        ]
    return trades


def fetch_trades(
    address: str,
    symbol_filter: str | None = None,
    count: int | None = None,
    note_overrides: dict[str, str | None] | None = None,
) -> AnalyticsBundle:
    """Full analytics bundle for a wallet's trade history."""
    trades = fetch_trade_history(address, symbol_filter, count, note_overrides)
    logger.info(f"Serving {len(trades)} trades for {address[:8]} (symbol={symbol_filter})")
    return build_analytics(trades)
