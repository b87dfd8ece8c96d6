"""Summary statistics over a list of trades.

All functions are pure computation: an empty list is valid input and
yields zero/neutral values, never an exception.
"""

from collections.abc import Sequence

from backend.schemas.analytics import Metrics
from backend.schemas.trade import Trade


def win_rate(trades: Sequence[Trade]) -> float:
    """Percentage of trades with positive PnL (0 for no trades)."""
    if not trades:
        return 0.0
    return sum(1 for t in trades if t.is_win) / len(trades) * 100


def average_win(trades: Sequence[Trade]) -> float:
    wins = [t.pnl for t in trades if t.is_win]
    return sum(wins) / len(wins) if wins else 0.0


def average_loss(trades: Sequence[Trade]) -> float:
    """Mean losing PnL as a positive magnitude."""
    losses = [t.pnl for t in trades if t.is_loss]
    return abs(sum(losses) / len(losses)) if losses else 0.0


def win_loss_ratio(avg_win: float, avg_loss: float) -> float:
    """avg win / avg loss; 0 when there are no losses to divide by."""
    return avg_win / avg_loss if avg_loss > 0 else 0.0


def aggregate_metrics(trades: Sequence[Trade]) -> Metrics:
    """Reduce a trade list to the dashboard's headline metrics.

    Args:
        trades: Closed trades in any order.

    Returns:
        Metrics. With no trades every field is zero except
        ``long_short_ratio``, which is the neutral 1.
    """
    if not trades:
        return Metrics()

    total_pnl = sum(t.pnl for t in trades)
    total_volume = sum(t.notional for t in trades)
    total_fees = sum(t.fees for t in trades)

    wins = [t.pnl for t in trades if t.is_win]
    losses = [t.pnl for t in trades if t.is_loss]
    long_count = sum(1 for t in trades if t.direction == "long")
    short_count = sum(1 for t in trades if t.direction == "short")

    avg_win = average_win(trades)
    avg_loss = average_loss(trades)
    # profit factor and risk/reward have always been the same ratio
    ratio = win_loss_ratio(avg_win, avg_loss)

    return Metrics(
        total_pnl=total_pnl,
        total_pnl_percent=total_pnl / total_volume * 100 if total_volume > 0 else 0.0,
        win_rate=win_rate(trades),
        total_trades=len(trades),
        total_volume=total_volume,
        total_fees=total_fees,
        long_short_ratio=long_count / short_count if short_count > 0 else float(long_count),
        avg_duration=sum(t.duration for t in trades) / len(trades),
        avg_win=avg_win,
        avg_loss=avg_loss,
        largest_win=max(wins) if wins else 0.0,
        largest_loss=min(losses) if losses else 0.0,
        profit_factor=ratio,
        risk_reward_ratio=ratio,
    )
