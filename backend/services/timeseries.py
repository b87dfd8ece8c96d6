"""Daily PnL / equity / drawdown series."""

from collections import defaultdict
from collections.abc import Sequence

import numpy as np

from backend.schemas.analytics import DailyPerformance, Metrics, RiskSummary
from backend.schemas.trade import Trade
from backend.services.metrics import win_rate
from backend.utils.constants import STARTING_EQUITY


def exit_date(trade: Trade) -> str:
    """UTC calendar day a trade closed on, as YYYY-MM-DD."""
    return trade.exit_time.date().isoformat()


def group_by_exit_date(trades: Sequence[Trade]) -> dict[str, list[Trade]]:
    """Trades keyed by exit date, keys in ascending date order."""
    grouped: dict[str, list[Trade]] = defaultdict(list)
    for trade in trades:
        grouped[exit_date(trade)].append(trade)
    return {day: grouped[day] for day in sorted(grouped)}


def build_daily_performance(
    trades: Sequence[Trade],
    starting_equity: float = STARTING_EQUITY,
) -> list[DailyPerformance]:
    """Equity curve from a fixed starting balance, one point per trading day.

    Drawdown is measured from the running peak, which starts at
    ``starting_equity``; it is 0 on any day that sets a new peak.
    """
    by_day = group_by_exit_date(trades)
    if not by_day:
        return []

    daily_pnl = np.array([sum(t.pnl for t in day) for day in by_day.values()])
    cumulative = np.cumsum(daily_pnl)
    equity = starting_equity + cumulative
    peak = np.maximum.accumulate(np.maximum(equity, starting_equity))
    drawdown = (peak - equity) / peak * 100

    series = []
    for i, (day, day_trades) in enumerate(by_day.items()):
        series.append(DailyPerformance(
            date=day,
            pnl=float(daily_pnl[i]),
            cumulative_pnl=float(cumulative[i]),
            trades=len(day_trades),
            volume=sum(t.notional for t in day_trades),
            fees=sum(t.fees for t in day_trades),
            win_rate=win_rate(day_trades),
            drawdown=float(drawdown[i]),
            equity=float(equity[i]),
        ))
    return series


def build_risk_summary(
    daily: Sequence[DailyPerformance],
    metrics: Metrics,
    starting_equity: float = STARTING_EQUITY,
) -> RiskSummary:
    """Drawdown extremes plus the win/loss ratios for the risk panel."""
    if not daily:
        return RiskSummary(
            peak_equity=starting_equity,
            profit_factor=metrics.profit_factor,
            risk_reward_ratio=metrics.risk_reward_ratio,
        )
    return RiskSummary(
        max_drawdown=max(d.drawdown for d in daily),
        current_drawdown=daily[-1].drawdown,
        peak_equity=max(starting_equity, max(d.equity for d in daily)),
        profit_factor=metrics.profit_factor,
        risk_reward_ratio=metrics.risk_reward_ratio,
    )
