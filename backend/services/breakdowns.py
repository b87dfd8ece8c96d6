"""Per-dimension performance slices: session, symbol, strategy, order type,
direction, market type, day/hour heatmap and daily fees.

Every builder emits a row for each known group even when it is empty,
except the strategy breakdown, which drops strategies nobody used.
"""

from collections import defaultdict
from collections.abc import Sequence

from backend.schemas.analytics import (
    DirectionPerformance,
    DirectionSlice,
    FeeBreakdownRow,
    HourlyHeatmapCell,
    MarketTypePerformance,
    OrderTypePerformance,
    OrderTypeSlice,
    SessionPerformance,
    StrategyPerformance,
    SymbolPerformance,
)
from backend.schemas.trade import Trade
from backend.services.metrics import average_loss, average_win, win_rate
from backend.services.timeseries import group_by_exit_date
from backend.utils.constants import (
    HEATMAP_DAYS,
    HEATMAP_HOURS,
    MARKET_TYPES,
    STRATEGY_TAGS,
    TRADING_SESSIONS,
)


def _group(trades: Sequence[Trade], attr: str) -> dict[str, list[Trade]]:
    grouped: dict[str, list[Trade]] = defaultdict(list)
    for trade in trades:
        grouped[getattr(trade, attr)].append(trade)
    return grouped


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def session_performance(trades: Sequence[Trade]) -> list[SessionPerformance]:
    grouped = _group(trades, "session")
    result = []
    for session in TRADING_SESSIONS:
        members = grouped.get(session, [])
        result.append(SessionPerformance(
            session=session,
            pnl=sum(t.pnl for t in members),
            trades=len(members),
            win_rate=win_rate(members),
            avg_win=average_win(members),
            avg_loss=average_loss(members),
        ))
    return result


def symbol_performance(trades: Sequence[Trade]) -> list[SymbolPerformance]:
    """Per-symbol stats, most profitable first."""
    result = []
    for symbol, members in _group(trades, "symbol").items():
        result.append(SymbolPerformance(
            symbol=symbol,
            pnl=sum(t.pnl for t in members),
            trades=len(members),
            win_rate=win_rate(members),
            avg_win=average_win(members),
            avg_loss=average_loss(members),
            volume=sum(t.notional for t in members),
            avg_hold_time=_mean([t.duration for t in members]),
        ))
    result.sort(key=lambda s: s.pnl, reverse=True)
    return result


def strategy_performance(trades: Sequence[Trade]) -> list[StrategyPerformance]:
    grouped = _group(trades, "strategy")
    result = []
    for strategy in STRATEGY_TAGS:
        members = grouped.get(strategy, [])
        if not members:
            continue
        result.append(StrategyPerformance(
            strategy=strategy,
            trades=len(members),
            pnl=sum(t.pnl for t in members),
            win_rate=win_rate(members),
            avg_duration=_mean([t.duration for t in members]),
        ))
    return result


def market_type_performance(trades: Sequence[Trade]) -> list[MarketTypePerformance]:
    grouped = _group(trades, "market_type")
    result = []
    for market_type in MARKET_TYPES:
        members = grouped.get(market_type, [])
        result.append(MarketTypePerformance(
            market_type=market_type,
            trades=len(members),
            pnl=sum(t.pnl for t in members),
            volume=sum(t.notional for t in members),
            win_rate=win_rate(members),
        ))
    return result


def order_type_performance(trades: Sequence[Trade]) -> OrderTypePerformance:
    grouped = _group(trades, "order_type")

    def _slice(members: list[Trade]) -> OrderTypeSlice:
        return OrderTypeSlice(
            trades=len(members),
            pnl=sum(t.pnl for t in members),
            win_rate=win_rate(members),
            avg_fee=_mean([t.fees for t in members]),
        )

    return OrderTypePerformance(
        market=_slice(grouped.get("market", [])),
        limit=_slice(grouped.get("limit", [])),
    )


def direction_performance(trades: Sequence[Trade]) -> DirectionPerformance:
    grouped = _group(trades, "direction")

    def _slice(members: list[Trade]) -> DirectionSlice:
        return DirectionSlice(
            trades=len(members),
            pnl=sum(t.pnl for t in members),
            win_rate=win_rate(members),
        )

    return DirectionPerformance(
        long=_slice(grouped.get("long", [])),
        short=_slice(grouped.get("short", [])),
    )


def weekday_index(trade: Trade) -> int:
    """Day of week of the UTC entry time, 0 = Sunday."""
    return trade.entry_time.isoweekday() % 7


def hourly_heatmap(trades: Sequence[Trade]) -> list[HourlyHeatmapCell]:
    """Dense 7x24 grid of PnL and trade count by entry day/hour, day-major."""
    pnl: dict[tuple[int, int], float] = defaultdict(float)
    counts: dict[tuple[int, int], int] = defaultdict(int)
    for trade in trades:
        key = (weekday_index(trade), trade.entry_time.hour)
        pnl[key] += trade.pnl
        counts[key] += 1

    return [
        HourlyHeatmapCell(hour=hour, day=day, pnl=pnl[(day, hour)], trades=counts[(day, hour)])
        for day in range(HEATMAP_DAYS)
        for hour in range(HEATMAP_HOURS)
    ]


def fee_breakdown(trades: Sequence[Trade]) -> list[FeeBreakdownRow]:
    """Fee magnitudes by type per exit date, oldest first."""
    rows = []
    for day, members in group_by_exit_date(trades).items():
        totals = {"taker": 0.0, "maker": 0.0, "funding": 0.0}
        for trade in members:
            for fee in trade.fee_breakdown:
                totals[fee.type] += abs(fee.amount)
        rows.append(FeeBreakdownRow(date=day, total=sum(totals.values()), **totals))
    return rows
