"""Plain-language observations derived from the performance breakdowns."""

from collections.abc import Sequence

from backend.schemas.analytics import (
    DirectionPerformance,
    OrderTypePerformance,
    SessionPerformance,
    SymbolPerformance,
)

DIRECTION_EDGE_PCT = 5.0
ORDER_TYPE_EDGE_PCT = 3.0


def generate_insights(
    sessions: Sequence[SessionPerformance],
    symbols: Sequence[SymbolPerformance],
    directions: DirectionPerformance,
    order_types: OrderTypePerformance,
) -> list[str]:
    """Emit, in order, the session, symbol, direction and order-type insights
    whose rule fires. ``symbols`` is expected ranked by PnL, best first.
    """
    insights: list[str] = []

    if sessions:
        best_session = sessions[0]
        for s in sessions[1:]:
            if s.pnl > best_session.pnl:
                best_session = s
        if best_session.pnl > 0:
            name = best_session.session.replace("-", " ")
            insights.append(
                f"You perform best during the {name} session with {best_session.win_rate:.1f}% win rate"
            )

    if symbols and symbols[0].pnl > 0:
        best = symbols[0]
        insights.append(f"{best.symbol} is your most profitable asset with ${best.pnl:.2f} total PnL")

    if directions.long.win_rate > directions.short.win_rate + DIRECTION_EDGE_PCT:
        insights.append("Your long trades outperform shorts - consider focusing on bullish setups")
    elif directions.short.win_rate > directions.long.win_rate + DIRECTION_EDGE_PCT:
        insights.append("Your short trades outperform longs - you have good timing on reversals")

    if order_types.limit.win_rate > order_types.market.win_rate + ORDER_TYPE_EDGE_PCT:
        insights.append("Limit orders are more profitable - patience in entries is paying off")

    return insights
