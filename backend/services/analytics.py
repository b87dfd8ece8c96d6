"""Assemble the full analytics bundle from one trade list."""

import logging
from collections.abc import Sequence

from backend.schemas.analytics import AnalyticsBundle
from backend.schemas.trade import Trade
from backend.services import breakdowns
from backend.services.insights import generate_insights
from backend.services.metrics import aggregate_metrics
from backend.services.timeseries import build_daily_performance, build_risk_summary

logger = logging.getLogger(__name__)


def build_analytics(trades: Sequence[Trade]) -> AnalyticsBundle:
    """Run every aggregator over ``trades`` and merge the results.

    The trade list may come from the synthesizer or any other source;
    an empty list produces a well-formed bundle of zero values.
    """
    trades = list(trades)
    metrics = aggregate_metrics(trades)
    daily = build_daily_performance(trades)
    sessions = breakdowns.session_performance(trades)
    symbols = breakdowns.symbol_performance(trades)
    directions = breakdowns.direction_performance(trades)
    order_types = breakdowns.order_type_performance(trades)

    bundle = AnalyticsBundle(
        trades=trades,
        metrics=metrics,
        daily_performance=daily,
        session_performance=sessions,
        symbol_performance=symbols,
        hourly_heatmap=breakdowns.hourly_heatmap(trades),
        fee_breakdown=breakdowns.fee_breakdown(trades),
        order_type_performance=order_types,
        direction_performance=directions,
        strategy_performance=breakdowns.strategy_performance(trades),
        market_type_performance=breakdowns.market_type_performance(trades),
        risk_summary=build_risk_summary(daily, metrics),
        insights=generate_insights(sessions, symbols, directions, order_types),
    )
    logger.debug(
        f"Built analytics for {len(trades)} trades: "
        f"{len(daily)} days, {len(bundle.insights)} insights"
    )
    return bundle
