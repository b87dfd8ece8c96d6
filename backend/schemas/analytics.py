"""Pydantic schemas for derived analytics: metrics, time series and breakdowns."""

from pydantic import Field

from backend.schemas.base import CamelModel
from backend.schemas.trade import MarketType, StrategyTag, Trade, TradingSession


class Metrics(CamelModel):
    total_pnl: float = 0.0
    total_pnl_percent: float = 0.0
    win_rate: float = 0.0
    total_trades: int = 0
    total_volume: float = 0.0
    total_fees: float = 0.0
    long_short_ratio: float = 1.0
    avg_duration: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0  # magnitude
    largest_win: float = 0.0
    largest_loss: float = 0.0  # zero or negative
    profit_factor: float = 0.0
    risk_reward_ratio: float = 0.0


class DailyPerformance(CamelModel):
    date: str  # YYYY-MM-DD, UTC
    pnl: float
    cumulative_pnl: float
    trades: int
    volume: float
    fees: float
    win_rate: float
    drawdown: float
    equity: float


class RiskSummary(CamelModel):
    max_drawdown: float = 0.0
    current_drawdown: float = 0.0
    peak_equity: float = 0.0
    profit_factor: float = 0.0
    risk_reward_ratio: float = 0.0


class SessionPerformance(CamelModel):
    session: TradingSession
    pnl: float = 0.0
    trades: int = 0
    win_rate: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0


class SymbolPerformance(CamelModel):
    symbol: str
    pnl: float = 0.0
    trades: int = 0
    win_rate: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0
    volume: float = 0.0
    avg_hold_time: float = 0.0


class StrategyPerformance(CamelModel):
    strategy: StrategyTag
    trades: int = 0
    pnl: float = 0.0
    win_rate: float = 0.0
    avg_duration: float = 0.0


class MarketTypePerformance(CamelModel):
    market_type: MarketType = Field(alias="type")
    trades: int = 0
    pnl: float = 0.0
    volume: float = 0.0
    win_rate: float = 0.0


class OrderTypeSlice(CamelModel):
    trades: int = 0
    pnl: float = 0.0
    win_rate: float = 0.0
    avg_fee: float = 0.0


class OrderTypePerformance(CamelModel):
    market: OrderTypeSlice = Field(default_factory=OrderTypeSlice)
    limit: OrderTypeSlice = Field(default_factory=OrderTypeSlice)


class DirectionSlice(CamelModel):
    trades: int = 0
    pnl: float = 0.0
    win_rate: float = 0.0


class DirectionPerformance(CamelModel):
    long: DirectionSlice = Field(default_factory=DirectionSlice)
    short: DirectionSlice = Field(default_factory=DirectionSlice)


class HourlyHeatmapCell(CamelModel):
    hour: int = Field(ge=0, le=23)
    day: int = Field(ge=0, le=6)  # 0 = Sunday
    pnl: float = 0.0
    trades: int = 0


class FeeBreakdownRow(CamelModel):
    date: str
    taker: float = 0.0
    maker: float = 0.0
    funding: float = 0.0
    total: float = 0.0


class AnalyticsBundle(CamelModel):
    """Everything the dashboard needs for one wallet, computed from one trade list."""

    trades: list[Trade]
    metrics: Metrics
    daily_performance: list[DailyPerformance]
    session_performance: list[SessionPerformance]
    symbol_performance: list[SymbolPerformance]
    hourly_heatmap: list[HourlyHeatmapCell]
    fee_breakdown: list[FeeBreakdownRow]
    order_type_performance: OrderTypePerformance
    direction_performance: DirectionPerformance
    strategy_performance: list[StrategyPerformance]
    market_type_performance: list[MarketTypePerformance]
    risk_summary: RiskSummary
    insights: list[str]
