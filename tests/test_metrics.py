"""Tests for the metrics aggregator."""

import pytest

from backend.schemas.analytics import Metrics
from backend.services.metrics import aggregate_metrics
from backend.services.trade_generator import generate_trades

from tests.helpers import AS_OF, WALLET, make_trade


class TestAggregateMetrics:
    def test_empty_list_defaults(self):
        m = aggregate_metrics([])
        assert m == Metrics()
        assert m.long_short_ratio == 1
        assert m.total_trades == 0
        assert m.total_pnl == 0
        assert m.profit_factor == 0

    def test_one_win_one_loss(self):
        m = aggregate_metrics([make_trade(100.0), make_trade(-50.0)])
        assert m.win_rate == 50
        assert m.avg_win == 100
        assert m.avg_loss == 50
        assert m.profit_factor == 2
        assert m.risk_reward_ratio == m.profit_factor
        assert m.largest_win == 100
        assert m.largest_loss == -50
        assert m.total_pnl == 50

    def test_no_losses_gives_zero_ratios(self):
        m = aggregate_metrics([make_trade(10.0), make_trade(20.0)])
        assert m.avg_loss == 0
        assert m.profit_factor == 0
        assert m.risk_reward_ratio == 0
        assert m.largest_loss == 0

    def test_breakeven_trade_is_neither_win_nor_loss(self):
        flat = make_trade(0.0)
        assert not flat.is_win and not flat.is_loss
        assert make_trade(-1.0).is_loss
        m = aggregate_metrics([make_trade(0.0), make_trade(30.0)])
        assert m.win_rate == 50
        assert m.avg_loss == 0

    def test_long_short_ratio(self):
        longs_only = [make_trade(1.0, direction="long") for _ in range(3)]
        assert aggregate_metrics(longs_only).long_short_ratio == 3

        mixed = longs_only + [make_trade(1.0, direction="short") for _ in range(2)]
        assert aggregate_metrics(mixed).long_short_ratio == 1.5

    def test_volume_fees_and_duration(self):
        trades = [
            make_trade(10.0, entry_price=100.0, size=2.0, fees=0.5, duration=30),
            make_trade(-5.0, entry_price=50.0, size=4.0, fees=1.5, duration=90),
        ]
        m = aggregate_metrics(trades)
        assert m.total_volume == 400.0
        assert m.total_fees == 2.0
        assert m.avg_duration == 60
        assert m.total_pnl_percent == pytest.approx(5.0 / 400.0 * 100)

    def test_totals_match_generated_history(self):
        trades = generate_trades(WALLET, as_of=AS_OF)
        m = aggregate_metrics(trades)
        assert m.total_trades == len(trades)
        assert m.total_pnl == pytest.approx(sum(t.pnl for t in trades))
        assert 0 <= m.win_rate <= 100
        assert m.avg_loss >= 0
        assert m.largest_loss <= 0 <= m.largest_win
