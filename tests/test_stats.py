"""Property-based tests for the statistics aggregator.

**Feature: post-trade-therapy**
"""

import random

from hypothesis import given, settings
from hypothesis import strategies as st

from tests.strategies import make_trade, trade_strategy
from tradetherapy.analysis import calculate_stats
from tradetherapy.models import Trade


class TestWinRate:
    """
    *For any* journal, the win rate lies in [0, 100] and is 0 for an
    empty journal.
    """

    @given(trades=st.lists(trade_strategy(), min_size=0, max_size=50))
    @settings(max_examples=100)
    def test_win_rate_bounds(self, trades: list[Trade]):
        result = calculate_stats(trades)

        assert 0 <= result.win_rate <= 100, f"Win rate out of bounds: {result.win_rate}"

    @given(trades=st.lists(trade_strategy(), min_size=1, max_size=50))
    @settings(max_examples=100)
    def test_win_rate_matches_wins(self, trades: list[Trade]):
        result = calculate_stats(trades)

        wins = sum(1 for t in trades if t.outcome == "win")
        assert result.win_rate == round(wins / len(trades) * 100, 1)

    def test_empty_trades_returns_zeros(self):
        result = calculate_stats([])

        assert result.total_trades == 0
        assert result.win_rate == 0
        assert result.avg_profit == 0
        assert result.total_pnl == 0

    def test_win_rate_rounded_to_one_decimal(self):
        trades = [make_trade("win"), make_trade("loss"), make_trade("loss")]

        assert calculate_stats(trades).win_rate == 33.3


class TestPnLAccuracy:
    """
    *For any* journal, total P&L equals the sum of profits with missing
    profit counted as 0, regardless of order.
    """

    @given(trades=st.lists(trade_strategy(), min_size=0, max_size=50))
    @settings(max_examples=100)
    def test_total_pnl_is_sum(self, trades: list[Trade]):
        result = calculate_stats(trades)

        expected = sum(t.profit or 0.0 for t in trades)
        assert abs(result.total_pnl - expected) <= 0.006

    @given(
        trades=st.lists(trade_strategy(), min_size=0, max_size=30),
        seed=st.integers(),
    )
    @settings(max_examples=50)
    def test_order_independent(self, trades: list[Trade], seed: int):
        shuffled = list(trades)
        random.Random(seed).shuffle(shuffled)

        original = calculate_stats(trades)
        reordered = calculate_stats(shuffled)
        assert original.total_trades == reordered.total_trades
        assert original.win_rate == reordered.win_rate
        assert abs(original.total_pnl - reordered.total_pnl) <= 0.01

    def test_average_uses_unrounded_total(self):
        trades = [make_trade(profit=0.004), make_trade(profit=0.004), make_trade(profit=0.004)]

        result = calculate_stats(trades)
        assert result.total_pnl == 0.01
        assert result.avg_profit == 0.0

    def test_missing_profit_counts_as_zero(self):
        trades = [
            make_trade(profit=2.5),
            Trade(id=1, symbol="AAPL", outcome="loss", timestamp="2024-06-10T10:00:00"),
        ]

        result = calculate_stats(trades)
        assert result.total_pnl == 2.5
        assert result.avg_profit == 1.25
        assert result.total_trades == 2
