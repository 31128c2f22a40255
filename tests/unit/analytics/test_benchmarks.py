"""Tests for personal records."""

from datetime import timedelta

from journal_analytics.analytics.benchmarks import empty_benchmarks, personal_benchmarks

from .conftest import BASE, make_trade


def _journal():
    return [
        make_trade(100, "win", day=0, strategy="A", instrument="EUR/USD"),
        make_trade(-30, "loss", date=BASE + timedelta(hours=3), strategy="B", instrument="GBP/USD"),
        make_trade(-80, "loss", day=1, strategy="A", instrument=None, trade_pair="XAUUSD"),
        make_trade(60, "win", day=40, strategy="B", instrument="GBP/USD"),
    ]


class TestPersonalBenchmarks:
    def test_best_and_worst_trade(self):
        bench = personal_benchmarks(_journal())
        assert bench["bestTrade"] == {
            "pnl": 100.0,
            "date": BASE.isoformat(),
            "instrument": "EUR/USD",
            "strategy": "A",
        }
        assert bench["worstTrade"]["pnl"] == -80.0
        assert bench["worstTrade"]["instrument"] == "XAUUSD"

    def test_days_are_summed(self):
        bench = personal_benchmarks(_journal())
        assert bench["bestDay"] == {"date": "2024-01-01", "pnl": 70.0}
        assert bench["worstDay"] == {"date": "2024-01-02", "pnl": -80.0}

    def test_best_month(self):
        bench = personal_benchmarks(_journal())
        assert bench["bestMonth"] == {"month": "2024-02", "pnl": 60.0}

    def test_streaks(self):
        bench = personal_benchmarks(_journal())
        assert bench["longestWinStreak"] == 1
        assert bench["longestLossStreak"] == 2

    def test_most_profitable_strategy(self):
        bench = personal_benchmarks(_journal())
        assert bench["mostProfitableStrategy"] == {"name": "B", "pnl": 30.0, "trades": 2}

    def test_ties_go_to_earliest(self):
        trades = [
            make_trade(50, "win", day=0, strategy="First"),
            make_trade(50, "win", day=1, strategy="Second"),
        ]
        bench = personal_benchmarks(trades)
        assert bench["bestTrade"]["strategy"] == "First"
        assert bench["bestDay"]["date"] == "2024-01-01"
        assert bench["mostProfitableStrategy"]["name"] == "First"

    def test_empty(self):
        assert personal_benchmarks([]) == empty_benchmarks()
