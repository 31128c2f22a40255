"""Tests for filter-value extraction and TradeQuery selection."""

from datetime import datetime, timedelta, timezone

from journal_analytics.analytics.filters import TradeQuery, available_filters
from journal_analytics.analytics.resolve import resolve_trades
from journal_analytics.core.enums import TradeType

from .conftest import BASE, make_trade


class TestAvailableFilters:
    def test_distinct_values_first_seen_order(self):
        trades = [
            make_trade(10, "win", day=0, instrument="GBP/USD", strategy="Reversal", session="NY"),
            make_trade(10, "win", day=1, instrument="EUR/USD", strategy="Breakout", session="London"),
            make_trade(10, "win", day=2, instrument="GBP/USD", strategy="Reversal", session="NY",
                       direction="Short"),
        ]
        filters = available_filters(trades)
        assert filters == {
            "instruments": ["GBP/USD", "EUR/USD"],
            "strategies": ["Reversal", "Breakout"],
            "sessions": ["NY", "London"],
            "directions": ["Long", "Short"],
        }

    def test_instrument_falls_back_to_pair_and_skips_missing(self):
        trades = [
            make_trade(10, "win", day=0, instrument=None, trade_pair="XAUUSD"),
            make_trade(10, "win", day=1, instrument=None, strategy=None, session=None, direction=None),
        ]
        filters = available_filters(trades)
        assert filters["instruments"] == ["XAUUSD"]
        assert filters["strategies"] == ["Breakout"]
        assert "Unknown" not in filters["sessions"]

    def test_accepts_resolved_trades(self):
        trades = [make_trade(10, "win", day=0)]
        assert available_filters(resolve_trades(trades)) == available_filters(trades)

    def test_empty(self):
        assert available_filters([]) == {
            "instruments": [], "strategies": [], "sessions": [], "directions": [],
        }


class TestTradeQuery:
    def test_default_selects_everything_sorted(self):
        trades = [make_trade(1, "win", day=2), make_trade(2, "win", day=0), make_trade(3, "win", day=1)]
        selected = TradeQuery().apply(trades)
        assert [t.pnl for t in selected] == [2, 3, 1]

    def test_sort_is_stable_for_equal_dates(self):
        trades = [make_trade(1, "win", day=0), make_trade(2, "win", day=0)]
        assert [t.pnl for t in TradeQuery().apply(trades)] == [1, 2]

    def test_date_range_is_inclusive(self):
        trades = [make_trade(i, "win", day=i) for i in range(5)]
        query = TradeQuery(date_from=BASE + timedelta(days=1), date_to=BASE + timedelta(days=3))
        assert [t.pnl for t in query.apply(trades)] == [1, 2, 3]

    def test_mixed_naive_and_aware_dates_compare(self):
        aware = make_trade(1, "win", date=datetime(2024, 1, 2, 9, tzinfo=timezone.utc))
        naive = make_trade(2, "win", date=datetime(2024, 1, 1, 9))
        query = TradeQuery(date_from=datetime(2024, 1, 2))
        assert query.apply([aware, naive]) == [aware]

    def test_categories_combine_with_and(self):
        trades = [
            make_trade(1, "win", day=0, strategy="Breakout", session="London"),
            make_trade(2, "win", day=1, strategy="Breakout", session="NY"),
            make_trade(3, "win", day=2, strategy="Reversal", session="London"),
        ]
        query = TradeQuery(strategy="Breakout", session="London")
        assert [t.pnl for t in query.apply(trades)] == [1]

    def test_instrument_matches_pair_fallback(self):
        trades = [
            make_trade(1, "win", day=0, instrument=None, trade_pair="XAUUSD"),
            make_trade(2, "win", day=1, instrument="EUR/USD"),
        ]
        assert [t.pnl for t in TradeQuery(instrument="XAUUSD").apply(trades)] == [1]

    def test_direction(self):
        trades = [make_trade(1, "win", day=0, direction="Long"), make_trade(2, "win", day=1, direction="Short")]
        assert [t.pnl for t in TradeQuery(direction="Short").apply(trades)] == [2]

    def test_trade_type(self):
        trades = [make_trade(1, "win", day=0), make_trade(2, "win", day=1, is_backtest=True)]
        assert [t.pnl for t in TradeQuery(trade_type=TradeType.REAL).apply(trades)] == [1]
        assert [t.pnl for t in TradeQuery(trade_type=TradeType.BACKTEST).apply(trades)] == [2]
        assert len(TradeQuery(trade_type="all").apply(trades)) == 2

    def test_describe_lists_active_criteria_only(self):
        assert TradeQuery().describe() == {}
        query = TradeQuery(strategy="Breakout", trade_type=TradeType.REAL)
        assert query.describe() == {"strategy": "Breakout", "trade_type": "real"}
