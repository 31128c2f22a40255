"""Tests for the rule-based insights."""

from datetime import timedelta

from journal_analytics.analytics.insights import generate_insights, longest_burst
from journal_analytics.analytics.resolve import resolve_trades

from .conftest import BASE, make_trade


def _titles(insights):
    return [i["title"] for i in insights]


def _weekly_mondays(n, pnl=100, result="win", **kwargs):
    """``n`` trades on consecutive Mondays at 09:00."""
    return [make_trade(pnl, result, day=7 * i, **kwargs) for i in range(n)]


class TestGenerateInsights:
    def test_silent_below_minimum(self):
        assert generate_insights(_weekly_mondays(9)) == []

    def test_minimum_is_configurable(self):
        assert generate_insights(_weekly_mondays(3), min_trades=3) != []

    def test_consistent_winner(self):
        insights = generate_insights(_weekly_mondays(10))
        assert insights == [
            {
                "type": "success",
                "title": "Best Trading Day",
                "message": "Monday is your best day with 100% win rate on 10 trades",
            },
            {
                "type": "info",
                "title": "Best Trading Hour",
                "message": "Hour 9:00 averages $100.00 per trade",
            },
            {
                "type": "success",
                "title": "Top Strategy",
                "message": "Breakout generated $1000.00 with 100.0% win rate",
            },
        ]

    def test_worst_day_warning(self):
        trades = _weekly_mondays(5) + [
            make_trade(-50, "loss", day=1 + 7 * i) for i in range(5)
        ]
        insights = generate_insights(trades)
        warning = next(i for i in insights if i["title"] == "Avoid Trading")
        assert warning["type"] == "warning"
        assert warning["message"] == "Tuesday shows 0% win rate. Consider reducing activity on this day"

    def test_worst_day_needs_enough_trades(self):
        trades = _weekly_mondays(8) + [make_trade(-50, "loss", day=1 + 7 * i) for i in range(2)]
        assert "Avoid Trading" not in _titles(generate_insights(trades))

    def test_no_profitable_hour(self):
        insights = generate_insights(_weekly_mondays(10, pnl=-10, result="loss"))
        assert "Best Trading Hour" not in _titles(insights)
        assert "Best Trading Day" not in _titles(insights)

    def test_top_strategy_counts_break_even_against_win_rate(self):
        trades = _weekly_mondays(6, strategy="Scalp") + [
            make_trade(0, "be", day=7 * i + 2, strategy="Scalp") for i in range(4)
        ]
        top = next(i for i in generate_insights(trades) if i["title"] == "Top Strategy")
        assert top["message"] == "Scalp generated $600.00 with 60.0% win rate"

    def test_overtrading(self):
        trades = [
            make_trade(10, "win", date=BASE + timedelta(minutes=10 * i)) for i in range(10)
        ]
        alert = next(i for i in generate_insights(trades) if i["title"] == "Overtrading Alert")
        assert alert["type"] == "warning"
        assert alert["message"] == "You took 10 trades within an hour. Consider reducing frequency"

    def test_overtrading_burst_configurable(self):
        trades = [
            make_trade(10, "win", date=BASE + timedelta(minutes=10 * i)) for i in range(3)
        ] + _weekly_mondays(7)
        assert "Overtrading Alert" not in _titles(generate_insights(trades))
        assert "Overtrading Alert" in _titles(generate_insights(trades, burst=3))

    def test_excellent_risk_reward(self):
        insights = generate_insights(_weekly_mondays(10, risk_reward="1:3"))
        rr = next(i for i in insights if i["title"] == "Excellent Risk Management")
        assert rr["message"] == "Average Risk:Reward of 3.00:1 is outstanding"

    def test_poor_risk_reward(self):
        insights = generate_insights(_weekly_mondays(10, risk_reward="1:0.5"))
        rr = next(i for i in insights if i["title"] == "Poor Risk:Reward")
        assert rr["type"] == "danger"
        assert rr["message"] == "Average R:R of 0.50:1 is too low. Aim for at least 2:1"

    def test_middling_risk_reward_is_silent(self):
        titles = _titles(generate_insights(_weekly_mondays(10, risk_reward="1:1.5")))
        assert "Excellent Risk Management" not in titles
        assert "Poor Risk:Reward" not in titles


class TestLongestBurst:
    def test_counts_trades_within_gap(self):
        times = [0, 20, 40, 200, 210]
        trades = [make_trade(1, "win", date=BASE + timedelta(minutes=m)) for m in times]
        assert longest_burst(resolve_trades(trades), 60) == 3

    def test_gap_boundary_breaks_run(self):
        trades = [make_trade(1, "win", date=BASE + timedelta(minutes=60 * i)) for i in range(4)]
        assert longest_burst(resolve_trades(trades), 60) == 0

    def test_order_independent(self):
        times = [40, 0, 20]
        trades = [make_trade(1, "win", date=BASE + timedelta(minutes=m)) for m in times]
        assert longest_burst(resolve_trades(trades), 60) == 3
