"""Trading journal analytics: performance report over recorded trades.

Turns an ordered list of journal trades into a multi-section report.
Every section is a pure function of the trade list; nothing is cached
or persisted between calls.

Key components
--------------
**Core report**

resolve_outcome       Normalized win/loss/break-even across legacy fields
compute_overview      Headline stats (win rate, profit factor, expectancy)
equity_curve          Running cumulative P&L
monthly/weekly/daily  Calendar-bucketed P&L series
category_performance  Session / instrument / strategy leaderboards
rr_distribution       Planned risk:reward histogram
r_multiples           Dollar-outcome histogram
execution_scores      Execution discipline over time
StreakState           Win/loss streak state machine
DrawdownState         Peak-to-trough drawdown state machine
available_filters     Distinct filterable values

**Extended analytics**

advanced_risk_metrics  Sharpe, Sortino, Calmar, deviations
time_of_day / day_of_week / hourly_heatmap
personal_benchmarks    Best/worst trade, day, month, strategy
generate_insights      Rule-based habit observations
strategy_instrument_pairs  Best strategy x instrument combinations

**Composition**

AnalyticsEngine / build_report / empty_report
TradeQuery             Caller-side selection and date ordering
"""

from .resolve import resolve_category, resolve_instrument, resolve_outcome, resolve_trades
from .overview import compute_overview
from .time_buckets import bucket_key, daily_pnl, equity_curve, monthly_pnl, weekly_pnl
from .categorical import (
    category_performance,
    instrument_performance,
    session_performance,
    strategy_instrument_pairs,
    strategy_performance,
)
from .distribution import parse_risk_reward, r_multiples, rr_distribution
from .execution import execution_scores
from .streaks import StreakState, step_streak, track_streaks
from .drawdown import DrawdownState, step_drawdown, track_drawdown
from .filters import TradeQuery, available_filters
from .risk_metrics import advanced_risk_metrics
from .temporal import day_of_week_performance, hourly_heatmap, time_of_day_performance
from .benchmarks import personal_benchmarks
from .insights import generate_insights
from .report import REPORT_SECTIONS, AnalyticsEngine, build_report, empty_report

__all__ = [
    "resolve_outcome",
    "resolve_instrument",
    "resolve_category",
    "resolve_trades",
    "compute_overview",
    "bucket_key",
    "equity_curve",
    "monthly_pnl",
    "weekly_pnl",
    "daily_pnl",
    "category_performance",
    "session_performance",
    "instrument_performance",
    "strategy_performance",
    "strategy_instrument_pairs",
    "parse_risk_reward",
    "rr_distribution",
    "r_multiples",
    "execution_scores",
    "StreakState",
    "step_streak",
    "track_streaks",
    "DrawdownState",
    "step_drawdown",
    "track_drawdown",
    "TradeQuery",
    "available_filters",
    "advanced_risk_metrics",
    "time_of_day_performance",
    "day_of_week_performance",
    "hourly_heatmap",
    "personal_benchmarks",
    "generate_insights",
    "REPORT_SECTIONS",
    "AnalyticsEngine",
    "build_report",
    "empty_report",
]
