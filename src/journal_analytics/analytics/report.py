"""Report composer: runs every section over one trade list.

Usage::

    engine = AnalyticsEngine()
    report = engine.report(trades)          # trades sorted by date
    print(report["overview"]["winRate"])
    print(report["drawdown"]["maxDrawdown"])

Each section is computed independently from the same resolved trade
list, so no section inherits another section's rounding.  An empty list
short-circuits to :func:`empty_report`, which has the same shape with
every scalar at 0 and every series empty.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..core.config import AnalyticsConfig
from ..core.models import Trade
from .benchmarks import empty_benchmarks, personal_benchmarks
from .categorical import (
    instrument_performance,
    session_performance,
    strategy_instrument_pairs,
    strategy_performance,
)
from .distribution import r_multiples, rr_distribution
from .drawdown import track_drawdown
from .execution import execution_scores
from .filters import available_filters
from .insights import generate_insights
from .overview import compute_overview
from .resolve import resolve_trades
from .risk_metrics import RISK_METRIC_KEYS, advanced_risk_metrics
from .streaks import StreakState, track_streaks
from .temporal import day_of_week_performance, hourly_heatmap, time_of_day_performance
from .time_buckets import daily_pnl, equity_curve, monthly_pnl, weekly_pnl

logger = logging.getLogger(__name__)

REPORT_SECTIONS = (
    "overview",
    "equity",
    "monthly",
    "weekly",
    "daily",
    "sessions",
    "instruments",
    "strategies",
    "rrDistribution",
    "rMultiples",
    "executionScores",
    "streaks",
    "drawdown",
    "filters",
    "advancedRiskMetrics",
    "timeOfDay",
    "dayOfWeek",
    "insights",
    "benchmarks",
    "correlations",
    "hourlyHeatmap",
)

OVERVIEW_KEYS = (
    "totalTrades",
    "winningTrades",
    "losingTrades",
    "breakEvenTrades",
    "winRate",
    "totalPnL",
    "avgPnL",
    "avgWin",
    "avgLoss",
    "profitFactor",
    "payoffRatio",
    "expectancy",
    "avgExecutionScore",
    "bestTrade",
    "worstTrade",
)

_COUNT_KEYS = {"totalTrades", "winningTrades", "losingTrades", "breakEvenTrades"}


def empty_report() -> dict[str, Any]:
    """Canonical report for a journal with no trades."""
    return {
        "overview": {k: 0 if k in _COUNT_KEYS else 0.0 for k in OVERVIEW_KEYS},
        "equity": [],
        "monthly": [],
        "weekly": [],
        "daily": [],
        "sessions": [],
        "instruments": [],
        "strategies": [],
        "rrDistribution": [],
        "rMultiples": [],
        "executionScores": [],
        "streaks": StreakState().to_dict(),
        "drawdown": {"maxDrawdown": 0.0, "maxDrawdownPercent": 0.0, "data": []},
        "filters": {"instruments": [], "strategies": [], "sessions": [], "directions": []},
        "advancedRiskMetrics": {k: 0.0 for k in RISK_METRIC_KEYS},
        "timeOfDay": [],
        "dayOfWeek": [],
        "insights": [],
        "benchmarks": empty_benchmarks(),
        "correlations": {"strategyInstrumentPairs": []},
        "hourlyHeatmap": [],
    }


def build_report(
    trades: Sequence[Trade],
    config: AnalyticsConfig | None = None,
) -> dict[str, Any]:
    """Build the full analytics report.

    Parameters
    ----------
    trades : sequence of Trade
        Already filtered for one user and sorted ascending by date.  The
        order is not checked; an unsorted list still yields a report, but
        the equity, streak and drawdown sections lose their meaning.
    config : AnalyticsConfig | None
        Window sizes and thresholds.  Defaults to ``AnalyticsConfig()``.

    Returns
    -------
    dict
        One key per entry in :data:`REPORT_SECTIONS`.
    """
    if not trades:
        return empty_report()

    cfg = config or AnalyticsConfig()
    resolved = resolve_trades(trades)

    return {
        "overview": compute_overview(resolved),
        "equity": equity_curve(resolved),
        "monthly": monthly_pnl(resolved),
        "weekly": weekly_pnl(resolved, window=cfg.weekly_window),
        "daily": daily_pnl(resolved),
        "sessions": session_performance(resolved),
        "instruments": instrument_performance(resolved),
        "strategies": strategy_performance(resolved),
        "rrDistribution": rr_distribution(resolved),
        "rMultiples": r_multiples(resolved),
        "executionScores": execution_scores(resolved),
        "streaks": track_streaks(resolved),
        "drawdown": track_drawdown(resolved),
        "filters": available_filters(resolved),
        "advancedRiskMetrics": advanced_risk_metrics(
            resolved, periods=cfg.annualisation_periods
        ),
        "timeOfDay": time_of_day_performance(resolved),
        "dayOfWeek": day_of_week_performance(resolved),
        "insights": generate_insights(
            resolved,
            min_trades=cfg.insight_min_trades,
            gap_minutes=cfg.overtrading_gap_minutes,
            burst=cfg.overtrading_burst,
        ),
        "benchmarks": personal_benchmarks(resolved),
        "correlations": strategy_instrument_pairs(
            resolved,
            min_history=cfg.correlation_min_trades,
            min_trades=cfg.pair_min_trades,
            limit=cfg.pair_limit,
        ),
        "hourlyHeatmap": hourly_heatmap(resolved),
    }


class AnalyticsEngine:
    """Stateless report generator bound to one analytics configuration.

    Parameters
    ----------
    config : AnalyticsConfig | None
        Thresholds and window sizes.  Defaults to ``AnalyticsConfig()``.
    """

    def __init__(self, config: AnalyticsConfig | None = None) -> None:
        self._config = config or AnalyticsConfig()

    @property
    def config(self) -> AnalyticsConfig:
        return self._config

    def report(self, trades: Sequence[Trade]) -> dict[str, Any]:
        """Full report for ``trades`` (see :func:`build_report`)."""
        if not trades:
            logger.info("No trades supplied, returning empty report")
            return empty_report()

        report = build_report(trades, self._config)
        logger.debug(
            "Report built: trades=%d total_pnl=%.2f sections=%d",
            len(trades),
            report["overview"]["totalPnL"],
            len(report),
        )
        return report

    def section(self, trades: Sequence[Trade], name: str) -> Any:
        """A single named section of the report."""
        if name not in REPORT_SECTIONS:
            raise KeyError(f"Unknown report section: {name!r}")
        return self.report(trades)[name]
