"""Rule-based observations about trading habits.

Each rule looks at one aspect of the journal (weekday, hour, strategy,
trade frequency, planned risk:reward) and emits at most one insight.
Nothing is said until the journal holds enough trades for the numbers
to mean something.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..core.models import Trade
from .distribution import parse_risk_reward
from .resolve import ResolvedTrade, resolve_category, resolve_trades
from .temporal import day_of_week_performance, time_of_day_performance
from .time_buckets import as_utc

logger = logging.getLogger(__name__)

BEST_DAY_WIN_RATE = 60.0
WORST_DAY_WIN_RATE = 40.0
WORST_DAY_MIN_TRADES = 5
BEST_HOUR_MIN_TRADES = 3
TOP_STRATEGY_MIN_TRADES = 5
GOOD_RR = 2.0
POOR_RR = 1.0


def _insight(kind: str, title: str, message: str) -> dict[str, str]:
    return {"type": kind, "title": title, "message": message}


def _day_insights(resolved: list[ResolvedTrade]) -> list[dict[str, str]]:
    days = day_of_week_performance(resolved)
    if not days:
        return []
    out = []
    best = max(days, key=lambda d: d["winRate"])
    worst = min(days, key=lambda d: d["winRate"])
    if best["winRate"] > BEST_DAY_WIN_RATE:
        out.append(_insight(
            "success",
            "Best Trading Day",
            f"{best['day']} is your best day with {best['winRate']:g}% win rate "
            f"on {best['trades']} trades",
        ))
    if worst["winRate"] < WORST_DAY_WIN_RATE and worst["trades"] >= WORST_DAY_MIN_TRADES:
        out.append(_insight(
            "warning",
            "Avoid Trading",
            f"{worst['day']} shows {worst['winRate']:g}% win rate. "
            f"Consider reducing activity on this day",
        ))
    return out


def _hour_insights(resolved: list[ResolvedTrade]) -> list[dict[str, str]]:
    profitable = [
        h for h in time_of_day_performance(resolved)
        if h["avgPnL"] > 0 and h["trades"] >= BEST_HOUR_MIN_TRADES
    ]
    if not profitable:
        return []
    best = max(profitable, key=lambda h: h["avgPnL"])
    return [_insight(
        "info",
        "Best Trading Hour",
        f"Hour {best['hour']}:00 averages ${best['avgPnL']:.2f} per trade",
    )]


def _strategy_insights(resolved: list[ResolvedTrade]) -> list[dict[str, str]]:
    groups: dict[str, list[ResolvedTrade]] = {}
    for t in resolved:
        groups.setdefault(resolve_category(t.trade, "strategy"), []).append(t)

    eligible = {
        name: group for name, group in groups.items()
        if len(group) >= TOP_STRATEGY_MIN_TRADES
    }
    if not eligible:
        return []
    name = max(eligible, key=lambda n: sum(t.pnl for t in eligible[n]))
    group = eligible[name]
    pnl = sum(t.pnl for t in group)
    # Every non-win counts against the rate here
    wr = sum(1 for t in group if t.is_win) / len(group) * 100
    return [_insight(
        "success",
        "Top Strategy",
        f"{name} generated ${pnl:.2f} with {wr:.1f}% win rate",
    )]


def longest_burst(resolved: list[ResolvedTrade], gap_minutes: float) -> int:
    """Longest run of trades each opened within ``gap_minutes`` of the previous."""
    times = sorted(as_utc(t.date) for t in resolved)
    longest = 0
    run = 1
    for prev, cur in zip(times, times[1:]):
        if (cur - prev).total_seconds() / 60 < gap_minutes:
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest


def _frequency_insights(
    resolved: list[ResolvedTrade], gap_minutes: float, burst: int
) -> list[dict[str, str]]:
    longest = longest_burst(resolved, gap_minutes)
    if longest < burst:
        return []
    return [_insight(
        "warning",
        "Overtrading Alert",
        f"You took {longest} trades within an hour. Consider reducing frequency",
    )]


def _risk_reward_insights(resolved: list[ResolvedTrade]) -> list[dict[str, str]]:
    ratios = [parse_risk_reward(t.trade.risk_reward) for t in resolved]
    ratios = [r for r in ratios if r is not None and r > 0]
    if not ratios:
        return []
    avg = sum(ratios) / len(ratios)
    if avg > GOOD_RR:
        return [_insight(
            "success",
            "Excellent Risk Management",
            f"Average Risk:Reward of {avg:.2f}:1 is outstanding",
        )]
    if avg < POOR_RR:
        return [_insight(
            "danger",
            "Poor Risk:Reward",
            f"Average R:R of {avg:.2f}:1 is too low. Aim for at least 2:1",
        )]
    return []


def generate_insights(
    trades: Sequence[Trade | ResolvedTrade],
    *,
    min_trades: int = 10,
    gap_minutes: float = 60.0,
    burst: int = 5,
) -> list[dict[str, str]]:
    """Insights as ``[{type, title, message}]``.

    ``type`` is one of ``success``, ``info``, ``warning``, ``danger``.
    Returns an empty list below ``min_trades`` trades.
    """
    resolved = resolve_trades(trades)
    if len(resolved) < min_trades:
        return []

    insights = [
        *_day_insights(resolved),
        *_hour_insights(resolved),
        *_strategy_insights(resolved),
        *_frequency_insights(resolved, gap_minutes, burst),
        *_risk_reward_insights(resolved),
    ]
    logger.debug("Generated %d insights from %d trades", len(insights), len(resolved))
    return insights
