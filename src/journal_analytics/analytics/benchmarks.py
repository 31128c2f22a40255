"""Personal records: best/worst trade, day and month, longest streaks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..core.enums import Period
from ..core.models import Trade
from .buckets import r2
from .resolve import ResolvedTrade, resolve_category, resolve_instrument, resolve_trades
from .streaks import fold_streaks
from .time_buckets import bucket_key


def empty_benchmarks() -> dict[str, Any]:
    return {
        "bestTrade": {"pnl": 0.0, "date": None, "instrument": None, "strategy": None},
        "worstTrade": {"pnl": 0.0, "date": None, "instrument": None, "strategy": None},
        "bestDay": {"date": "", "pnl": 0.0},
        "worstDay": {"date": "", "pnl": 0.0},
        "bestMonth": {"month": "", "pnl": 0.0},
        "longestWinStreak": 0,
        "longestLossStreak": 0,
        "mostProfitableStrategy": {"name": "", "pnl": 0.0, "trades": 0},
    }


def _trade_ref(t: ResolvedTrade) -> dict[str, Any]:
    return {
        "pnl": r2(t.pnl),
        "date": t.date.isoformat(),
        "instrument": resolve_instrument(t.trade),
        "strategy": t.trade.strategy,
    }


def _sum_by(resolved: list[ResolvedTrade], key_fn) -> dict[str, float]:
    totals: dict[str, float] = {}
    for t in resolved:
        key = key_fn(t)
        totals[key] = totals.get(key, 0.0) + t.pnl
    return totals


def personal_benchmarks(trades: Sequence[Trade | ResolvedTrade]) -> dict[str, Any]:
    """Personal bests and worsts.  Ties resolve to the earliest entry."""
    resolved = resolve_trades(trades)
    if not resolved:
        return empty_benchmarks()

    best_trade = max(resolved, key=lambda t: t.pnl)
    worst_trade = min(resolved, key=lambda t: t.pnl)

    daily = _sum_by(resolved, lambda t: bucket_key(t.date, Period.DAILY))
    best_day = max(daily, key=daily.__getitem__)
    worst_day = min(daily, key=daily.__getitem__)

    monthly = _sum_by(resolved, lambda t: bucket_key(t.date, Period.MONTHLY))
    best_month = max(monthly, key=monthly.__getitem__)

    strategies: dict[str, list[float]] = {}
    for t in resolved:
        strategies.setdefault(resolve_category(t.trade, "strategy"), []).append(t.pnl)
    top_name = max(strategies, key=lambda name: sum(strategies[name]))

    streaks = fold_streaks(resolved)

    return {
        "bestTrade": _trade_ref(best_trade),
        "worstTrade": _trade_ref(worst_trade),
        "bestDay": {"date": best_day, "pnl": r2(daily[best_day])},
        "worstDay": {"date": worst_day, "pnl": r2(daily[worst_day])},
        "bestMonth": {"month": best_month, "pnl": r2(monthly[best_month])},
        "longestWinStreak": streaks.max_win,
        "longestLossStreak": streaks.max_loss,
        "mostProfitableStrategy": {
            "name": top_name,
            "pnl": r2(sum(strategies[top_name])),
            "trades": len(strategies[top_name]),
        },
    }
