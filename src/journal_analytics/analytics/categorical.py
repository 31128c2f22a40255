"""Performance leaderboards grouped by session, instrument and strategy."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..core.models import Trade
from .buckets import BucketStats, r2
from .resolve import ResolvedTrade, resolve_category, resolve_trades

CATEGORY_KEYS = ("session", "instrument", "strategy")


def category_performance(
    trades: Sequence[Trade | ResolvedTrade],
    key: str,
) -> list[dict[str, Any]]:
    """Group trades by a category and rank the groups by total P&L.

    Parameters
    ----------
    trades : sequence of Trade
        Trades to group.
    key : str
        ``"session"``, ``"instrument"`` or ``"strategy"``.  Missing
        values group under ``"Unknown"``.

    Returns
    -------
    list[dict]
        ``[{<key>, trades, wins, losses, pnl, winRate, avgPnL}]`` sorted
        descending by P&L.  Ties keep first-seen order.
    """
    if key not in CATEGORY_KEYS:
        raise ValueError(f"Unsupported category key: {key!r}")

    groups: dict[str, BucketStats] = {}
    for t in resolve_trades(trades):
        label = resolve_category(t.trade, key)
        groups.setdefault(label, BucketStats()).record(t)

    ranked = sorted(groups.items(), key=lambda item: item[1].pnl, reverse=True)
    return [{key: label, **stats.to_dict(with_avg=True)} for label, stats in ranked]


def session_performance(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    return category_performance(trades, "session")


def instrument_performance(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    return category_performance(trades, "instrument")


def strategy_performance(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    return category_performance(trades, "strategy")


def strategy_instrument_pairs(
    trades: Sequence[Trade | ResolvedTrade],
    *,
    min_history: int = 10,
    min_trades: int = 3,
    limit: int = 10,
) -> dict[str, Any]:
    """Best strategy/instrument combinations by P&L.

    Only pairs with at least ``min_trades`` trades are ranked, and
    nothing is reported until the journal holds ``min_history`` trades.
    Win rate here counts every non-win as a loss.
    """
    resolved = resolve_trades(trades)
    if len(resolved) < min_history:
        return {"strategyInstrumentPairs": []}

    pairs: dict[tuple[str, str], BucketStats] = {}
    for t in resolved:
        pair = (
            resolve_category(t.trade, "strategy"),
            resolve_category(t.trade, "instrument"),
        )
        pairs.setdefault(pair, BucketStats()).record(t)

    eligible = [(pair, s) for pair, s in pairs.items() if s.trades >= min_trades]
    eligible.sort(key=lambda item: item[1].pnl, reverse=True)

    rows = [
        {
            "strategy": strategy,
            "instrument": instrument,
            "trades": stats.trades,
            "pnl": r2(stats.pnl),
            "winRate": r2(stats.wins / stats.trades * 100),
        }
        for (strategy, instrument), stats in eligible[:limit]
    ]
    return {"strategyInstrumentPairs": rows}
