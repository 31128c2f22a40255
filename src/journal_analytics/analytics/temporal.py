"""Time-of-day and day-of-week performance.

Answers "which hours / weekdays do I trade best?".  Hours come from the
trade timestamp (UTC for timezone-aware values, as recorded otherwise).
Weekdays are numbered Sunday=0 .. Saturday=6, the journal UI's
convention.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from ..core.models import Trade
from .buckets import BucketStats, r2
from .resolve import ResolvedTrade, resolve_trades
from .time_buckets import normalise_timestamp

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def day_index(dt: datetime) -> int:
    """Sunday-first weekday index (0=Sunday)."""
    return (normalise_timestamp(dt).weekday() + 1) % 7


def time_of_day_performance(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """Per-hour buckets ``[{hour, trades, wins, losses, pnl, winRate, avgPnL}]``, hour ascending."""
    hours: dict[int, BucketStats] = {}
    for t in resolve_trades(trades):
        hour = normalise_timestamp(t.date).hour
        hours.setdefault(hour, BucketStats()).record(t)
    return [{"hour": h, **hours[h].to_dict(with_avg=True)} for h in sorted(hours)]


def day_of_week_performance(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """Per-weekday buckets, Sunday first, days without trades omitted."""
    days = [BucketStats() for _ in DAY_NAMES]
    for t in resolve_trades(trades):
        days[day_index(t.date)].record(t)
    return [
        {"day": DAY_NAMES[i], **stats.to_dict(with_avg=True)}
        for i, stats in enumerate(days)
        if stats.trades > 0
    ]


def hourly_heatmap(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """Weekday x hour cells ``[{day, hour, trades, pnl, winRate}]``.

    Cells appear in the order they are first traded.
    """
    cells: dict[tuple[int, int], BucketStats] = {}
    for t in resolve_trades(trades):
        key = (day_index(t.date), normalise_timestamp(t.date).hour)
        cells.setdefault(key, BucketStats()).record(t)
    return [
        {
            "day": day,
            "hour": hour,
            "trades": stats.trades,
            "pnl": r2(stats.pnl),
            "winRate": r2(stats.win_rate),
        }
        for (day, hour), stats in cells.items()
    ]
