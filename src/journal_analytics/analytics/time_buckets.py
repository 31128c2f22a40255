"""Equity curve and calendar-bucketed P&L series.

All series are derived from the trade list as given; the caller is
responsible for passing it sorted ascending by date.  Period buckets are
emitted in key order, which for these zero-padded formats is also
chronological order.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from ..core.enums import Period
from ..core.models import Trade
from .buckets import BucketStats, r2
from .resolve import ResolvedTrade, resolve_trades

logger = logging.getLogger(__name__)

DEFAULT_WEEKLY_WINDOW = 12


def normalise_timestamp(dt: datetime) -> datetime:
    """Aware datetimes are bucketed in UTC, naive ones as recorded."""
    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc)
    return dt


def as_utc(dt: datetime) -> datetime:
    """Comparable UTC timestamp; naive values are taken to be UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def bucket_key(dt: datetime, period: Period | str) -> str:
    """Calendar bucket key for a timestamp.

    ``daily`` -> ``YYYY-MM-DD``, ``monthly`` -> ``YYYY-MM`` and
    ``weekly`` -> ``YYYY-Www`` using the ISO-8601 year and week number
    (weeks start on Monday, week 1 holds the year's first Thursday).
    """
    ts = normalise_timestamp(dt)
    period = Period(period)
    if period == Period.DAILY:
        return ts.strftime("%Y-%m-%d")
    if period == Period.MONTHLY:
        return ts.strftime("%Y-%m")
    iso_year, iso_week, _ = ts.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def equity_curve(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """Running cumulative P&L, one point per trade, in input order."""
    cumulative = 0.0
    points = []
    for t in resolve_trades(trades):
        cumulative += t.pnl
        points.append({
            "date": t.date.isoformat(),
            "pnl": r2(t.pnl),
            "cumulative": r2(cumulative),
        })
    return points


def _period_series(
    trades: Sequence[Trade | ResolvedTrade],
    period: Period,
    label: str,
) -> list[dict[str, Any]]:
    buckets: dict[str, BucketStats] = defaultdict(BucketStats)
    for t in resolve_trades(trades):
        buckets[bucket_key(t.date, period)].record(t)

    return [
        {label: key, **buckets[key].to_dict()}
        for key in sorted(buckets)
    ]


def monthly_pnl(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """P&L per calendar month: ``[{month, trades, wins, losses, pnl, winRate}]``."""
    return _period_series(trades, Period.MONTHLY, "month")


def weekly_pnl(
    trades: Sequence[Trade | ResolvedTrade],
    *,
    window: int = DEFAULT_WEEKLY_WINDOW,
) -> list[dict[str, Any]]:
    """P&L per ISO week, keeping only the most recent ``window`` weeks."""
    series = _period_series(trades, Period.WEEKLY, "week")
    if len(series) > window:
        logger.debug("Weekly series truncated: %d -> %d weeks", len(series), window)
        series = series[-window:]
    return series


def daily_pnl(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """P&L per calendar day: ``[{date, trades, wins, losses, pnl, winRate}]``."""
    return _period_series(trades, Period.DAILY, "date")
