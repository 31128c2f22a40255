"""Risk:reward and dollar-outcome histograms.

Both histograms use fixed ranges and emit only non-empty buckets, always
in the canonical range order below regardless of how the trades arrive.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from typing import Any

from ..core.models import Trade
from .buckets import r2
from .resolve import ResolvedTrade, resolve_trades

# (label, exclusive upper bound); the last bucket is open-ended
RR_BUCKETS: tuple[tuple[str, float], ...] = (
    ("< 1:1", 1.0),
    ("1:1 - 2:1", 2.0),
    ("2:1 - 3:1", 3.0),
    ("3:1 - 5:1", 5.0),
    ("> 5:1", math.inf),
)

# Fixed dollar thresholds.  The labels say "R" for display continuity
# with the journal UI; they are not risk multiples.
PNL_BUCKETS: tuple[tuple[str, float], ...] = (
    ("< -2R", -200.0),
    ("-2R to -1R", -100.0),
    ("-1R to 0R", 0.0),
    ("0R to 1R", 100.0),
    ("1R to 2R", 200.0),
    ("2R to 3R", 300.0),
    ("> 3R", math.inf),
)

_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)"
_RATIO_RE = re.compile(rf"^\s*({_NUMBER})\s*[:/]\s*({_NUMBER})")
_LEADING_RE = re.compile(rf"^\s*({_NUMBER})")


def parse_risk_reward(text: str | None) -> float | None:
    """Parse a risk:reward annotation into reward per unit of risk.

    ``"1:2"`` -> 2.0, ``"2:3"`` -> 1.5, ``"2.5"`` or ``"2.5R"`` -> 2.5.
    Returns None for empty or unparseable text and for a zero risk leg.
    """
    if not text:
        return None
    m = _RATIO_RE.match(text)
    if m:
        risk, reward = float(m.group(1)), float(m.group(2))
        if risk == 0:
            return None
        return reward / risk
    m = _LEADING_RE.match(text)
    if m:
        return float(m.group(1))
    return None


def _bucket_for(value: float, buckets: tuple[tuple[str, float], ...]) -> str:
    for label, upper in buckets:
        if value < upper:
            return label
    return buckets[-1][0]


def rr_distribution(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """Histogram of planned risk:reward.

    Trades without a parseable ratio are skipped.  Within a bucket every
    non-win (break-evens included) counts against the win rate.

    Returns
    -------
    list[dict]
        ``[{range, count, wins, pnl, winRate}]`` in canonical order.
    """
    acc: dict[str, dict[str, float]] = {}
    for t in resolve_trades(trades):
        rr = parse_risk_reward(t.trade.risk_reward)
        if rr is None:
            continue
        b = acc.setdefault(_bucket_for(rr, RR_BUCKETS), {"count": 0, "wins": 0, "pnl": 0.0})
        b["count"] += 1
        b["pnl"] += t.pnl
        if t.is_win:
            b["wins"] += 1

    out = []
    for label, _ in RR_BUCKETS:
        b = acc.get(label)
        if b is None:
            continue
        out.append({
            "range": label,
            "count": b["count"],
            "wins": b["wins"],
            "pnl": r2(b["pnl"]),
            "winRate": r2(b["wins"] / b["count"] * 100),
        })
    return out


def r_multiples(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """Histogram of trade P&L over fixed dollar ranges.

    Returns
    -------
    list[dict]
        ``[{range, count, totalPnL}]`` in canonical order.
    """
    acc: dict[str, dict[str, float]] = {}
    for t in resolve_trades(trades):
        b = acc.setdefault(_bucket_for(t.pnl, PNL_BUCKETS), {"count": 0, "total": 0.0})
        b["count"] += 1
        b["total"] += t.pnl

    return [
        {"range": label, "count": acc[label]["count"], "totalPnL": r2(acc[label]["total"])}
        for label, _ in PNL_BUCKETS
        if label in acc
    ]
