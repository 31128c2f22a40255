"""Execution-score series for charting discipline over time."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..core.models import Trade
from .buckets import r2
from .resolve import ResolvedTrade, resolve_trades


def execution_scores(trades: Sequence[Trade | ResolvedTrade]) -> list[dict[str, Any]]:
    """Scored trades as ``[{tradeNumber, date, score, pnl}]``.

    ``tradeNumber`` is the 1-based position in the full input list, so
    gaps appear where trades carry no score.  Unscored and non-positive
    scores are left out.
    """
    series = []
    for number, t in enumerate(resolve_trades(trades), start=1):
        score = t.trade.execution_score
        if score is None or score <= 0:
            continue
        series.append({
            "tradeNumber": number,
            "date": t.date.isoformat(),
            "score": r2(score),
            "pnl": r2(t.pnl),
        })
    return series
