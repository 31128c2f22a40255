"""Scalar summary statistics for a trade list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..core.enums import Outcome
from ..core.models import Trade
from .buckets import r2, win_rate
from .resolve import ResolvedTrade, resolve_trades


def compute_overview(trades: Sequence[Trade | ResolvedTrade]) -> dict[str, Any]:
    """Compute the headline performance numbers.

    Break-even trades are counted but excluded from the win-rate
    denominator.  Ratios whose denominator is zero are reported as 0
    rather than inf/NaN.  Must not be called with an empty list; the
    report composer short-circuits that case.

    Returns
    -------
    dict
        ``totalTrades``, ``winningTrades``, ``losingTrades``,
        ``breakEvenTrades``, ``winRate``, ``totalPnL``, ``avgPnL``,
        ``avgWin``, ``avgLoss``, ``profitFactor``, ``payoffRatio``,
        ``expectancy``, ``avgExecutionScore``, ``bestTrade``,
        ``worstTrade``.
    """
    resolved = resolve_trades(trades)
    total = len(resolved)

    wins = [t for t in resolved if t.outcome == Outcome.WIN]
    losses = [t for t in resolved if t.outcome == Outcome.LOSS]
    breakevens = sum(1 for t in resolved if t.outcome == Outcome.BREAKEVEN)

    total_pnl = sum(t.pnl for t in resolved)
    winning_pnl = sum(t.pnl for t in wins)
    losing_pnl = abs(sum(t.pnl for t in losses))

    avg_win = winning_pnl / len(wins) if wins else 0.0
    avg_loss = losing_pnl / len(losses) if losses else 0.0

    wr = win_rate(len(wins), len(losses))
    profit_factor = winning_pnl / losing_pnl if losing_pnl > 0 else 0.0
    payoff_ratio = avg_win / avg_loss if avg_loss > 0 else 0.0
    expectancy = (wr / 100) * avg_win - (1 - wr / 100) * avg_loss

    # Missing scores count as 0 and stay in the denominator
    avg_score = sum(t.trade.execution_score or 0.0 for t in resolved) / total

    pnls = [t.pnl for t in resolved]
    best = max(max(pnls), 0.0)
    worst = min(min(pnls), 0.0)

    return {
        "totalTrades": total,
        "winningTrades": len(wins),
        "losingTrades": len(losses),
        "breakEvenTrades": breakevens,
        "winRate": r2(wr),
        "totalPnL": r2(total_pnl),
        "avgPnL": r2(total_pnl / total),
        "avgWin": r2(avg_win),
        "avgLoss": r2(avg_loss),
        "profitFactor": r2(profit_factor),
        "payoffRatio": r2(payoff_ratio),
        "expectancy": r2(expectancy),
        "avgExecutionScore": r2(avg_score),
        "bestTrade": r2(best),
        "worstTrade": r2(worst),
    }
