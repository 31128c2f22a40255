"""Risk-adjusted return metrics over the per-trade P&L series.

Trades are treated as periods: Sharpe and Sortino are annualised with
``sqrt(periods)`` and a zero risk-free rate.  Deviations are population
deviations (divide by N), matching how the journal has always shown them.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np

from ..core.models import Trade
from .buckets import r2
from .resolve import ResolvedTrade, resolve_trades

RISK_METRIC_KEYS = (
    "sharpeRatio",
    "sortinoRatio",
    "calmarRatio",
    "recoveryFactor",
    "profitFactor",
    "maxDrawdown",
    "standardDeviation",
    "downsideDeviation",
    "averageReturn",
)


def advanced_risk_metrics(
    trades: Sequence[Trade | ResolvedTrade],
    *,
    periods: int = 252,
) -> dict[str, Any]:
    """Sharpe, Sortino, Calmar, recovery factor and deviations.

    ``maxDrawdown`` here is the largest peak-to-trough decline as a
    positive number (the drawdown section reports it as a negative one).
    All ratios are 0 when their denominator is 0.
    """
    returns = np.array([t.pnl for t in resolve_trades(trades)], dtype=float)
    if returns.size == 0:
        return {key: 0.0 for key in RISK_METRIC_KEYS}

    avg = float(returns.mean())
    std = float(returns.std())

    negative = returns[returns < 0]
    downside = float(np.sqrt(np.mean(negative ** 2))) if negative.size else 0.0

    scale = math.sqrt(periods)
    sharpe = avg / std * scale if std > 0 else 0.0
    sortino = avg / downside * scale if downside > 0 else 0.0

    cumulative = np.cumsum(returns)
    peaks = np.maximum.accumulate(np.maximum(cumulative, 0.0))
    max_dd = float((peaks - cumulative).max())

    total = float(returns.sum())
    calmar = total / max_dd if max_dd > 0 else 0.0

    gross_profit = float(returns[returns > 0].sum())
    gross_loss = abs(float(negative.sum()))
    pf = gross_profit / gross_loss if gross_loss > 0 else 0.0

    return {
        "sharpeRatio": r2(sharpe),
        "sortinoRatio": r2(sortino),
        "calmarRatio": r2(calmar),
        "recoveryFactor": r2(calmar),  # Same ratio on a trade-count basis
        "profitFactor": r2(pf),
        "maxDrawdown": r2(max_dd),
        "standardDeviation": r2(std),
        "downsideDeviation": r2(downside),
        "averageReturn": r2(avg),
    }
