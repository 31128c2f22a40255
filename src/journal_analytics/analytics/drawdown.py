"""Drawdown tracking over the cumulative P&L curve.

The peak starts at 0 (flat account), so a journal that opens with
losses is in drawdown from the first trade but reports a 0% drawdown
until a positive peak exists.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..core.models import Trade
from .buckets import r2
from .resolve import ResolvedTrade, resolve_trades


@dataclass(frozen=True)
class DrawdownState:
    cumulative: float = 0.0
    peak: float = 0.0
    drawdown: float = 0.0  # At the latest step, always <= 0
    drawdown_pct: float = 0.0
    max_drawdown: float = 0.0  # Most negative drawdown seen
    max_drawdown_pct: float = 0.0  # Percent at the time of max_drawdown


def step_drawdown(state: DrawdownState, pnl: float) -> DrawdownState:
    """Advance the drawdown state by one trade's P&L."""
    cumulative = state.cumulative + pnl
    peak = cumulative if cumulative > state.peak else state.peak
    drawdown = cumulative - peak
    drawdown_pct = drawdown / peak * 100 if peak > 0 else 0.0

    max_dd, max_dd_pct = state.max_drawdown, state.max_drawdown_pct
    if drawdown < max_dd:
        max_dd, max_dd_pct = drawdown, drawdown_pct

    return DrawdownState(
        cumulative=cumulative,
        peak=peak,
        drawdown=drawdown,
        drawdown_pct=drawdown_pct,
        max_drawdown=max_dd,
        max_drawdown_pct=max_dd_pct,
    )


def track_drawdown(trades: Sequence[Trade | ResolvedTrade]) -> dict[str, Any]:
    """Drawdown section: scalar maxima plus a per-trade chart series.

    Returns
    -------
    dict
        ``maxDrawdown``, ``maxDrawdownPercent`` and
        ``data: [{date, drawdown, cumulative}]``.
    """
    state = DrawdownState()
    data = []
    for t in resolve_trades(trades):
        state = step_drawdown(state, t.pnl)
        data.append({
            "date": t.date.isoformat(),
            "drawdown": r2(state.drawdown),
            "cumulative": r2(state.cumulative),
        })

    return {
        "maxDrawdown": r2(state.max_drawdown),
        "maxDrawdownPercent": r2(state.max_drawdown_pct),
        "data": data,
    }
