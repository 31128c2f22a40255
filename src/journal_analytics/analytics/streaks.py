"""Win/loss streak tracking as an explicit state machine.

:func:`step_streak` is the whole transition logic; :func:`track_streaks`
just folds it over a trade sequence.  Break-even and unresolved trades
neither extend nor break a streak, they are skipped.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from ..core.enums import Outcome
from ..core.models import Trade
from .buckets import r2
from .resolve import ResolvedTrade, resolve_trades


@dataclass(frozen=True)
class StreakState:
    """Running and best streaks.  Loss P&L is held as a positive amount."""

    current_win: int = 0
    current_win_pnl: float = 0.0
    max_win: int = 0
    max_win_pnl: float = 0.0
    current_loss: int = 0
    current_loss_pnl: float = 0.0
    max_loss: int = 0
    max_loss_pnl: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxWinStreak": self.max_win,
            "maxWinStreakPnL": r2(self.max_win_pnl),
            "maxLossStreak": self.max_loss,
            "maxLossStreakPnL": r2(self.max_loss_pnl),
            "currentWinStreak": self.current_win,
            "currentLossStreak": self.current_loss,
        }


def step_streak(state: StreakState, outcome: Outcome, pnl: float) -> StreakState:
    """Advance the streak state by one trade."""
    if outcome == Outcome.WIN:
        win = state.current_win + 1
        win_pnl = state.current_win_pnl + pnl
        new = replace(
            state,
            current_win=win,
            current_win_pnl=win_pnl,
            current_loss=0,
            current_loss_pnl=0.0,
        )
        if win > state.max_win:
            new = replace(new, max_win=win, max_win_pnl=win_pnl)
        return new

    if outcome == Outcome.LOSS:
        loss = state.current_loss + 1
        loss_pnl = state.current_loss_pnl + abs(pnl)
        new = replace(
            state,
            current_loss=loss,
            current_loss_pnl=loss_pnl,
            current_win=0,
            current_win_pnl=0.0,
        )
        if loss > state.max_loss:
            new = replace(new, max_loss=loss, max_loss_pnl=loss_pnl)
        return new

    return state


def fold_streaks(trades: Sequence[Trade | ResolvedTrade]) -> StreakState:
    """Final streak state after walking the whole sequence."""
    state = StreakState()
    for t in resolve_trades(trades):
        state = step_streak(state, t.outcome, t.pnl)
    return state


def track_streaks(trades: Sequence[Trade | ResolvedTrade]) -> dict[str, Any]:
    """Streak section of the report."""
    return fold_streaks(trades).to_dict()
