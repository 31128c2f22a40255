"""Shared helpers for analytics tests."""

from __future__ import annotations

from datetime import datetime, timedelta

from journal_analytics.core.models import Trade

BASE = datetime(2024, 1, 1, 9, 0, 0)  # Monday


def make_trade(
    pnl: float | None = 0.0,
    result: str | None = None,
    *,
    date: datetime | None = None,
    day: int = 0,
    trade_outcome: str | None = None,
    instrument: str | None = "EUR/USD",
    trade_pair: str | None = None,
    strategy: str | None = "Breakout",
    session: str | None = "London",
    direction: str | None = "Long",
    risk_reward: str | None = None,
    execution_score: float | None = None,
    is_backtest: bool = False,
) -> Trade:
    """Create a journal trade; ``day`` offsets from the base Monday."""
    return Trade(
        date=date or BASE + timedelta(days=day),
        pnl=pnl,
        result=result,
        trade_outcome=trade_outcome,
        instrument=instrument,
        trade_pair=trade_pair,
        strategy=strategy,
        session=session,
        direction=direction,
        risk_reward=risk_reward,
        execution_score=execution_score,
        is_backtest=is_backtest,
    )


def outcome_for(pnl: float) -> str:
    if pnl > 0:
        return "win"
    if pnl < 0:
        return "loss"
    return "be"


def make_series(pnls: list[float], *, start: datetime | None = None, step_days: int = 1) -> list[Trade]:
    """One trade per P&L value, dated ``step_days`` apart, outcome from sign."""
    start = start or BASE
    return [
        make_trade(pnl, outcome_for(pnl), date=start + timedelta(days=i * step_days))
        for i, pnl in enumerate(pnls)
    ]


def make_outcomes(outcomes: list[str], pnl: float = 100.0) -> list[Trade]:
    """One trade per outcome with +pnl for wins, -pnl for losses, 0 otherwise."""
    sign = {"win": 1, "loss": -1}
    return [
        make_trade(pnl * sign.get(o, 0), o, day=i)
        for i, o in enumerate(outcomes)
    ]
