"""Bucket accumulator and rounding helpers shared by the aggregators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .resolve import ResolvedTrade

DECIMALS = 2


def r2(value: float) -> float:
    """Round a numeric leaf for emission."""
    return round(value, DECIMALS) + 0.0  # normalise -0.0


def win_rate(wins: int, losses: int) -> float:
    """Wins as a percentage of decided (win + loss) trades, 0 if none."""
    decided = wins + losses
    if decided <= 0:
        return 0.0
    return wins / decided * 100


@dataclass
class BucketStats:
    """Accumulator for one bucket (period, category, cell...)."""

    trades: int = 0
    wins: int = 0
    losses: int = 0
    pnl: float = 0.0

    def record(self, trade: ResolvedTrade) -> None:
        self.trades += 1
        self.pnl += trade.pnl
        if trade.is_win:
            self.wins += 1
        elif trade.is_loss:
            self.losses += 1

    @property
    def win_rate(self) -> float:
        return win_rate(self.wins, self.losses)

    @property
    def avg_pnl(self) -> float:
        return self.pnl / self.trades if self.trades else 0.0

    def to_dict(self, *, with_avg: bool = False) -> dict[str, Any]:
        out: dict[str, Any] = {
            "trades": self.trades,
            "wins": self.wins,
            "losses": self.losses,
            "pnl": r2(self.pnl),
            "winRate": r2(self.win_rate),
        }
        if with_avg:
            out["avgPnL"] = r2(self.avg_pnl)
        return out
