"""Field resolution shared by every aggregator.

The journal schema grew two outcome fields (``result`` and the older
``tradeOutcome``) and two instrument fields (``instrument`` and
``tradePair``).  The helpers here are the only place that knows about
the fallback order; aggregators consume the normalized values.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Outcome
from ..core.models import Trade

UNKNOWN_CATEGORY = "Unknown"

# Precedence for the instrument label, first non-empty wins
INSTRUMENT_FALLBACK = ("instrument", "trade_pair")

_OUTCOME_ALIASES = {
    "win": Outcome.WIN,
    "loss": Outcome.LOSS,
    "be": Outcome.BREAKEVEN,
    "break even": Outcome.BREAKEVEN,
}


def resolve_outcome(trade: Trade) -> Outcome:
    """Normalize a trade's result across ``result`` and ``tradeOutcome``.

    ``result`` wins when present; otherwise ``tradeOutcome`` is used.
    Matching is case-insensitive and "Break Even" maps to ``be``.
    Anything else resolves to :attr:`Outcome.UNKNOWN`.
    """
    raw = trade.result or trade.trade_outcome or ""
    return _OUTCOME_ALIASES.get(raw.strip().lower(), Outcome.UNKNOWN)


def resolve_instrument(trade: Trade) -> str | None:
    """First non-empty instrument label, or None."""
    for attr in INSTRUMENT_FALLBACK:
        value = getattr(trade, attr)
        if value:
            return value
    return None


def resolve_category(trade: Trade, key: str) -> str:
    """Category label for grouping, falling back to ``"Unknown"``.

    ``key`` is one of ``"session"``, ``"instrument"`` or ``"strategy"``.
    """
    if key == "instrument":
        value = resolve_instrument(trade)
    else:
        value = getattr(trade, key)
    return value or UNKNOWN_CATEGORY


def pnl_of(trade: Trade) -> float:
    """Trade P&L with missing values treated as 0."""
    return trade.pnl if trade.pnl is not None else 0.0


@dataclass(frozen=True)
class ResolvedTrade:
    """A trade with its outcome and pnl normalized once up front."""

    trade: Trade
    outcome: Outcome
    pnl: float

    @property
    def date(self) -> datetime:
        return self.trade.date

    @property
    def is_win(self) -> bool:
        return self.outcome == Outcome.WIN

    @property
    def is_loss(self) -> bool:
        return self.outcome == Outcome.LOSS


def resolve_trades(trades: Iterable[Trade | ResolvedTrade]) -> list[ResolvedTrade]:
    """Resolve outcome and pnl for every trade, preserving order.

    Already-resolved trades pass through untouched, so section functions
    can be called directly with raw trades or from the report composer
    with the shared resolved list.
    """
    return [
        t if isinstance(t, ResolvedTrade) else
        ResolvedTrade(trade=t, outcome=resolve_outcome(t), pnl=pnl_of(t))
        for t in trades
    ]
