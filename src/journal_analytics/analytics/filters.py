"""Filter values for the report, and the journal query used to select trades."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.enums import TradeType
from ..core.models import Trade
from .resolve import ResolvedTrade, resolve_instrument
from .time_buckets import as_utc


def _distinct(values: Iterable[str | None]) -> list[str]:
    """Unique non-empty values in first-seen order."""
    return list(dict.fromkeys(v for v in values if v))


def available_filters(trades: Sequence[Trade | ResolvedTrade]) -> dict[str, list[str]]:
    """Distinct instruments, strategies, sessions and directions present."""
    raw = [t.trade if isinstance(t, ResolvedTrade) else t for t in trades]
    return {
        "instruments": _distinct(resolve_instrument(t) for t in raw),
        "strategies": _distinct(t.strategy for t in raw),
        "sessions": _distinct(t.session for t in raw),
        "directions": _distinct(t.direction for t in raw),
    }


class TradeQuery(BaseModel):
    """Selection criteria mirroring the journal's analytics query string.

    All criteria are optional and combined with AND.  Category matches
    are exact; ``instrument`` matches the resolved instrument label
    (``instrument`` falling back to ``tradePair``).
    """

    model_config = ConfigDict(frozen=True)

    date_from: datetime | None = None
    date_to: datetime | None = None
    instrument: str | None = None
    strategy: str | None = None
    session: str | None = None
    direction: str | None = None
    trade_type: TradeType = TradeType.ALL

    def matches(self, trade: Trade) -> bool:
        if self.date_from is not None and as_utc(trade.date) < as_utc(self.date_from):
            return False
        if self.date_to is not None and as_utc(trade.date) > as_utc(self.date_to):
            return False
        if self.instrument and resolve_instrument(trade) != self.instrument:
            return False
        if self.strategy and trade.strategy != self.strategy:
            return False
        if self.session and trade.session != self.session:
            return False
        if self.direction and trade.direction != self.direction:
            return False
        if self.trade_type == TradeType.REAL and trade.is_backtest:
            return False
        if self.trade_type == TradeType.BACKTEST and not trade.is_backtest:
            return False
        return True

    def apply(self, trades: Iterable[Trade]) -> list[Trade]:
        """Matching trades, sorted ascending by date (stable)."""
        selected = [t for t in trades if self.matches(t)]
        selected.sort(key=lambda t: as_utc(t.date))
        return selected

    def describe(self) -> dict[str, Any]:
        """Active criteria only, for logging."""
        return {
            k: (v.value if isinstance(v, TradeType) else v)
            for k, v in self.model_dump().items()
            if v is not None and v != TradeType.ALL
        }
