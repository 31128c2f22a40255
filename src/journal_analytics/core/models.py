"""Core domain model: the journal trade record.

Trades are owned by the storage layer; the analytics engine only reads
them.  Field names follow the journal's wire format (camelCase) through
aliases, but snake_case names are accepted as well.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TEXT_FIELDS = (
    "result",
    "trade_outcome",
    "instrument",
    "trade_pair",
    "strategy",
    "session",
    "direction",
    "risk_reward",
)


class Trade(BaseModel):
    """A single journal trade as seen by the analytics engine.

    Everything except ``date`` is optional.  Enum-like fields (result,
    session, direction) are kept as free text so an unexpected value
    degrades to "unknown" downstream instead of failing ingestion.  An
    unparseable ``pnl`` or ``executionScore`` is treated as not recorded.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    date: datetime
    pnl: float | None = None

    # Outcome: ``result`` is the current field, ``tradeOutcome`` the legacy one
    result: str | None = None  # "win" / "loss" / "be"
    trade_outcome: str | None = Field(default=None, alias="tradeOutcome")  # "Win" / "Loss" / "Break Even"

    # Categories
    instrument: str | None = None
    trade_pair: str | None = Field(default=None, alias="tradePair")
    strategy: str | None = None
    session: str | None = None  # London / NY / Asian / Overlap
    direction: str | None = None  # Long / Short

    risk_reward: str | None = Field(default=None, alias="riskReward")  # e.g. "1:2"
    execution_score: float | None = Field(default=None, alias="executionScore")  # 1-10
    is_backtest: bool = Field(default=False, alias="isBacktest")

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_text_is_missing(cls, v: Any) -> Any:
        if v is None:
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("pnl", "execution_score", mode="before")
    @classmethod
    def unparseable_number_is_missing(cls, v: Any) -> Any:
        # "n/a", "abc", "" and the like mean "not recorded", not a bad record
        if isinstance(v, str):
            v = v.strip()
        try:
            float(v)
        except (TypeError, ValueError):
            return None
        return v

    @field_validator("pnl", "execution_score")
    @classmethod
    def non_finite_is_missing(cls, v: float | None) -> float | None:
        if v is not None and not math.isfinite(v):
            return None
        return v

    @field_validator("is_backtest", mode="before")
    @classmethod
    def blank_flag_is_false(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return False
        return v
