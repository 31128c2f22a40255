"""Enumerations used across the journal analytics engine."""

from enum import Enum


class Outcome(str, Enum):
    """Normalized win / loss / break-even classification of a trade."""

    WIN = "win"
    LOSS = "loss"
    BREAKEVEN = "be"
    UNKNOWN = ""  # No usable result on the record


class Session(str, Enum):
    LONDON = "London"
    NEW_YORK = "NY"
    ASIAN = "Asian"
    OVERLAP = "Overlap"


class Direction(str, Enum):
    LONG = "Long"
    SHORT = "Short"


class TradeType(str, Enum):
    """Real-vs-backtest selector used when querying the journal."""

    ALL = "all"
    REAL = "real"
    BACKTEST = "backtest"


class Period(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
