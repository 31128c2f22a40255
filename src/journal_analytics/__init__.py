"""Trading journal analytics engine."""

from .analytics import AnalyticsEngine, TradeQuery, build_report, empty_report
from .core.models import Trade

__all__ = ["AnalyticsEngine", "Trade", "TradeQuery", "build_report", "empty_report"]

__version__ = "0.1.0"
