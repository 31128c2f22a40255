"""Shared fixtures for the journal-analytics test suite."""

from __future__ import annotations

import pytest

from journal_analytics.analytics import AnalyticsEngine
from journal_analytics.core.config import AnalyticsConfig
from journal_analytics.core.models import Trade


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

@pytest.fixture
def analytics_config() -> AnalyticsConfig:
    return AnalyticsConfig()


@pytest.fixture
def engine(analytics_config) -> AnalyticsEngine:
    return AnalyticsEngine(analytics_config)


# ---------------------------------------------------------------------------
# Trades
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_trade() -> Trade:
    """A single London EUR/USD win in the journal's wire format."""
    return Trade.model_validate({
        "date": "2024-03-04T10:30:00",
        "pnl": 150.0,
        "result": "win",
        "instrument": "EUR/USD",
        "strategy": "Breakout",
        "session": "London",
        "direction": "Long",
        "riskReward": "1:2",
        "executionScore": 8,
        "isBacktest": False,
    })
