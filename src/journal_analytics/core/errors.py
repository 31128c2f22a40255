"""Custom exception hierarchy for the journal analytics engine.

The report pipeline itself never raises these: missing or odd fields are
defaulted.  They surface only at the edges (config loading and trade
ingestion), where the caller can turn them into a user-facing error.
"""


class JournalAnalyticsError(Exception):
    """Base exception for all journal analytics errors."""


# --- Configuration ---
class ConfigError(JournalAnalyticsError):
    """Invalid or missing configuration."""


# --- Data ---
class DataError(JournalAnalyticsError):
    """Trade data could not be ingested."""


class TradeLoadError(DataError):
    """Trade file is missing, unreadable, or in an unsupported format."""


class MalformedTradeError(DataError):
    """A single trade record failed validation."""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"Trade #{index}: {reason}")
