"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class AnalyticsConfig(BaseModel):
    weekly_window: int = Field(default=12, ge=1)  # Weekly buckets kept (most recent)
    insight_min_trades: int = Field(default=10, ge=1)
    correlation_min_trades: int = Field(default=10, ge=1)
    pair_min_trades: int = Field(default=3, ge=1)  # Per strategy/instrument pair
    pair_limit: int = Field(default=10, ge=1)
    overtrading_gap_minutes: float = Field(default=60.0, gt=0)
    overtrading_burst: int = Field(default=5, ge=2)
    annualisation_periods: int = Field(default=252, ge=1)  # sqrt(N) for Sharpe/Sortino


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, overridden by environment variables.
    Constructor arguments (the TOML data passed in by
    :func:`load_settings`) rank below the environment, so
    ``JOURNAL_ANALYTICS_ANALYTICS__WEEKLY_WINDOW=26`` wins over a
    ``weekly_window`` set in the file.  Keys the environment does not
    set keep their file value.
    """

    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "JOURNAL_ANALYTICS_", "env_nested_delimiter": "__"}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # First source wins; nested sections are merged key by key
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Precedence, highest first: environment variables, ``overrides``,
    the TOML file, built-in defaults.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict merged over the file data, section by section.

    Raises:
        ConfigError: if ``config_path`` is given but does not exist or
            cannot be parsed.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")

        import tomli

        try:
            with open(path, "rb") as f:
                data = tomli.load(f)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    if overrides:
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value

    return Settings(**data)
