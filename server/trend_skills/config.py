"""
Trend Skills Configuration

Centralized configuration for every skill.
All environment variables MUST be read here. No os.getenv() calls allowed elsewhere;
components receive the Settings object (or one of its parts) explicitly.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from trend_skills.core.types import ConfigurationError


def _first_env(*names: str, default: str = "") -> str:
    """Return the first non-empty environment variable among names."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return default


def _optional_env(name: str, default: str = "") -> str:
    """Get an optional environment variable with a default."""
    return os.environ.get(name, default)


def _optional_env_int(name: str, default: int) -> int:
    """Get an optional integer environment variable with a default."""
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid integer value for {name}: {value}",
            context={"variable": name},
        )


@dataclass(frozen=True)
class BraveConfig:
    """Brave Search API configuration."""
    api_key: str
    base_url: str = "https://api.search.brave.com/res/v1"

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class PolygonConfig:
    """Polygon.io reference news configuration."""
    api_key: str
    base_url: str = "https://api.polygon.io"

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class DiscordConfig:
    """Discord bot token and target channels."""
    bot_token: str
    trends_channel_id: str = ""
    alerts_channel_id: str = ""
    market_channel_id: str = ""
    opportunities_channel_id: str = ""
    api_base: str = "https://discord.com/api/v10"

    @property
    def market_channel(self) -> str:
        """Market summaries go to the market channel, else the trends channel."""
        return self.market_channel_id or self.trends_channel_id

    @property
    def alerts_channel(self) -> str:
        """Manual alerts go to the alerts channel, else the trends channel."""
        return self.alerts_channel_id or self.trends_channel_id


@dataclass(frozen=True)
class PacingConfig:
    """Fixed pauses between sequential upstream calls, in milliseconds."""
    query_delay_ms: int = 200
    category_delay_ms: int = 500
    close_delay_ms: int = 300


@dataclass(frozen=True)
class Settings:
    """Root configuration container."""
    brave: BraveConfig
    polygon: PolygonConfig
    discord: DiscordConfig
    pacing: PacingConfig = field(default_factory=PacingConfig)
    timezone: str = "America/New_York"
    http_timeout_seconds: int = 15


def load_settings() -> Settings:
    """Load all settings from environment variables.

    Every credential is optional at load time so that a single job can run
    with only the keys it needs. Jobs report missing values themselves.
    """
    brave = BraveConfig(
        api_key=_first_env("BRAVE_SEARCH_API_KEY", "BRAVE_API_KEY"),
        base_url=_optional_env("BRAVE_API_BASE", "https://api.search.brave.com/res/v1"),
    )

    polygon = PolygonConfig(
        api_key=_optional_env("POLYGON_API_KEY", ""),
        base_url=_optional_env("POLYGON_API_BASE", "https://api.polygon.io"),
    )

    discord = DiscordConfig(
        bot_token=_first_env("DISCORD_BOT_TOKEN", "DISCORD_TOKEN"),
        trends_channel_id=_optional_env("DISCORD_TRENDS_CHANNEL_ID", ""),
        alerts_channel_id=_optional_env("DISCORD_ALERTS_CHANNEL_ID", ""),
        market_channel_id=_optional_env("DISCORD_MARKET_CHANNEL_ID", ""),
        opportunities_channel_id=_optional_env("DISCORD_OPPORTUNITIES_CHANNEL_ID", ""),
    )

    pacing = PacingConfig(
        query_delay_ms=_optional_env_int("SEARCH_QUERY_DELAY_MS", 200),
        category_delay_ms=_optional_env_int("SEARCH_CATEGORY_DELAY_MS", 500),
        close_delay_ms=_optional_env_int("SEARCH_CLOSE_DELAY_MS", 300),
    )

    return Settings(
        brave=brave,
        polygon=polygon,
        discord=discord,
        pacing=pacing,
        timezone=_optional_env("TRENDS_TIMEZONE", "America/New_York"),
        http_timeout_seconds=_optional_env_int("HTTP_TIMEOUT_SECONDS", 15),
    )
