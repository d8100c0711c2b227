"""
Shared test doubles.

HTTP is replaced by FakeSession, which hands out canned FakeResponse
objects in call order. No network required.
"""
from __future__ import annotations

from typing import Any, Optional

import pytest

from trend_skills.config import BraveConfig, DiscordConfig, PolygonConfig
from trend_skills.models.news import Article


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as a context manager."""

    def __init__(self, status: int = 200, payload: Any = None, text: str = "") -> None:
        self.status = status
        self._payload = payload if payload is not None else {}
        self._text = text

    async def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *_: object) -> None:
        return None


class FakeSession:
    """Records requests and replays queued responses (last one repeats)."""

    def __init__(self, *responses: FakeResponse) -> None:
        self._responses = list(responses) or [FakeResponse()]
        self.calls: list[dict[str, Any]] = []

    def _next(self) -> FakeResponse:
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    def get(self, url: str, params: Optional[dict] = None, headers: Optional[dict] = None):
        self.calls.append({"method": "GET", "url": url, "params": params, "headers": headers})
        return self._next()

    def post(self, url: str, json: Any = None, headers: Optional[dict] = None):
        self.calls.append({"method": "POST", "url": url, "json": json, "headers": headers})
        return self._next()


def make_article(
    title: str,
    description: str = "",
    **kwargs: Any,
) -> Article:
    return Article(title=title, description=description, **kwargs)


@pytest.fixture
def brave_config() -> BraveConfig:
    return BraveConfig(api_key="brave-key", base_url="https://brave.test/res/v1")


@pytest.fixture
def polygon_config() -> PolygonConfig:
    return PolygonConfig(api_key="poly-key", base_url="https://polygon.test")


@pytest.fixture
def discord_config() -> DiscordConfig:
    return DiscordConfig(
        bot_token="bot-token",
        trends_channel_id="trends",
        alerts_channel_id="alerts",
        market_channel_id="market",
        opportunities_channel_id="opps",
        api_base="https://discord.test/api/v10",
    )
