"""
Polygon News Client

Market news from the Polygon.io reference news endpoint.
"""
from __future__ import annotations

import logging
from typing import Optional

import aiohttp

from trend_skills.clients.normalizer import normalize_many
from trend_skills.config import PolygonConfig
from trend_skills.core.types import SearchError
from trend_skills.models.news import Article, ArticleOrigin

logger = logging.getLogger(__name__)


class PolygonNewsClient:
    """Reads recent market news, optionally filtered to one ticker."""

    def __init__(self, config: PolygonConfig, session: aiohttp.ClientSession) -> None:
        self._config = config
        self._session = session

    @property
    def configured(self) -> bool:
        return self._config.configured

    async def market_news(
        self,
        ticker: Optional[str] = None,
        limit: int = 10,
    ) -> list[Article]:
        """
        Fetch the latest market news.

        Polygon is optional: without an API key this returns an empty list.
        """
        if not self._config.api_key:
            logger.debug("POLYGON_API_KEY not configured, skipping market news")
            return []

        params = {"limit": str(limit), "apiKey": self._config.api_key}
        if ticker:
            params["ticker"] = ticker

        try:
            data = await self._request(params)
        except SearchError as e:
            logger.warning(
                f"Polygon news request failed: {e}",
                extra={"ticker": ticker, "status": e.status},
            )
            return []

        return normalize_many(data.get("results") or [], ArticleOrigin.POLYGON)

    async def _request(self, params: dict[str, str]) -> dict:
        url = f"{self._config.base_url}/v2/reference/news"
        async with self._session.get(url, params=params) as resp:
            if not 200 <= resp.status < 300:
                raise SearchError(
                    f"HTTP {resp.status}", service="polygon", status=resp.status
                )
            data = await resp.json()

        if not isinstance(data, dict):
            raise SearchError("Non-object payload", service="polygon")
        return data
