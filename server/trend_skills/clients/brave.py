"""
Brave Search Client

News and web search against the Brave Search API.
An unusable response (non-2xx or a non-object payload) raises SearchError
internally and is reported as an empty result set so that a batch of queries
keeps going; network and decode errors propagate to the caller.
"""
from __future__ import annotations

import logging
from typing import Any

import aiohttp

from trend_skills.clients.normalizer import normalize_many
from trend_skills.config import BraveConfig
from trend_skills.core.types import ConfigurationError, SearchError
from trend_skills.models.news import Article, ArticleOrigin

logger = logging.getLogger(__name__)


class BraveSearchClient:
    """
    Thin wrapper over the Brave news and web search endpoints.

    The aiohttp session is owned by the caller.
    """

    def __init__(self, config: BraveConfig, session: aiohttp.ClientSession) -> None:
        self._config = config
        self._session = session
        self._requests = 0
        self._failures = 0

    @property
    def configured(self) -> bool:
        return self._config.configured

    def get_stats(self) -> dict[str, Any]:
        """Get request statistics."""
        return {"requests": self._requests, "failures": self._failures}

    async def search_news(
        self,
        query: str,
        count: int = 10,
        freshness: str = "pd",
    ) -> list[Article]:
        """
        Search recent news.

        Args:
            query: Free-text query
            count: Maximum results requested
            freshness: Brave freshness window ("pd" day, "pw" week, "pm" month)

        Raises:
            ConfigurationError: If no API key is configured
        """
        data = await self._get("news/search", query, count, freshness)
        results = data.get("results") or []
        return normalize_many(results, ArticleOrigin.BRAVE_NEWS)

    async def search_web(
        self,
        query: str,
        count: int = 8,
        freshness: str = "pm",
    ) -> list[Article]:
        """
        Search the general web index.

        Raises:
            ConfigurationError: If no API key is configured
        """
        data = await self._get("web/search", query, count, freshness)
        web = data.get("web") or {}
        results = web.get("results") or [] if isinstance(web, dict) else []
        return normalize_many(results, ArticleOrigin.BRAVE_WEB)

    async def _get(
        self,
        path: str,
        query: str,
        count: int,
        freshness: str,
    ) -> dict[str, Any]:
        try:
            return await self._request(path, query, count, freshness)
        except SearchError as e:
            self._failures += 1
            logger.warning(
                f"Brave search failed: {e}",
                extra={"path": path, "query": query, "status": e.status},
            )
            return {}

    async def _request(
        self,
        path: str,
        query: str,
        count: int,
        freshness: str,
    ) -> dict[str, Any]:
        if not self._config.api_key:
            raise ConfigurationError(
                "BRAVE_SEARCH_API_KEY not configured",
                context={"service": "brave"},
            )

        url = f"{self._config.base_url}/{path}"
        params = {"q": query, "count": str(count), "freshness": freshness}
        headers = {
            "Accept": "application/json",
            "X-Subscription-Token": self._config.api_key,
        }

        self._requests += 1
        async with self._session.get(url, params=params, headers=headers) as resp:
            if not 200 <= resp.status < 300:
                raise SearchError(
                    f"HTTP {resp.status}", service="brave", status=resp.status
                )
            data = await resp.json()

        if not isinstance(data, dict):
            raise SearchError("Non-object payload", service="brave")

        return data
