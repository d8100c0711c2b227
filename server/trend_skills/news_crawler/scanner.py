"""
Trend Scanner

Category query orchestrator for the news-crawler skill.

For a category it issues each fixed query in turn, pausing between calls,
then dedupes, extracts and ranks what came back. A query that fails
upstream contributes nothing; the remaining queries still run.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from trend_skills.clients.brave import BraveSearchClient
from trend_skills.clients.polygon import PolygonNewsClient
from trend_skills.core.types import ConfigurationError, PacingPolicy
from trend_skills.models.news import Article, Category, CategoryReport
from trend_skills.trends import dedupe_by_title, extract_trends, rank_trends

logger = logging.getLogger(__name__)

CATEGORY_QUERIES: dict[Category, tuple[str, ...]] = {
    Category.MARKETS: (
        "stock market", "S&P 500", "nasdaq", "federal reserve", "interest rates", "earnings",
    ),
    Category.TECH: (
        "artificial intelligence", "AI stocks", "tech earnings", "semiconductor", "cloud computing",
    ),
    Category.CRYPTO: ("bitcoin", "ethereum", "crypto regulation", "blockchain"),
    Category.ECONOMY: ("inflation", "jobs report", "GDP", "recession", "consumer spending"),
    Category.OPTIONS: (
        "options flow", "unusual options", "put call ratio", "VIX", "implied volatility",
    ),
}

QUERY_RESULT_COUNT = 5
TOP_ARTICLES = 5
BREAKING_POLYGON_LIMIT = 20
BREAKING_SEARCH_QUERY = "stock market breaking news"
BREAKING_SEARCH_COUNT = 10
BREAKING_LIMIT = 15


class TrendScanner:
    """
    Runs category scans against Brave news search.

    Pacing policies are injected so tests can run without real delays.
    """

    def __init__(
        self,
        brave: BraveSearchClient,
        polygon: Optional[PolygonNewsClient] = None,
        *,
        query_pacing: Optional[PacingPolicy] = None,
        category_pacing: Optional[PacingPolicy] = None,
    ) -> None:
        self._brave = brave
        self._polygon = polygon
        self._query_pacing = query_pacing or PacingPolicy(interval_seconds=0.2)
        self._category_pacing = category_pacing or PacingPolicy(interval_seconds=0.5)

    async def get_trending_news(self, category: Union[Category, str] = Category.MARKETS) -> CategoryReport:
        """
        Scan one category and rank its trends.

        Unknown category names fall back to markets.

        Raises:
            ConfigurationError: If Brave search is not configured
        """
        if not isinstance(category, Category):
            category = Category.from_string(category)

        if not self._brave.configured:
            raise ConfigurationError(
                "BRAVE_SEARCH_API_KEY not configured",
                context={"category": category.value},
            )

        collected: list[Article] = []
        for query in CATEGORY_QUERIES[category]:
            results = await self._brave.search_news(query, QUERY_RESULT_COUNT)
            collected.extend(results)
            await self._query_pacing.wait()

        unique = dedupe_by_title(collected)
        summary = rank_trends(extract_trends(unique))

        logger.info(
            f"Scanned category {category.value}",
            extra={
                "category": category.value,
                "articles": len(collected),
                "unique_articles": len(unique),
                "topics": len(summary.topics),
                "tickers": len(summary.tickers),
            },
        )

        return CategoryReport(
            category=category,
            article_count=len(unique),
            trends=summary,
            top_articles=tuple(unique[:TOP_ARTICLES]),
        )

    async def get_full_trend_report(self) -> dict[Category, CategoryReport]:
        """Scan every category in order."""
        report: dict[Category, CategoryReport] = {}
        for category in Category:
            report[category] = await self.get_trending_news(category)
            await self._category_pacing.wait()
        return report

    async def get_breaking_market_news(self) -> list[Article]:
        """
        Merge Polygon market news with a broad Brave news search.

        Brave is skipped when unconfigured; Polygon returns nothing without
        a key. Results are deduped by title and capped.
        """
        articles: list[Article] = []

        if self._polygon is not None:
            articles.extend(await self._polygon.market_news(limit=BREAKING_POLYGON_LIMIT))

        try:
            articles.extend(
                await self._brave.search_news(BREAKING_SEARCH_QUERY, BREAKING_SEARCH_COUNT)
            )
        except ConfigurationError as e:
            logger.info("Skipping Brave breaking news search", extra={"reason": str(e)})

        return dedupe_by_title(articles)[:BREAKING_LIMIT]

    async def search_topic_news(self, topic: str, limit: int = 10) -> list[Article]:
        """
        Search news about a single topic.

        Raises:
            ConfigurationError: If Brave search is not configured
        """
        return await self._brave.search_news(topic, limit)
