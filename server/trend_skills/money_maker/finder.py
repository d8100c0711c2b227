"""
Opportunity Finder

Money-maker skill: searches the web for product, service and side-hustle
ideas and keeps the few results that look like real articles.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from trend_skills.clients.brave import BraveSearchClient
from trend_skills.core.types import ConfigurationError, PacingPolicy
from trend_skills.models.news import Article
from trend_skills.models.opportunity import Idea, OpportunityCategory, OpportunityReport

logger = logging.getLogger(__name__)

OPPORTUNITY_QUERIES: dict[OpportunityCategory, tuple[str, ...]] = {
    OpportunityCategory.PRODUCTS: (
        "trending products to sell 2026",
        "best dropshipping products",
        "viral TikTok products",
        "Amazon FBA trending products",
        "Etsy best sellers trending",
        "print on demand trending designs",
    ),
    OpportunityCategory.SERVICES: (
        "most in demand freelance services",
        "high paying service business ideas",
        "local services in high demand",
        "online services to offer",
        "B2B services small business need",
    ),
    OpportunityCategory.SIDE_HUSTLES: (
        "best side hustles 2026",
        "passive income ideas",
        "weekend side hustle ideas",
        "work from home business ideas",
        "low startup cost business ideas",
    ),
    OpportunityCategory.DIGITAL: (
        "digital products to sell online",
        "best selling online courses topics",
        "SaaS ideas micro startup",
        "AI tools business opportunities",
        "newsletter business ideas",
    ),
    OpportunityCategory.AFFILIATE: (
        "high paying affiliate programs",
        "trending affiliate niches",
        "best recurring commission programs",
        "software affiliate programs",
    ),
}

OPPORTUNITY_TIPS: dict[OpportunityCategory, tuple[str, ...]] = {
    OpportunityCategory.PRODUCTS: (
        "Check TikTok Shop for viral product validation",
        "Use Google Trends to verify demand",
        "Look for products with 3-5x markup potential",
        "Consider shipping costs and complexity",
    ),
    OpportunityCategory.SERVICES: (
        "Start with skills you already have",
        "Local services often have less competition",
        "Recurring revenue services are most valuable",
        "Package services for predictable pricing",
    ),
    OpportunityCategory.SIDE_HUSTLES: (
        "Start small and validate before investing",
        "Focus on hustles that can scale",
        "Consider time vs money tradeoff",
        "Look for recurring income opportunities",
    ),
    OpportunityCategory.DIGITAL: (
        "Digital products have near-zero marginal cost",
        "Templates and tools sell well",
        "Courses need marketing but scale infinitely",
        "SaaS requires tech skills but has best margins",
    ),
    OpportunityCategory.AFFILIATE: (
        "Recurring commissions beat one-time payouts",
        "Promote products you actually use",
        "Software/SaaS affiliates pay highest",
        "Build an audience first, monetize second",
    ),
}

# Order used by the full report and the daily rotation
REPORT_CATEGORIES: tuple[OpportunityCategory, ...] = (
    OpportunityCategory.PRODUCTS,
    OpportunityCategory.SERVICES,
    OpportunityCategory.SIDE_HUSTLES,
    OpportunityCategory.DIGITAL,
)

QUERIES_PER_CATEGORY = 3
WEB_RESULT_COUNT = 8
MAX_IDEAS = 5
MIN_TITLE_LENGTH = 10
MIN_DESCRIPTION_LENGTH = 20
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 200


def extract_ideas(results: Iterable[Article], limit: int = MAX_IDEAS) -> list[Idea]:
    """
    Keep substantive, non-sponsored results as ideas.

    Results with a title under 10 chars, a description under 20 chars, or
    "sponsored" in the title are dropped.
    """
    ideas: list[Idea] = []
    for article in results:
        title = article.title or ""
        description = article.description or ""

        if len(title) < MIN_TITLE_LENGTH or len(description) < MIN_DESCRIPTION_LENGTH:
            continue
        if "sponsored" in title.lower():
            continue

        ideas.append(
            Idea(
                title=title[:MAX_TITLE_LENGTH],
                description=description[:MAX_DESCRIPTION_LENGTH],
                url=article.url,
                source=article.source,
            )
        )
        if len(ideas) >= limit:
            break

    return ideas


class OpportunityFinder:
    """Looks up opportunity ideas per category via Brave web search."""

    def __init__(
        self,
        brave: BraveSearchClient,
        *,
        query_pacing: Optional[PacingPolicy] = None,
        category_pacing: Optional[PacingPolicy] = None,
    ) -> None:
        self._brave = brave
        self._query_pacing = query_pacing or PacingPolicy(interval_seconds=0.2)
        self._category_pacing = category_pacing or PacingPolicy(interval_seconds=0.5)

    async def find(self, category: OpportunityCategory) -> OpportunityReport:
        """
        Search the first few queries of a category and extract ideas.

        Raises:
            ConfigurationError: If Brave search is not configured
        """
        if not self._brave.configured:
            raise ConfigurationError(
                "BRAVE_SEARCH_API_KEY not configured",
                context={"category": category.value},
            )

        results: list[Article] = []
        for query in OPPORTUNITY_QUERIES[category][:QUERIES_PER_CATEGORY]:
            results.extend(await self._brave.search_web(query, WEB_RESULT_COUNT))
            await self._query_pacing.wait()

        ideas = extract_ideas(results)
        logger.info(
            f"Found {len(ideas)} ideas for {category.label}",
            extra={"category": category.value, "results": len(results)},
        )

        return OpportunityReport(
            category=category,
            ideas=tuple(ideas),
            tips=OPPORTUNITY_TIPS[category],
        )

    async def get_trending_products(self) -> OpportunityReport:
        return await self.find(OpportunityCategory.PRODUCTS)

    async def get_in_demand_services(self) -> OpportunityReport:
        return await self.find(OpportunityCategory.SERVICES)

    async def get_side_hustle_ideas(self) -> OpportunityReport:
        return await self.find(OpportunityCategory.SIDE_HUSTLES)

    async def get_digital_product_ideas(self) -> OpportunityReport:
        return await self.find(OpportunityCategory.DIGITAL)

    async def get_affiliate_opportunities(self) -> OpportunityReport:
        return await self.find(OpportunityCategory.AFFILIATE)

    async def get_full_opportunity_report(self) -> dict[OpportunityCategory, OpportunityReport]:
        """Products, services, side hustles and digital, in that order."""
        report: dict[OpportunityCategory, OpportunityReport] = {}
        for category in REPORT_CATEGORIES:
            report[category] = await self.find(category)
            await self._category_pacing.wait()
        return report
