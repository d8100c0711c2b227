"""
Scheduled Skill Jobs

Handlers invoked on a timer. Each one gathers data, formats a message and
posts it to a Discord channel. Handlers never raise: missing configuration
short-circuits to an error result, and any network or parse failure is
logged and returned as an error result.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Awaitable, Callable, Optional, Sequence
from zoneinfo import ZoneInfo

from trend_skills.clients.discord import DiscordPoster
from trend_skills.config import DiscordConfig
from trend_skills.core.types import PacingPolicy
from trend_skills.formatting import (
    format_breaking_alert,
    format_breaking_news,
    format_daily_opportunity,
    format_hourly_update,
    format_market_close_summary,
    format_market_open_summary,
    format_weekly_opportunity_report,
)
from trend_skills.models.news import Article, Category, CategoryReport
from trend_skills.models.opportunity import OpportunityCategory, OpportunityReport
from trend_skills.models.results import JobResult
from trend_skills.money_maker.finder import REPORT_CATEGORIES, OpportunityFinder
from trend_skills.news_crawler.scanner import TrendScanner

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

BREAKING_WINDOW = timedelta(minutes=30)
CLOSE_CATEGORIES: tuple[Category, ...] = (Category.MARKETS, Category.TECH, Category.OPTIONS)
WEEKLY_CATEGORIES: tuple[OpportunityCategory, ...] = (
    OpportunityCategory.PRODUCTS,
    OpportunityCategory.SERVICES,
    OpportunityCategory.DIGITAL,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def category_for_hour(hour: int) -> Category:
    """Markets from pre-market through after-hours (06:00-17:59), tech otherwise."""
    if 6 <= hour < 18:
        return Category.MARKETS
    return Category.TECH


def is_recent(article: Article, now: datetime, window: timedelta = BREAKING_WINDOW) -> bool:
    """
    Whether an article is fresh enough to alert on.

    Uses the published timestamp when known, else Brave's relative age text.
    """
    if article.published is not None:
        return now - article.published < window
    age = article.age or ""
    return "minute" in age or "Just now" in age


def rotation_category(moment: datetime) -> OpportunityCategory:
    """Daily opportunity category, Sunday=0 modulo the rotation length."""
    day_of_week = moment.isoweekday() % 7
    return REPORT_CATEGORIES[day_of_week % len(REPORT_CATEGORIES)]


class SkillJobs:
    """
    Scheduled handlers for the scheduled-trends and money-maker skills.

    Collaborators are passed in; the clock and pacing are injectable.
    """

    def __init__(
        self,
        discord: DiscordConfig,
        poster: DiscordPoster,
        scanner: TrendScanner,
        finder: OpportunityFinder,
        *,
        tz: Optional[tzinfo] = None,
        clock: Clock = _utc_now,
        close_pacing: Optional[PacingPolicy] = None,
        category_pacing: Optional[PacingPolicy] = None,
    ) -> None:
        self._discord = discord
        self._poster = poster
        self._scanner = scanner
        self._finder = finder
        self._tz = tz or ZoneInfo("America/New_York")
        self._clock = clock
        self._close_pacing = close_pacing or PacingPolicy(interval_seconds=0.3)
        self._category_pacing = category_pacing or PacingPolicy(interval_seconds=0.5)

    def _local_now(self) -> datetime:
        return self._clock().astimezone(self._tz)

    async def _guard(self, name: str, job: Callable[[], Awaitable[JobResult]]) -> JobResult:
        """Run a job body, turning any exception into an error result."""
        logger.info(f"[{name}] Starting")
        try:
            result = await job()
        except Exception as e:
            logger.error(
                f"[{name}] Error: {e}",
                extra={"job": name, "error": str(e)},
                exc_info=True,
            )
            return JobResult.failed(str(e))

        if result.error:
            logger.warning(f"[{name}] Finished with error: {result.error}", extra={"job": name})
        else:
            logger.info(f"[{name}] Finished", extra={"job": name, "result": result.to_dict()})
        return result

    async def _post(self, channel_id: str, content: str) -> JobResult:
        return JobResult.from_post(await self._poster.post(channel_id, content))

    # ── Scheduled trends ──────────────────────────────────────────────────────

    async def generate_hourly_trends(self) -> tuple[CategoryReport, list[Article], datetime]:
        """Trends for the hour's focus category plus the first breaking items."""
        now = self._local_now()
        category = category_for_hour(now.hour)
        report = await self._scanner.get_trending_news(category)
        breaking = await self._scanner.get_breaking_market_news()
        return report, breaking[:5], now

    async def run_hourly_trend_update(self) -> JobResult:
        async def job() -> JobResult:
            channel_id = self._discord.trends_channel_id
            if not channel_id:
                return JobResult.failed("Channel ID not configured")
            report, breaking, now = await self.generate_hourly_trends()
            return await self._post(channel_id, format_hourly_update(report, breaking, now))

        return await self._guard("Trends", job)

    async def run_market_open_summary(self) -> JobResult:
        async def job() -> JobResult:
            channel_id = self._discord.market_channel
            if not channel_id:
                return JobResult.failed("No market channel configured")
            report = await self._scanner.get_trending_news(Category.MARKETS)
            breaking = await self._scanner.get_breaking_market_news()
            message = format_market_open_summary(report, breaking, self._local_now())
            return await self._post(channel_id, message)

        return await self._guard("Market Open", job)

    async def run_market_close_summary(self) -> JobResult:
        async def job() -> JobResult:
            channel_id = self._discord.market_channel
            if not channel_id:
                return JobResult.failed("No market channel configured")
            reports: dict[Category, CategoryReport] = {}
            for category in CLOSE_CATEGORIES:
                reports[category] = await self._scanner.get_trending_news(category)
                await self._close_pacing.wait()
            message = format_market_close_summary(reports, self._local_now())
            return await self._post(channel_id, message)

        return await self._guard("Market Close", job)

    async def post_breaking_alert(
        self,
        headline: str,
        tickers: Sequence[str] = (),
        urgency: str = "normal",
    ) -> JobResult:
        async def job() -> JobResult:
            channel_id = self._discord.alerts_channel
            if not channel_id:
                return JobResult.failed("No alerts channel configured")
            message = format_breaking_alert(headline, tickers, urgency, self._local_now())
            return await self._post(channel_id, message)

        return await self._guard("Alerts", job)

    async def check_and_post_alerts(self) -> JobResult:
        async def job() -> JobResult:
            channel_id = self._discord.alerts_channel_id
            if not channel_id:
                return JobResult.skip("No alerts channel configured")

            now = self._clock()
            breaking = await self._scanner.get_breaking_market_news()
            recent = [a for a in breaking if is_recent(a, now)]
            if not recent:
                return JobResult(success=True, posted=0, reason="No breaking news")

            result = await self._post(channel_id, format_breaking_news(recent[0]))
            if result.error:
                return result
            return JobResult(success=True, posted=1)

        return await self._guard("Alerts", job)

    # ── Money maker ───────────────────────────────────────────────────────────

    async def run_daily_opportunity_update(self) -> JobResult:
        async def job() -> JobResult:
            channel_id = self._discord.opportunities_channel_id
            if not channel_id:
                return JobResult.failed("DISCORD_OPPORTUNITIES_CHANNEL_ID not set")
            now = self._local_now()
            report = await self._finder.find(rotation_category(now))
            return await self._post(channel_id, format_daily_opportunity(report, now))

        return await self._guard("Opportunities", job)

    async def run_weekly_opportunity_report(self) -> JobResult:
        async def job() -> JobResult:
            channel_id = self._discord.opportunities_channel_id
            if not channel_id:
                return JobResult.failed("DISCORD_OPPORTUNITIES_CHANNEL_ID not set")
            reports: dict[OpportunityCategory, OpportunityReport] = {}
            for category in WEEKLY_CATEGORIES:
                reports[category] = await self._finder.find(category)
                await self._category_pacing.wait()
            message = format_weekly_opportunity_report(reports, self._local_now())
            return await self._post(channel_id, message)

        return await self._guard("Opportunities", job)
