"""
Trend Skills Entry Point

Runs one scheduled job (or an on-demand scan) and exits. Scheduling is
external: point cron at `trend-skills run <job>` using the table in
trend_skills.scheduled.cron.

Usage:
    cd server
    python -m trend_skills.main list
    python -m trend_skills.main run hourly_trends
    python -m trend_skills.main trends crypto
    python -m trend_skills.main search "chip export rules"
    python -m trend_skills.main alert "Fed cuts rates" --tickers SPY QQQ --urgency high
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence
from zoneinfo import ZoneInfo

import aiohttp
from dotenv import load_dotenv

if TYPE_CHECKING:
    from trend_skills.config import Settings
    from trend_skills.money_maker import OpportunityFinder
    from trend_skills.news_crawler import TrendScanner
    from trend_skills.scheduled import SkillJobs

logger = logging.getLogger("trend_skills")


@dataclass
class Services:
    """Components wired from one Settings object and one HTTP session."""

    scanner: TrendScanner
    finder: OpportunityFinder
    jobs: SkillJobs


def build_services(settings: Settings, session: aiohttp.ClientSession) -> Services:
    """Construct every component from explicit configuration."""
    from trend_skills.clients import BraveSearchClient, DiscordPoster, PolygonNewsClient
    from trend_skills.core.types import PacingPolicy
    from trend_skills.money_maker import OpportunityFinder
    from trend_skills.news_crawler import TrendScanner
    from trend_skills.scheduled import SkillJobs

    pacing = settings.pacing
    brave = BraveSearchClient(settings.brave, session)
    polygon = PolygonNewsClient(settings.polygon, session)

    scanner = TrendScanner(
        brave,
        polygon,
        query_pacing=PacingPolicy.from_ms(pacing.query_delay_ms),
        category_pacing=PacingPolicy.from_ms(pacing.category_delay_ms),
    )
    finder = OpportunityFinder(
        brave,
        query_pacing=PacingPolicy.from_ms(pacing.query_delay_ms),
        category_pacing=PacingPolicy.from_ms(pacing.category_delay_ms),
    )
    jobs = SkillJobs(
        settings.discord,
        DiscordPoster(settings.discord, session),
        scanner,
        finder,
        tz=ZoneInfo(settings.timezone),
        close_pacing=PacingPolicy.from_ms(pacing.close_delay_ms),
        category_pacing=PacingPolicy.from_ms(pacing.category_delay_ms),
    )
    return Services(scanner=scanner, finder=finder, jobs=jobs)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="trend-skills", description=__doc__.splitlines()[1])
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    parser.add_argument("--env-file", default=".env", help="dotenv file to load")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list scheduled jobs and skills")

    run = sub.add_parser("run", help="run one scheduled job")
    run.add_argument("job", help="job name from the cron table")

    trends = sub.add_parser("trends", help="print trends for a category")
    trends.add_argument("category", nargs="?", default="markets")

    search = sub.add_parser("search", help="search news on a topic")
    search.add_argument("topic")
    search.add_argument("--limit", type=int, default=10)

    alert = sub.add_parser("alert", help="post a manual breaking alert")
    alert.add_argument("headline")
    alert.add_argument("--tickers", nargs="*", default=[])
    alert.add_argument("--urgency", choices=("normal", "high"), default="normal")

    return parser.parse_args(argv)


def _print_listing() -> None:
    from trend_skills.scheduled import CRON_JOBS, SKILLS

    for skill in SKILLS:
        print(f"{skill.name} {skill.version} — {skill.description}")
        print(f"  requires: {', '.join(skill.requires)}")
        if skill.optional:
            print(f"  optional: {', '.join(skill.optional)}")
    print()
    for job in CRON_JOBS:
        tz = f" ({job.timezone})" if job.timezone else ""
        print(f"{job.name:<18} {job.schedule:<16}{tz} {job.description}")


async def run(args: argparse.Namespace) -> int:
    """Execute one CLI command. Returns a process exit code."""
    from trend_skills.config import load_settings
    from trend_skills.core.types import TrendSkillsError
    from trend_skills.formatting import format_trend_report
    from trend_skills.scheduled import get_job

    settings = load_settings()
    timeout = aiohttp.ClientTimeout(total=settings.http_timeout_seconds)

    async with aiohttp.ClientSession(timeout=timeout) as session:
        services = build_services(settings, session)

        if args.command == "run":
            try:
                job = get_job(args.job)
            except KeyError as e:
                logger.error(str(e))
                return 2
            result = await job.bind(services.jobs)()
            print(json.dumps(result.to_dict()))
            return 1 if result.error else 0

        if args.command == "alert":
            result = await services.jobs.post_breaking_alert(
                args.headline, args.tickers, args.urgency
            )
            print(json.dumps(result.to_dict()))
            return 1 if result.error else 0

        try:
            if args.command == "trends":
                report = await services.scanner.get_trending_news(args.category)
                print(format_trend_report(report))
            elif args.command == "search":
                for article in await services.scanner.search_topic_news(args.topic, args.limit):
                    print(f"• {article.title} — {article.source} ({article.age})\n  {article.url}")
        except (TrendSkillsError, aiohttp.ClientError) as e:
            logger.error(f"{args.command} failed: {e}")
            return 1

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    load_dotenv(args.env_file)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
    )

    if args.command == "list":
        _print_listing()
        return 0

    from trend_skills.core.types import ConfigurationError

    try:
        return asyncio.run(run(args))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
