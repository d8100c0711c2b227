"""
Cron Table and Skill Metadata

Declarative schedule for the scheduled handlers. The timer itself lives
outside this process: an external cron calls the CLI with a job name.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from trend_skills.models.results import JobResult
from trend_skills.scheduled.jobs import SkillJobs

CRON_FIELD_COUNT = 5


@dataclass(frozen=True)
class CronJob:
    """One scheduled handler."""

    name: str
    schedule: str
    handler: str  # SkillJobs method name
    description: str
    timezone: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate fields."""
        if not self.name:
            raise ValueError("name must be non-empty string")
        if len(self.schedule.split()) != CRON_FIELD_COUNT:
            raise ValueError(
                f"schedule must have {CRON_FIELD_COUNT} cron fields, got {self.schedule!r}"
            )
        if not callable(getattr(SkillJobs, self.handler, None)):
            raise ValueError(f"unknown handler: {self.handler}")

    def bind(self, jobs: SkillJobs) -> Callable[[], Awaitable[JobResult]]:
        """Resolve the handler on a SkillJobs instance."""
        return getattr(jobs, self.handler)


@dataclass(frozen=True)
class SkillInfo:
    """Descriptive metadata for one skill."""

    name: str
    version: str
    description: str
    requires: tuple[str, ...]
    optional: tuple[str, ...] = ()
    jobs: tuple[str, ...] = ()


CRON_JOBS: tuple[CronJob, ...] = (
    CronJob(
        name="hourly_trends",
        schedule="0 * * * *",
        handler="run_hourly_trend_update",
        description="Post hourly trend update to #trends",
    ),
    CronJob(
        name="market_open",
        schedule="30 9 * * 1-5",
        handler="run_market_open_summary",
        description="Market open summary to #market-open",
        timezone="America/New_York",
    ),
    CronJob(
        name="market_close",
        schedule="0 16 * * 1-5",
        handler="run_market_close_summary",
        description="Market close summary to #market-open",
        timezone="America/New_York",
    ),
    CronJob(
        name="breaking_alerts",
        schedule="*/15 * * * 1-5",
        handler="check_and_post_alerts",
        description="Check and post breaking news to #alerts",
        timezone="America/New_York",
    ),
    CronJob(
        name="daily_opportunity",
        schedule="0 8 * * *",
        handler="run_daily_opportunity_update",
        description="Daily money-making opportunity post",
        timezone="America/New_York",
    ),
    CronJob(
        name="weekly_report",
        schedule="0 10 * * 0",
        handler="run_weekly_opportunity_report",
        description="Weekly comprehensive opportunity report",
        timezone="America/New_York",
    ),
)

SKILLS: tuple[SkillInfo, ...] = (
    SkillInfo(
        name="news-crawler",
        version="1.0.0",
        description="Crawls web for news and identifies trending topics",
        requires=("BRAVE_SEARCH_API_KEY",),
        optional=("POLYGON_API_KEY",),
    ),
    SkillInfo(
        name="scheduled-trends",
        version="1.0.0",
        description="Automatically posts trend updates to Discord on a schedule",
        requires=("BRAVE_SEARCH_API_KEY", "DISCORD_BOT_TOKEN"),
        optional=(
            "DISCORD_TRENDS_CHANNEL_ID",
            "DISCORD_ALERTS_CHANNEL_ID",
            "DISCORD_MARKET_CHANNEL_ID",
            "POLYGON_API_KEY",
        ),
        jobs=("hourly_trends", "market_open", "market_close", "breaking_alerts"),
    ),
    SkillInfo(
        name="money-maker",
        version="1.0.0",
        description="Finds trending products, services, and money-making opportunities",
        requires=("BRAVE_SEARCH_API_KEY",),
        optional=("DISCORD_BOT_TOKEN", "DISCORD_OPPORTUNITIES_CHANNEL_ID"),
        jobs=("daily_opportunity", "weekly_report"),
    ),
)


def get_job(name: str) -> CronJob:
    """Look up a cron entry by name."""
    for job in CRON_JOBS:
        if job.name == name:
            return job
    raise KeyError(f"Unknown job: {name}")
