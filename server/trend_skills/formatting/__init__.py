"""
Message Formatting

Discord post templates for the news-crawler, scheduled-trends and
money-maker skills.
"""
from .messages import (
    format_breaking_alert,
    format_breaking_news,
    format_daily_opportunity,
    format_hourly_update,
    format_market_close_summary,
    format_market_open_summary,
    format_opportunity_post,
    format_trend_report,
    format_weekly_opportunity_report,
)

__all__ = [
    "format_breaking_alert",
    "format_breaking_news",
    "format_daily_opportunity",
    "format_hourly_update",
    "format_market_close_summary",
    "format_market_open_summary",
    "format_opportunity_post",
    "format_trend_report",
    "format_weekly_opportunity_report",
]
