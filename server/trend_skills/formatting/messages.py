"""
Discord Message Formatting

Plain-text Discord markdown for every report the skills post.
Sections with nothing to show are left out.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Mapping, Sequence

from trend_skills.models.news import Article, Category, CategoryReport, RankedEntry
from trend_skills.models.opportunity import OpportunityCategory, OpportunityReport

DIVIDER = "━━━━━━━━━━━━━━━━━━━━━━"
MAX_TITLE_CHARS = 80
MAX_BAR = 10


def _clock(moment: datetime, fmt: str = "%I:%M %p") -> str:
    """e.g. 09:30 AM EDT; naive times carry no zone abbreviation"""
    zone = moment.strftime("%Z")
    text = moment.strftime(fmt)
    return f"{text} {zone}" if zone else text


def _date(moment: datetime) -> str:
    """e.g. 10/18/2026"""
    return f"{moment.month}/{moment.day}/{moment.year}"


def _long_date(moment: datetime) -> str:
    """e.g. Sunday, October 18"""
    return f"{moment.strftime('%A, %B')} {moment.day}"


def _shorten(title: str, limit: int = MAX_TITLE_CHARS) -> str:
    return title[:limit] + ("..." if len(title) > limit else "")


def _cashtags(tickers: Iterable[str]) -> str:
    return " ".join(f"${t}" for t in tickers)


def format_trend_report(report: CategoryReport) -> str:
    """Topics, hot tickers and top stories for one category."""
    message = "📊 **Market Trends Report**\n\n"

    if report.trends.topics:
        message += "🔥 **Trending Topics:**\n"
        for t in report.trends.topics[:5]:
            message += f"• {t.subject} ({t.mentions} mentions)\n"
        message += "\n"

    if report.trends.tickers:
        message += "📈 **Hot Tickers:**\n"
        for t in report.trends.tickers[:5]:
            message += f"• ${t.subject} ({t.mentions} mentions)\n"
        message += "\n"

    if report.top_articles:
        message += "📰 **Top Stories:**\n"
        for a in report.top_articles[:3]:
            message += f"• [{a.title}]({a.url}) - {a.source}\n"

    return message


def _mention_bar(entry: RankedEntry) -> str:
    return "█" * min(entry.mentions, MAX_BAR)


def format_hourly_update(
    report: CategoryReport,
    breaking: Sequence[Article],
    moment: datetime,
) -> str:
    """Hourly trends post. moment should already be in the display timezone."""
    message = f"📊 **Hourly Trends Update** - {_clock(moment)}\n"
    message += f"{DIVIDER}\n\n"

    if report.trends.topics:
        message += "🔥 **Trending Topics:**\n"
        for t in report.trends.topics[:5]:
            message += f"`{_mention_bar(t)}` {t.subject} ({t.mentions})\n"
        message += "\n"

    if report.trends.tickers:
        message += "📈 **Hot Tickers:**\n"
        message += " • ".join(
            f"**${t.subject}** ({t.mentions})" for t in report.trends.tickers[:5]
        )
        message += "\n\n"

    if breaking:
        message += "⚡ **Breaking News:**\n"
        for article in breaking[:3]:
            message += f"• {article.title}\n"
            if article.tickers:
                message += f"  └ Tickers: {', '.join(article.tickers[:3])}\n"
        message += "\n"

    if report.top_articles:
        message += "📰 **Top Stories:**\n"
        for a in report.top_articles[:3]:
            message += f"• [{_shorten(a.title)}]({a.url})\n"
            message += f"  └ *{a.source}* - {a.age}\n"

    message += f"\n{DIVIDER}\n"
    message += "*Next update in 1 hour*"
    return message


def format_market_open_summary(
    report: CategoryReport,
    breaking: Sequence[Article],
    moment: datetime,
) -> str:
    message = f"🔔 **Market Open Summary** - {_date(moment)}\n"
    message += f"{DIVIDER}\n\n"
    message += format_trend_report(report)

    if breaking:
        message += "\n⚡ **Pre-Market Headlines:**\n"
        for a in breaking[:5]:
            message += f"• {a.title}\n"

    message += "\n*Good luck trading today!* 📈"
    return message


def format_market_close_summary(
    reports: Mapping[Category, CategoryReport],
    moment: datetime,
) -> str:
    """Top three topics per category; categories without topics are skipped."""
    message = f"🔔 **Market Close Summary** - {_date(moment)}\n"
    message += f"{DIVIDER}\n\n"

    for category, report in reports.items():
        if not report.trends.topics:
            continue
        message += f"**{category.value.upper()}:**\n"
        for t in report.trends.topics[:3]:
            message += f"• {t.subject} ({t.mentions})\n"
        message += "\n"

    message += "*See you tomorrow!* 🌙"
    return message


def format_breaking_alert(
    headline: str,
    tickers: Sequence[str],
    urgency: str,
    moment: datetime,
) -> str:
    """Manually triggered alert."""
    emoji = "🚨" if urgency == "high" else "⚡"
    message = f"{emoji} **BREAKING** {emoji}\n\n"
    message += f"{headline}\n"

    if tickers:
        message += f"\n📊 **Related Tickers:** {_cashtags(tickers)}\n"

    message += f"\n*{_clock(moment, '%I:%M:%S %p')}*"
    return message


def format_breaking_news(article: Article) -> str:
    """Single breaking story found by the alert check."""
    message = "⚡ **Breaking News**\n\n"
    message += f"**{article.title}**\n"
    message += f"*{article.source}*\n"

    if article.tickers:
        message += f"\n📊 {_cashtags(article.tickers[:5])}"

    if article.url:
        message += f"\n\n[Read more]({article.url})"

    return message


def format_opportunity_post(report: OpportunityReport) -> str:
    message = f"{report.category.emoji} **{report.category.label}**\n"
    message += f"{DIVIDER}\n\n"

    for i, idea in enumerate(report.ideas, start=1):
        message += f"**{i}. {idea.title}**\n"
        message += f"{idea.description}\n"
        message += f"🔗 [Read more]({idea.url}) - *{idea.source}*\n\n"

    if report.tips:
        message += "💡 **Pro Tips:**\n"
        for tip in report.tips:
            message += f"• {tip}\n"

    return message


def format_daily_opportunity(report: OpportunityReport, moment: datetime) -> str:
    message = "🌟 **Daily Money-Making Opportunity** 🌟\n"
    message += f"*{_long_date(moment)}*\n\n"
    message += format_opportunity_post(report)
    message += f"\n{DIVIDER}\n"
    message += "*Ask me for more ideas anytime!*"
    return message


def format_weekly_opportunity_report(
    reports: Mapping[OpportunityCategory, OpportunityReport],
    moment: datetime,
    ideas_per_category: int = 2,
) -> str:
    message = "📊 **Weekly Opportunity Report** 📊\n"
    message += f"*Week of {_date(moment)}*\n"
    message += f"{DIVIDER}\n\n"

    for category, report in reports.items():
        message += f"{category.emoji} **{category.label}**\n"
        for idea in report.ideas[:ideas_per_category]:
            message += f"• {idea.title}\n"
        message += "\n"

    message += "*Reply to get detailed info on any category!*"
    return message
